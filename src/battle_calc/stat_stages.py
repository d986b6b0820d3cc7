"""
Stat stage multipliers

Converts in-battle stages into the multiplier each generation applies:
- Gen I: approximated table for the five core stats; accuracy, evasion and
  crit ratio have no stages
- Gens II-IV: exact ratios for core stats, approximated accuracy/evasion table
- Gen V+: exact ratios for core stats and for accuracy/evasion
"""

from battle_calc.constants import (
    ACCURACY_STAGE_MULTIPLIERS,
    CRIT_CHANCE_TABLES,
    GEN_I_STAGE_MULTIPLIERS,
    GEN_II_ACCURACY_PLUS_FOUR,
)
from battle_calc.enums.generation import Generation
from battle_calc.enums.stat import CORE_BATTLE_STATS, STAGED_STATS, Stat
from battle_calc.errors import UnsupportedStageError
from battle_calc.schema.stage_block import StageBlock, normalize_stage


def _check_generation(gen: Generation) -> None:
    if not isinstance(gen, Generation):
        raise TypeError(f"Invalid generation specified (must be a Generation), got {type(gen).__name__}")


def _core_ratio(stage: int) -> float:
    return (2 + max(0, stage)) / (2 - min(0, stage))


def _accuracy_table(gen: Generation) -> tuple[float, ...]:
    if gen == Generation.II:
        table = list(ACCURACY_STAGE_MULTIPLIERS)
        table[10] = GEN_II_ACCURACY_PLUS_FOUR
        return tuple(table)
    return ACCURACY_STAGE_MULTIPLIERS


def multiplier_for(gen: Generation, stat: Stat | str, stage: int | float) -> float:
    """
    Get the multiplier a stage applies to a stat in a generation.

    Args:
        gen: Generation whose stage rules apply
        stat: Any staged stat (not HP). CRIT_RATIO returns a crit probability.
        stage: Stage value; floored and clamped to the stat's range with a warning

    Raises:
        UnsupportedStageError: for HP, a non-finite stage, or accuracy/evasion/crit
            stages in Gen I
    """
    _check_generation(gen)
    stat = Stat.parse(stat)
    stage = normalize_stage(stat, stage)

    if stat == Stat.CRIT_RATIO:
        return critical_hit_chance(gen, stage)

    if gen == Generation.I:
        if stat not in CORE_BATTLE_STATS:
            raise UnsupportedStageError(stat.field_name, stage, "Gen I has no accuracy or evasion stages")
        return float(GEN_I_STAGE_MULTIPLIERS[stage + 6])

    if stat in CORE_BATTLE_STATS:
        return _core_ratio(stage)

    if gen.matches("II-IV"):
        table = _accuracy_table(gen)
        if stat == Stat.ACCURACY:
            return float(table[stage + 6])
        # Evasion reads the accuracy table with the stage sign flipped
        return float(table[6 - stage])

    if stat == Stat.ACCURACY:
        return (3 + max(0, stage)) / (3 - min(0, stage))
    return (3 - min(0, stage)) / (3 + max(0, stage))


def critical_hit_chance(gen: Generation, stage: int | float) -> float:
    """Probability of a critical hit at a crit stage (0-4). Gen I crits depend on Speed, not stages."""
    _check_generation(gen)
    if gen == Generation.I:
        raise UnsupportedStageError(Stat.CRIT_RATIO.field_name, stage, "Gen I critical hits are not staged")
    stage = normalize_stage(Stat.CRIT_RATIO, stage)
    for gen_range, chances in CRIT_CHANCE_TABLES:
        if gen.matches(gen_range):
            return chances[stage]
    raise AssertionError(f"No critical hit table covers {gen}")


def all_multipliers(gen: Generation, stages: StageBlock) -> dict[Stat, float]:
    """Multiplier for every staged stat. Gen I only reports the five core stats."""
    _check_generation(gen)
    stats = CORE_BATTLE_STATS if gen == Generation.I else STAGED_STATS
    return {stat: multiplier_for(gen, stat, stages.get(stat)) for stat in stats}
