"""
Effective stat calculation (Gen III+ stat formulas)

    HP     = floor((2*Base + IV + floor(EV/4)) * Level / 100) + Level + 10
    Others = Nature * (floor((2*Base + IV + floor(EV/4)) * Level / 100) + 5)

Integer floor semantics are reproduced exactly by staying in integer arithmetic.
"""

import math

from battle_calc.constants import MAX_LEVEL, MIN_LEVEL
from battle_calc.enums.nature import Nature
from battle_calc.enums.stat import PERMANENT_STATS, Stat
from battle_calc.schema.stat_block import EFFECTIVE_POLICY, StatBlock


def _check_level(level: int) -> None:
    if isinstance(level, bool) or not isinstance(level, int):
        raise TypeError(f"Level must be an int, got {type(level).__name__}")
    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise ValueError(f"Level must be between {MIN_LEVEL} and {MAX_LEVEL}, got {level}")


def _scaled(base: int, iv: int, ev: int, level: int) -> int:
    return ((2 * base + iv + ev // 4) * level) // 100


def calc_hp(base: int, iv: int, ev: int, level: int) -> int:
    _check_level(level)
    return _scaled(base, iv, ev, level) + level + 10


def calc_non_hp(base: int, iv: int, ev: int, level: int, nature_multiplier: float = 1.0) -> float:
    """Non-HP stat before the final floor. Callers floor it to get the displayed value."""
    _check_level(level)
    return nature_multiplier * (_scaled(base, iv, ev, level) + 5)


def calculate_stats(base_stats: StatBlock, ivs: StatBlock, evs: StatBlock, level: int, nature: Nature = Nature.HARDY) -> StatBlock:
    """
    Calculate all six effective stats of a creature.

    Args:
        base_stats: Species base stats
        ivs: Individual values (0-31)
        evs: Effort values (0-252, total <= 510)
        level: Level (1-100)
        nature: Nature applying +10% / -10%

    Returns:
        StatBlock of integer effective stats
    """
    _check_level(level)
    values: dict[str, int] = {}
    for stat in PERMANENT_STATS:
        base, iv, ev = int(base_stats.get(stat)), int(ivs.get(stat)), int(evs.get(stat))
        if stat == Stat.HP:
            values[stat.field_name] = calc_hp(base, iv, ev, level)
        else:
            values[stat.field_name] = math.floor(calc_non_hp(base, iv, ev, level, nature.multiplier(stat)))
    return StatBlock(policy=EFFECTIVE_POLICY, **values)
