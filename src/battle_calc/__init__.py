from battle_calc.enums import Ability, Generation, HoldEffect, MoveCategory, Nature, Stat, Type, Weather, parse_generation
from battle_calc.errors import BattleCalcError, EVSumError, FormatError, RangeViolationError, ReadOnlyStatsError, UnsupportedStageError
from battle_calc.schema import (
    BattleConditions,
    CreatureRecord,
    CreatureSnapshot,
    MoveSnapshot,
    StageBlock,
    StatBlock,
    StatPolicy,
    make_base_stats,
    make_evs,
    make_ivs,
)
from battle_calc.type_effectiveness import TypeEffectiveness, effectiveness, effectiveness_description, weather_power_multiplier
from battle_calc.stat_stages import all_multipliers, critical_hit_chance, multiplier_for
from battle_calc.stat_calculator import calc_hp, calc_non_hp, calculate_stats
from battle_calc.damage_formulas import (
    calc_gen1_damage,
    calc_gen2_damage,
    calc_gen3_damage,
    calc_gen4_damage,
    calc_modern_damage,
    critical_multiplier,
    damage_rolls,
)
from battle_calc.damage_calculator import DamageCalculator, DamageResult
from battle_calc.data import Pokedex
from battle_calc.utils.rng import DamageRng
