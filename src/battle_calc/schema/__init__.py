from battle_calc.schema.stat_block import (
    BASE_POLICY,
    EFFECTIVE_POLICY,
    EV_POLICY,
    IV_POLICY,
    NATURE_POLICY,
    StatBlock,
    StatPolicy,
    make_base_stats,
    make_evs,
    make_ivs,
    nature_multipliers,
    uniform_ivs,
)
from battle_calc.schema.stage_block import StageBlock
from battle_calc.schema.species_info import CreatureRecord
from battle_calc.schema.battle_pokemon import CreatureSnapshot
from battle_calc.schema.battle_move import MoveSnapshot
from battle_calc.schema.battle_state import BattleConditions
