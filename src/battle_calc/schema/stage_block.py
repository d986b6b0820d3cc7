import logging
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from battle_calc.constants import MAX_CRIT_STAGE, MAX_STAT_STAGE, MIN_CRIT_STAGE, MIN_STAT_STAGE
from battle_calc.enums.stat import STAGED_STATS, Stat
from battle_calc.errors import UnsupportedStageError

logger = logging.getLogger(__name__)

STAGE_FIELDS = tuple(stat.field_name for stat in STAGED_STATS)


def stage_bounds(stat: Stat) -> tuple[int, int]:
    if stat == Stat.CRIT_RATIO:
        return MIN_CRIT_STAGE, MAX_CRIT_STAGE
    return MIN_STAT_STAGE, MAX_STAT_STAGE


def normalize_stage(stat: Stat, stage: Any) -> int:
    """
    Floor a stage to an integer and clamp it to the stat's legal range.

    Out-of-range stages are not an error: they are clamped and a warning is logged.

    Raises:
        UnsupportedStageError: for HP, or a stage that is not a finite number
    """
    if stat == Stat.HP:
        raise UnsupportedStageError(stat.field_name, stage, "HP has no stat stage")
    if isinstance(stage, bool) or not isinstance(stage, (int, float)):
        raise UnsupportedStageError(stat.field_name, stage, "stage must be a number")
    if isinstance(stage, float) and not math.isfinite(stage):
        raise UnsupportedStageError(stat.field_name, stage, "stage must be finite")

    # Stat stages only exist in integers
    value = math.floor(stage)
    low, high = stage_bounds(stat)
    if value < low:
        logger.warning('The "%s" stage %s is less than %s. Its value will be set to %s.', stat.field_name, stage, low, low)
        return low
    if value > high:
        logger.warning('The "%s" stage %s is greater than %s. Its value will be set to %s.', stat.field_name, stage, high, high)
        return high
    return value


class StageBlock(BaseModel):
    """Snapshot of in-battle stages: five core stats, accuracy and evasion (-6..6) and crit ratio (0..4)."""

    model_config = ConfigDict(frozen=True)

    attack: int = 0
    defense: int = 0
    speed: int = 0
    spAttack: int = 0
    spDefense: int = 0
    accuracy: int = 0
    evasion: int = 0
    critRatio: int = 0

    @model_validator(mode="before")
    @classmethod
    def _clamp_stages(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if "hp" in data:
            raise UnsupportedStageError("hp", data["hp"], "HP has no stat stage")
        for stat in STAGED_STATS:
            if stat.field_name in data:
                data[stat.field_name] = normalize_stage(stat, data[stat.field_name])
        return data

    def get(self, stat: Stat | str) -> int:
        stat = Stat.parse(stat)
        if stat not in STAGED_STATS:
            raise UnsupportedStageError(stat.field_name, None, "HP has no stat stage")
        return getattr(self, stat.field_name)

    def with_stage(self, stat: Stat | str, value: int | float) -> "StageBlock":
        """Return a copy with one stage replaced (clamped like the constructor)."""
        stat = Stat.parse(stat)
        values = {name: getattr(self, name) for name in STAGE_FIELDS}
        values[stat.field_name] = value
        return StageBlock(**values)
