import logging
import math
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from battle_calc.constants import MAX_BASE_STAT, MAX_PER_STAT_EVS, MAX_PER_STAT_IVS, MAX_TOTAL_EVS, MIN_BASE_STAT, NATURE_BOOST, NATURE_HINDER
from battle_calc.enums.nature import Nature
from battle_calc.enums.stat import PERMANENT_STATS, Stat
from battle_calc.errors import EVSumError, RangeViolationError, ReadOnlyStatsError

logger = logging.getLogger(__name__)

StatValue = Union[int, float]

STAT_FIELDS = tuple(stat.field_name for stat in PERMANENT_STATS)


class StatPolicy(BaseModel):
    """Validation rules injected into a StatBlock.

    Individual values outside [minimum, maximum] are clamped with a warning.
    A total above total_cap is rejected outright.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    total_cap: Optional[int] = None
    editable: bool = True
    integral: bool = False

    def clamp(self, stat: str, value: Any) -> StatValue:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"{self.name} value for '{stat}' must be a number, got {type(value).__name__}")
        if isinstance(value, float) and not math.isfinite(value):
            raise RangeViolationError(f"{self.name} value for '{stat}' must be finite, got {value}")

        if self.integral and value != math.floor(value):
            logger.warning('The "%s" %s value %s is not an integer. It will be floored.', stat, self.name, value)
        if self.integral:
            value = math.floor(value)

        if self.minimum is not None and value < self.minimum:
            logger.warning('The "%s" %s value %s is less than %s. Its value will be set to %s.', stat, self.name, value, self.minimum, self.minimum)
            return type(value)(self.minimum)
        if self.maximum is not None and value > self.maximum:
            logger.warning('The "%s" %s value %s is greater than %s. Its value will be set to %s.', stat, self.name, value, self.maximum, self.maximum)
            return type(value)(self.maximum)
        return value


IV_POLICY = StatPolicy(name="individual", minimum=0, maximum=MAX_PER_STAT_IVS, integral=True)
EV_POLICY = StatPolicy(name="effort", minimum=0, maximum=MAX_PER_STAT_EVS, total_cap=MAX_TOTAL_EVS, integral=True)
BASE_POLICY = StatPolicy(name="base", minimum=MIN_BASE_STAT, maximum=MAX_BASE_STAT, integral=True)
NATURE_POLICY = StatPolicy(name="nature", minimum=NATURE_HINDER, maximum=NATURE_BOOST, editable=False)
EFFECTIVE_POLICY = StatPolicy(name="effective", minimum=0)


class StatBlock(BaseModel):
    """Six permanent stats (HP, Attack, Defense, Speed, Sp. Attack, Sp. Defense).

    One container serves base stats, IVs, EVs, nature multipliers and computed
    stats; the attached policy decides what is legal for each use.
    """

    model_config = ConfigDict(frozen=True)

    hp: StatValue = 0
    attack: StatValue = 0
    defense: StatValue = 0
    speed: StatValue = 0
    spAttack: StatValue = 0
    spDefense: StatValue = 0

    policy: StatPolicy = Field(default=EFFECTIVE_POLICY, exclude=True, repr=False)

    @model_validator(mode="before")
    @classmethod
    def _apply_policy(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        policy = data.get("policy", EFFECTIVE_POLICY)
        if isinstance(policy, dict):
            policy = StatPolicy(**policy)
            data["policy"] = policy

        unknown = set(data) - set(STAT_FIELDS) - {"policy"}
        if unknown:
            raise TypeError(f"Unknown stat field(s): {', '.join(sorted(unknown))}")

        for name in STAT_FIELDS:
            if name in data:
                data[name] = policy.clamp(name, data[name])

        if policy.total_cap is not None:
            total = sum(data.get(name, 0) for name in STAT_FIELDS)
            if total > policy.total_cap:
                raise EVSumError(total, policy.total_cap)
        return data

    def get(self, stat: Stat | str) -> StatValue:
        stat = Stat.parse(stat)
        if stat not in PERMANENT_STATS:
            raise TypeError(f"{stat.name} is not a permanent stat")
        return getattr(self, stat.field_name)

    def with_stat(self, stat: Stat | str, value: StatValue) -> "StatBlock":
        """
        Return a copy with one stat replaced, validated under the same policy.

        The original block is never modified, so a rejected value leaves it intact.

        Raises:
            ReadOnlyStatsError: if the policy does not allow edits
            EVSumError: if the new total exceeds the policy's cap
        """
        if not self.policy.editable:
            raise ReadOnlyStatsError(self.policy.name)
        stat = Stat.parse(stat)
        if stat not in PERMANENT_STATS:
            raise TypeError(f"{stat.name} is not a permanent stat")
        values = self.as_dict()
        values[stat.field_name] = value
        return StatBlock(policy=self.policy, **values)

    def as_dict(self) -> dict[str, StatValue]:
        return {name: getattr(self, name) for name in STAT_FIELDS}

    @property
    def total(self) -> StatValue:
        return sum(self.as_dict().values())


def make_ivs(hp: int = 0, attack: int = 0, defense: int = 0, speed: int = 0, spAttack: int = 0, spDefense: int = 0) -> StatBlock:
    return StatBlock(policy=IV_POLICY, hp=hp, attack=attack, defense=defense, speed=speed, spAttack=spAttack, spDefense=spDefense)


def make_evs(hp: int = 0, attack: int = 0, defense: int = 0, speed: int = 0, spAttack: int = 0, spDefense: int = 0) -> StatBlock:
    """Build an EV spread. Each value is clamped to 0-252; a total above 510 raises EVSumError."""
    return StatBlock(policy=EV_POLICY, hp=hp, attack=attack, defense=defense, speed=speed, spAttack=spAttack, spDefense=spDefense)


def make_base_stats(hp: int, attack: int, defense: int, speed: int, spAttack: int, spDefense: int) -> StatBlock:
    return StatBlock(policy=BASE_POLICY, hp=hp, attack=attack, defense=defense, speed=speed, spAttack=spAttack, spDefense=spDefense)


def uniform_ivs(value: int = MAX_PER_STAT_IVS) -> StatBlock:
    return make_ivs(value, value, value, value, value, value)


def nature_multipliers(nature: Nature) -> StatBlock:
    """Per-stat nature multipliers as a read-only StatBlock."""
    values = {stat.field_name: nature.multiplier(stat) for stat in PERMANENT_STATS}
    return StatBlock(policy=NATURE_POLICY, **values)
