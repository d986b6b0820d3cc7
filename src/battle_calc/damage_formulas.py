"""
Damage formulas - one pure function per generation family

Every variant shares the skeleton

    base = ((2 * Level / 5 + 2) * Power * (A * as) / (D * ds) / 50) + 2

followed by an ordered chain of multipliers. Inputs are already-resolved numbers
and flags (see DamageCalculator for how battle state is resolved into them);
results are fractional and never floored here.

Shared rules:
- On a critical hit an attack stage below x1 and a defense stage above x1 are
  ignored, and screens are bypassed (except Gen I, see calc_gen1_damage)
- Type effectiveness or power of 0 yields exactly 0
- The random factor (85-100%) is applied last unless ignore_random is set
"""

from typing import Callable, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from battle_calc.constants import (
    ADAPTABILITY_STAB_MULTIPLIER,
    BURN_MULTIPLIER,
    DAMAGE_RANDOM_MAX,
    DAMAGE_RANDOM_MIN,
    EXPERT_BELT_MULTIPLIER,
    FILTER_MULTIPLIER,
    STAB_MULTIPLIER,
    TINTED_LENS_MULTIPLIER,
)
from battle_calc.enums.generation import Generation


class DamageModifiers(BaseModel):
    """Inputs common to every generation's formula."""

    model_config = ConfigDict(frozen=True)

    level: int = Field(ge=1, le=100)
    power: float = Field(ge=0)
    attack: float = Field(gt=0)
    defense: float = Field(gt=0)
    attack_stage: float = Field(default=1.0, gt=0)
    defense_stage: float = Field(default=1.0, gt=0)

    critical: bool = False
    stab: bool = False
    type_effectiveness: float = Field(default=1.0, ge=0)
    screen: float = Field(default=1.0, gt=0, le=1)  # 0.5 singles, 2/3 doubles

    burned: bool = False
    physical: bool = True
    has_guts: bool = False

    random_percent: int = Field(default=DAMAGE_RANDOM_MAX, ge=DAMAGE_RANDOM_MIN, le=DAMAGE_RANDOM_MAX)
    ignore_random: bool = False

    @property
    def burn_multiplier(self) -> float:
        if self.burned and self.physical and not self.has_guts:
            return BURN_MULTIPLIER
        return 1.0

    @property
    def random_multiplier(self) -> float:
        return 1.0 if self.ignore_random else self.random_percent / 100

    @property
    def stab_multiplier(self) -> float:
        return STAB_MULTIPLIER if self.stab else 1.0

    def staged_attack(self) -> float:
        stage = self.attack_stage
        if self.critical:
            stage = max(stage, 1.0)
        return self.attack * stage

    def staged_defense(self) -> float:
        stage = self.defense_stage
        if self.critical:
            stage = min(stage, 1.0)
        return self.defense * stage

    def screen_multiplier(self) -> float:
        return 1.0 if self.critical else self.screen

    def is_zero(self) -> bool:
        return self.type_effectiveness == 0 or self.power == 0


class Gen1Modifiers(DamageModifiers):
    pass


class Gen2Modifiers(DamageModifiers):
    item: float = Field(default=1.0, ge=1)  # 1.1 with a matching type-boosting item
    weather: float = Field(default=1.0, ge=0)
    double_damage: float = Field(default=1.0, ge=1)


class Gen3Modifiers(DamageModifiers):
    targets: float = Field(default=1.0, gt=0, le=1)  # 0.5 for spread moves in doubles
    weather: float = Field(default=1.0, ge=0)
    flash_fire: float = Field(default=1.0, ge=1)
    stockpile: int = Field(default=1, ge=1, le=3)
    double_damage: float = Field(default=1.0, ge=1)
    charge: float = Field(default=1.0, ge=1)
    helping_hand: float = Field(default=1.0, ge=1)


class _LateModifiers(DamageModifiers):
    """Ability and item conditionals introduced in Gen IV and kept since."""

    targets: float = Field(default=1.0, gt=0, le=1)  # 0.75 for spread moves in doubles
    weather: float = Field(default=1.0, ge=0)
    flash_fire: float = Field(default=1.0, ge=1)
    item: float = Field(default=1.0, gt=0)  # Life Orb, Metronome
    sniper: bool = False
    adaptability: bool = False
    filter: bool = False  # defender has Solid Rock / Filter / Prism Armor
    mold_breaker: bool = False
    expert_belt: bool = False
    tinted_lens: bool = False
    berry: float = Field(default=1.0, ge=0, le=1)

    @property
    def stab_multiplier(self) -> float:
        if not self.stab:
            return 1.0
        return ADAPTABILITY_STAB_MULTIPLIER if self.adaptability else STAB_MULTIPLIER

    def super_effective_modifiers(self) -> float:
        """Solid Rock/Filter, Expert Belt and Tinted Lens, all keyed on type effectiveness."""
        multiplier = 1.0
        if self.type_effectiveness > 1:
            if self.filter and not self.mold_breaker:
                multiplier *= FILTER_MULTIPLIER
            if self.expert_belt:
                multiplier *= EXPERT_BELT_MULTIPLIER
        elif 0 < self.type_effectiveness < 1 and self.tinted_lens:
            multiplier *= TINTED_LENS_MULTIPLIER
        return multiplier


class Gen4Modifiers(_LateModifiers):
    me_first: float = Field(default=1.0, ge=1)


class ModernModifiers(_LateModifiers):
    generation: Generation = Generation.V

    @field_validator("generation")
    @classmethod
    def _check_generation(cls, value: Generation) -> Generation:
        if value < Generation.V:
            raise ValueError(f"Modern damage formula applies from Gen V, got {value}")
        return value


def critical_multiplier(gen: Generation, sniper: bool = False) -> float:
    """
    Damage multiplier of a critical hit.

    Gens I-IV: x2 (Gen I doubles the level instead, which this value represents)
    Gen V: x2, Gen VI+: x1.5
    Sniper (Gen IV+) promotes the multiplier by half again: x3 in Gens IV-V, x2.25 in VI+
    """
    base = 1.5 if gen >= Generation.VI else 2.0
    if sniper and gen >= Generation.IV:
        return base * 1.5
    return base


def _level_factor(level: float) -> float:
    return 2 * level / 5 + 2


def calc_gen1_damage(mods: Gen1Modifiers) -> float:
    """
    Gen I damage.

    A critical hit doubles the level and ignores every stage, the screen and burn.
    """
    if mods.is_zero():
        return 0.0

    if mods.critical:
        level, attack, defense, screen, burn = mods.level * 2, mods.attack, mods.defense, 1.0, 1.0
    else:
        level, attack, defense = mods.level, mods.attack * mods.attack_stage, mods.defense * mods.defense_stage
        screen, burn = mods.screen, mods.burn_multiplier

    base = _level_factor(level) * mods.power * attack / defense / 50 * burn * screen + 2
    return base * mods.stab_multiplier * mods.type_effectiveness * mods.random_multiplier


def calc_gen2_damage(mods: Gen2Modifiers) -> float:
    if mods.is_zero():
        return 0.0

    crit = 2.0 if mods.critical else 1.0
    base = _level_factor(mods.level) * mods.power * mods.staged_attack() / mods.staged_defense() / 50
    base = base * mods.burn_multiplier * mods.screen_multiplier() * mods.item * crit + 2
    return base * mods.weather * mods.double_damage * mods.stab_multiplier * mods.type_effectiveness * mods.random_multiplier


def calc_gen3_damage(mods: Gen3Modifiers) -> float:
    """Gen III damage: burn, screen, targets, weather and Flash Fire inside the base."""
    if mods.is_zero():
        return 0.0

    base = _level_factor(mods.level) * mods.power * mods.staged_attack() / mods.staged_defense() / 50
    base = base * mods.burn_multiplier * mods.screen_multiplier() * mods.targets * mods.weather * mods.flash_fire + 2

    crit = critical_multiplier(Generation.III) if mods.critical else 1.0
    damage = base * mods.stockpile * crit * mods.double_damage * mods.charge * mods.helping_hand
    return damage * mods.stab_multiplier * mods.type_effectiveness * mods.random_multiplier


def calc_gen4_damage(mods: Gen4Modifiers) -> float:
    """
    Gen IV damage.

    Chain after the base: critical (x2, x3 with Sniper), item, Me First, STAB
    (x2 with Adaptability), type, Solid Rock/Filter, Expert Belt, Tinted Lens,
    resist berry, random.
    """
    if mods.is_zero():
        return 0.0

    base = _level_factor(mods.level) * mods.power * mods.staged_attack() / mods.staged_defense() / 50
    base = base * mods.burn_multiplier * mods.screen_multiplier() * mods.targets * mods.weather * mods.flash_fire + 2

    crit = critical_multiplier(Generation.IV, mods.sniper) if mods.critical else 1.0
    damage = base * crit * mods.item * mods.me_first * mods.stab_multiplier * mods.type_effectiveness
    damage *= mods.super_effective_modifiers() * mods.berry
    return damage * mods.random_multiplier


def calc_modern_damage(mods: ModernModifiers) -> float:
    """Gen V+ damage: every modifier sits outside the base."""
    if mods.is_zero():
        return 0.0

    base = _level_factor(mods.level) * mods.power * mods.staged_attack() / mods.staged_defense() / 50 + 2

    crit = critical_multiplier(mods.generation, mods.sniper) if mods.critical else 1.0
    damage = base * mods.targets * mods.weather * mods.flash_fire * crit
    damage *= mods.stab_multiplier * mods.type_effectiveness * mods.burn_multiplier * mods.screen_multiplier()
    damage *= mods.item * mods.super_effective_modifiers() * mods.berry
    return damage * mods.random_multiplier


M = TypeVar("M", bound=DamageModifiers)


def damage_rolls(formula: Callable[[M], float], mods: M) -> list[float]:
    """All 16 possible results of a formula, for random rolls 85 through 100."""
    return [formula(mods.model_copy(update={"random_percent": percent, "ignore_random": False})) for percent in range(DAMAGE_RANDOM_MIN, DAMAGE_RANDOM_MAX + 1)]
