from enum import IntEnum

from battle_calc.enums.type import Type


class HoldEffect(IntEnum):
    """Held item effects that feed the damage calculation."""

    NONE = 0

    # =============================================================================
    # STAT BOOSTING EFFECTS
    # =============================================================================
    CHOICE_BAND = 1  # Attack x1.5
    CHOICE_SPECS = 2  # Special Attack x1.5

    # =============================================================================
    # FINAL DAMAGE EFFECTS
    # =============================================================================
    LIFE_ORB = 3  # Damage x1.3
    EXPERT_BELT = 4  # Super effective damage x1.2
    METRONOME = 5  # Damage grows with consecutive uses of the same move
    RESIST_BERRY = 6  # Halves one super effective hit of the berry's type

    # =============================================================================
    # TYPE POWER BOOSTING EFFECTS
    # =============================================================================
    BUG_POWER = 31  # Increases Bug-type move power
    STEEL_POWER = 42  # Increases Steel-type move power
    GROUND_POWER = 46  # Increases Ground-type move power
    ROCK_POWER = 47  # Increases Rock-type move power
    GRASS_POWER = 48  # Increases Grass-type move power
    DARK_POWER = 49  # Increases Dark-type move power
    FIGHTING_POWER = 50  # Increases Fighting-type move power
    ELECTRIC_POWER = 51  # Increases Electric-type move power
    WATER_POWER = 52  # Increases Water-type move power
    FLYING_POWER = 53  # Increases Flying-type move power
    POISON_POWER = 54  # Increases Poison-type move power
    ICE_POWER = 55  # Increases Ice-type move power
    GHOST_POWER = 56  # Increases Ghost-type move power
    PSYCHIC_POWER = 57  # Increases Psychic-type move power
    FIRE_POWER = 58  # Increases Fire-type move power
    DRAGON_POWER = 59  # Increases Dragon-type move power
    NORMAL_POWER = 60  # Increases Normal-type move power
    FAIRY_POWER = 61  # Increases Fairy-type move power

    def boosted_type(self) -> Type | None:
        """Move type powered up by this item, if it is a type-boosting item."""
        return HOLD_EFFECT_TO_TYPE.get(self)


HOLD_EFFECT_TO_TYPE: dict[HoldEffect, Type] = {
    HoldEffect.BUG_POWER: Type.BUG,
    HoldEffect.ROCK_POWER: Type.ROCK,
    HoldEffect.GRASS_POWER: Type.GRASS,
    HoldEffect.DARK_POWER: Type.DARK,
    HoldEffect.FIGHTING_POWER: Type.FIGHTING,
    HoldEffect.ELECTRIC_POWER: Type.ELECTRIC,
    HoldEffect.WATER_POWER: Type.WATER,
    HoldEffect.FLYING_POWER: Type.FLYING,
    HoldEffect.POISON_POWER: Type.POISON,
    HoldEffect.ICE_POWER: Type.ICE,
    HoldEffect.GHOST_POWER: Type.GHOST,
    HoldEffect.PSYCHIC_POWER: Type.PSYCHIC,
    HoldEffect.FIRE_POWER: Type.FIRE,
    HoldEffect.DRAGON_POWER: Type.DRAGON,
    HoldEffect.NORMAL_POWER: Type.NORMAL,
    HoldEffect.GROUND_POWER: Type.GROUND,
    HoldEffect.STEEL_POWER: Type.STEEL,
    HoldEffect.FAIRY_POWER: Type.FAIRY,
}
