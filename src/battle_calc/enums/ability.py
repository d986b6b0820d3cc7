from enum import IntEnum


class Ability(IntEnum):
    """Abilities that change stat, stage or damage resolution. Everything else is NONE."""

    NONE = 0

    # Attacker-side damage modifiers
    ADAPTABILITY = 1
    GUTS = 2
    SNIPER = 3
    TINTED_LENS = 4
    HUGE_POWER = 5
    PURE_POWER = 6
    HUSTLE = 7
    FLASH_FIRE = 8

    # Ignore the target's defensive abilities
    MOLD_BREAKER = 9
    TERAVOLT = 10
    TURBOBLAZE = 11

    # Defender-side damage modifiers
    SOLID_ROCK = 12
    FILTER = 13
    PRISM_ARMOR = 14
    THICK_FAT = 15
    LEVITATE = 16

    # Block critical hits
    BATTLE_ARMOR = 17
    SHELL_ARMOR = 18

    # Suppress weather
    CLOUD_NINE = 19
    AIR_LOCK = 20

    @classmethod
    def from_name(cls, name: "str | Ability | None") -> "Ability":
        """Resolve a dataset ability name; abilities the engine does not model map to NONE."""
        if isinstance(name, cls):
            return name
        if not name:
            return cls.NONE
        key = str(name).strip().upper().replace(" ", "_").replace("-", "_")
        return cls.__members__.get(key, cls.NONE)

    def ignores_defender_ability(self) -> bool:
        return self in (Ability.MOLD_BREAKER, Ability.TERAVOLT, Ability.TURBOBLAZE)

    def blocks_critical_hits(self) -> bool:
        return self in (Ability.BATTLE_ARMOR, Ability.SHELL_ARMOR)

    def suppresses_weather(self) -> bool:
        return self in (Ability.CLOUD_NINE, Ability.AIR_LOCK)

    def filters_super_effective(self) -> bool:
        return self in (Ability.SOLID_ROCK, Ability.FILTER, Ability.PRISM_ARMOR)
