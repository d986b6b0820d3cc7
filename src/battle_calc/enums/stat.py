from enum import IntEnum


class Stat(IntEnum):
    """Stat indices. The first six are permanent stats, the rest exist only in battle."""

    HP = 0
    ATTACK = 1
    DEFENSE = 2
    SPEED = 3
    SP_ATTACK = 4
    SP_DEFENSE = 5
    ACCURACY = 6
    EVASION = 7
    CRIT_RATIO = 8

    @classmethod
    def parse(cls, value: "Stat | str") -> "Stat":
        """Resolve a stat from the enum, its name, or a common short alias ("atk", "sp.def", "spe")."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise TypeError(f"Stat must be a Stat or a string, got {type(value).__name__}")
        key = value.strip().lower().replace(".", "").replace("_", "").replace(" ", "")
        try:
            return _ALIASES[key]
        except KeyError:
            raise TypeError(f"Unknown stat name: '{value}'") from None

    @property
    def field_name(self) -> str:
        """Attribute name used by StatBlock / StageBlock."""
        return _FIELD_NAMES[self]


_FIELD_NAMES = {
    Stat.HP: "hp",
    Stat.ATTACK: "attack",
    Stat.DEFENSE: "defense",
    Stat.SPEED: "speed",
    Stat.SP_ATTACK: "spAttack",
    Stat.SP_DEFENSE: "spDefense",
    Stat.ACCURACY: "accuracy",
    Stat.EVASION: "evasion",
    Stat.CRIT_RATIO: "critRatio",
}

_ALIASES = {
    "hp": Stat.HP,
    "atk": Stat.ATTACK,
    "attack": Stat.ATTACK,
    "def": Stat.DEFENSE,
    "defense": Stat.DEFENSE,
    "spe": Stat.SPEED,
    "speed": Stat.SPEED,
    "spa": Stat.SP_ATTACK,
    "spatk": Stat.SP_ATTACK,
    "spattack": Stat.SP_ATTACK,
    "specialattack": Stat.SP_ATTACK,
    "spd": Stat.SP_DEFENSE,
    "spdef": Stat.SP_DEFENSE,
    "spdefense": Stat.SP_DEFENSE,
    "specialdefense": Stat.SP_DEFENSE,
    "acc": Stat.ACCURACY,
    "accuracy": Stat.ACCURACY,
    "eva": Stat.EVASION,
    "evasion": Stat.EVASION,
    "crit": Stat.CRIT_RATIO,
    "critratio": Stat.CRIT_RATIO,
}

PERMANENT_STATS = (Stat.HP, Stat.ATTACK, Stat.DEFENSE, Stat.SPEED, Stat.SP_ATTACK, Stat.SP_DEFENSE)
CORE_BATTLE_STATS = (Stat.ATTACK, Stat.DEFENSE, Stat.SPEED, Stat.SP_ATTACK, Stat.SP_DEFENSE)
STAGED_STATS = CORE_BATTLE_STATS + (Stat.ACCURACY, Stat.EVASION, Stat.CRIT_RATIO)
