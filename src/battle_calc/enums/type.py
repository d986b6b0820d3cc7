from enum import IntEnum


class Type(IntEnum):
    """Elemental types. TYPELESS fills the second slot of single-type creatures."""

    NORMAL = 0
    FIGHTING = 1
    FLYING = 2
    POISON = 3
    GROUND = 4
    ROCK = 5
    BUG = 6
    GHOST = 7
    STEEL = 8
    FIRE = 9
    WATER = 10
    GRASS = 11
    ELECTRIC = 12
    PSYCHIC = 13
    ICE = 14
    DRAGON = 15
    DARK = 16
    FAIRY = 17

    TYPELESS = 18
    # Flying while strong winds are active: loses its Electric, Ice and Rock weaknesses
    DELTA_FLYING = 19

    @classmethod
    def from_name(cls, name: "str | Type | None") -> "Type":
        """Resolve a dataset type name ("Fire", "fire", "FIRE"). Missing names are TYPELESS."""
        if isinstance(name, cls):
            return name
        if name is None or name == "":
            return cls.TYPELESS
        if not isinstance(name, str):
            raise TypeError(f"Type name must be a string, got {type(name).__name__}")
        try:
            return cls[name.strip().upper().replace(" ", "_").replace("-", "_")]
        except KeyError:
            raise TypeError(f"Unknown type name: '{name}'") from None

    def is_real(self) -> bool:
        """True for the 18 canonical types."""
        return self < Type.TYPELESS
