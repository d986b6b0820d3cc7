from enum import IntEnum


class Weather(IntEnum):
    NONE = 0
    HARSH_SUN = 1
    RAIN = 2
    SANDSTORM = 3
    HAIL = 4
    SNOW = 5
    FOG = 6
    EXTREMELY_HARSH_SUN = 7
    HEAVY_RAIN = 8
    STRONG_WINDS = 9

    def is_primal(self) -> bool:
        """Weathers summoned by primal abilities, which only exist from Gen VI."""
        return self in (Weather.EXTREMELY_HARSH_SUN, Weather.HEAVY_RAIN, Weather.STRONG_WINDS)


class MoveCategory(IntEnum):
    PHYSICAL = 0
    SPECIAL = 1
    STATUS = 2
