from enum import IntEnum

from battle_calc.constants import NATURE_BOOST, NATURE_HINDER
from battle_calc.enums.stat import Stat


class Nature(IntEnum):
    """The 25 natures, ordered by (boosted stat, hindered stat)."""

    HARDY = 0
    LONELY = 1
    BRAVE = 2
    ADAMANT = 3
    NAUGHTY = 4
    BOLD = 5
    DOCILE = 6
    RELAXED = 7
    IMPISH = 8
    LAX = 9
    TIMID = 10
    HASTY = 11
    SERIOUS = 12
    JOLLY = 13
    NAIVE = 14
    MODEST = 15
    MILD = 16
    QUIET = 17
    BASHFUL = 18
    RASH = 19
    CALM = 20
    GENTLE = 21
    SASSY = 22
    CAREFUL = 23
    QUIRKY = 24

    @property
    def boosted(self) -> Stat:
        return _NATURE_STATS[self][0]

    @property
    def hindered(self) -> Stat:
        return _NATURE_STATS[self][1]

    def is_neutral(self) -> bool:
        """Natures that boost and hinder the same stat have no effect."""
        return self.boosted == self.hindered

    def multiplier(self, stat: Stat | str) -> float:
        """Return 1.1 for the boosted stat, 0.9 for the hindered stat and 1.0 otherwise."""
        stat = Stat.parse(stat)
        if self.is_neutral():
            return 1.0
        if stat == self.boosted:
            return NATURE_BOOST
        if stat == self.hindered:
            return NATURE_HINDER
        return 1.0

    def multipliers(self):
        """Per-stat multipliers as a read-only StatBlock."""
        from battle_calc.schema.stat_block import nature_multipliers

        return nature_multipliers(self)


_ORDER = (Stat.ATTACK, Stat.DEFENSE, Stat.SPEED, Stat.SP_ATTACK, Stat.SP_DEFENSE)

# Natures are laid out as a 5x5 grid: row = boosted stat, column = hindered stat
_NATURE_STATS = {Nature(row * 5 + col): (boosted, hindered) for row, boosted in enumerate(_ORDER) for col, hindered in enumerate(_ORDER)}

