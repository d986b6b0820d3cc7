import re
from enum import IntEnum

from battle_calc.errors import FormatError
from battle_calc.utils.roman import ROMAN_PATTERN, parse_ordinal

_BOUND = rf"[0-9]+|{ROMAN_PATTERN}"

_RANGE_RE = re.compile(rf"^\s*({_BOUND})\s*-\s*({_BOUND})\s*$")
_MINIMUM_RE = re.compile(rf"^\s*({_BOUND})\+\s*$")
_EXACT_RE = re.compile(rf"^\s*({_BOUND})\s*$")

_ROMAN_NAMES = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")


class Generation(IntEnum):
    """Ruleset era of the battle mechanics. Compared by ordinal value."""

    I = 1
    II = 2
    III = 3
    IV = 4
    V = 5
    VI = 6
    VII = 7
    VIII = 8
    IX = 9

    @classmethod
    def parse(cls, value: "Generation | int | str") -> "Generation":
        """
        Resolve a generation from an enum member, an int, a decimal string or a Roman numeral.

        Raises:
            FormatError: if the value does not name one of generations I-IX
            TypeError: for any other argument type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise TypeError("Generation cannot be parsed from a bool")
        if isinstance(value, int):
            ordinal = value
        elif isinstance(value, str):
            ordinal = parse_ordinal(value)
        else:
            raise TypeError(f"Cannot parse a generation from {type(value).__name__}")

        if not cls.I <= ordinal <= cls.IX:
            raise FormatError(f"Generation must be between 1 and 9, got {ordinal}")
        return cls(ordinal)

    @property
    def roman(self) -> str:
        return _ROMAN_NAMES[self.value - 1]

    def matches(self, gen_range: str) -> bool:
        """
        Check this generation against a range expression.

        Accepted forms, each bound in Arabic or Roman numerals:
            "3" / "III"      exact generation
            "2-4" / "II-IV"  inclusive range, bounds in either order
            "5+" / "V+"      this generation or later

        Raises:
            FormatError: if the expression matches none of the forms
        """
        if not isinstance(gen_range, str):
            raise TypeError("Generation range must be a string")

        match = _RANGE_RE.match(gen_range)
        if match:
            g1, g2 = parse_ordinal(match.group(1)), parse_ordinal(match.group(2))
            return min(g1, g2) <= self.value <= max(g1, g2)

        match = _MINIMUM_RE.match(gen_range)
        if match:
            return self.value >= parse_ordinal(match.group(1))

        match = _EXACT_RE.match(gen_range)
        if match:
            return self.value == parse_ordinal(match.group(1))

        raise FormatError(f"Invalid generation range format: '{gen_range}'")

    def __str__(self) -> str:
        return f"Gen {self.roman}"


def parse_generation(value: Generation | int | str) -> Generation:
    return Generation.parse(value)
