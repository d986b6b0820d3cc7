import re

from battle_calc.errors import FormatError

ROMAN_PATTERN = r"M{0,10}(?:CM|CD|D?C{0,3})(?:XC|XL|L?X{0,3})(?:IX|IV|V?I{0,3})"

_ROMAN_RE = re.compile(rf"^{ROMAN_PATTERN}$")

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def is_roman_numeral(text: str) -> bool:
    """Check strict upper-case numeral grammar. The empty string is not a numeral."""
    return bool(text) and _ROMAN_RE.match(text) is not None


def roman_to_int(text: str) -> int:
    """Convert a validated Roman numeral to its integer value.

    Raises:
        FormatError: if ``text`` does not follow the numeral grammar
    """
    if not is_roman_numeral(text):
        raise FormatError(f"'{text}' is not a valid Roman numeral")

    total = 0
    for i, char in enumerate(text):
        value = _ROMAN_VALUES[char]
        if i + 1 < len(text) and value < _ROMAN_VALUES[text[i + 1]]:
            total -= value
        else:
            total += value
    return total


def parse_ordinal(token: str) -> int:
    """Parse a positive ordinal written in ASCII digits or Roman numerals."""
    token = token.strip()
    if token.isascii() and token.isdecimal():
        value = int(token)
    elif is_roman_numeral(token):
        value = roman_to_int(token)
    else:
        raise FormatError(f"'{token}' is neither a number nor a Roman numeral")

    if value < 1:
        raise FormatError(f"Ordinal must be positive, got {value}")
    return value
