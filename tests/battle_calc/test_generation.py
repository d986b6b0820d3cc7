import pytest

from battle_calc.enums import Generation, parse_generation
from battle_calc.errors import FormatError
from battle_calc.utils.roman import is_roman_numeral, parse_ordinal, roman_to_int


@pytest.mark.parametrize("value", [Generation.IV, 4, "4", "IV", " 4 "])
def test_parse_generation_accepts_enum_int_and_numerals(value):
    assert parse_generation(value) == Generation.IV


@pytest.mark.parametrize("value", [0, -1, 10, "0", "X", "", "iv", "IIII", "four"])
def test_parse_generation_rejects_out_of_range_and_malformed(value):
    with pytest.raises(FormatError):
        Generation.parse(value)


@pytest.mark.parametrize("value", [True, 4.0, None, [4]])
def test_parse_generation_rejects_other_types(value):
    with pytest.raises(TypeError):
        Generation.parse(value)


def test_generation_identity_is_by_value():
    assert Generation.parse("VI") is Generation.VI
    assert Generation.VI == 6
    assert Generation.III < Generation.IV
    assert str(Generation.IV) == "Gen IV"
    assert Generation.IX.roman == "IX"


@pytest.mark.parametrize(
    "gen,expr,expected",
    [
        (Generation.III, "3", True),
        (Generation.III, "III", True),
        (Generation.III, "4", False),
        (Generation.III, "2-4", True),
        (Generation.III, "II-IV", True),
        (Generation.III, "IV-II", True),
        (Generation.III, "4-2", True),
        (Generation.III, "II - IV", True),
        (Generation.III, "2-IV", True),
        (Generation.V, "II-IV", False),
        (Generation.III, "4+", False),
        (Generation.IV, "4+", True),
        (Generation.IX, "VI+", True),
        (Generation.I, "I", True),
        (Generation.II, "I", False),
    ],
)
def test_matches_range_forms(gen, expr, expected):
    assert gen.matches(expr) is expected


@pytest.mark.parametrize("expr", ["", "abc", "3-", "-3", "+", "3++", "2-4-6", "0-3", "0+", "ii-iv", "IIII"])
def test_matches_rejects_invalid_expressions(expr):
    with pytest.raises(FormatError):
        Generation.V.matches(expr)


def test_matches_rejects_non_string():
    with pytest.raises(TypeError):
        Generation.V.matches(5)


def test_format_error_is_a_value_error():
    with pytest.raises(ValueError):
        Generation.V.matches("five")


@pytest.mark.parametrize("numeral,value", [("I", 1), ("IV", 4), ("IX", 9), ("XIV", 14), ("XL", 40), ("MCMXCIV", 1994)])
def test_roman_to_int(numeral, value):
    assert is_roman_numeral(numeral)
    assert roman_to_int(numeral) == value


@pytest.mark.parametrize("numeral", ["", "IIII", "VX", "IC", "ix", "VV", "MMMMMMMMMMM"])
def test_roman_to_int_rejects_invalid_numerals(numeral):
    assert not is_roman_numeral(numeral)
    with pytest.raises(FormatError):
        roman_to_int(numeral)


def test_parse_ordinal():
    assert parse_ordinal("12") == 12
    assert parse_ordinal(" VII ") == 7
    with pytest.raises(FormatError):
        parse_ordinal("0")
    with pytest.raises(FormatError):
        parse_ordinal("-3")


@pytest.mark.parametrize("value", ["٣", "３", "٣-٥", "०+"])
def test_non_ascii_digits_are_rejected(value):
    with pytest.raises(FormatError):
        Generation.III.matches(value)


@pytest.mark.parametrize("value", ["٣", "４"])
def test_parse_generation_rejects_non_ascii_digits(value):
    with pytest.raises(FormatError):
        Generation.parse(value)
    with pytest.raises(FormatError):
        parse_ordinal(value)
