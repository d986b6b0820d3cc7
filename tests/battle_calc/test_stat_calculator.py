import pytest

from battle_calc.enums import Nature
from battle_calc.schema.stat_block import make_base_stats, make_evs, make_ivs, uniform_ivs
from battle_calc.stat_calculator import calc_hp, calc_non_hp, calculate_stats


@pytest.mark.parametrize(
    "base,expected",
    [
        (100, 404),
        (108, 420),  # Garchomp
        (255, 714),  # Blissey
        (1, 206),
    ],
)
def test_hp_at_level_100_with_max_ivs_and_evs(base, expected):
    assert calc_hp(base, 31, 252, 100) == expected


def test_hp_floors_each_step():
    # floor(253 / 4) = 63, floor((200 + 0 + 63) * 37 / 100) = 97
    assert calc_hp(100, 0, 253, 37) == 97 + 37 + 10


def test_non_hp_at_level_50():
    assert calc_non_hp(100, 31, 252, 50, 1.0) == 152


def test_non_hp_applies_nature_after_flooring():
    assert calc_non_hp(100, 31, 252, 100, 1.1) == pytest.approx(328.9)
    assert calc_non_hp(100, 31, 252, 100, 0.9) == pytest.approx(269.1)


@pytest.mark.parametrize("level", [0, 101, -5])
def test_level_out_of_range_raises(level):
    with pytest.raises(ValueError):
        calc_hp(100, 31, 0, level)
    with pytest.raises(ValueError):
        calc_non_hp(100, 31, 0, level, 1.0)


def test_calculate_stats_matches_known_spread():
    garchomp = make_base_stats(hp=108, attack=130, defense=95, speed=102, spAttack=80, spDefense=85)
    evs = make_evs(hp=4, attack=252, speed=252)

    stats = calculate_stats(garchomp, uniform_ivs(), evs, 100, Nature.JOLLY)

    assert stats.as_dict() == {"hp": 358, "attack": 359, "defense": 226, "speed": 333, "spAttack": 176, "spDefense": 206}
    assert all(isinstance(value, int) for value in stats.as_dict().values())


def test_calculate_stats_with_zero_ivs_and_evs():
    base = make_base_stats(100, 100, 100, 100, 100, 100)
    stats = calculate_stats(base, make_ivs(), make_evs(), 50, Nature.HARDY)
    assert stats.hp == 160
    assert stats.attack == 105


def test_calculate_stats_rejects_bad_level():
    base = make_base_stats(100, 100, 100, 100, 100, 100)
    with pytest.raises(ValueError):
        calculate_stats(base, uniform_ivs(), make_evs(), 0)


def test_stat_formulas_are_idempotent():
    assert calc_hp(80, 31, 252, 50) == calc_hp(80, 31, 252, 50)
    assert calc_non_hp(80, 31, 252, 50, 1.1) == calc_non_hp(80, 31, 252, 50, 1.1)
