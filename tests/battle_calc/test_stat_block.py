import logging

import pytest

from battle_calc.enums import Nature, Stat
from battle_calc.errors import EVSumError, RangeViolationError, ReadOnlyStatsError
from battle_calc.schema.stat_block import StatBlock, make_base_stats, make_evs, make_ivs, nature_multipliers, uniform_ivs


def test_ev_round_trip():
    evs = make_evs(hp=4, attack=252, speed=252)
    assert evs.as_dict() == {"hp": 4, "attack": 252, "defense": 0, "speed": 252, "spAttack": 0, "spDefense": 0}
    assert evs.total == 508


def test_ev_total_above_cap_is_rejected():
    with pytest.raises(EVSumError) as exc_info:
        make_evs(hp=7, attack=252, speed=252)
    assert exc_info.value.total == 511
    assert exc_info.value.cap == 510


def test_six_legal_evs_over_the_cap_are_rejected():
    with pytest.raises(EVSumError):
        make_evs(252, 252, 252, 252, 252, 252)


def test_failed_edit_leaves_original_untouched():
    evs = make_evs(attack=252, speed=252)
    with pytest.raises(EVSumError):
        evs.with_stat("hp", 7)
    assert evs.hp == 0
    assert evs.total == 504


def test_ev_per_stat_boundary(caplog):
    with caplog.at_level(logging.WARNING):
        assert make_evs(attack=252).attack == 252
    assert caplog.records == []

    with caplog.at_level(logging.WARNING):
        assert make_evs(attack=253).attack == 252
    assert "greater than 252" in caplog.text


def test_ivs_are_clamped():
    ivs = make_ivs(hp=-3, attack=40)
    assert ivs.hp == 0
    assert ivs.attack == 31


def test_huge_integers_are_clamped(caplog):
    with caplog.at_level(logging.WARNING):
        assert make_ivs(hp=10**400).hp == 31
        assert make_evs(hp=10**400).hp == 252
        assert make_ivs(attack=-(10**400)).attack == 0
    assert "greater than 31" in caplog.text


def test_fractional_iv_is_floored(caplog):
    with caplog.at_level(logging.WARNING):
        assert make_ivs(spAttack=30.7).spAttack == 30
    assert "not an integer" in caplog.text


def test_base_stats_are_clamped():
    base = make_base_stats(0, 300, 100, 100, 100, 100)
    assert base.hp == 1
    assert base.attack == 255


def test_non_numeric_value_raises_type_error():
    with pytest.raises(TypeError):
        make_ivs(attack="31")


def test_non_finite_value_raises():
    with pytest.raises(RangeViolationError):
        make_ivs(attack=float("nan"))


def test_unknown_field_raises_type_error():
    with pytest.raises(TypeError):
        StatBlock(hp=1, luck=5)


def test_get_accepts_aliases():
    ivs = uniform_ivs(20)
    assert ivs.get("spe") == 20
    assert ivs.get(Stat.SP_DEFENSE) == 20
    with pytest.raises(TypeError):
        ivs.get(Stat.ACCURACY)


def test_with_stat_keeps_policy():
    ivs = make_ivs().with_stat(Stat.ATTACK, 99)
    assert ivs.attack == 31


@pytest.mark.parametrize(
    "nature,boosted,hindered",
    [
        (Nature.ADAMANT, Stat.ATTACK, Stat.SP_ATTACK),
        (Nature.MODEST, Stat.SP_ATTACK, Stat.ATTACK),
        (Nature.JOLLY, Stat.SPEED, Stat.SP_ATTACK),
        (Nature.TIMID, Stat.SPEED, Stat.ATTACK),
        (Nature.BOLD, Stat.DEFENSE, Stat.ATTACK),
        (Nature.CALM, Stat.SP_DEFENSE, Stat.ATTACK),
    ],
)
def test_nature_multipliers(nature, boosted, hindered):
    assert nature.multiplier(boosted) == 1.1
    assert nature.multiplier(hindered) == 0.9
    assert nature.multiplier(Stat.HP) == 1.0

    block = nature.multipliers()
    assert block.get(boosted) == 1.1
    assert block.get(hindered) == 0.9


@pytest.mark.parametrize("nature", [Nature.HARDY, Nature.DOCILE, Nature.SERIOUS, Nature.BASHFUL, Nature.QUIRKY])
def test_neutral_natures_are_all_ones(nature):
    assert nature.is_neutral()
    assert set(nature_multipliers(nature).as_dict().values()) == {1.0}


def test_nature_multipliers_are_read_only():
    block = Nature.ADAMANT.multipliers()
    with pytest.raises(ReadOnlyStatsError):
        block.with_stat(Stat.ATTACK, 1.0)
