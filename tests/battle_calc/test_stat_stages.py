import logging

import pytest

from battle_calc.enums import Generation, Stat
from battle_calc.enums.stat import CORE_BATTLE_STATS, STAGED_STATS
from battle_calc.errors import UnsupportedStageError
from battle_calc.schema.stage_block import StageBlock
from battle_calc.stat_stages import all_multipliers, critical_hit_chance, multiplier_for


def test_core_stat_ratio_from_gen_ii():
    previous = 0.0
    for stage in range(-6, 7):
        value = multiplier_for(Generation.V, "atk", stage)
        assert value == (2 + max(0, stage)) / (2 - min(0, stage))
        assert value > previous
        previous = value


@pytest.mark.parametrize("gen", [Generation.II, Generation.IV, Generation.IX])
def test_core_stat_ratio_is_unchanged_across_eras(gen):
    assert multiplier_for(gen, Stat.SPEED, -2) == 0.5
    assert multiplier_for(gen, Stat.SP_DEFENSE, 6) == 4.0


@pytest.mark.parametrize("stage,expected", [(-6, 0.25), (-3, 0.4), (-1, 0.66), (0, 1), (1, 1.5), (5, 3.5), (6, 4)])
def test_gen_i_uses_approximated_table(stage, expected):
    assert multiplier_for(Generation.I, Stat.ATTACK, stage) == expected


@pytest.mark.parametrize("stat", [Stat.ACCURACY, Stat.EVASION, Stat.CRIT_RATIO])
def test_gen_i_has_no_accuracy_evasion_or_crit_stages(stat):
    with pytest.raises(UnsupportedStageError):
        multiplier_for(Generation.I, stat, 1)


@pytest.mark.parametrize("gen", [Generation.I, Generation.V])
def test_hp_has_no_stage(gen):
    with pytest.raises(UnsupportedStageError):
        multiplier_for(gen, Stat.HP, 0)


def test_gen_ii_to_iv_accuracy_table():
    assert multiplier_for(Generation.II, Stat.ACCURACY, 4) == 2.33
    assert multiplier_for(Generation.III, Stat.ACCURACY, 4) == 2.5
    assert multiplier_for(Generation.IV, Stat.ACCURACY, -6) == 0.33
    assert multiplier_for(Generation.IV, Stat.ACCURACY, 1) == 1.33


def test_gen_ii_to_iv_evasion_reads_table_with_flipped_stage():
    assert multiplier_for(Generation.III, Stat.EVASION, 1) == 0.75
    assert multiplier_for(Generation.III, Stat.EVASION, 6) == 0.33
    assert multiplier_for(Generation.III, Stat.EVASION, -4) == 2.5
    assert multiplier_for(Generation.II, Stat.EVASION, -4) == 2.33


def test_gen_v_accuracy_and_evasion_ratios():
    assert multiplier_for(Generation.V, Stat.ACCURACY, 2) == pytest.approx(5 / 3)
    assert multiplier_for(Generation.V, Stat.ACCURACY, -3) == pytest.approx(0.5)
    assert multiplier_for(Generation.V, Stat.EVASION, 2) == pytest.approx(3 / 5)
    assert multiplier_for(Generation.V, Stat.EVASION, -3) == pytest.approx(2.0)


@pytest.mark.parametrize(
    "gen,stage,expected",
    [
        (Generation.II, 0, 17 / 256),
        (Generation.II, 3, 85 / 256),
        (Generation.III, 0, 1 / 16),
        (Generation.V, 3, 1 / 3),
        (Generation.VI, 2, 1 / 2),
        (Generation.VI, 3, 1),
        (Generation.VII, 0, 1 / 24),
        (Generation.IX, 4, 1),
    ],
)
def test_critical_hit_chance(gen, stage, expected):
    assert critical_hit_chance(gen, stage) == expected
    assert multiplier_for(gen, Stat.CRIT_RATIO, stage) == expected


def test_out_of_range_stage_is_clamped_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        assert multiplier_for(Generation.V, "atk", 9) == 4.0
    assert "greater than 6" in caplog.text

    caplog.clear()
    with caplog.at_level(logging.WARNING):
        assert critical_hit_chance(Generation.VI, 7) == 1
    assert "critRatio" in caplog.text


def test_fractional_stage_is_floored():
    assert multiplier_for(Generation.V, Stat.DEFENSE, 1.7) == 1.5
    assert multiplier_for(Generation.V, Stat.DEFENSE, -0.5) == pytest.approx(2 / 3)


@pytest.mark.parametrize("stage", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_stage_raises(stage):
    with pytest.raises(UnsupportedStageError):
        multiplier_for(Generation.V, Stat.ATTACK, stage)


def test_huge_integer_stage_is_clamped(caplog):
    with caplog.at_level(logging.WARNING):
        assert multiplier_for(Generation.V, Stat.ATTACK, 10**400) == 4.0
        assert multiplier_for(Generation.V, Stat.ATTACK, -(10**400)) == 0.25
        assert critical_hit_chance(Generation.VI, 10**400) == 1
    assert "greater than 6" in caplog.text
    assert StageBlock(speed=10**400).speed == 6


def test_multiplier_for_is_idempotent():
    assert multiplier_for(Generation.IV, Stat.EVASION, 3) == multiplier_for(Generation.IV, Stat.EVASION, 3)


def test_all_multipliers_gen_i_omits_accuracy_evasion_and_crit():
    result = all_multipliers(Generation.I, StageBlock(attack=2))
    assert set(result) == set(CORE_BATTLE_STATS)
    assert result[Stat.ATTACK] == 2


def test_all_multipliers_modern():
    result = all_multipliers(Generation.V, StageBlock(speed=-1, evasion=1))
    assert set(result) == set(STAGED_STATS)
    assert result[Stat.SPEED] == pytest.approx(2 / 3)
    assert result[Stat.EVASION] == pytest.approx(3 / 4)
    assert result[Stat.ATTACK] == 1
    assert result[Stat.CRIT_RATIO] == 1 / 16


def test_stage_block_clamps_on_build(caplog):
    with caplog.at_level(logging.WARNING):
        block = StageBlock(attack=8, evasion=-7, critRatio=5, speed=1.9)
    assert (block.attack, block.evasion, block.critRatio, block.speed) == (6, -6, 4, 1)
    assert len(caplog.records) == 3

    assert StageBlock(critRatio=-1).critRatio == 0


def test_stage_block_rejects_hp():
    with pytest.raises(UnsupportedStageError):
        StageBlock(hp=1)
    with pytest.raises(UnsupportedStageError):
        StageBlock().with_stage(Stat.HP, 1)


def test_stage_block_with_stage_returns_copy():
    block = StageBlock(attack=1)
    updated = block.with_stage("spe", 2)
    assert updated.speed == 2
    assert updated.attack == 1
    assert block.speed == 0
