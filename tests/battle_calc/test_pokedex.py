import json
import logging

import pytest

from battle_calc.data.pokedex import Pokedex
from battle_calc.enums import Ability, Type
from battle_calc.schema.battle_pokemon import CreatureSnapshot
from battle_calc.schema.species_info import CreatureRecord

DATASET = {
    "Bulbasaur": {"hp": 45, "atk": 49, "def": 49, "sp.atk": 65, "sp.def": 65, "spe": 45, "types": ["Grass", "Poison"], "abilities": ["Overgrow", "Chlorophyll"]},
    "Charmander": {"hp": 39, "atk": 52, "def": 43, "sp.atk": 60, "sp.def": 50, "spe": 65, "types": ["Fire"], "abilities": ["Blaze", "Solar Power"]},
    "Gastly": {"hp": 30, "atk": 35, "def": 30, "sp.atk": 100, "sp.def": 35, "spe": 80, "types": ["Ghost", "Poison"], "abilities": ["Levitate"]},
}


def make_pokedex() -> Pokedex:
    return Pokedex.from_mapping(DATASET)


def test_find_by_name():
    bulbasaur = make_pokedex().find_by_name("Bulbasaur")

    assert bulbasaur is not None
    assert bulbasaur.types == (Type.GRASS, Type.POISON)
    assert bulbasaur.base_stats.spAttack == 65
    assert bulbasaur.base_stats.speed == 45
    assert bulbasaur.abilities == ("Overgrow", "Chlorophyll")


def test_absent_name_is_none():
    pokedex = make_pokedex()
    assert pokedex.find_by_name("Missingno") is None
    # Lookups are exact
    assert pokedex.find_by_name("bulbasaur") is None
    assert "Charmander" in pokedex
    assert len(pokedex) == 3


def test_single_type_records_get_typeless_second_slot():
    charmander = make_pokedex().find_by_name("Charmander")
    assert charmander.types == (Type.FIRE, Type.TYPELESS)
    assert charmander.secondary_type == Type.TYPELESS


def test_duplicate_types_collapse():
    base_stats = {"hp": 50, "attack": 0, "defense": 50, "speed": 50, "spAttack": 50, "spDefense": 50}
    record = CreatureRecord(name="Dupe", base_stats=base_stats, types=["Normal", "Normal"])
    assert record.types == (Type.NORMAL, Type.TYPELESS)
    assert record.base_stats.attack == 1


def test_unknown_type_name_raises():
    entry = dict(DATASET["Charmander"], types=["Fire", "Cosmic"])
    with pytest.raises(TypeError):
        Pokedex.from_mapping({"Broken": entry})


def test_load_from_json(tmp_path, caplog):
    path = tmp_path / "m_pokedex.json"
    path.write_text(json.dumps(DATASET), encoding="utf-8")

    with caplog.at_level(logging.INFO):
        pokedex = Pokedex.load(path)

    assert sorted(pokedex.names()) == ["Bulbasaur", "Charmander", "Gastly"]
    assert "Loaded 3 creature records" in caplog.text


def test_snapshot_from_record_uses_first_ability():
    pokedex = make_pokedex()

    gastly = CreatureSnapshot.from_record(pokedex.find_by_name("Gastly"), level=30)
    assert gastly.ability == Ability.LEVITATE
    assert gastly.level == 30
    assert gastly.ivs.attack == 31
    assert gastly.evs.total == 0

    # Abilities without a battle effect resolve to NONE
    bulbasaur = CreatureSnapshot.from_record(pokedex.find_by_name("Bulbasaur"))
    assert bulbasaur.ability == Ability.NONE
    assert bulbasaur.has_type(Type.POISON)
    assert not bulbasaur.has_type(Type.TYPELESS)


def test_snapshot_from_record_accepts_overrides():
    record = make_pokedex().find_by_name("Charmander")
    snapshot = CreatureSnapshot.from_record(record, ability=Ability.FLASH_FIRE, burned=True)
    assert snapshot.ability == Ability.FLASH_FIRE
    assert snapshot.burned is True
