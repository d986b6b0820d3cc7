import json
import logging
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional, Union

from battle_calc.schema.species_info import CreatureRecord

logger = logging.getLogger(__name__)


class Pokedex:
    """Read-only creature dataset keyed by exact creature name.

    Expects the merged dataset layout:
        {"Bulbasaur": {"hp": 45, "atk": 49, "def": 49, "sp.atk": 65, "sp.def": 65, "spe": 45,
                       "types": ["Grass", "Poison"], "abilities": ["Overgrow", "Chlorophyll"]}, ...}
    """

    def __init__(self, records: Mapping[str, CreatureRecord]):
        self._records = dict(records)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Mapping[str, Any]]) -> "Pokedex":
        records = {name: CreatureRecord.from_dataset_entry(name, dict(entry)) for name, entry in data.items()}
        return cls(records)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Pokedex":
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        pokedex = cls.from_mapping(data)
        logger.info("Loaded %d creature records from %s", len(pokedex), path)
        return pokedex

    def find_by_name(self, name: str) -> Optional[CreatureRecord]:
        """Exact-name lookup. Returns None when the name is not in the dataset."""
        return self._records.get(name)

    def names(self) -> list[str]:
        return list(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CreatureRecord]:
        return iter(self._records.values())
