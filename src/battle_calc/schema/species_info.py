from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from battle_calc.enums import Type
from battle_calc.schema.stat_block import StatBlock, make_base_stats


def normalize_types(value: Any) -> tuple[Type, Type]:
    """
    Normalize a type pair to (primary, secondary).

    Accepts one or two Type members or type names. A single type, or the same
    type twice, yields a TYPELESS second slot.

    Raises:
        TypeError: for unknown type names
        ValueError: if the primary type is not one of the 18 real types, or more than two types are given
    """
    if isinstance(value, (Type, str)):
        value = [value]
    types = [Type.from_name(t) for t in value]
    if not 1 <= len(types) <= 2:
        raise ValueError(f"A creature has one or two types, got {len(types)}")

    primary = types[0]
    secondary = types[1] if len(types) == 2 else Type.TYPELESS
    if not primary.is_real():
        raise ValueError(f"Primary type must be a real type, got {primary.name}")
    if secondary == primary:
        secondary = Type.TYPELESS
    return primary, secondary


class CreatureRecord(BaseModel):
    """Creature dataset entry: base stats, one or two types and ability names."""

    model_config = ConfigDict(frozen=True)

    name: str
    base_stats: StatBlock
    types: tuple[Type, Type]
    abilities: tuple[str, ...] = ()

    @field_validator("types", mode="before")
    @classmethod
    def _normalize_types(cls, value: Any) -> tuple[Type, Type]:
        return normalize_types(value)

    @field_validator("base_stats", mode="before")
    @classmethod
    def _base_policy(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return make_base_stats(**value)
        return value

    @classmethod
    def from_dataset_entry(cls, name: str, entry: dict[str, Any]) -> "CreatureRecord":
        """Build a record from the merged dataset layout ("hp", "atk", "def", "sp.atk", "sp.def", "spe", "types", "abilities")."""
        base_stats = make_base_stats(
            hp=entry["hp"],
            attack=entry["atk"],
            defense=entry["def"],
            speed=entry["spe"],
            spAttack=entry["sp.atk"],
            spDefense=entry["sp.def"],
        )
        return cls(name=name, base_stats=base_stats, types=entry.get("types", []), abilities=tuple(entry.get("abilities", ())))

    @property
    def primary_type(self) -> Type:
        return self.types[0]

    @property
    def secondary_type(self) -> Type:
        return self.types[1]
