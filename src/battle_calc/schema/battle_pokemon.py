from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from battle_calc.enums import Ability, HoldEffect, Nature, Type
from battle_calc.schema.species_info import CreatureRecord, normalize_types
from battle_calc.schema.stage_block import StageBlock
from battle_calc.schema.stat_block import StatBlock, make_base_stats, make_evs, make_ivs, uniform_ivs


class CreatureSnapshot(BaseModel):
    """Everything about one battler that feeds its stats and damage modifiers"""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    base_stats: StatBlock
    types: tuple[Type, Type]
    level: int = Field(default=50, ge=1, le=100)
    ivs: StatBlock = Field(default_factory=uniform_ivs)
    evs: StatBlock = Field(default_factory=make_evs)
    nature: Nature = Nature.HARDY
    stages: StageBlock = Field(default_factory=StageBlock)
    ability: Ability = Ability.NONE
    item: HoldEffect = HoldEffect.NONE
    burned: bool = False
    flash_fire_active: bool = False

    @field_validator("types", mode="before")
    @classmethod
    def _normalize_types(cls, value: Any) -> tuple[Type, Type]:
        return normalize_types(value)

    # Plain dicts get the policy that matches the field
    @field_validator("base_stats", mode="before")
    @classmethod
    def _base_policy(cls, value: Any) -> Any:
        return make_base_stats(**value) if isinstance(value, dict) else value

    @field_validator("ivs", mode="before")
    @classmethod
    def _iv_policy(cls, value: Any) -> Any:
        return make_ivs(**value) if isinstance(value, dict) else value

    @field_validator("evs", mode="before")
    @classmethod
    def _ev_policy(cls, value: Any) -> Any:
        return make_evs(**value) if isinstance(value, dict) else value

    @field_validator("ability", mode="before")
    @classmethod
    def _ability_from_name(cls, value: Any) -> Any:
        return Ability.from_name(value) if isinstance(value, str) else value

    @classmethod
    def from_record(
        cls,
        record: CreatureRecord,
        level: int = 50,
        ivs: Optional[StatBlock] = None,
        evs: Optional[StatBlock] = None,
        nature: Nature = Nature.HARDY,
        ability: Optional[Ability] = None,
        **kwargs: Any,
    ) -> "CreatureSnapshot":
        """
        Build a snapshot from a dataset record.

        The first listed ability is used unless one is given. IVs default to 31
        and EVs to 0 across the board.
        """
        if ability is None:
            ability = Ability.from_name(record.abilities[0]) if record.abilities else Ability.NONE
        return cls(
            name=record.name,
            base_stats=record.base_stats,
            types=record.types,
            level=level,
            ivs=ivs if ivs is not None else uniform_ivs(),
            evs=evs if evs is not None else make_evs(),
            nature=nature,
            ability=ability,
            **kwargs,
        )

    def has_type(self, type_: Type) -> bool:
        return type_ != Type.TYPELESS and type_ in self.types
