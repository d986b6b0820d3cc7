from pydantic import BaseModel, ConfigDict, Field

from battle_calc.enums import Generation, MoveCategory, Type

# Before the physical/special split (Gen IV) the category followed the move's type
PHYSICAL_TYPES = frozenset({Type.NORMAL, Type.FIGHTING, Type.POISON, Type.GROUND, Type.FLYING, Type.BUG, Type.ROCK, Type.GHOST, Type.STEEL})


def is_type_physical(move_type: Type) -> bool:
    """Check if move type is physical (pre-Gen 4 physical/special split)"""
    return move_type in PHYSICAL_TYPES


class MoveSnapshot(BaseModel):
    """Move as seen by the damage calculation"""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    type: Type
    power: int = Field(ge=0)  # 0 for status moves
    category: MoveCategory = MoveCategory.PHYSICAL
    spread: bool = False  # hits more than one target in doubles

    def category_in(self, gen: Generation) -> MoveCategory:
        """Damage category in a generation. Status moves stay status moves."""
        if self.category == MoveCategory.STATUS:
            return MoveCategory.STATUS
        if gen <= Generation.III:
            return MoveCategory.PHYSICAL if is_type_physical(self.type) else MoveCategory.SPECIAL
        return self.category
