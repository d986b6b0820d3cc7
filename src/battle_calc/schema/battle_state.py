from pydantic import BaseModel, ConfigDict, Field

from battle_calc.constants import SCREEN_DOUBLES, SCREEN_SINGLES
from battle_calc.enums import MoveCategory, Weather


class BattleConditions(BaseModel):
    """Field and turn flags for a single damage calculation"""

    model_config = ConfigDict(frozen=True)

    # Field
    weather: Weather = Weather.NONE
    weather_suppressed: bool = False  # e.g. a Cloud Nine holder elsewhere on the field
    doubles: bool = False

    # Defender's side
    reflect: bool = False
    light_screen: bool = False

    # This attack
    critical_hit: bool = False
    helping_hand: bool = False
    charged: bool = False  # Charge before an Electric move
    double_damage: bool = False  # Stomp on Minimize, Pursuit on a switch, ...
    stockpile: int = Field(default=1, ge=1, le=3)  # Spit Up
    me_first: bool = False
    metronome_count: int = Field(default=0, ge=0)  # consecutive uses with a Metronome item
    resist_berry: bool = False  # defender's berry halves a super effective hit

    def screen_for(self, category: MoveCategory) -> float:
        """Reflect halves physical hits and Light Screen special ones (2/3 in doubles)."""
        active = (category == MoveCategory.PHYSICAL and self.reflect) or (category == MoveCategory.SPECIAL and self.light_screen)
        if not active:
            return 1.0
        return SCREEN_DOUBLES if self.doubles else SCREEN_SINGLES
