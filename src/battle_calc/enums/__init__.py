from battle_calc.enums.generation import Generation, parse_generation
from battle_calc.enums.type import Type
from battle_calc.enums.stat import Stat
from battle_calc.enums.nature import Nature
from battle_calc.enums.ability import Ability
from battle_calc.enums.hold_effect import HoldEffect
from battle_calc.enums.other import Weather, MoveCategory
