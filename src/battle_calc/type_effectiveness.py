"""
Type effectiveness - per-generation type charts

Charts are indexed by DEFENDING type first:
    chart[defending_type][attacking_type] -> multiplier

Pairs missing from a chart are neutral (x1.0). The historical chart changed
twice, so three tables exist:
- Gen I: no Dark, Steel or Fairy; Ghost cannot hit Psychic, Bug and Poison are
  mutually super effective, Ice is neutral on Fire
- Gens II-V: Dark and Steel added
- Gen VI+: Fairy added, Steel no longer resists Ghost or Dark
"""

from types import MappingProxyType
from typing import Mapping

from battle_calc.constants import MSG_NO_EFFECT, MSG_NOT_VERY_EFFECTIVE, MSG_SUPER_EFFECTIVE, TYPE_MUL_NO_EFFECT, TYPE_MUL_NORMAL
from battle_calc.enums.generation import Generation
from battle_calc.enums.other import Weather
from battle_calc.enums.type import Type

TypeChart = Mapping[Type, Mapping[Type, float]]


def _freeze(chart: dict[Type, dict[Type, float]]) -> TypeChart:
    return MappingProxyType({defending: MappingProxyType(dict(row)) for defending, row in chart.items()})


# fmt: off
_GEN_I_CHART = {
    Type.NORMAL:   {Type.FIGHTING: 2, Type.GHOST: 0},
    Type.FIRE:     {Type.FIRE: 0.5, Type.WATER: 2, Type.GRASS: 0.5, Type.GROUND: 2, Type.BUG: 0.5, Type.ROCK: 2},
    Type.WATER:    {Type.FIRE: 0.5, Type.WATER: 0.5, Type.ELECTRIC: 2, Type.GRASS: 2, Type.ICE: 0.5},
    Type.ELECTRIC: {Type.ELECTRIC: 0.5, Type.GROUND: 2, Type.FLYING: 0.5},
    Type.GRASS:    {Type.FIRE: 2, Type.WATER: 0.5, Type.ELECTRIC: 0.5, Type.GRASS: 0.5, Type.ICE: 2, Type.POISON: 2, Type.GROUND: 0.5, Type.FLYING: 2, Type.BUG: 2},
    Type.ICE:      {Type.FIRE: 2, Type.ICE: 0.5, Type.FIGHTING: 2, Type.ROCK: 2},
    Type.FIGHTING: {Type.FLYING: 2, Type.PSYCHIC: 2, Type.BUG: 0.5, Type.ROCK: 0.5},
    Type.POISON:   {Type.GRASS: 0.5, Type.FIGHTING: 0.5, Type.POISON: 0.5, Type.GROUND: 2, Type.PSYCHIC: 2, Type.BUG: 2},
    Type.GROUND:   {Type.WATER: 2, Type.ELECTRIC: 0, Type.GRASS: 2, Type.ICE: 2, Type.POISON: 0.5, Type.ROCK: 0.5},
    Type.FLYING:   {Type.ELECTRIC: 2, Type.GRASS: 0.5, Type.ICE: 2, Type.FIGHTING: 0.5, Type.GROUND: 0, Type.BUG: 0.5, Type.ROCK: 2},
    Type.PSYCHIC:  {Type.FIGHTING: 0.5, Type.PSYCHIC: 0.5, Type.BUG: 2, Type.GHOST: 0},
    Type.BUG:      {Type.FIRE: 2, Type.GRASS: 0.5, Type.FIGHTING: 0.5, Type.POISON: 2, Type.GROUND: 0.5, Type.FLYING: 2, Type.ROCK: 2},
    Type.ROCK:     {Type.NORMAL: 0.5, Type.FIRE: 0.5, Type.WATER: 2, Type.GRASS: 2, Type.FIGHTING: 2, Type.POISON: 0.5, Type.GROUND: 2, Type.FLYING: 0.5},
    Type.GHOST:    {Type.NORMAL: 0, Type.FIGHTING: 0, Type.POISON: 0.5, Type.BUG: 0.5, Type.GHOST: 2},
    Type.DRAGON:   {Type.FIRE: 0.5, Type.WATER: 0.5, Type.ELECTRIC: 0.5, Type.GRASS: 0.5, Type.ICE: 2, Type.DRAGON: 2},
}

_GEN_II_TO_V_CHART = {
    Type.NORMAL:       {Type.FIGHTING: 2, Type.GHOST: 0},
    Type.FIRE:         {Type.FIRE: 0.5, Type.WATER: 2, Type.GRASS: 0.5, Type.ICE: 0.5, Type.GROUND: 2, Type.BUG: 0.5, Type.ROCK: 2, Type.STEEL: 0.5},
    Type.WATER:        {Type.FIRE: 0.5, Type.WATER: 0.5, Type.GRASS: 2, Type.ELECTRIC: 2, Type.ICE: 0.5, Type.STEEL: 0.5},
    Type.ELECTRIC:     {Type.ELECTRIC: 0.5, Type.GROUND: 2, Type.FLYING: 0.5, Type.STEEL: 0.5},
    Type.GRASS:        {Type.FIRE: 2, Type.WATER: 0.5, Type.GRASS: 0.5, Type.ELECTRIC: 0.5, Type.ICE: 2, Type.POISON: 2, Type.GROUND: 0.5, Type.FLYING: 2, Type.BUG: 2},
    Type.ICE:          {Type.FIRE: 2, Type.ICE: 0.5, Type.FIGHTING: 2, Type.ROCK: 2, Type.STEEL: 2},
    Type.FIGHTING:     {Type.FLYING: 2, Type.PSYCHIC: 2, Type.BUG: 0.5, Type.ROCK: 0.5, Type.DARK: 0.5},
    Type.POISON:       {Type.GRASS: 0.5, Type.FIGHTING: 0.5, Type.POISON: 0.5, Type.GROUND: 2, Type.PSYCHIC: 2, Type.BUG: 0.5},
    Type.GROUND:       {Type.WATER: 2, Type.GRASS: 2, Type.ICE: 2, Type.ELECTRIC: 0, Type.POISON: 0.5, Type.ROCK: 0.5},
    Type.FLYING:       {Type.ELECTRIC: 2, Type.ICE: 2, Type.ROCK: 2, Type.GRASS: 0.5, Type.FIGHTING: 0.5, Type.BUG: 0.5, Type.GROUND: 0},
    Type.DELTA_FLYING: {Type.GRASS: 0.5, Type.FIGHTING: 0.5, Type.BUG: 0.5, Type.GROUND: 0},
    Type.PSYCHIC:      {Type.FIGHTING: 0.5, Type.PSYCHIC: 0.5, Type.BUG: 2, Type.GHOST: 2, Type.DARK: 2},
    Type.BUG:          {Type.FIRE: 2, Type.FLYING: 2, Type.ROCK: 2, Type.GRASS: 0.5, Type.FIGHTING: 0.5, Type.GROUND: 0.5},
    Type.ROCK:         {Type.NORMAL: 0.5, Type.FIRE: 0.5, Type.POISON: 0.5, Type.FLYING: 0.5, Type.WATER: 2, Type.GRASS: 2, Type.FIGHTING: 2, Type.GROUND: 2, Type.STEEL: 2},
    Type.GHOST:        {Type.NORMAL: 0, Type.FIGHTING: 0, Type.POISON: 0.5, Type.BUG: 0.5, Type.GHOST: 2, Type.DARK: 2},
    Type.DRAGON:       {Type.FIRE: 0.5, Type.WATER: 0.5, Type.ELECTRIC: 0.5, Type.GRASS: 0.5, Type.ICE: 2, Type.DRAGON: 2},
    Type.DARK:         {Type.FIGHTING: 2, Type.BUG: 2, Type.PSYCHIC: 0, Type.GHOST: 0.5, Type.DARK: 0.5},
    Type.STEEL:        {
        Type.NORMAL: 0.5, Type.FLYING: 0.5, Type.ROCK: 0.5, Type.BUG: 0.5, Type.GHOST: 0.5, Type.STEEL: 0.5, Type.GRASS: 0.5,
        Type.PSYCHIC: 0.5, Type.ICE: 0.5, Type.DRAGON: 0.5, Type.DARK: 0.5,
        Type.FIGHTING: 2, Type.FIRE: 2, Type.GROUND: 2, Type.POISON: 0,
    },
}
# fmt: on


def _build_gen_vi_chart() -> dict[Type, dict[Type, float]]:
    chart = {defending: dict(row) for defending, row in _GEN_II_TO_V_CHART.items()}

    # Steel loses its Ghost and Dark resistances
    del chart[Type.STEEL][Type.GHOST]
    del chart[Type.STEEL][Type.DARK]

    # Fairy as an attacking type
    chart[Type.FIGHTING][Type.FAIRY] = 2
    chart[Type.DRAGON][Type.FAIRY] = 2
    chart[Type.DARK][Type.FAIRY] = 2
    chart[Type.FIRE][Type.FAIRY] = 0.5
    chart[Type.POISON][Type.FAIRY] = 0.5
    chart[Type.STEEL][Type.FAIRY] = 0.5

    # Fairy as a defending type
    chart[Type.FAIRY] = {Type.POISON: 2, Type.STEEL: 2, Type.FIGHTING: 0.5, Type.BUG: 0.5, Type.DARK: 0.5, Type.DRAGON: 0}
    return chart


GEN_I_CHART: TypeChart = _freeze(_GEN_I_CHART)
GEN_II_TO_V_CHART: TypeChart = _freeze(_GEN_II_TO_V_CHART)
GEN_VI_CHART: TypeChart = _freeze(_build_gen_vi_chart())

# Fire / Water power under weather
_WEATHER_POWER: Mapping[Type, Mapping[Weather, float]] = MappingProxyType(
    {
        Type.FIRE: MappingProxyType({Weather.HARSH_SUN: 1.5, Weather.EXTREMELY_HARSH_SUN: 1.5, Weather.RAIN: 0.5, Weather.HEAVY_RAIN: 0}),
        Type.WATER: MappingProxyType({Weather.HARSH_SUN: 0.5, Weather.EXTREMELY_HARSH_SUN: 0, Weather.RAIN: 1.5, Weather.HEAVY_RAIN: 1.5}),
    }
)


class TypeEffectiveness:
    """
    Type effectiveness calculator

    All methods are static lookups into the immutable charts above.
    """

    @staticmethod
    def chart_for(gen: Generation) -> TypeChart:
        """Select the chart for a generation: I, then II-V, else VI+."""
        if not isinstance(gen, Generation):
            raise TypeError(f"Invalid generation specified (must be a Generation), got {type(gen).__name__}")
        if gen.matches("I"):
            return GEN_I_CHART
        elif gen.matches("II-V"):
            return GEN_II_TO_V_CHART
        return GEN_VI_CHART

    @staticmethod
    def get_effectiveness(gen: Generation, attacking_type: Type, defending_type: Type) -> float:
        """
        Get the multiplier of one attacking type against one defending type.

        Returns:
            0.0, 0.5, 1.0 or 2.0. Pairs absent from the chart are neutral.
        """
        _check_type(attacking_type, "Attack type")
        _check_type(defending_type, "Defender types")
        row = TypeEffectiveness.chart_for(gen).get(defending_type)
        if row is None:
            return TYPE_MUL_NORMAL
        return float(row.get(attacking_type, TYPE_MUL_NORMAL))

    @staticmethod
    def calculate_effectiveness(gen: Generation, attacking_type: Type, defending_type1: Type, defending_type2: Type = Type.TYPELESS) -> float:
        """
        Calculate type effectiveness against a single or dual-type defender.

        The result is the product of both single-type lookups. An immunity on
        either type makes the result exactly 0.0.

        Args:
            gen: Generation whose chart applies
            attacking_type: Type of the incoming move
            defending_type1: Defender's primary type
            defending_type2: Defender's secondary type (TYPELESS for single-type defenders)

        Returns:
            One of 0.0, 0.25, 0.5, 1.0, 2.0, 4.0
        """
        _check_type(defending_type2, "Defender types")
        effectiveness1 = TypeEffectiveness.get_effectiveness(gen, attacking_type, defending_type1)
        if effectiveness1 == TYPE_MUL_NO_EFFECT:
            return TYPE_MUL_NO_EFFECT

        # Single-type defender or both slots hold the same type
        if defending_type2 == Type.TYPELESS or defending_type1 == defending_type2:
            return effectiveness1

        effectiveness2 = TypeEffectiveness.get_effectiveness(gen, attacking_type, defending_type2)
        if effectiveness2 == TYPE_MUL_NO_EFFECT:
            return TYPE_MUL_NO_EFFECT
        return effectiveness1 * effectiveness2

    @staticmethod
    def is_immune(gen: Generation, attacking_type: Type, defending_type: Type) -> bool:
        """Check if defending type is immune to attacking type"""
        return TypeEffectiveness.get_effectiveness(gen, attacking_type, defending_type) == TYPE_MUL_NO_EFFECT

    @staticmethod
    def is_super_effective(gen: Generation, attacking_type: Type, defending_type1: Type, defending_type2: Type = Type.TYPELESS) -> bool:
        return TypeEffectiveness.calculate_effectiveness(gen, attacking_type, defending_type1, defending_type2) > TYPE_MUL_NORMAL

    @staticmethod
    def is_not_very_effective(gen: Generation, attacking_type: Type, defending_type1: Type, defending_type2: Type = Type.TYPELESS) -> bool:
        multiplier = TypeEffectiveness.calculate_effectiveness(gen, attacking_type, defending_type1, defending_type2)
        return TYPE_MUL_NO_EFFECT < multiplier < TYPE_MUL_NORMAL

    @staticmethod
    def get_effectiveness_description(multiplier: float) -> str:
        """Get the battle message for an effectiveness multiplier"""
        if multiplier == TYPE_MUL_NO_EFFECT:
            return MSG_NO_EFFECT
        elif multiplier < TYPE_MUL_NORMAL:
            return MSG_NOT_VERY_EFFECTIVE
        elif multiplier > TYPE_MUL_NORMAL:
            return MSG_SUPER_EFFECTIVE
        else:
            return ""  # Normal effectiveness - no message

    @staticmethod
    def weather_power_multiplier(weather: Weather, move_type: Type) -> float:
        """
        Power multiplier that field weather applies to a move type.

        Fire: x1.5 in (extremely) harsh sun, x0.5 in rain, x0 in heavy rain.
        Water: x0.5 in harsh sun, x0 in extremely harsh sun, x1.5 in (heavy) rain.
        Everything else: x1.
        """
        if not isinstance(weather, Weather):
            raise TypeError(f"Weather must be a Weather, got {type(weather).__name__}")
        _check_type(move_type, "Attack type")
        return float(_WEATHER_POWER.get(move_type, {}).get(weather, 1.0))


def _check_type(value: object, label: str) -> None:
    if not isinstance(value, Type):
        raise TypeError(f"{label} must be instances of Type, got {type(value).__name__}")


effectiveness = TypeEffectiveness.calculate_effectiveness
weather_power_multiplier = TypeEffectiveness.weather_power_multiplier
effectiveness_description = TypeEffectiveness.get_effectiveness_description
