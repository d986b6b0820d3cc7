from battle_calc.data.pokedex import Pokedex
