"""
Damage calculator - resolves creature, move and field snapshots into the flat
modifiers each generation's formula expects

Resolution order:
1. Effective stats from base stats, IVs, EVs, level and nature
2. Damage category (by type before Gen IV)
3. Attack / defense with ability and item stat boosts, then stage multipliers
4. Move power with type-boosting items and power-doubling conditions
5. Weather (suppressed by Cloud Nine / Air Lock), type effectiveness, STAB
6. Critical hit, screens, burn, then the generation's formula
"""

import logging
import math
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict

from battle_calc.constants import (
    CHARGE_MULTIPLIER,
    FLASH_FIRE_MULTIPLIER,
    HELPING_HAND_MULTIPLIER,
    LIFE_ORB_MULTIPLIER,
    ME_FIRST_MULTIPLIER,
    SPREAD_GEN_III,
    SPREAD_GEN_IV_PLUS,
    TYPE_BOOST_ITEM_NEW,
    TYPE_BOOST_ITEM_OLD,
)
from battle_calc.damage_formulas import (
    DamageModifiers,
    Gen1Modifiers,
    Gen2Modifiers,
    Gen3Modifiers,
    Gen4Modifiers,
    ModernModifiers,
    calc_gen1_damage,
    calc_gen2_damage,
    calc_gen3_damage,
    calc_gen4_damage,
    calc_modern_damage,
    damage_rolls,
)
from battle_calc.enums import Ability, Generation, HoldEffect, MoveCategory, Stat, Type, Weather
from battle_calc.schema.battle_move import MoveSnapshot
from battle_calc.schema.battle_pokemon import CreatureSnapshot
from battle_calc.schema.battle_state import BattleConditions
from battle_calc.schema.stat_block import StatBlock
from battle_calc.stat_calculator import calculate_stats
from battle_calc.stat_stages import multiplier_for
from battle_calc.type_effectiveness import TypeEffectiveness
from battle_calc.utils.rng import DamageRng

logger = logging.getLogger(__name__)

Formula = Callable[[Any], float]


class DamageResult(BaseModel):
    """Outcome of one damage calculation, with the resolved modifiers for auditing"""

    model_config = ConfigDict(frozen=True)

    damage: float
    attacker_stats: StatBlock
    defender_stats: StatBlock
    modifiers: dict[str, Any]
    message: str = ""

    @property
    def hp_damage(self) -> int:
        """Damage as it would be subtracted from HP"""
        return math.floor(self.damage)


class DamageCalculator:
    """
    Damage calculator for one generation's rules

    Stateless apart from the generation; safe to share between threads.
    """

    def __init__(self, generation: Generation | int | str):
        self.generation: Generation = Generation.parse(generation)

    def effective_stats(self, creature: CreatureSnapshot) -> StatBlock:
        return calculate_stats(creature.base_stats, creature.ivs, creature.evs, creature.level, creature.nature)

    def calculate(
        self,
        attacker: CreatureSnapshot,
        defender: CreatureSnapshot,
        move: MoveSnapshot,
        conditions: Optional[BattleConditions] = None,
        random_percent: Optional[int] = None,
        rng: Optional[DamageRng] = None,
    ) -> DamageResult:
        """
        Calculate the damage of one hit.

        Args:
            attacker: Attacking creature
            defender: Defending creature
            move: Move being used
            conditions: Field and turn flags (defaults to a plain singles field)
            random_percent: Damage roll in [85, 100]; None means no random factor
            rng: Draws the damage roll when random_percent is not given

        Returns:
            DamageResult with the fractional damage and the resolved modifiers
        """
        conditions = conditions or BattleConditions()
        if random_percent is None and rng is not None:
            random_percent = rng.roll_percent()

        attacker_stats = self.effective_stats(attacker)
        defender_stats = self.effective_stats(defender)

        resolved = self._resolve(attacker, defender, move, conditions, attacker_stats, defender_stats, random_percent)
        if resolved is None:
            return DamageResult(damage=0.0, attacker_stats=attacker_stats, defender_stats=defender_stats, modifiers={}, message="")

        formula, mods = resolved
        damage = formula(mods)
        logger.debug("%s: %s used %s on %s for %.2f damage", self.generation, attacker.name, move.name, defender.name, damage)

        modifiers = mods.model_dump()
        modifiers["generation"] = int(self.generation)
        return DamageResult(
            damage=damage,
            attacker_stats=attacker_stats,
            defender_stats=defender_stats,
            modifiers=modifiers,
            message=TypeEffectiveness.get_effectiveness_description(mods.type_effectiveness),
        )

    def damage_range(
        self,
        attacker: CreatureSnapshot,
        defender: CreatureSnapshot,
        move: MoveSnapshot,
        conditions: Optional[BattleConditions] = None,
    ) -> tuple[int, int]:
        """Lowest and highest floored damage over all 16 random rolls."""
        conditions = conditions or BattleConditions()
        attacker_stats = self.effective_stats(attacker)
        defender_stats = self.effective_stats(defender)
        resolved = self._resolve(attacker, defender, move, conditions, attacker_stats, defender_stats, None)
        if resolved is None:
            return 0, 0
        formula, mods = resolved
        rolls = damage_rolls(formula, mods)
        return math.floor(min(rolls)), math.floor(max(rolls))

    # =============================================================================
    # RESOLUTION
    # =============================================================================

    def _resolve(
        self,
        attacker: CreatureSnapshot,
        defender: CreatureSnapshot,
        move: MoveSnapshot,
        conditions: BattleConditions,
        attacker_stats: StatBlock,
        defender_stats: StatBlock,
        random_percent: Optional[int],
    ) -> Optional[tuple[Formula, DamageModifiers]]:
        gen = self.generation
        category = move.category_in(gen)
        if category == MoveCategory.STATUS:
            return None

        physical = category == MoveCategory.PHYSICAL
        mold_breaker = self._has_abilities() and attacker.ability.ignores_defender_ability()
        defender_ability = Ability.NONE if mold_breaker or not self._has_abilities() else defender.ability

        attack_stat, defense_stat = (Stat.ATTACK, Stat.DEFENSE) if physical else (Stat.SP_ATTACK, Stat.SP_DEFENSE)
        attack = self._boosted_attack(attacker, move, physical, attacker_stats.get(attack_stat), defender_ability)
        defense = defender_stats.get(defense_stat)
        attack_stage = multiplier_for(gen, attack_stat, attacker.stages.get(attack_stat))
        defense_stage = multiplier_for(gen, defense_stat, defender.stages.get(defense_stat))

        weather = self.resolve_weather(attacker, defender, conditions)
        defender_types = self.resolve_defender_types(defender, weather)
        type_effectiveness = TypeEffectiveness.calculate_effectiveness(gen, move.type, *defender_types)
        if move.type == Type.GROUND and defender_ability == Ability.LEVITATE:
            type_effectiveness = 0.0

        critical = conditions.critical_hit
        if critical and gen >= Generation.III and defender_ability.blocks_critical_hits():
            critical = False

        common = dict(
            level=attacker.level,
            power=self._resolve_power(attacker, move, conditions),
            attack=attack,
            defense=defense,
            attack_stage=attack_stage,
            defense_stage=defense_stage,
            critical=critical,
            stab=attacker.has_type(move.type),
            type_effectiveness=type_effectiveness,
            screen=conditions.screen_for(category),
            burned=attacker.burned,
            physical=physical,
            has_guts=self._has_abilities() and attacker.ability == Ability.GUTS,
            random_percent=random_percent if random_percent is not None else 100,
            ignore_random=random_percent is None,
        )
        weather_multiplier = TypeEffectiveness.weather_power_multiplier(weather, move.type)
        flash_fire = 1.0
        if self._has_abilities() and attacker.ability == Ability.FLASH_FIRE and attacker.flash_fire_active and move.type == Type.FIRE:
            flash_fire = FLASH_FIRE_MULTIPLIER
        spread = conditions.doubles and move.spread

        if gen == Generation.I:
            return calc_gen1_damage, Gen1Modifiers(**common)

        if gen == Generation.II:
            item = TYPE_BOOST_ITEM_OLD if attacker.item.boosted_type() == move.type else 1.0
            return calc_gen2_damage, Gen2Modifiers(
                **common,
                item=item,
                weather=weather_multiplier,
                double_damage=2.0 if conditions.double_damage else 1.0,
            )

        if gen == Generation.III:
            return calc_gen3_damage, Gen3Modifiers(
                **common,
                targets=SPREAD_GEN_III if spread else 1.0,
                weather=weather_multiplier,
                flash_fire=flash_fire,
                stockpile=conditions.stockpile,
                double_damage=2.0 if conditions.double_damage else 1.0,
                charge=CHARGE_MULTIPLIER if conditions.charged and move.type == Type.ELECTRIC else 1.0,
                helping_hand=HELPING_HAND_MULTIPLIER if conditions.helping_hand else 1.0,
            )

        late = dict(
            targets=SPREAD_GEN_IV_PLUS if spread else 1.0,
            weather=weather_multiplier,
            flash_fire=flash_fire,
            item=self._final_item_multiplier(attacker, conditions),
            sniper=attacker.ability == Ability.SNIPER,
            adaptability=attacker.ability == Ability.ADAPTABILITY,
            filter=defender_ability.filters_super_effective(),
            mold_breaker=mold_breaker,
            expert_belt=attacker.item == HoldEffect.EXPERT_BELT,
            tinted_lens=attacker.ability == Ability.TINTED_LENS,
            berry=0.5 if self._holds_resist_berry(defender, conditions) and type_effectiveness > 1 else 1.0,
        )
        if gen == Generation.IV:
            return calc_gen4_damage, Gen4Modifiers(**common, **late, me_first=ME_FIRST_MULTIPLIER if conditions.me_first else 1.0)
        return calc_modern_damage, ModernModifiers(**common, **late, generation=gen)

    def resolve_weather(self, attacker: CreatureSnapshot, defender: CreatureSnapshot, conditions: BattleConditions) -> Weather:
        """Weather in effect for this hit. Gen I has none; Cloud Nine / Air Lock suppress it."""
        if self.generation == Generation.I or conditions.weather_suppressed:
            return Weather.NONE
        if self._has_abilities() and (attacker.ability.suppresses_weather() or defender.ability.suppresses_weather()):
            return Weather.NONE
        if conditions.weather.is_primal() and self.generation < Generation.VI:
            logger.warning("%s does not exist in %s. No weather will be applied.", conditions.weather.name, self.generation)
            return Weather.NONE
        return conditions.weather

    def resolve_defender_types(self, defender: CreatureSnapshot, weather: Weather) -> tuple[Type, Type]:
        """Strong winds turn the defender's Flying type into DELTA_FLYING (Gen VI+)."""
        if weather != Weather.STRONG_WINDS or self.generation < Generation.VI:
            return defender.types
        return tuple(Type.DELTA_FLYING if t == Type.FLYING else t for t in defender.types)

    def _has_abilities(self) -> bool:
        return self.generation >= Generation.III

    def _boosted_attack(self, attacker: CreatureSnapshot, move: MoveSnapshot, physical: bool, attack: float, defender_ability: Ability) -> float:
        """Apply ability and held item boosts to the attacking stat"""
        if self._has_abilities():
            if physical and attacker.ability in (Ability.HUGE_POWER, Ability.PURE_POWER):
                attack *= 2
            if physical and attacker.ability == Ability.HUSTLE:
                attack *= 1.5
            if physical and attacker.ability == Ability.GUTS and attacker.burned:
                attack *= 1.5
            if defender_ability == Ability.THICK_FAT and move.type in (Type.FIRE, Type.ICE):
                attack *= 0.5

        # Choice Band from Gen III, Choice Specs from Gen IV
        if physical and attacker.item == HoldEffect.CHOICE_BAND and self.generation >= Generation.III:
            attack *= 1.5
        elif not physical and attacker.item == HoldEffect.CHOICE_SPECS and self.generation >= Generation.IV:
            attack *= 1.5
        return attack

    def _resolve_power(self, attacker: CreatureSnapshot, move: MoveSnapshot, conditions: BattleConditions) -> float:
        """
        Move power after type-boosting items.

        Gen II keeps the item in its own formula slot. From Gen IV, Helping Hand,
        Charge and double-damage conditions scale power rather than damage.
        """
        power = float(move.power)
        gen = self.generation
        if gen >= Generation.III and attacker.item.boosted_type() == move.type:
            power *= TYPE_BOOST_ITEM_OLD if gen == Generation.III else TYPE_BOOST_ITEM_NEW

        if gen >= Generation.IV:
            if conditions.helping_hand:
                power *= HELPING_HAND_MULTIPLIER
            if conditions.charged and move.type == Type.ELECTRIC:
                power *= CHARGE_MULTIPLIER
            if conditions.double_damage:
                power *= 2
        return power

    @staticmethod
    def _holds_resist_berry(defender: CreatureSnapshot, conditions: BattleConditions) -> bool:
        return defender.item == HoldEffect.RESIST_BERRY or conditions.resist_berry

    def _final_item_multiplier(self, attacker: CreatureSnapshot, conditions: BattleConditions) -> float:
        """Life Orb x1.3; Metronome +10% (Gen IV) / +20% (Gen V+) per consecutive use, up to x2"""
        if attacker.item == HoldEffect.LIFE_ORB:
            return LIFE_ORB_MULTIPLIER
        if attacker.item == HoldEffect.METRONOME:
            step = 0.1 if self.generation == Generation.IV else 0.2
            return min(2.0, 1.0 + step * conditions.metronome_count)
        return 1.0
