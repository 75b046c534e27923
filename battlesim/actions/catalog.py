"""
Ability catalog.

Maps every `AbilityId` to its descriptor. Effect functions read the user,
the target and the battle context, and return an `EffectOutcome` without
mutating anything.
"""

import math
from typing import Any

from battlesim.core.constants import AbilityCategory, StatusKind, TargetKind

from .ability import Ability, AbilityId, EffectOutcome

POTION_ITEM = "POTION"
POTION_HEAL = 50
PROTECT_DURATION = 3


def _fire_slash(user: Any, target: Any, context: Any) -> EffectOutcome:
    damage = math.floor(user.stats.STR * 1.5 + context.rng.random() * 10)
    return EffectOutcome(
        damage=damage,
        message="{user} uses Fire Slash on {target} for {damage} damage!",
    )


def _heal(user: Any, target: Any, context: Any) -> EffectOutcome:
    amount = math.floor(user.stats.MND * 1.5 + 20)
    return EffectOutcome(
        heal=amount,
        message="{user} casts Heal! {target} recovers {heal} HP!",
    )


def _cure_poison(user: Any, target: Any, context: Any) -> EffectOutcome:
    return EffectOutcome(
        remove_statuses=[StatusKind.POISON],
        message="{user} casts CurePoison! {target}'s poison is cured!",
    )


def _protect(user: Any, target: Any, context: Any) -> EffectOutcome:
    return EffectOutcome(
        add_statuses={StatusKind.PROTECT: PROTECT_DURATION},
        message="{user} casts Protect! {target}'s defense increases!",
    )


def _override(user: Any, target: Any, context: Any) -> EffectOutcome:
    return EffectOutcome(
        message="{user} prepares to override {target}'s action!",
    )


def _use_potion(user: Any, target: Any, context: Any) -> EffectOutcome:
    return EffectOutcome(
        heal=POTION_HEAL,
        consume_item=POTION_ITEM,
        message="{user} uses a Potion! {target} recovers {heal} HP!",
        failure_message="No Potions available!",
    )


def _scan(user: Any, target: Any, context: Any) -> EffectOutcome:
    hp, max_hp = target.stats.hp, target.stats.max_hp
    return EffectOutcome(
        scan=True,
        message=f"{{user}} scans {{target}}! HP: {hp}/{max_hp}",
    )


ABILITIES: dict[AbilityId, Ability] = {
    AbilityId.FIRE_SLASH: Ability(
        id=AbilityId.FIRE_SLASH,
        name="Fire Slash",
        cost=8,
        category=AbilityCategory.PHYSICAL,
        target=TargetKind.ENEMY,
        description="A flaming strike scaling with STR.",
        effect=_fire_slash,
    ),
    AbilityId.HEADSTRONG: Ability(
        id=AbilityId.HEADSTRONG,
        name="Headstrong",
        category=AbilityCategory.PASSIVE,
        description="Sometimes ignores an override.",
    ),
    AbilityId.HEAL: Ability(
        id=AbilityId.HEAL,
        name="Heal",
        cost=4,
        category=AbilityCategory.MAGIC,
        target=TargetKind.ALLY,
        description="Restores HP scaling with MND.",
        effect=_heal,
    ),
    AbilityId.CURE_POISON: Ability(
        id=AbilityId.CURE_POISON,
        name="CurePoison",
        cost=3,
        category=AbilityCategory.MAGIC,
        target=TargetKind.ALLY,
        description="Cures POISON.",
        effect=_cure_poison,
    ),
    AbilityId.PROTECT: Ability(
        id=AbilityId.PROTECT,
        name="Protect",
        cost=6,
        category=AbilityCategory.MAGIC,
        target=TargetKind.ALLY,
        description="Grants PROTECT for three turns.",
        effect=_protect,
    ),
    AbilityId.PRAYER: Ability(
        id=AbilityId.PRAYER,
        name="Prayer",
        category=AbilityCategory.PASSIVE,
        description="Sometimes wastes a defending turn in prayer.",
    ),
    AbilityId.OVERRIDE: Ability(
        id=AbilityId.OVERRIDE,
        name="Override",
        cost=0,
        category=AbilityCategory.SPECIAL,
        target=TargetKind.ALLY,
        description="Dictates the next action of an AI-controlled ally.",
        effect=_override,
    ),
    AbilityId.USE_POTION: Ability(
        id=AbilityId.USE_POTION,
        name="Use Potion",
        cost=0,
        category=AbilityCategory.ITEM,
        target=TargetKind.ALLY,
        description="Consumes a Potion to restore 50 HP.",
        effect=_use_potion,
    ),
    AbilityId.SCAN: Ability(
        id=AbilityId.SCAN,
        name="Scan",
        cost=5,
        category=AbilityCategory.MAGIC,
        target=TargetKind.ENEMY,
        description="Reveals the HP of an enemy.",
        effect=_scan,
    ),
}

# Passives that let a combatant ignore an override.
STUBBORN_PASSIVES: frozenset[AbilityId] = frozenset({AbilityId.HEADSTRONG})


def get_ability(ability_id: AbilityId) -> Ability | None:
    """Returns the descriptor for the given ability, or None if unknown."""
    return ABILITIES.get(ability_id)
