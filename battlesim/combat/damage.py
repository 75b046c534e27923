"""
Damage module for the battle simulator.

Handles the damage formulas: the raw damage of a basic attack, the
mitigation applied by the target (PROTECT and DEF), and the application of
the mitigated damage to the target.
"""

import math
import random
from fractions import Fraction
from typing import Any

from battlesim.core.config import DEFAULT_RULES, BattleRules
from battlesim.core.constants import StatusKind
from battlesim.effects.status_engine import has_status


def roll_attack_damage(
    actor: Any,
    rng: random.Random,
    rules: BattleRules = DEFAULT_RULES,
) -> int:
    """
    Rolls the raw damage of a basic attack.

    Args:
        actor (Entity): The attacker.
        rng (random.Random): The random source for the bonus.
        rules (BattleRules): The tuning rules to use.

    Returns:
        int: floor(STR * factor + uniform[0, bonus)).

    """
    return math.floor(
        actor.stats.STR * rules.attack_str_factor
        + rng.random() * rules.attack_random_bonus
    )


def mitigate_damage(
    raw: int,
    target: Any,
    rules: BattleRules = DEFAULT_RULES,
) -> int:
    """
    Computes the damage a target actually takes from a raw amount.

    PROTECT divides the raw damage before DEF mitigation. A single floor is
    applied to the final result, and at least one point always gets through.
    Exact rational arithmetic keeps the floor free of rounding drift.

    Args:
        raw (int): The raw damage.
        target (Entity): The entity being hit.
        rules (BattleRules): The tuning rules to use.

    Returns:
        int: max(1, floor(raw [/ divisor] * 100 / (100 + DEF))).

    """
    amount = Fraction(raw)
    if has_status(target, StatusKind.PROTECT):
        amount /= Fraction(str(rules.protect_divisor))
    amount = amount * 100 / (100 + target.stats.DEF)
    return max(1, math.floor(amount))


def apply_damage(
    raw: int,
    target: Any,
    rules: BattleRules = DEFAULT_RULES,
) -> int:
    """
    Mitigates raw damage and removes it from the target's HP.

    Returns:
        int: The mitigated damage, which is what gets reported.

    """
    damage = mitigate_damage(raw, target, rules)
    target.take_hp(damage)
    return damage
