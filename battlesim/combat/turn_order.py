"""
Turn scheduler.

The turn order is computed once, at battle start, from the effective speed
of every living combatant.
"""

from typing import Any

from battlesim.core.config import DEFAULT_RULES, BattleRules
from battlesim.core.constants import StatusKind
from battlesim.effects.status_engine import has_status


def effective_speed(entity: Any, rules: BattleRules = DEFAULT_RULES) -> float:
    """
    Returns the entity's speed adjusted by speed-altering statuses.

    Args:
        entity (Entity): The entity to evaluate.
        rules (BattleRules): The tuning rules to use.

    Returns:
        float: SPD, multiplied under HASTE.

    """
    speed = float(entity.stats.SPD)
    if has_status(entity, StatusKind.HASTE):
        speed *= rules.haste_multiplier
    return speed


def compute_order(
    party: list[Any],
    enemies: list[Any],
    rules: BattleRules = DEFAULT_RULES,
) -> list[Any]:
    """
    Computes the turn order of a battle.

    Party members come before enemies, dead combatants are dropped, and the
    result is sorted by descending effective speed. The sort is stable, so
    ties keep the party-then-enemies order.

    Args:
        party (list[Entity]): The party members.
        enemies (list[Entity]): The enemies.
        rules (BattleRules): The tuning rules to use.

    Returns:
        list[Entity]: The combatants in turn order.

    """
    living = [entity for entity in [*party, *enemies] if entity.stats.hp > 0]
    return sorted(
        living,
        key=lambda entity: effective_speed(entity, rules),
        reverse=True,
    )
