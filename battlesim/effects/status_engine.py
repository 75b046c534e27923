"""
Status effect engine.

Applies the periodic effects of statuses (POISON, REGEN), ages out timed
statuses, and answers whether a combatant is able to act this turn.
"""

import math
import random
from typing import Any

from battlesim.core.config import DEFAULT_RULES, BattleRules
from battlesim.core.constants import StatusKind
from battlesim.core.logging import log_debug

from .status_effect import StatusInstance, is_persistent


def has_status(entity: Any, kind: StatusKind) -> bool:
    """Returns True if the entity currently carries the given status."""
    return kind in entity.statuses


def add_status(
    entity: Any,
    kind: StatusKind,
    duration: int = DEFAULT_RULES.default_status_duration,
) -> None:
    """
    Applies a status to the entity, replacing any existing instance of the
    same kind. Statuses never stack.

    Args:
        entity (Entity): The entity receiving the status.
        kind (StatusKind): The status to apply.
        duration (int): Number of turns before the status wears off.

    """
    entity.statuses[kind] = StatusInstance(kind=kind, turns_remaining=max(0, duration))
    log_debug(f"{entity.name} gains {kind}", {"duration": duration})


def remove_status(entity: Any, kind: StatusKind) -> bool:
    """Removes a status, returning True if the entity had it."""
    return entity.statuses.pop(kind, None) is not None


def clear_non_persistent(entity: Any) -> list[StatusKind]:
    """
    Removes every non-persistent status from the entity.

    Returns:
        list[StatusKind]: The statuses that were removed.

    """
    removed = [kind for kind in entity.statuses if not is_persistent(kind)]
    for kind in removed:
        del entity.statuses[kind]
    return removed


def tick(entity: Any, rules: BattleRules = DEFAULT_RULES) -> list[str]:
    """
    Runs the start-of-turn status update for an entity.

    The order is fixed: POISON damage, then REGEN healing, then the duration
    countdown of every non-persistent status. The countdown runs even when
    the poison has just brought the entity down.

    Args:
        entity (Entity): The entity whose statuses are updated.
        rules (BattleRules): The tuning rules to use.

    Returns:
        list[str]: The messages produced by the update.

    """
    messages: list[str] = []

    if has_status(entity, StatusKind.POISON):
        damage = math.floor(entity.stats.max_hp * rules.poison_ratio)
        entity.take_hp(damage)
        messages.append(f"{entity.name} takes {damage} damage from POISON!")

    if has_status(entity, StatusKind.REGEN):
        heal = math.floor(entity.stats.max_hp * rules.regen_ratio)
        entity.restore_hp(heal)
        messages.append(f"{entity.name} recovers {heal} HP from REGEN!")

    expired: list[StatusKind] = []
    for kind, instance in entity.statuses.items():
        if is_persistent(kind):
            continue
        instance.turns_remaining = max(0, instance.turns_remaining - 1)
        if instance.turns_remaining == 0:
            expired.append(kind)
    for kind in expired:
        del entity.statuses[kind]
        messages.append(f"{entity.name}'s {kind} wore off!")

    return messages


def can_act(
    entity: Any,
    rng: random.Random,
    rules: BattleRules = DEFAULT_RULES,
) -> tuple[bool, str | None]:
    """
    Checks whether the entity is able to act this turn.

    A paralyzed entity makes an independent draw every time it is asked.

    Args:
        entity (Entity): The entity to check.
        rng (random.Random): The random source for the paralysis draw.
        rules (BattleRules): The tuning rules to use.

    Returns:
        tuple[bool, str | None]:
            Whether the entity can act, and the reason to log when it cannot.

    """
    if entity.is_dead():
        return False, None
    if has_status(entity, StatusKind.SLEEP):
        return False, f"{entity.name} is asleep!"
    if has_status(entity, StatusKind.PARALYSIS):
        if rng.random() >= rules.paralysis_act_chance:
            return False, f"{entity.name} is paralyzed!"
    return True, None
