"""
Action resolver.

Applies one chosen action to the battle: rolls and mitigates damage, pays
ability costs, applies the outcome of ability effects, and produces the log
entries describing what happened. The resolver never raises to its caller:
invalid actions become a no-op with an explanatory message, and failures of
an ability effect are caught at this boundary and reported as error
entries.
"""

from typing import Any

from catchery import log_warning

from battlesim.actions.ability import Ability, AbilityId, EffectOutcome
from battlesim.actions.action import (
    AbilityAction,
    AttackAction,
    BaseAction,
    DefendAction,
    OverrideAction,
    PrayAction,
)
from battlesim.actions.catalog import STUBBORN_PASSIVES, get_ability
from battlesim.core.constants import AbilityCategory, LogKind, StatusKind, TargetKind
from battlesim.core.errors import ActionResolutionFailure, InvalidAction
from battlesim.core.logging import log_critical
from battlesim.effects.status_engine import add_status, remove_status

from .context import BattleContext, LogEntry
from .damage import apply_damage, roll_attack_damage


def _info(message: str) -> LogEntry:
    return LogEntry(message=message)


class ActionResolver:
    """
    Resolves actions chosen by players and policies.

    Every resolution returns the log entries it produced, in order. Costs
    already paid (MP, items) are never refunded, even when a later step of
    the resolution fails.
    """

    def resolve(
        self,
        action: BaseAction,
        actor: Any,
        context: BattleContext,
    ) -> list[LogEntry]:
        """
        Resolves a single action.

        Args:
            action (BaseAction): The action to resolve.
            actor (Entity): The entity performing the action.
            context (BattleContext): The battle context.

        Returns:
            list[LogEntry]: The entries describing the resolution.

        """
        try:
            if isinstance(action, AttackAction):
                return self._resolve_attack(action, actor, context)
            if isinstance(action, DefendAction):
                return self._resolve_defend(actor)
            if isinstance(action, AbilityAction):
                return self._resolve_ability(action, actor, context)
            if isinstance(action, PrayAction):
                return [_info(f"{actor.name} prays... (nothing happens)")]
            if isinstance(action, OverrideAction):
                return self._resolve_override(action, actor, context)
            raise InvalidAction(
                f"{actor.name} hesitates and does nothing.",
                {"actor": actor.name, "action": type(action).__name__},
            )
        except InvalidAction as e:
            log_warning(e.message, {**e.context, "context": "action_validation"})
            return [_info(e.message)]
        except ActionResolutionFailure as e:
            log_critical(e.message, e.context, e.cause)
            return [LogEntry(message=e.message, kind=LogKind.ERROR)]

    # ============================================================================
    # ACTION KINDS
    # ============================================================================

    def _resolve_attack(
        self,
        action: AttackAction,
        actor: Any,
        context: BattleContext,
    ) -> list[LogEntry]:
        target = action.target
        self._require_target(actor, target, TargetKind.ENEMY, context)

        raw = roll_attack_damage(actor, context.rng, context.rules)
        damage = apply_damage(raw, target, context.rules)
        entries = [_info(f"{actor.name} attacks {target.name} for {damage} damage!")]
        entries.extend(self._wake_up(target))
        return entries

    def _resolve_defend(self, actor: Any) -> list[LogEntry]:
        # The flag is not consulted by damage mitigation, PROTECT is.
        actor.is_defending = True
        return [_info(f"{actor.name} defends!")]

    def _resolve_ability(
        self,
        action: AbilityAction,
        actor: Any,
        context: BattleContext,
    ) -> list[LogEntry]:
        ability = self._require_ability(action.ability_id, actor)
        target = action.target if ability.target != TargetKind.SELF else actor
        self._require_target(actor, target, ability.target, context)
        if actor.stats.mp < ability.cost:
            raise InvalidAction(
                f"{actor.name} doesn't have enough MP for {ability.name}!",
                {"actor": actor.name, "mp": actor.stats.mp, "cost": ability.cost},
            )

        actor.spend_mp(ability.cost)

        try:
            outcome = ability.effect(actor, target, context)
            return self._apply_outcome(ability, outcome, actor, target, context)
        except Exception as e:
            raise ActionResolutionFailure(
                f"{actor.name}'s {ability.name} fizzles out!",
                {"actor": actor.name, "ability": ability.id, "error": str(e)},
                cause=e,
            ) from e

    def _resolve_override(
        self,
        action: OverrideAction,
        actor: Any,
        context: BattleContext,
    ) -> list[LogEntry]:
        target = action.target
        if not actor.knows(AbilityId.OVERRIDE):
            raise InvalidAction(
                f"{actor.name} cannot override anyone!",
                {"actor": actor.name},
            )
        self._require_target(actor, target, TargetKind.ALLY, context)
        if target is actor or target.is_player_controlled:
            raise InvalidAction(
                f"{target.name} is not following orders from {actor.name}.",
                {"actor": actor.name, "target": target.name},
            )
        queued = action.queued_action
        if not isinstance(queued, BaseAction) or isinstance(queued, OverrideAction):
            raise InvalidAction(
                f"{actor.name} gives {target.name} a confusing order.",
                {"actor": actor.name, "queued": type(queued).__name__},
            )
        target.pending_override = queued
        return [_info(f"{actor.name} will control {target.name}'s next action!")]

    # ============================================================================
    # OVERRIDES
    # ============================================================================

    def take_override(
        self,
        actor: Any,
        context: BattleContext,
    ) -> tuple[BaseAction | None, list[LogEntry]]:
        """
        Consumes the override queued for a policy-controlled actor.

        A stubborn actor makes an independent draw and may discard the
        override, in which case its policy decides instead.

        Args:
            actor (Entity): The entity about to act.
            context (BattleContext): The battle context.

        Returns:
            tuple[BaseAction | None, list[LogEntry]]:
                The queued action (None if absent or ignored) and the
                entries to log.

        """
        action = actor.pending_override
        if action is None:
            return None, []
        actor.pending_override = None
        entries = [_info(f"[OVERRIDE] {actor.name}'s action is controlled!")]

        stubborn = next((p for p in STUBBORN_PASSIVES if actor.knows(p)), None)
        if stubborn is not None and context.rng.random() < context.rules.stubbornness_chance:
            passive = get_ability(stubborn)
            entries.append(
                _info(f"{actor.name} ignores the override! ({passive.name})")
            )
            return None, entries
        return action, entries

    # ============================================================================
    # HELPERS
    # ============================================================================

    def _require_ability(self, ability_id: AbilityId, actor: Any) -> Ability:
        ability = get_ability(ability_id)
        if ability is None or ability.effect is None:
            raise InvalidAction(
                f"{actor.name} tries an ability that cannot be used!",
                {"actor": actor.name, "ability": ability_id},
            )
        if not actor.knows(ability_id):
            raise InvalidAction(
                f"{actor.name} doesn't know {ability.name}!",
                {"actor": actor.name, "ability": ability_id},
            )
        return ability

    def _require_target(
        self,
        actor: Any,
        target: Any,
        kind: TargetKind,
        context: BattleContext,
    ) -> None:
        if target is None or target.is_dead():
            raise InvalidAction(
                f"{actor.name}'s target is no longer standing!",
                {"actor": actor.name, "target": getattr(target, "name", None)},
            )
        if kind == TargetKind.SELF and target is not actor:
            raise InvalidAction(
                f"{actor.name} can only do that to themselves!",
                {"actor": actor.name, "target": target.name},
            )
        allied = context.are_allies(actor, target)
        if (kind == TargetKind.ENEMY and allied) or (kind == TargetKind.ALLY and not allied):
            raise InvalidAction(
                f"{actor.name} cannot target {target.name} with that!",
                {"actor": actor.name, "target": target.name, "kind": kind},
            )

    def _apply_outcome(
        self,
        ability: Ability,
        outcome: EffectOutcome,
        actor: Any,
        target: Any,
        context: BattleContext,
    ) -> list[LogEntry]:
        if outcome.consume_item is not None:
            inventory = context.inventory
            if inventory is None or not inventory.use_item(outcome.consume_item):
                message = outcome.failure_message or f"No {outcome.consume_item} left!"
                return [_info(message)]

        damage = 0
        if outcome.damage > 0:
            damage = apply_damage(outcome.damage, target, context.rules)
        healed = target.restore_hp(outcome.heal) if outcome.heal > 0 else 0
        for kind in outcome.remove_statuses:
            remove_status(target, kind)
        for kind, duration in outcome.add_statuses.items():
            add_status(target, kind, duration)
        if outcome.scan:
            target.scanned = True

        entries = [
            _info(
                outcome.message.format(
                    user=actor.name,
                    target=target.name,
                    damage=damage,
                    heal=healed,
                )
            )
        ]
        if damage > 0 and ability.category == AbilityCategory.PHYSICAL:
            entries.extend(self._wake_up(target))
        return entries

    def _wake_up(self, target: Any) -> list[LogEntry]:
        if remove_status(target, StatusKind.SLEEP):
            return [_info(f"{target.name} wakes up!")]
        return []
