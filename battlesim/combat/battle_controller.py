"""
Battle controller.

The state machine that sequences a battle: it computes the turn order once,
ticks statuses and checks act-eligibility before every turn, suspends for
player input or consults AI policies, hands actions to the resolver, waits
for a presentation delay, and detects victory, defeat and stuck turn loops.

The controller runs on an asyncio event loop and suspends at two points
only: while waiting for a player-controlled entity's action, and during the
post-resolution presentation delay.
"""

import asyncio
from typing import Any

from catchery import log_debug, log_warning

from battlesim.actions.action import BaseAction, PrayAction
from battlesim.core.config import BattleRules
from battlesim.core.constants import BattleOutcome, BattleState, LogKind, StatusKind
from battlesim.core.errors import StuckTurnLoop
from battlesim.core.logging import log_info
from battlesim.effects.status_engine import (
    can_act,
    clear_non_persistent,
    has_status,
    remove_status,
    tick,
)
from battlesim.interfaces import BattleUI

from .clock import Clock, RealClock
from .context import BattleContext, BattleLog, LogEntry
from .npc_ai import policy_for
from .resolver import ActionResolver
from .turn_order import compute_order


class BattleController:
    """
    Orchestrates a battle between a party and a group of enemies.

    Attributes:
        party (list[Entity]): The party members, in roster order.
        enemies (list[Entity]): The enemies, in roster order.
        context (BattleContext): The context shared with resolver and policies.
        ui (BattleUI | None): The presentation collaborator.
        clock (Clock): The source of presentation delays.
        resolver (ActionResolver): The action resolver.
        rules (BattleRules): The tuning rules, shared with the context.
        log (BattleLog): The fixed-capacity battle log.
        state (BattleState): The current state of the machine.
        turn_order (list[Entity]): The order computed at battle start.
        current (Entity | None): The entity whose turn it is.
        outcome (BattleOutcome | None): The result, once the battle is over.

    """

    def __init__(
        self,
        party: list[Any],
        enemies: list[Any],
        ui: BattleUI | None = None,
        context: BattleContext | None = None,
        clock: Clock | None = None,
        resolver: ActionResolver | None = None,
        rules: BattleRules | None = None,
    ) -> None:
        if ui is None and any(e.is_player_controlled for e in [*party, *enemies]):
            raise ValueError("Player-controlled entities require a battle UI.")

        self.party = party
        self.enemies = enemies
        self.context = context if context is not None else BattleContext()
        self.context.party = party
        self.context.enemies = enemies
        if rules is not None:
            self.context.rules = rules
        self.rules = self.context.rules
        self.ui = ui
        self.clock = clock if clock is not None else RealClock()
        self.resolver = resolver if resolver is not None else ActionResolver()
        self.log = BattleLog(
            capacity=self.rules.log_capacity,
            sink=ui.log_message if ui is not None else None,
        )

        self.state: BattleState = BattleState.TURN_START
        self.turn_order: list[Any] = []
        self.current: Any = None
        self.outcome: BattleOutcome | None = None
        self.turns_taken: int = 0

        # Advanced before each read, so the fastest combatant acts first.
        self._index: int = -1
        self._executing: bool = False
        self._pending_action: asyncio.Future | None = None

    # ============================================================================
    # MAIN LOOP
    # ============================================================================

    async def run(self) -> BattleOutcome:
        """
        Runs the battle to completion.

        Returns:
            BattleOutcome: VICTORY or DEFEAT.

        """
        self.log.add("Battle Start!")
        self.turn_order = compute_order(self.party, self.enemies, self.rules)
        log_info(
            "Turn order computed",
            {"order": ", ".join(e.name for e in self.turn_order)},
        )

        while True:
            actor = self._turn_start()
            if actor is None:
                break
            action = await self._select_action(actor)
            await self._execute(actor, action)

        await self._end_battle()
        assert self.outcome is not None
        return self.outcome

    def submit_player_action(self, entity: Any, action: BaseAction) -> bool:
        """
        Delivers the action chosen for a player-controlled entity.

        Only the first well-formed submission for the entity currently
        selecting an action is accepted. The execution latch is set before
        returning, so any later submission is dropped until the next player
        turn begins.

        Args:
            entity (Entity): The entity the action is for.
            action (BaseAction): The chosen action.

        Returns:
            bool: True if the action was accepted.

        """
        pending = self._pending_action
        if (
            self._executing
            or self.state != BattleState.SELECTING_ACTION
            or pending is None
            or pending.done()
        ):
            log_debug(
                f"Dropped action for {getattr(entity, 'name', entity)}",
                {"state": str(self.state), "executing": self._executing},
            )
            return False
        if entity is not self.current:
            log_warning(
                f"Action submitted for {entity.name} during {self.current.name}'s turn",
                {"entity": entity.name, "current": self.current.name},
            )
            return False
        if not isinstance(action, BaseAction) or isinstance(action, PrayAction):
            log_warning(
                f"Rejected malformed action for {entity.name}",
                {"entity": entity.name, "action": repr(action)},
            )
            return False

        self._executing = True
        self.state = BattleState.EXECUTING
        pending.set_result(action)
        return True

    @property
    def is_executing(self) -> bool:
        return self._executing

    @property
    def messages(self) -> list[str]:
        return self.log.messages

    # ============================================================================
    # TURN_START
    # ============================================================================

    def _turn_start(self) -> Any:
        """
        Finds the next entity able to act.

        Returns:
            Entity | None: The next actor, or None once the battle is over.

        """
        self.state = BattleState.TURN_START
        self.current = None

        self.outcome = self._check_terminal()
        if self.outcome is not None:
            return None

        try:
            return self._scan_for_actor()
        except StuckTurnLoop as e:
            return self._recover_from_stuck_loop(e)

    def _check_terminal(self) -> BattleOutcome | None:
        if all(enemy.is_dead() for enemy in self.enemies):
            return BattleOutcome.VICTORY
        if all(member.is_dead() for member in self.party):
            return BattleOutcome.DEFEAT
        return None

    def _scan_for_actor(self) -> Any:
        order = self.turn_order
        guard = self.rules.scan_guard_factor * len(order)

        for _ in range(guard):
            self._index = (self._index + 1) % len(order)
            entity = order[self._index]
            if entity.is_dead():
                continue

            # Statuses tick on every visit, right before the turn is offered.
            self.log.extend(tick(entity, self.rules))
            if entity.is_dead():
                self.log.add(f"{entity.name} collapses!")
                self.outcome = self._check_terminal()
                if self.outcome is not None:
                    return None
                continue

            able, reason = can_act(entity, self.context.rng, self.rules)
            if not able:
                if reason:
                    self.log.add(reason)
                continue
            return entity

        raise StuckTurnLoop(
            "No combatant was able to act",
            {"iterations": guard, "order": len(order)},
        )

    def _recover_from_stuck_loop(self, error: StuckTurnLoop) -> Any:
        sleeper = next(
            (
                entity
                for entity in self.turn_order
                if entity.is_alive() and has_status(entity, StatusKind.SLEEP)
            ),
            None,
        )
        if sleeper is not None:
            remove_status(sleeper, StatusKind.SLEEP)
            self.log.add(
                f"The battle has stalled! {sleeper.name} is jolted awake!",
                LogKind.ERROR,
            )
            self._index = next(
                i for i, entity in enumerate(self.turn_order) if entity is sleeper
            )
            return sleeper

        self.log.add(
            f"The battle has stalled and no one can act! ({error.message})",
            LogKind.ERROR,
        )
        self.outcome = BattleOutcome.DEFEAT
        return None

    # ============================================================================
    # SELECTING_ACTION
    # ============================================================================

    async def _select_action(self, actor: Any) -> BaseAction:
        self.current = actor
        # A guard only lasts until the defender's next turn comes around.
        actor.is_defending = False

        if actor.is_player_controlled:
            self.state = BattleState.SELECTING_ACTION
            self._pending_action = asyncio.get_running_loop().create_future()
            self.ui.request_player_action(actor)
            try:
                return await self._pending_action
            finally:
                self._pending_action = None

        action, entries = self.resolver.take_override(actor, self.context)
        self._add_entries(entries)
        if action is None:
            action = policy_for(actor).decide(
                actor,
                self.context.living_allies(actor),
                self.context.living_opponents(actor),
                self.context,
            )
        return action

    # ============================================================================
    # EXECUTING
    # ============================================================================

    async def _execute(self, actor: Any, action: BaseAction) -> None:
        self.state = BattleState.EXECUTING
        self._executing = True
        try:
            self._add_entries(self.resolver.resolve(action, actor, self.context))
            self.turns_taken += 1
            await self.clock.sleep(self.rules.presentation_delay)
        finally:
            self._executing = False

    def _add_entries(self, entries: list[LogEntry]) -> None:
        for entry in entries:
            self.log.add(entry.message, entry.kind)

    # ============================================================================
    # BATTLE_END
    # ============================================================================

    async def _end_battle(self) -> None:
        self.state = BattleState.BATTLE_END
        self.current = None
        survivors = [member for member in self.party if member.is_alive()]

        if self.outcome == BattleOutcome.VICTORY:
            self.log.add("Victory!")
            total_exp = sum(enemy.exp_reward for enemy in self.enemies)
            for member in survivors:
                self.log.extend(member.gain_exp(total_exp))
        else:
            self.log.add("Defeat...")

        for member in survivors:
            clear_non_persistent(member)
            member.clear_transient_flags()

        log_info(
            "Battle ended",
            {"outcome": str(self.outcome), "turns": self.turns_taken},
        )
        await self.clock.sleep(self.rules.end_delay)
        if self.ui is not None:
            self.ui.battle_ended(self.outcome)
