"""
User interface module for the battle simulator.

Provides the terminal front-end of a battle: rich tables for the battlefield
and the menus, prompt_toolkit prompts for the player's choices, and the
`BattleUI` callbacks the controller reports to.
"""

import asyncio
from typing import Any

from prompt_toolkit import ANSI, PromptSession
from rich.table import Table

from battlesim.actions.ability import AbilityId
from battlesim.actions.action import (
    BaseAction,
    attack,
    defend,
    override,
    use_ability,
)
from battlesim.actions.catalog import get_ability
from battlesim.combat.battle_controller import BattleController
from battlesim.core.constants import BattleOutcome, TargetKind
from battlesim.core.utils import ccapture, cprint, crule

# one session keeps history
session: PromptSession = PromptSession(erase_when_done=True)


class CliInterface:
    """
    Terminal implementation of the `BattleUI` protocol.

    When the controller asks for a player action, the interface schedules a
    prompt on the running event loop and submits the answer back to the
    controller once the player has made a complete choice. Choosing "q" in a
    submenu goes back to the previous menu.
    """

    def __init__(self) -> None:
        self.controller: BattleController | None = None
        self.outcome: BattleOutcome | None = None
        self._battle_task: asyncio.Task | None = None
        self._prompts: set[asyncio.Task] = set()

    def bind(self, controller: BattleController) -> None:
        """
        Attaches the interface to the controller it answers to.

        Must be called from the task that runs the battle, which is
        cancelled if the player abandons the prompt.
        """
        self.controller = controller
        self._battle_task = asyncio.current_task()

    # ============================================================================
    # BattleUI
    # ============================================================================

    def request_player_action(self, entity: Any) -> None:
        task = asyncio.get_running_loop().create_task(self._prompt_player(entity))
        self._prompts.add(task)
        task.add_done_callback(self._prompts.discard)

    def log_message(self, message: str) -> None:
        cprint(message)

    def battle_ended(self, outcome: BattleOutcome) -> None:
        self.outcome = outcome
        crule(outcome.display_name, style=outcome.color)
        if self.controller is not None:
            self.print_battlefield(show_enemies=False)

    # ============================================================================
    # BATTLEFIELD
    # ============================================================================

    def print_battlefield(self, show_enemies: bool = True) -> None:
        assert self.controller is not None
        table = Table(title="Battlefield", pad_edge=False)
        table.add_column("Side", style="cyan")
        table.add_column("Status")
        for member in self.controller.party:
            table.add_row("Party", member.get_status_line(show_numbers=True))
        if show_enemies:
            table.add_row()
            for enemy in self.controller.enemies:
                table.add_row(
                    "Enemy",
                    enemy.get_status_line(show_numbers=enemy.scanned),
                )
        cprint(table)

    # ============================================================================
    # PLAYER TURN
    # ============================================================================

    async def _prompt_player(self, entity: Any) -> None:
        assert self.controller is not None
        self.print_battlefield()
        try:
            action = await self.choose_action(entity)
        except (EOFError, KeyboardInterrupt):
            crule("Battle abandoned", style="bold red")
            if self._battle_task is not None:
                self._battle_task.cancel()
            return
        self.controller.submit_player_action(entity, action)

    async def choose_action(self, entity: Any) -> BaseAction:
        """
        Walks the player through the action menus until an action is complete.

        Args:
            entity (Entity): The entity whose action is being chosen.

        Returns:
            BaseAction: The chosen action.

        """
        assert self.controller is not None
        context = self.controller.context
        while True:
            options: list[tuple[str, str, Any]] = [
                ("Attack", "Basic attack", "attack"),
                ("Defend", "Raise guard", "defend"),
            ]
            for ability_id in entity.available_abilities():
                if ability_id == AbilityId.OVERRIDE:
                    continue
                ability = get_ability(ability_id)
                options.append((ability.menu_label, ability.description, ability_id))
            if self._override_candidates(entity):
                options.append(("Override", "Dictate an ally's next action", "override"))

            choice = await self._choose(
                f"{entity.name}'s turn ({entity.stats.mp} MP)",
                options,
                prompt="Action > ",
                exit_entry=None,
            )

            if choice == "attack":
                target = await self.choose_target(context.living_opponents(entity))
                if target is not None:
                    return attack(target)
            elif choice == "defend":
                return defend()
            elif choice == "override":
                action = await self._choose_override(entity)
                if action is not None:
                    return action
            elif isinstance(choice, AbilityId):
                ability = get_ability(choice)
                if ability.target == TargetKind.SELF:
                    return use_ability(choice, entity)
                candidates = (
                    context.living_opponents(entity)
                    if ability.target == TargetKind.ENEMY
                    else context.living_allies(entity)
                )
                target = await self.choose_target(candidates)
                if target is not None:
                    return use_ability(choice, target)

    async def choose_target(self, targets: list[Any]) -> Any:
        """
        Chooses a target among the given entities.

        Returns:
            Entity | None: The chosen target, or None to go back.

        """
        if not targets:
            return None
        options = [
            (target.name, target.get_status_line(show_numbers=True), target)
            for target in targets
        ]
        return await self._choose("Targets", options, prompt="Target > ")

    async def _choose_override(self, entity: Any) -> BaseAction | None:
        assert self.controller is not None
        ally = await self.choose_target(self._override_candidates(entity))
        if ally is None:
            return None
        cprint(f"Choose the attack {ally.name} will make.")
        target = await self.choose_target(self.controller.context.living_opponents(ally))
        if target is None:
            return None
        return override(ally, attack(target))

    def _override_candidates(self, entity: Any) -> list[Any]:
        assert self.controller is not None
        if not entity.knows(AbilityId.OVERRIDE):
            return []
        return [
            ally
            for ally in self.controller.context.living_allies(entity)
            if ally is not entity and not ally.is_player_controlled
        ]

    # ============================================================================
    # MENUS
    # ============================================================================

    async def _choose(
        self,
        title: str,
        options: list[tuple[str, str, Any]],
        prompt: str,
        exit_entry: str | None = "Back",
    ) -> Any:
        table = Table(title=title, pad_edge=False)
        table.add_column("#", style="cyan", no_wrap=True)
        table.add_column("Name", style="bold")
        table.add_column("Info")
        for i, (name, info, _) in enumerate(options, 1):
            table.add_row(str(i), name, info)
        # Add the exit entry if requested.
        if exit_entry:
            table.add_row()
            table.add_row("q", exit_entry, "")
        text = "\n" + ccapture(table) + "\n" + prompt
        while True:
            answer = (await session.prompt_async(ANSI(text))).strip()
            # Keep asking until the user provides a valid input.
            if not answer:
                continue
            index = self.get_digit_choice(answer) - 1
            if 0 <= index < len(options):
                return options[index][2]
            if exit_entry and answer.lower() == "q":
                return None

    @staticmethod
    def get_digit_choice(answer: str) -> int:
        """
        Convert a numeric string input to its integer value.

        Args:
            answer (str): User input string to parse.

        Returns:
            int: The integer value, or -1 if invalid input.

        """
        if isinstance(answer, str) and answer.isdigit():
            return int(answer)
        return -1
