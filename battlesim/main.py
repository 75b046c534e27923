"""
Main entry point for the battle simulator.

Builds the demo party and the Shadow Beast encounter, then runs the battle
in the terminal. Leo and Eliza are controlled by the player unless `--auto`
hands every combatant to its AI policy.
"""

import argparse
import asyncio
import logging
import random
from pathlib import Path

from battlesim.combat.battle_controller import BattleController
from battlesim.combat.clock import ImmediateClock, RealClock
from battlesim.combat.context import BattleContext
from battlesim.content import build_enemies, build_inventory, build_party
from battlesim.core.config import DEFAULT_RULES, BattleRules, load_rules
from battlesim.core.constants import BattleOutcome
from battlesim.core.logging import setup_logging
from battlesim.core.utils import cprint, crule
from battlesim.ui.cli_interface import CliInterface


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="battlesim",
        description="Turn-based party battle against the Shadow Beast.",
    )
    parser.add_argument(
        "--auto",
        action="store_true",
        help="let the AI control every combatant",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed of the battle's random source",
    )
    parser.add_argument(
        "--rules",
        type=Path,
        default=None,
        help="JSON file overriding the battle rules",
    )
    parser.add_argument(
        "--fast",
        action="store_true",
        help="skip the presentation delays",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="show debug diagnostics",
    )
    return parser.parse_args(argv)


async def run_battle(
    auto: bool,
    rng: random.Random,
    rules: BattleRules,
    fast: bool = False,
) -> BattleOutcome:
    """
    Runs the demo battle to completion.

    Args:
        auto (bool): Whether the AI controls every combatant.
        rng (random.Random): The random source of the battle.
        rules (BattleRules): The tuning rules.
        fast (bool): Whether to skip the presentation delays.

    Returns:
        BattleOutcome: The result of the battle.

    """
    party = build_party(auto=auto)
    enemies = build_enemies()
    context = BattleContext(rng=rng, inventory=build_inventory(), rules=rules)

    ui = CliInterface()
    controller = BattleController(
        party,
        enemies,
        ui=ui,
        context=context,
        clock=ImmediateClock() if fast else RealClock(),
    )
    ui.bind(controller)
    return await controller.run()


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    rules = load_rules(args.rules) if args.rules is not None else DEFAULT_RULES

    crule(":crossed_swords:  Battle Simulator", style="bold green")
    cprint("A Shadow Beast blocks the way!\n", style="bold blue")

    try:
        asyncio.run(
            run_battle(
                auto=args.auto,
                rng=random.Random(args.seed),
                rules=rules,
                fast=args.fast,
            )
        )
        crule(":crossed_swords:  Battle Finished", style="bold green")
    except (KeyboardInterrupt, asyncio.CancelledError):
        cprint("")
        crule(":crossed_swords:  Battle Interrupted", style="bold red")


if __name__ == "__main__":
    main()
