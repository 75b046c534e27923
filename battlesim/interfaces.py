"""
Collaborator interfaces of the battle engine.

The engine never renders, reads input or stores items itself: it talks to
these protocols.
"""

from typing import Any, Protocol

from battlesim.core.constants import BattleOutcome


class InventoryProtocol(Protocol):
    """Item stock consumed by item abilities."""

    def use_item(self, item_id: str) -> bool:
        """Consumes one unit of the item, returning False if none is left."""
        ...

    def remove_item(self, item_id: str, count: int) -> bool:
        """Removes `count` units of the item, returning False if short."""
        ...

    def item_count(self, item_id: str) -> int:
        """Returns how many units of the item are in stock."""
        ...


class BattleUI(Protocol):
    """The presentation side of a battle."""

    def request_player_action(self, entity: Any) -> None:
        """
        Asks for the action of a player-controlled entity.

        The answer must be delivered later, exactly once, through
        `BattleController.submit_player_action`.

        Args:
            entity (Entity): The entity whose action is requested.

        """
        ...

    def log_message(self, message: str) -> None:
        """Receives battle log messages in order."""
        ...

    def battle_ended(self, outcome: BattleOutcome) -> None:
        """Receives the terminal result of the battle."""
        ...
