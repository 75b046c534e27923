"""
Error kinds raised inside the battle engine.

None of these escape the engine: the resolver and the controller catch them
at their boundaries and turn them into battle log entries.
"""

from typing import Any


class BattleError(Exception):
    """Base class for all battle engine errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}


class InvalidAction(BattleError):
    """An action names an unknown ability, an ineligible target or an
    unaffordable cost."""


class StuckTurnLoop(BattleError):
    """The turn scan exceeded its iteration guard without finding an actor."""


class ActionResolutionFailure(BattleError):
    """An ability effect raised while being resolved."""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context)
        self.cause = cause
