"""
Battle context and battle log.

The context is the explicit value passed to every resolver and policy call:
it carries the random source, the inventory, the rules and the two sides
of the battle. The battle log is a fixed-capacity ring of entries that also
forwards every message, in order, to an external sink.
"""

import random
from collections import deque
from collections.abc import Iterator
from typing import Any, Callable

from pydantic import BaseModel, Field

from battlesim.core.config import DEFAULT_RULES, BattleRules
from battlesim.core.constants import LogKind
from battlesim.core.logging import log_error
from battlesim.interfaces import InventoryProtocol


class LogEntry(BaseModel):
    """A single battle log entry."""

    message: str = Field(description="The human-readable message.")
    kind: LogKind = Field(LogKind.INFO, description="The kind of entry.")

    def __str__(self) -> str:
        return self.message


class BattleLog:
    """
    Fixed-capacity battle log. The oldest entries are discarded once the
    capacity is reached.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_RULES.log_capacity,
        sink: Callable[[str], None] | None = None,
    ) -> None:
        self._entries: deque[LogEntry] = deque(maxlen=capacity)
        self._sink = sink

    def add(self, message: str, kind: LogKind = LogKind.INFO) -> LogEntry:
        entry = LogEntry(message=message, kind=kind)
        self._entries.append(entry)
        if kind == LogKind.ERROR:
            log_error(message, {"context": "battle_log"})
        if self._sink is not None:
            self._sink(message)
        return entry

    def extend(self, messages: list[str]) -> None:
        for message in messages:
            self.add(message)

    @property
    def entries(self) -> list[LogEntry]:
        return list(self._entries)

    @property
    def messages(self) -> list[str]:
        return [entry.message for entry in self._entries]

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)


class BattleContext:
    """
    Everything a resolver or a policy needs besides the acting entity.

    Attributes:
        rng (random.Random): The random source of every draw in the battle.
        inventory (InventoryProtocol | None): The party inventory.
        rules (BattleRules): The tuning rules.
        party (list[Entity]): The party members, in roster order.
        enemies (list[Entity]): The enemies, in roster order.

    """

    def __init__(
        self,
        rng: random.Random | None = None,
        inventory: InventoryProtocol | None = None,
        rules: BattleRules = DEFAULT_RULES,
        party: list[Any] | None = None,
        enemies: list[Any] | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.inventory = inventory
        self.rules = rules
        self.party: list[Any] = list(party or [])
        self.enemies: list[Any] = list(enemies or [])

    def side_of(self, entity: Any) -> list[Any]:
        """Returns the roster list the entity belongs to."""
        if any(member is entity for member in self.party):
            return self.party
        return self.enemies

    def opponents_of(self, entity: Any) -> list[Any]:
        """Returns the roster list opposing the entity."""
        if any(member is entity for member in self.party):
            return self.enemies
        return self.party

    def are_allies(self, first: Any, second: Any) -> bool:
        return any(member is second for member in self.side_of(first))

    def living_allies(self, entity: Any) -> list[Any]:
        return [member for member in self.side_of(entity) if member.is_alive()]

    def living_opponents(self, entity: Any) -> list[Any]:
        return [member for member in self.opponents_of(entity) if member.is_alive()]
