"""
Status effect descriptors and instances.

A `StatusDescriptor` is the static description of a status kind, while a
`StatusInstance` is the copy of it currently applied to a combatant.
"""

from pydantic import BaseModel, Field

from battlesim.core.constants import StatusKind


class StatusDescriptor(BaseModel):
    """
    Static description of a status kind.

    Persistent statuses are never aged out by the turn countdown.
    """

    kind: StatusKind = Field(
        description="The status kind this descriptor belongs to.",
    )
    persistent: bool = Field(
        False,
        description="If True, the status is not subject to turn-count expiry.",
    )
    description: str = Field(
        "",
        description="A brief description of the status.",
    )

    @property
    def colored_name(self) -> str:
        return self.kind.colored_name


class StatusInstance(BaseModel):
    """A status currently applied to a combatant."""

    kind: StatusKind = Field(
        description="The kind of the status.",
    )
    turns_remaining: int = Field(
        ge=0,
        description="Turns left before a non-persistent status wears off.",
    )

    @property
    def persistent(self) -> bool:
        return STATUS_TABLE[self.kind].persistent

    def __str__(self) -> str:
        if self.persistent:
            return f"{self.kind.colored_name}(∞)"
        return f"{self.kind.colored_name}({self.turns_remaining})"


STATUS_TABLE: dict[StatusKind, StatusDescriptor] = {
    StatusKind.POISON: StatusDescriptor(
        kind=StatusKind.POISON,
        persistent=True,
        description="Loses a share of max HP every turn until cured.",
    ),
    StatusKind.SLEEP: StatusDescriptor(
        kind=StatusKind.SLEEP,
        description="Cannot act. Woken up by physical attacks.",
    ),
    StatusKind.PARALYSIS: StatusDescriptor(
        kind=StatusKind.PARALYSIS,
        description="Has a chance to fail to act each turn.",
    ),
    StatusKind.PROTECT: StatusDescriptor(
        kind=StatusKind.PROTECT,
        description="Incoming physical damage is reduced.",
    ),
    StatusKind.HASTE: StatusDescriptor(
        kind=StatusKind.HASTE,
        description="Speed is increased when the turn order is computed.",
    ),
    StatusKind.REGEN: StatusDescriptor(
        kind=StatusKind.REGEN,
        description="Recovers a share of max HP every turn.",
    ),
}


def is_persistent(kind: StatusKind) -> bool:
    """Returns True if the given status kind ignores the turn countdown."""
    return STATUS_TABLE[kind].persistent
