"""
Ability descriptors.

An ability is static data plus a pure effect function. The effect function
never mutates the combatants: it describes what should happen through an
`EffectOutcome`, which the action resolver then applies.
"""

from typing import Any, Callable

from pydantic import BaseModel, Field

from battlesim.core.constants import AbilityCategory, NiceEnum, StatusKind, TargetKind


class AbilityId(NiceEnum):
    """Identifiers of every ability in the catalog."""

    FIRE_SLASH = "FIRE_SLASH"
    HEADSTRONG = "HEADSTRONG"
    HEAL = "HEAL"
    CURE_POISON = "CURE_POISON"
    PROTECT = "PROTECT"
    PRAYER = "PRAYER"
    OVERRIDE = "OVERRIDE"
    USE_POTION = "USE_POTION"
    SCAN = "SCAN"


class EffectOutcome(BaseModel):
    """
    Description of what an ability does to its target.

    The message is a template: the resolver fills `{user}`, `{target}`,
    `{damage}` and `{heal}` with the names and the amounts actually applied.
    """

    message: str = Field(
        description="Message template logged once the outcome is applied.",
    )
    damage: int = Field(
        0,
        ge=0,
        description="Raw damage, mitigated by the target's defenses.",
    )
    heal: int = Field(
        0,
        ge=0,
        description="HP to restore to the target.",
    )
    add_statuses: dict[StatusKind, int] = Field(
        default_factory=dict,
        description="Statuses to apply to the target, with their duration.",
    )
    remove_statuses: list[StatusKind] = Field(
        default_factory=list,
        description="Statuses to remove from the target.",
    )
    scan: bool = Field(
        False,
        description="If True, the target is marked as scanned.",
    )
    consume_item: str | None = Field(
        None,
        description="Inventory item consumed before the outcome is applied.",
    )
    failure_message: str | None = Field(
        None,
        description="Message logged instead when the item cannot be consumed.",
    )


EffectFunction = Callable[[Any, Any, Any], EffectOutcome]


class Ability(BaseModel):
    """Static description of an ability."""

    id: AbilityId = Field(
        description="The identifier of the ability.",
    )
    name: str = Field(
        description="The display name of the ability.",
    )
    cost: int = Field(
        0,
        ge=0,
        description="The MP cost of the ability.",
    )
    category: AbilityCategory = Field(
        description="The category of the ability.",
    )
    target: TargetKind = Field(
        TargetKind.SELF,
        description="Who the ability may be aimed at.",
    )
    description: str = Field(
        "",
        description="A brief description of the ability.",
    )
    effect: EffectFunction | None = Field(
        None,
        exclude=True,
        description="Pure effect function, None for passive abilities.",
    )

    @property
    def is_passive(self) -> bool:
        return self.category == AbilityCategory.PASSIVE

    @property
    def menu_label(self) -> str:
        if self.cost:
            return f"{self.category.emoji} {self.name} ({self.cost} MP)"
        return f"{self.category.emoji} {self.name}"

    def __str__(self) -> str:
        return self.name
