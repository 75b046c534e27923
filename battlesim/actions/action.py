"""
Battle actions.

An action is the decision a combatant makes for its turn, produced either
by a human selection or by an AI policy. Actions are closed tagged variants
discriminated by their `kind`.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field

from .ability import AbilityId


class BaseAction(BaseModel):
    """Common base of all actions."""

    def describe(self) -> str:
        return self.__class__.__name__


class AttackAction(BaseAction):
    """A basic physical attack."""

    kind: Literal["attack"] = "attack"
    target: Any = Field(description="The entity being attacked.")

    def describe(self) -> str:
        return f"Attack {self.target.name}"


class DefendAction(BaseAction):
    """Raise guard for the turn."""

    kind: Literal["defend"] = "defend"

    def describe(self) -> str:
        return "Defend"


class AbilityAction(BaseAction):
    """Use an ability from the catalog."""

    kind: Literal["ability"] = "ability"
    ability_id: AbilityId = Field(description="The ability to use.")
    target: Any = Field(description="The entity the ability is aimed at.")

    def describe(self) -> str:
        return f"{self.ability_id.display_name} on {self.target.name}"


class PrayAction(BaseAction):
    """Waste the turn praying. Only chosen by policies."""

    kind: Literal["pray"] = "pray"

    def describe(self) -> str:
        return "Pray"


class OverrideAction(BaseAction):
    """Queue the next action of a policy-controlled ally."""

    kind: Literal["override"] = "override"
    target: Any = Field(description="The ally whose next action is dictated.")
    queued_action: Any = Field(description="The action the ally will take.")

    def describe(self) -> str:
        return f"Override {self.target.name}: {self.queued_action.describe()}"


Action = Annotated[
    Union[AttackAction, DefendAction, AbilityAction, PrayAction, OverrideAction],
    Field(discriminator="kind"),
]


def attack(target: Any) -> AttackAction:
    return AttackAction(target=target)


def defend() -> DefendAction:
    return DefendAction()


def use_ability(ability_id: AbilityId, target: Any) -> AbilityAction:
    return AbilityAction(ability_id=ability_id, target=target)


def pray() -> PrayAction:
    return PrayAction()


def override(target: Any, queued_action: BaseAction) -> OverrideAction:
    return OverrideAction(target=target, queued_action=queued_action)
