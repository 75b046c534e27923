"""
AI decision policies.

A policy is assigned to each policy-controlled entity when it is created,
and turns the current battle situation into one action. Every random draw
goes through the context's random source.
"""

from abc import ABC, abstractmethod
from typing import Any

from battlesim.actions.ability import AbilityId
from battlesim.actions.action import BaseAction, attack, defend, pray, use_ability

from .context import BattleContext


class Policy(ABC):
    """Base class of all AI decision policies."""

    name: str = "policy"

    @abstractmethod
    def decide(
        self,
        actor: Any,
        allies: list[Any],
        enemies: list[Any],
        context: BattleContext,
    ) -> BaseAction:
        """
        Chooses the action of `actor` for this turn.

        Args:
            actor (Entity): The entity about to act.
            allies (list[Entity]): Living members of the actor's side, in
                roster order, the actor included.
            enemies (list[Entity]): Living members of the opposing side.
            context (BattleContext): The battle context.

        Returns:
            BaseAction: The chosen action.

        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class HostilePolicy(Policy):
    """Attacks a random living opponent, or defends if there is none."""

    name = "hostile"

    def decide(
        self,
        actor: Any,
        allies: list[Any],
        enemies: list[Any],
        context: BattleContext,
    ) -> BaseAction:
        living = [e for e in enemies if e.is_alive()]
        if not living:
            return defend()
        return attack(context.rng.choice(living))


class AggressivePolicy(Policy):
    """
    Spends MP on a signature offensive ability whenever it can, and falls
    back to basic attacks. Never heals, never saves MP.
    """

    name = "aggressive"

    def __init__(self, signature: AbilityId = AbilityId.FIRE_SLASH) -> None:
        self.signature = signature

    def decide(
        self,
        actor: Any,
        allies: list[Any],
        enemies: list[Any],
        context: BattleContext,
    ) -> BaseAction:
        living = [e for e in enemies if e.is_alive()]
        if not living:
            return defend()
        target = context.rng.choice(living)
        if actor.can_afford(self.signature):
            return use_ability(self.signature, target)
        return attack(target)

    def __repr__(self) -> str:
        return f"AggressivePolicy(signature={self.signature})"


class SupportPolicy(Policy):
    """
    A well-meaning but inefficient healer.

    While defending it may waste the turn in prayer. Otherwise it heals the
    first injured ally in roster order, however small the wound, then keeps
    recasting its buff on the designated ally whether or not the buff is
    already active, and defends when nothing else applies.
    """

    name = "support"

    def __init__(
        self,
        heal: AbilityId = AbilityId.HEAL,
        buff: AbilityId = AbilityId.PROTECT,
        buff_target: Any = None,
    ) -> None:
        self.heal = heal
        self.buff = buff
        self.buff_target = buff_target

    def decide(
        self,
        actor: Any,
        allies: list[Any],
        enemies: list[Any],
        context: BattleContext,
    ) -> BaseAction:
        if actor.is_defending and context.rng.random() < context.rules.prayer_chance:
            return pray()

        for ally in allies:
            if ally.is_alive() and ally.stats.hp < ally.stats.max_hp:
                if actor.can_afford(self.heal):
                    return use_ability(self.heal, ally)
                break

        buff_target = self.buff_target
        if (
            buff_target is not None
            and buff_target.is_alive()
            and actor.can_afford(self.buff)
        ):
            return use_ability(self.buff, buff_target)

        return defend()

    def __repr__(self) -> str:
        target = self.buff_target.name if self.buff_target is not None else None
        return f"SupportPolicy(heal={self.heal}, buff={self.buff}, buff_target={target!r})"


DEFAULT_POLICY = HostilePolicy()


def policy_for(entity: Any) -> Policy:
    """Returns the policy assigned to the entity, or the hostile default."""
    policy = entity.policy
    return policy if isinstance(policy, Policy) else DEFAULT_POLICY
