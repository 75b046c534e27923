"""
Shared fixtures for the battle simulator tests.
"""

import random

import pytest

from battlesim.actions.ability import AbilityId
from battlesim.combat.context import BattleContext
from battlesim.core.constants import Archetype, ControlMode
from battlesim.entity.entity_stats import StatBlock
from battlesim.entity.main import Entity
from battlesim.items.inventory import Inventory


class FixedRandom(random.Random):
    """A random source whose draws are fully scripted."""

    def __init__(self, value: float = 0.0) -> None:
        super().__init__(0)
        self.value = value
        self.queue: list[float] = []

    def random(self) -> float:
        if self.queue:
            return self.queue.pop(0)
        return self.value

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def fixed_rng():
    """Draws 0.0 forever, and always picks the first candidate."""
    return FixedRandom(0.0)


@pytest.fixture
def make_entity():
    """Factory for entities with explicit stats."""

    def _make(
        name: str,
        hp: int = 100,
        max_hp: int | None = None,
        mp: int = 0,
        max_mp: int | None = None,
        STR: int = 10,
        DEF: int = 0,
        INT: int = 0,
        MND: int = 0,
        SPD: int = 10,
        level: int = 1,
        control: ControlMode = ControlMode.POLICY,
        archetype: Archetype = Archetype.MONSTER,
        abilities: list[AbilityId] | None = None,
        **kwargs,
    ) -> Entity:
        stats = StatBlock(
            hp=hp,
            max_hp=hp if max_hp is None else max_hp,
            mp=mp,
            max_mp=mp if max_mp is None else max_mp,
            STR=STR,
            DEF=DEF,
            INT=INT,
            MND=MND,
            SPD=SPD,
        )
        return Entity(
            name=name,
            stats=stats,
            level=level,
            control=control,
            archetype=archetype,
            abilities=abilities,
            **kwargs,
        )

    return _make


@pytest.fixture
def hero(make_entity):
    return make_entity(
        "Hero",
        hp=80,
        mp=20,
        STR=25,
        DEF=15,
        SPD=15,
        archetype=Archetype.HERO,
        abilities=[AbilityId.FIRE_SLASH, AbilityId.HEADSTRONG],
    )


@pytest.fixture
def healer(make_entity):
    return make_entity(
        "Healer",
        hp=50,
        mp=40,
        STR=8,
        DEF=10,
        MND=25,
        SPD=18,
        archetype=Archetype.HEALER,
        abilities=[
            AbilityId.HEAL,
            AbilityId.CURE_POISON,
            AbilityId.PROTECT,
            AbilityId.PRAYER,
        ],
    )


@pytest.fixture
def commander(make_entity):
    return make_entity(
        "Commander",
        hp=70,
        mp=25,
        STR=18,
        DEF=22,
        SPD=14,
        control=ControlMode.PLAYER,
        archetype=Archetype.REALIST,
        abilities=[AbilityId.OVERRIDE, AbilityId.USE_POTION, AbilityId.SCAN],
    )


@pytest.fixture
def beast(make_entity):
    return make_entity("Beast", hp=60, STR=18, DEF=0, SPD=14, exp_reward=80)


@pytest.fixture
def context(fixed_rng, hero, healer, commander, beast):
    return BattleContext(
        rng=fixed_rng,
        inventory=Inventory(),
        party=[hero, healer, commander],
        enemies=[beast],
    )
