"""
Demo content for the battle simulator.

Builds the demo party, the Shadow Beast encounter and the starting
inventory. Every call returns fresh objects, so a battle never shares state
with a previous one.
"""

from battlesim.actions.ability import AbilityId
from battlesim.combat.npc_ai import AggressivePolicy, SupportPolicy
from battlesim.core.constants import Archetype, ControlMode
from battlesim.entity.entity_stats import StatBlock
from battlesim.entity.main import Entity
from battlesim.items.inventory import Inventory


def _stats(hp: int, mp: int, STR: int, DEF: int, INT: int, MND: int, SPD: int) -> StatBlock:
    return StatBlock(
        hp=hp,
        max_hp=hp,
        mp=mp,
        max_mp=mp,
        STR=STR,
        DEF=DEF,
        INT=INT,
        MND=MND,
        SPD=SPD,
    )


def build_party(auto: bool = False) -> list[Entity]:
    """
    Builds the demo party, in roster order.

    Args:
        auto (bool): If True, the members normally driven by the player are
            handed to the default AI policy instead.

    Returns:
        list[Entity]: Blayde, Serapha, Leo and Eliza.

    """
    player = ControlMode.POLICY if auto else ControlMode.PLAYER

    blayde = Entity(
        name="Blayde",
        level=5,
        archetype=Archetype.HERO,
        stats=_stats(hp=80, mp=20, STR=25, DEF=15, INT=5, MND=5, SPD=15),
        abilities=[AbilityId.FIRE_SLASH, AbilityId.HEADSTRONG],
        policy=AggressivePolicy(signature=AbilityId.FIRE_SLASH),
    )
    serapha = Entity(
        name="Serapha",
        level=5,
        archetype=Archetype.HEALER,
        stats=_stats(hp=50, mp=40, STR=8, DEF=10, INT=12, MND=25, SPD=18),
        abilities=[
            AbilityId.HEAL,
            AbilityId.CURE_POISON,
            AbilityId.PROTECT,
            AbilityId.PRAYER,
        ],
        policy=SupportPolicy(buff_target=blayde),
    )
    leo = Entity(
        name="Leo",
        level=5,
        control=player,
        archetype=Archetype.REALIST,
        stats=_stats(hp=70, mp=25, STR=18, DEF=22, INT=12, MND=12, SPD=14),
        abilities=[AbilityId.OVERRIDE, AbilityId.USE_POTION],
    )
    eliza = Entity(
        name="Eliza",
        level=5,
        control=player,
        archetype=Archetype.STRATEGIST,
        stats=_stats(hp=60, mp=30, STR=14, DEF=16, INT=22, MND=20, SPD=16),
        abilities=[AbilityId.OVERRIDE, AbilityId.SCAN],
    )
    return [blayde, serapha, leo, eliza]


def build_shadow_beast() -> Entity:
    return Entity(
        name="Shadow Beast",
        level=4,
        archetype=Archetype.MONSTER,
        stats=_stats(hp=60, mp=0, STR=18, DEF=12, INT=5, MND=5, SPD=14),
        exp_reward=80,
    )


def build_enemies() -> list[Entity]:
    """Builds the demo encounter."""
    return [build_shadow_beast()]


def build_inventory() -> Inventory:
    """Builds the party inventory with the starting stock."""
    return Inventory()
