"""
Entity system for the battle simulator.

This module handles the combatant record: stats, archetype growth, display
and the persisted attribute set.
"""

from .archetype import GROWTH_TABLE, StatGrowth, get_growth
from .entity_display import EntityDisplay
from .entity_serialization import (
    entity_from_dict,
    entity_to_dict,
    load_entities,
    save_entities,
)
from .entity_stats import StatBlock
from .main import DEFAULT_EXP_REWARD, EXP_PER_LEVEL, Entity

__all__ = [
    # Import from archetype.py
    "GROWTH_TABLE",
    "StatGrowth",
    "get_growth",
    # Import from entity_display.py
    "EntityDisplay",
    # Import from entity_serialization.py
    "entity_from_dict",
    "entity_to_dict",
    "load_entities",
    "save_entities",
    # Import from entity_stats.py
    "StatBlock",
    # Import from main.py
    "DEFAULT_EXP_REWARD",
    "EXP_PER_LEVEL",
    "Entity",
]
