"""
Status effect system for the battle simulator.

Contains the status descriptors, the per-combatant status instances and the
engine that ticks them at the start of every turn.
"""

from .status_effect import STATUS_TABLE, StatusDescriptor, StatusInstance, is_persistent
from .status_engine import (
    add_status,
    can_act,
    clear_non_persistent,
    has_status,
    remove_status,
    tick,
)

__all__ = [
    # Import from status_effect.py
    "STATUS_TABLE",
    "StatusDescriptor",
    "StatusInstance",
    "is_persistent",
    # Import from status_engine.py
    "add_status",
    "can_act",
    "clear_non_persistent",
    "has_status",
    "remove_status",
    "tick",
]
