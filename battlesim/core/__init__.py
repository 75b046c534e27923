"""
Core module for the battle simulator.

Contains the enumerations, tuning rules, error kinds, logging setup and
console helpers shared by every other part of the engine.
"""

from .config import DEFAULT_RULES, BattleRules, load_rules
from .constants import (
    AbilityCategory,
    Archetype,
    BattleOutcome,
    BattleState,
    ControlMode,
    LogKind,
    StatusKind,
    TargetKind,
)
from .errors import (
    ActionResolutionFailure,
    BattleError,
    InvalidAction,
    StuckTurnLoop,
)

__all__ = [
    # Import from config.py
    "DEFAULT_RULES",
    "BattleRules",
    "load_rules",
    # Import from constants.py
    "AbilityCategory",
    "Archetype",
    "BattleOutcome",
    "BattleState",
    "ControlMode",
    "LogKind",
    "StatusKind",
    "TargetKind",
    # Import from errors.py
    "ActionResolutionFailure",
    "BattleError",
    "InvalidAction",
    "StuckTurnLoop",
]
