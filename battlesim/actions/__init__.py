"""
Action and ability catalog for the battle simulator.
"""

from .ability import Ability, AbilityId, EffectOutcome
from .action import (
    AbilityAction,
    Action,
    AttackAction,
    BaseAction,
    DefendAction,
    OverrideAction,
    PrayAction,
    attack,
    defend,
    override,
    pray,
    use_ability,
)
from .catalog import ABILITIES, STUBBORN_PASSIVES, get_ability

__all__ = [
    # Import from ability.py
    "Ability",
    "AbilityId",
    "EffectOutcome",
    # Import from action.py
    "AbilityAction",
    "Action",
    "AttackAction",
    "BaseAction",
    "DefendAction",
    "OverrideAction",
    "PrayAction",
    "attack",
    "defend",
    "override",
    "pray",
    "use_ability",
    # Import from catalog.py
    "ABILITIES",
    "STUBBORN_PASSIVES",
    "get_ability",
]
