"""
Tuning rules for the battle engine.

Every numeric constant used by the status engine, the scheduler, the
resolver, the policies and the controller lives in `BattleRules`, so a demo
can be rebalanced from a JSON file without touching the code.
"""

import json
from pathlib import Path

from pydantic import BaseModel, Field


class BattleRules(BaseModel):
    """Numeric rules of a battle."""

    # Status effects.
    poison_ratio: float = Field(
        0.05,
        description="Fraction of max HP lost to POISON on every tick.",
    )
    regen_ratio: float = Field(
        0.05,
        description="Fraction of max HP restored by REGEN on every tick.",
    )
    default_status_duration: int = Field(
        3,
        ge=1,
        description="Duration used when a status is added without one.",
    )
    paralysis_act_chance: float = Field(
        0.5,
        ge=0.0,
        le=1.0,
        description="Chance that a paralyzed combatant manages to act.",
    )

    # Turn order.
    haste_multiplier: float = Field(
        1.5,
        description="Speed multiplier granted by HASTE at turn-order time.",
    )

    # Damage.
    attack_str_factor: float = Field(
        0.8,
        description="STR multiplier of a basic attack.",
    )
    attack_random_bonus: float = Field(
        10.0,
        description="Exclusive upper bound of the uniform attack bonus.",
    )
    protect_divisor: float = Field(
        1.5,
        gt=0.0,
        description="Divisor applied to raw damage against PROTECT.",
    )

    # Policies.
    stubbornness_chance: float = Field(
        0.1,
        ge=0.0,
        le=1.0,
        description="Chance that a stubborn combatant ignores an override.",
    )
    prayer_chance: float = Field(
        0.15,
        ge=0.0,
        le=1.0,
        description="Chance that a defending healer wastes its turn praying.",
    )

    # Controller.
    log_capacity: int = Field(
        10,
        ge=1,
        description="Number of entries kept by the battle log.",
    )
    presentation_delay: float = Field(
        1.5,
        ge=0.0,
        description="Seconds to wait after an action is resolved.",
    )
    end_delay: float = Field(
        3.0,
        ge=0.0,
        description="Seconds to wait before the terminal result is reported.",
    )
    scan_guard_factor: int = Field(
        2,
        ge=1,
        description="Turn scan iterations allowed per combatant in the order.",
    )


DEFAULT_RULES = BattleRules()


def load_rules(path: Path) -> BattleRules:
    """
    Loads battle rules from a JSON file, falling back to defaults for any
    missing key.

    Args:
        path (Path): The JSON file to read.

    Returns:
        BattleRules: The validated rules.

    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return BattleRules.model_validate(data)
