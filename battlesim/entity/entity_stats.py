"""
Entity stats module for the battle simulator.

Holds the numeric stat block of a combatant. Current HP and MP are kept
within [0, max] by every mutation helper.
"""

from typing import Any

from pydantic import BaseModel, Field

from battlesim.core.utils import clamp


class StatBlock(BaseModel):
    """
    The stat block of a combatant.

    Attributes:
        hp (int): Current hit points.
        max_hp (int): Maximum hit points.
        mp (int): Current magic points.
        max_mp (int): Maximum magic points.
        STR (int): Strength, scales physical damage.
        DEF (int): Defense, mitigates incoming damage.
        INT (int): Intelligence.
        MND (int): Mind, scales healing magic.
        SPD (int): Speed, drives the turn order.

    """

    hp: int = Field(description="Current hit points.")
    max_hp: int = Field(ge=0, description="Maximum hit points.")
    mp: int = Field(0, description="Current magic points.")
    max_mp: int = Field(0, ge=0, description="Maximum magic points.")
    STR: int = Field(0, ge=0, description="Strength.")
    DEF: int = Field(0, ge=0, description="Defense.")
    INT: int = Field(0, ge=0, description="Intelligence.")
    MND: int = Field(0, ge=0, description="Mind.")
    SPD: int = Field(0, ge=0, description="Speed.")

    def model_post_init(self, _: Any) -> None:
        """Clamps current values into their valid ranges."""
        self.hp = clamp(self.hp, 0, self.max_hp)
        self.mp = clamp(self.mp, 0, self.max_mp)

    def adjust_hp(self, amount: int) -> int:
        """
        Adjusts HP by the given amount, clamped between 0 and max_hp.

        Args:
            amount (int): Positive to heal, negative to damage.

        Returns:
            int: The change actually applied.

        """
        before = self.hp
        self.hp = clamp(self.hp + amount, 0, self.max_hp)
        return self.hp - before

    def adjust_mp(self, amount: int) -> int:
        """Adjusts MP by the given amount, clamped between 0 and max_mp."""
        before = self.mp
        self.mp = clamp(self.mp + amount, 0, self.max_mp)
        return self.mp - before

    def restore_all(self) -> None:
        """Fully restores HP and MP."""
        self.hp = self.max_hp
        self.mp = self.max_mp
