from pydantic import BaseModel, Field

from battlesim.core.constants import Archetype


class StatGrowth(BaseModel):
    """
    Per-level stat increases granted by an archetype.
    """

    max_hp: int = Field(0, description="Max HP gained per level.")
    max_mp: int = Field(0, description="Max MP gained per level.")
    STR: int = Field(0, description="Strength gained per level.")
    DEF: int = Field(0, description="Defense gained per level.")
    INT: int = Field(0, description="Intelligence gained per level.")
    MND: int = Field(0, description="Mind gained per level.")
    SPD: int = Field(0, description="Speed gained per level.")

    def apply(self, stats) -> None:
        """
        Adds this growth to a stat block.

        Args:
            stats (StatBlock): The stat block to grow.

        """
        stats.max_hp += self.max_hp
        stats.max_mp += self.max_mp
        stats.STR += self.STR
        stats.DEF += self.DEF
        stats.INT += self.INT
        stats.MND += self.MND
        stats.SPD += self.SPD


GROWTH_TABLE: dict[Archetype, StatGrowth] = {
    Archetype.HERO: StatGrowth(max_hp=10, max_mp=2, STR=5, DEF=3, INT=1, MND=1, SPD=2),
    Archetype.HEALER: StatGrowth(max_hp=5, max_mp=8, STR=1, DEF=2, INT=2, MND=5, SPD=3),
    Archetype.REALIST: StatGrowth(max_hp=8, max_mp=3, STR=3, DEF=5, INT=2, MND=2, SPD=2),
    Archetype.STRATEGIST: StatGrowth(max_hp=6, max_mp=5, STR=2, DEF=3, INT=5, MND=4, SPD=3),
    Archetype.MONSTER: StatGrowth(),
}


def get_growth(archetype: Archetype) -> StatGrowth:
    """Returns the per-level growth of the given archetype."""
    return GROWTH_TABLE.get(archetype, StatGrowth())
