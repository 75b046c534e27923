"""
Entity module for the battle simulator.

Defines the mutable combatant record: stats, statuses, abilities, control
mode and the transient per-battle flags. Provides the clamped HP/MP helpers
used by the status engine and the action resolver, and the experience and
level progression applied at the end of a victorious battle.
"""

from typing import Any

from battlesim.actions.ability import AbilityId
from battlesim.actions.catalog import get_ability
from battlesim.core.constants import Archetype, ControlMode, StatusKind
from battlesim.core.logging import log_debug
from battlesim.effects.status_effect import StatusInstance

from .archetype import get_growth
from .entity_display import EntityDisplay
from .entity_stats import StatBlock

# Experience needed per current level to reach the next one.
EXP_PER_LEVEL = 100

# Experience granted by a defeated enemy without an explicit reward.
DEFAULT_EXP_REWARD = 50


class Entity:
    """
    Represents a combatant, either a party member or an enemy.

    Attributes:
        name (str):
            The name of the combatant, also its identity key.
        level (int):
            The current level.
        control (ControlMode):
            Whether actions come from a human or from an AI policy.
        archetype (Archetype):
            The growth class of the combatant.
        exp (int):
            Experience accumulated towards the next level.
        exp_reward (int):
            Experience granted to the party when this combatant is defeated.
        stats (StatBlock):
            The numeric stats.
        statuses (dict[StatusKind, StatusInstance]):
            Active statuses, at most one per kind.
        abilities (list[AbilityId]):
            Known abilities.
        equipment (dict[str, str | None]):
            Equipped item per slot.
        policy (Policy | None):
            The AI policy used when the combatant is policy-controlled.
        is_defending (bool):
            Set by the defend action until the combatant's next turn.
        pending_override (Action | None):
            Action queued by an ally's override, consumed on the next turn.
        scanned (bool):
            Whether the combatant's stats have been revealed.

    """

    def __init__(
        self,
        name: str,
        stats: StatBlock,
        level: int = 1,
        control: ControlMode = ControlMode.POLICY,
        archetype: Archetype = Archetype.MONSTER,
        exp: int = 0,
        exp_reward: int = DEFAULT_EXP_REWARD,
        abilities: list[AbilityId] | None = None,
        equipment: dict[str, str | None] | None = None,
        policy: Any = None,
    ) -> None:
        self.name = name
        self.level = level
        self.control = control
        self.archetype = archetype
        self.exp = exp
        self.exp_reward = exp_reward
        self.stats = stats
        self.statuses: dict[StatusKind, StatusInstance] = {}
        self.abilities: list[AbilityId] = list(abilities or [])
        self.equipment: dict[str, str | None] = {
            "weapon": None,
            "armor": None,
            "accessory": None,
        }
        self.equipment.update(equipment or {})
        self.policy = policy

        # Transient flags.
        self.is_defending: bool = False
        self.pending_override: Any = None
        self.scanned: bool = False

        self.exp_to_next: int = self.calculate_exp_to_next()
        self.display = EntityDisplay(owner=self)

    def __repr__(self) -> str:
        return (
            f"Entity(name={self.name!r}, level={self.level}, "
            f"hp={self.stats.hp}/{self.stats.max_hp})"
        )

    # ============================================================================
    # STATE QUERIES
    # ============================================================================

    @property
    def colored_name(self) -> str:
        return self.archetype.colorize(self.name)

    @property
    def is_player_controlled(self) -> bool:
        return self.control == ControlMode.PLAYER

    def is_alive(self) -> bool:
        return self.stats.hp > 0

    def is_dead(self) -> bool:
        return self.stats.hp <= 0

    def knows(self, ability_id: AbilityId) -> bool:
        return ability_id in self.abilities

    def can_afford(self, ability_id: AbilityId) -> bool:
        """
        Checks whether the entity knows the ability and has enough MP for it.

        Args:
            ability_id (AbilityId): The ability to check.

        Returns:
            bool: True if the ability can be paid for right now.

        """
        ability = get_ability(ability_id)
        if ability is None or not self.knows(ability_id):
            return False
        return self.stats.mp >= ability.cost

    def available_abilities(self) -> list[AbilityId]:
        """Returns the known, usable and affordable abilities."""
        result: list[AbilityId] = []
        for ability_id in self.abilities:
            ability = get_ability(ability_id)
            if ability is None or ability.is_passive:
                continue
            if ability.cost > self.stats.mp:
                continue
            result.append(ability_id)
        return result

    # ============================================================================
    # CLAMPED MUTATIONS
    # ============================================================================

    def take_hp(self, amount: int) -> int:
        """
        Removes HP, never going below zero.

        Returns:
            int: The HP actually lost.

        """
        return -self.stats.adjust_hp(-max(0, amount))

    def restore_hp(self, amount: int) -> int:
        """
        Restores HP, never going above max HP.

        Returns:
            int: The HP actually restored.

        """
        return self.stats.adjust_hp(max(0, amount))

    def spend_mp(self, amount: int) -> int:
        """Removes MP, never going below zero. Returns the MP spent."""
        return -self.stats.adjust_mp(-max(0, amount))

    def restore_mp(self, amount: int) -> int:
        """Restores MP, never going above max MP. Returns the MP restored."""
        return self.stats.adjust_mp(max(0, amount))

    def clear_transient_flags(self) -> None:
        """Resets the per-battle flags."""
        self.is_defending = False
        self.pending_override = None

    # ============================================================================
    # PROGRESSION
    # ============================================================================

    def calculate_exp_to_next(self) -> int:
        return self.level * EXP_PER_LEVEL

    def gain_exp(self, amount: int) -> list[str]:
        """
        Adds experience and levels up as many times as it allows.

        Args:
            amount (int): The experience gained.

        Returns:
            list[str]: One message per level gained.

        """
        self.exp += max(0, amount)
        messages: list[str] = []
        while self.exp >= self.exp_to_next:
            self.exp -= self.exp_to_next
            self.level_up()
            messages.append(f"{self.name} reached Level {self.level}!")
        return messages

    def level_up(self) -> None:
        """
        Increases the level by one, applies the archetype growth and fully
        restores HP and MP.
        """
        self.level += 1
        get_growth(self.archetype).apply(self.stats)
        self.stats.restore_all()
        self.exp_to_next = self.calculate_exp_to_next()
        log_debug(
            f"{self.name} levelled up",
            {"level": self.level, "archetype": self.archetype},
        )

    # ============================================================================
    # DISPLAY
    # ============================================================================

    def get_status_line(
        self,
        show_numbers: bool = False,
        show_bars: bool = True,
    ) -> str:
        """Returns a formatted status line, see `EntityDisplay`."""
        return self.display.get_status_line(
            show_numbers=show_numbers,
            show_bars=show_bars,
        )
