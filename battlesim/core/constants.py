"""
Constants and enumerations for the battle simulator.

Defines the closed enumerations used throughout the engine: control modes,
archetypes, status kinds, ability categories and targets, battle states and
outcomes, and the kinds of entries stored in the battle log.
"""

from enum import Enum


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()


class ControlMode(NiceEnum):
    """Defines where a combatant's decisions come from."""

    PLAYER = "PLAYER"
    POLICY = "POLICY"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this control mode."""
        return {
            ControlMode.PLAYER: "👤",
            ControlMode.POLICY: "🤖",
        }.get(self, "❔")


class Archetype(NiceEnum):
    """Defines the growth class of a combatant."""

    HERO = "HERO"
    HEALER = "HEALER"
    REALIST = "REALIST"
    STRATEGIST = "STRATEGIST"
    MONSTER = "MONSTER"

    @property
    def color(self) -> str:
        """Returns the color string associated with this archetype."""
        return {
            Archetype.HERO: "bold red",
            Archetype.HEALER: "bold green",
            Archetype.REALIST: "bold blue",
            Archetype.STRATEGIST: "bold magenta",
            Archetype.MONSTER: "bold white",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies archetype color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class StatusKind(NiceEnum):
    """Defines the status conditions a combatant can carry."""

    POISON = "POISON"
    SLEEP = "SLEEP"
    PARALYSIS = "PARALYSIS"
    PROTECT = "PROTECT"
    HASTE = "HASTE"
    REGEN = "REGEN"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this status."""
        return {
            StatusKind.POISON: "☠️",
            StatusKind.SLEEP: "💤",
            StatusKind.PARALYSIS: "⚡",
            StatusKind.PROTECT: "🛡️",
            StatusKind.HASTE: "💨",
            StatusKind.REGEN: "💚",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this status."""
        return {
            StatusKind.POISON: "bold magenta",
            StatusKind.SLEEP: "bold blue",
            StatusKind.PARALYSIS: "bold yellow",
            StatusKind.PROTECT: "bold green",
            StatusKind.HASTE: "bold red",
            StatusKind.REGEN: "bold cyan",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.name)

    def colorize(self, message: str) -> str:
        """Applies status color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class AbilityCategory(NiceEnum):
    """Defines the category of an ability."""

    PHYSICAL = "PHYSICAL"
    MAGIC = "MAGIC"
    SPECIAL = "SPECIAL"
    ITEM = "ITEM"
    PASSIVE = "PASSIVE"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this ability category."""
        return {
            AbilityCategory.PHYSICAL: "⚔️",
            AbilityCategory.MAGIC: "✨",
            AbilityCategory.SPECIAL: "🎯",
            AbilityCategory.ITEM: "🧪",
            AbilityCategory.PASSIVE: "🔒",
        }.get(self, "❔")


class TargetKind(NiceEnum):
    """Defines who an ability may be aimed at."""

    ENEMY = "ENEMY"
    ALLY = "ALLY"
    SELF = "SELF"


class BattleState(NiceEnum):
    """States of the battle controller."""

    TURN_START = "TURN_START"
    SELECTING_ACTION = "SELECTING_ACTION"
    EXECUTING = "EXECUTING"
    BATTLE_END = "BATTLE_END"


class BattleOutcome(NiceEnum):
    """Terminal result of a battle."""

    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"

    @property
    def color(self) -> str:
        return "bold green" if self == BattleOutcome.VICTORY else "bold red"


class LogKind(NiceEnum):
    """Kind of an entry stored in the battle log."""

    INFO = "INFO"
    ERROR = "ERROR"
