"""
Entity display module for the battle simulator.

Provides the rich-markup status line shown in turn orders and battle
reports.
"""

from typing import Any

from battlesim.core.utils import make_bar


class EntityDisplay:
    """
    Handles display and formatting for Entity objects.

    Attributes:
        owner (Any):
            The Entity instance that this display is associated with.

    """

    def __init__(self, owner: Any) -> None:
        self.owner = owner

    def get_status_line(
        self,
        show_numbers: bool = False,
        show_bars: bool = True,
    ) -> str:
        """
        Get a formatted status line with health, magic and statuses.

        Args:
            show_numbers (bool): Whether to show numerical values. Defaults to False.
            show_bars (bool): Whether to show bar representations. Defaults to True.

        Returns:
            str: A formatted string representing the entity's status line.

        """
        owner = self.owner
        stats = owner.stats

        name_width = min(max(len(owner.name), 8), 16)
        status = f"{owner.control.emoji} [bold]{owner.name:<{name_width}}[/] "
        status += f"[dim]Lv{owner.level}[/] "

        if show_bars:
            status += make_bar(stats.hp, stats.max_hp, length=8, color="green") + " "
        if show_numbers:
            status += f"[green]{stats.hp:>3}/{stats.max_hp:<3}[/] "
            if stats.max_mp > 0:
                status += f"[blue]{stats.mp:>3}/{stats.max_mp:<3}[/] "

        if owner.is_dead():
            status += "[bold red]KO[/] "
        elif owner.is_defending:
            status += "🛡 "

        statuses = ", ".join(str(instance) for instance in owner.statuses.values())
        if statuses:
            status += f"[{statuses}]"
        return status.rstrip()
