"""
Combatant display module for the game.

Provides display functionality for combatants, including health bars and
status lines.
"""

from typing import Any

from rich.markup import escape

from mystic_quest.core.utils import make_bar


class CombatantDisplay:
    """
    Handles display and formatting for Combatant objects.

    Attributes:
        owner (Any):
            The Combatant instance that this display is associated with.

    """

    def __init__(self, owner: Any) -> None:
        """
        Initialize the CombatantDisplay with its owner.

        Args:
            owner (Any):
                The Combatant instance that this display is associated with.

        """
        self.owner = owner

    def get_status_line(self, show_bars: bool = True) -> str:
        """
        Get a formatted status line with the name, health and, for players,
        the treasure count.

        Args:
            show_bars (bool): Whether to add a bar next to the health. Defaults to True.

        Returns:
            str: A formatted string representing the combatant's status line.

        """
        kind = self.owner.kind
        # Use dynamic name width based on name length, but cap it
        name_width = min(max(len(self.owner.name), 8), 16)
        status = (
            f"{kind.emoji} {kind.colorize(kind.display_name + ':')} "
            f"[bold]{escape(self.owner.name):<{name_width}}[/] "
        )

        hp_bar = (
            make_bar(self.owner.health, self.owner.max_health, color="green", length=8)
            if show_bars
            else ""
        )
        status += f"| [green]Health:{self.owner.health:>4}/{self.owner.max_health}[/]{hp_bar} "

        if self.owner.progress is not None:
            status += (
                f"| [yellow]Treasures:{self.owner.progress.treasures_collected:>3}[/] "
            )

        return status.rstrip()

    def get_plain_stats(self) -> str:
        """
        Get the stats as plain text, without markup.

        Returns:
            str: For example "Player: Ari, Health: 85, Treasures: 2".

        """
        text = (
            f"{self.owner.kind.display_name}: {self.owner.name}, "
            f"Health: {self.owner.health}"
        )
        if self.owner.progress is not None:
            text += f", Treasures: {self.owner.progress.treasures_collected}"
        return text
