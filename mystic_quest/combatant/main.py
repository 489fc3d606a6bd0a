"""
Combatant module for the game.

Defines the Combatant class shared by the player and the enemy. The kind of a
combatant selects its starting health and the damage its attacks deal; players
additionally carry a PlayerProgress that counts collected treasures.
"""

from catchery import log_debug, log_warning
from rich.markup import escape

from mystic_quest.core.constants import DEFAULT_ENEMY_NAME, CombatantKind
from mystic_quest.core.utils import cprint

from .combatant_display import CombatantDisplay
from .combatant_progress import PlayerProgress


class Combatant:
    """
    Represents a participant of a battle.

    Attributes:
        kind (CombatantKind):
            Whether the combatant is the player or the enemy.
        health (int):
            The current health, never below zero.
        progress (PlayerProgress | None):
            The treasure counter, only present for players.
        display (CombatantDisplay):
            The display module of the combatant.

    """

    kind: CombatantKind
    health: int
    progress: PlayerProgress | None
    display: CombatantDisplay

    def __init__(
        self,
        kind: CombatantKind,
        name: str,
        health: int | None = None,
    ) -> None:
        self.kind = kind
        self._name = name
        self.health = kind.max_health if health is None else max(0, health)
        self.progress = PlayerProgress() if kind == CombatantKind.PLAYER else None
        self.display = CombatantDisplay(owner=self)

    def __repr__(self) -> str:
        return f"Combatant(kind={self.kind}, name={self._name!r}, health={self.health})"

    # ============================================================================
    # PROPERTIES
    # ============================================================================

    @property
    def name(self) -> str:
        """The name of the combatant, fixed at creation."""
        return self._name

    @property
    def max_health(self) -> int:
        """The starting health for this kind of combatant."""
        return self.kind.max_health

    @property
    def attack_damage(self) -> int:
        """The damage dealt by each attack of this combatant."""
        return self.kind.attack_damage

    @property
    def is_player(self) -> bool:
        return self.kind == CombatantKind.PLAYER

    @property
    def treasures_collected(self) -> int:
        """The number of treasures collected, always 0 for enemies."""
        return self.progress.treasures_collected if self.progress else 0

    # ============================================================================
    # HEALTH
    # ============================================================================

    def take_damage(self, amount: int) -> int:
        """
        Subtracts damage from the health, never going below zero.

        Args:
            amount (int): The damage to apply. Negative amounts are treated as zero.

        Returns:
            int: The health actually lost.

        """
        if amount < 0:
            log_warning(
                f"{self.name} cannot take negative damage, ignoring it",
                {"combatant": self.name, "amount": amount},
            )
            amount = 0
        previous = self.health
        self.health = max(0, self.health - amount)
        return previous - self.health

    def is_alive(self) -> bool:
        """
        Checks if the combatant is still standing.

        Returns:
            bool: True if health is above zero, False otherwise.

        """
        return self.health > 0

    # ============================================================================
    # ACTIONS
    # ============================================================================

    def attack(self, target: "Combatant") -> int:
        """
        Hits the target for this combatant's fixed damage.

        Args:
            target (Combatant): The combatant being attacked.

        Returns:
            int: The health the target actually lost.

        """
        cprint(
            f"{self.kind.colorize(escape(self.name))} attacks {self.kind.opponent_label}!"
        )
        lost = target.take_damage(self.attack_damage)
        log_debug(
            f"{self.name} hit {target.name}",
            {"damage": self.attack_damage, "lost": lost, "target_health": target.health},
        )
        return lost

    def collect_treasure(self) -> int:
        """
        Collects one treasure.

        Returns:
            int: The new number of treasures collected.

        Raises:
            ValueError: If the combatant is not a player.

        """
        if self.progress is None:
            raise ValueError(f"{self.name} is not a player and cannot collect treasures.")
        total = self.progress.collect_treasure()
        cprint(f"[yellow]Collected a treasure! Total: {total}[/]")
        return total

    # ============================================================================
    # DISPLAY
    # ============================================================================

    def get_status_line(self, show_bars: bool = True) -> str:
        return self.display.get_status_line(show_bars=show_bars)

    def display_stats(self) -> None:
        """Prints the name, health and, for players, the treasure count."""
        cprint(self.get_status_line())


def create_player(name: str) -> Combatant:
    """
    Creates a full-health player.

    Args:
        name (str): The name chosen by the user.

    Returns:
        Combatant: The new player.

    """
    return Combatant(kind=CombatantKind.PLAYER, name=name)


def create_enemy(name: str = DEFAULT_ENEMY_NAME) -> Combatant:
    """Creates a full-health enemy, a Goblin unless told otherwise."""
    return Combatant(kind=CombatantKind.ENEMY, name=name)
