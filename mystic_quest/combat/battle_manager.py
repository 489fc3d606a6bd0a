# battle_manager.py
from pathlib import Path
from typing import Protocol

from catchery import log_debug

from mystic_quest.combatant import Combatant, create_enemy
from mystic_quest.core.constants import DEFAULT_SAVE_FILE, BattleAction, BattleState
from mystic_quest.core.error_handling import GameError, invalid_input
from mystic_quest.core.utils import cprint, crule
from mystic_quest.persistence import save_game
from mystic_quest.ui.cli_interface import PlayerInterface

FINAL_MESSAGES: dict[BattleState, str] = {
    BattleState.PLAYER_VICTORY: "[bold green]You defeated the enemy! Victory![/]",
    BattleState.PLAYER_DEFEATED: "[bold red]You have been defeated. Game over.[/]",
    BattleState.PLAYER_EXITED: "[bold yellow]Leaving the battle. Returning to the main menu.[/]",
}


class BattleInterface(Protocol):
    """Anything that can ask the player for a battle action."""

    def choose_battle_action(self) -> BattleAction: ...


class BattleManager:
    """Manages one battle between the player and a single enemy.

    Each iteration shows both combatants, asks for an action and resolves it.
    Attacks are answered by the enemy as long as it survives the hit. The
    battle ends when either side reaches zero health or when the player saves
    and leaves.
    """

    def __init__(
        self,
        player: Combatant,
        enemy: Combatant | None = None,
        ui: BattleInterface | None = None,
        save_path: Path = Path(DEFAULT_SAVE_FILE),
    ):
        """Initialize the BattleManager with its participants.

        Args:
            player (Combatant): The player character controlled by the user.
            enemy (Combatant | None): The enemy, a fresh Goblin if None.
            ui (BattleInterface | None): Where actions come from, the console if None.
            save_path (Path): The file used by the save action.

        """
        # Store the ui.
        self.ui: BattleInterface = ui if ui is not None else PlayerInterface()

        # The player is owned by the manager until the battle ends.
        self.player: Combatant | None = player

        # The opponent of the player.
        self.enemy: Combatant = enemy if enemy is not None else create_enemy()

        self.save_path: Path = save_path

        self.state: BattleState = BattleState.IN_PROGRESS

        # Number of actions that actually spent a turn.
        self.turn_number: int = 0

        # The last error reported during the battle, if any.
        self.last_error: GameError | None = None

        # A side already at zero health ends the battle before the first turn.
        self.state = self.check_outcome()

    def show_status(self) -> None:
        """Prints the stats of both combatants."""
        player = self._require_player()
        player.display_stats()
        self.enemy.display_stats()

    def apply_action(self, action: BattleAction) -> BattleState:
        """Resolves a single player action.

        Args:
            action (BattleAction): The action chosen by the player.

        Returns:
            BattleState: The state of the battle after the action.

        """
        if self.state.is_terminal:
            log_debug(
                "Ignoring action, the battle is over",
                {"action": str(action), "state": str(self.state)},
            )
            return self.state

        player = self._require_player()

        if action == BattleAction.ATTACK:
            self.resolve_attack()
        elif action == BattleAction.COLLECT_TREASURE:
            player.collect_treasure()
        elif action == BattleAction.SAVE_AND_EXIT:
            # Leave right away, even when saving failed.
            self.last_error = save_game(player, self.save_path)
            self.state = BattleState.PLAYER_EXITED
            return self.state
        else:
            self.last_error = invalid_input(
                "Invalid action. Try again.",
                {"player": player.name, "turn": self.turn_number},
            )
            return self.state

        self.turn_number += 1
        self.state = self.check_outcome()
        return self.state

    def resolve_attack(self) -> None:
        """The player hits the enemy, and a surviving enemy hits back."""
        player = self._require_player()
        player.attack(self.enemy)
        if self.enemy.is_alive():
            self.enemy.attack(player)

    def check_outcome(self) -> BattleState:
        """Returns the state implied by the current health of both sides.

        A defeated player takes precedence over a defeated enemy.
        """
        player = self._require_player()
        if not player.is_alive():
            return BattleState.PLAYER_DEFEATED
        if not self.enemy.is_alive():
            return BattleState.PLAYER_VICTORY
        return BattleState.IN_PROGRESS

    def run(self) -> BattleState:
        """Runs the battle until it reaches a terminal state.

        Returns:
            BattleState: How the battle ended.

        """
        crule(":crossed_swords:  Battle Started", style="bold green")
        while self.state == BattleState.IN_PROGRESS:
            self.show_status()
            self.apply_action(self.ui.choose_battle_action())
            cprint("")
        self.final_report()
        # The battle is over, release the player.
        self.player = None
        return self.state

    def final_report(self) -> None:
        """Prints the message matching how the battle ended."""
        message = FINAL_MESSAGES.get(self.state)
        if message:
            cprint(message)
        crule(":crossed_swords:  Battle Finished", style="bold green")

    def _require_player(self) -> Combatant:
        if self.player is None:
            raise RuntimeError("The battle has already released its player.")
        return self.player
