"""
Top-level game controller.

Shows the opening screen, runs the main menu and starts new or loaded battles.
"""

from typing import Protocol

from mystic_quest.combat.battle_manager import BattleManager
from mystic_quest.combatant import Combatant, create_enemy, create_player
from mystic_quest.core.config import GameConfig
from mystic_quest.core.constants import GAME_TITLE, BattleAction, BattleState, MenuChoice
from mystic_quest.core.error_handling import GameError, invalid_input
from mystic_quest.core.utils import cprint, crule
from mystic_quest.persistence import combatant_from_record, load_game
from mystic_quest.ui.cli_interface import PlayerInterface


class GameInterface(Protocol):
    """Everything the game asks the user."""

    def choose_menu_option(self) -> MenuChoice: ...

    def choose_battle_action(self) -> BattleAction: ...

    def ask_player_name(self) -> str: ...


class Game:
    """Runs the main menu until the user exits."""

    def __init__(
        self,
        config: GameConfig | None = None,
        ui: GameInterface | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.ui: GameInterface = ui if ui is not None else PlayerInterface()
        # How the most recent battle ended.
        self.last_outcome: BattleState | None = None
        # The most recent error reported by the menu or by a load.
        self.last_error: GameError | None = None

    def display_opening_screen(self) -> None:
        """Shows the title and the instructions."""
        crule(f"Welcome to {GAME_TITLE}!", style="bold green")
        cprint(
            "[bold]Instructions:[/]\n"
            "1. Navigate through the forest.\n"
            "2. Solve puzzles, battle enemies, and collect treasures.\n"
            "3. Escape the forest to win.\n",
            style="bold blue",
        )

    def run(self) -> None:
        """Shows the main menu until the user chooses to exit."""
        try:
            while True:
                choice = self.ui.choose_menu_option()
                if choice == MenuChoice.START_GAME:
                    self.start_game()
                elif choice == MenuChoice.LOAD_GAME:
                    self.load_game()
                elif choice == MenuChoice.EXIT:
                    break
                else:
                    self.last_error = invalid_input(
                        "Invalid choice. Please try again.",
                        {"context": "main_menu"},
                    )
        except (EOFError, KeyboardInterrupt):
            cprint("")
        cprint(f"[bold green]Thank you for playing {GAME_TITLE}![/]")

    def start_game(self) -> BattleState:
        """Asks for a name and starts a battle with a fresh player."""
        player = create_player(self.ui.ask_player_name())
        cprint("Starting new game...")
        return self.play(player)

    def load_game(self) -> BattleState | None:
        """
        Loads the saved player and starts a battle with it.

        Returns:
            BattleState | None: How the battle ended, None if nothing could be loaded.

        """
        result = load_game(self.config.save_path)
        if isinstance(result, GameError):
            self.last_error = result
            return None
        player = combatant_from_record(result)
        cprint("[green]Game state loaded successfully.[/]")
        return self.play(player)

    def play(self, player: Combatant) -> BattleState:
        """Runs one battle against a fresh enemy."""
        manager = BattleManager(
            player,
            enemy=create_enemy(self.config.enemy_name),
            ui=self.ui,
            save_path=self.config.save_path,
        )
        self.last_outcome = manager.run()
        return self.last_outcome
