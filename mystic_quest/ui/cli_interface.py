"""
User interface module for the game.

Provides console-based menus for the top level and for battles, rendered as
rich tables and read through a prompt_toolkit session.
"""

from prompt_toolkit import ANSI, PromptSession
from rich.table import Table

from mystic_quest.core.constants import BattleAction, MenuChoice
from mystic_quest.core.utils import ccapture

MENU_ENTRIES: dict[MenuChoice, str] = {
    MenuChoice.START_GAME: "Start Game",
    MenuChoice.LOAD_GAME: "Load Game",
    MenuChoice.EXIT: "Exit",
}

BATTLE_ENTRIES: dict[BattleAction, str] = {
    BattleAction.ATTACK: "Attack",
    BattleAction.COLLECT_TREASURE: "Collect Treasure",
    BattleAction.SAVE_AND_EXIT: "Save and Exit",
}


class PlayerInterface:
    """
    Command-line interface for player interactions.

    Shows the available entries as a table and reads one answer per call.
    Answers that do not match an entry come back as the INVALID selector, so
    the caller decides how to report them.
    """

    def __init__(self) -> None:
        """Initialize the PlayerInterface; the prompt session is created on first use."""
        self._session: PromptSession | None = None

    @property
    def session(self) -> PromptSession:
        # One session keeps history across prompts.
        if self._session is None:
            self._session = PromptSession()
        return self._session

    def prompt(self, message: str) -> str:
        """
        Prompt the user and return what was typed.

        Raises:
            EOFError: If the input stream is closed.
            KeyboardInterrupt: If the user presses Ctrl-C.

        """
        return self.session.prompt(ANSI(message))

    def choose_menu_option(self) -> MenuChoice:
        """Show the top-level menu and return the user's choice."""
        table = self._create_table("Main Menu", MENU_ENTRIES)
        answer = self.prompt("\n" + ccapture(table) + "\nChoose an option: ")
        selector = self.get_number_choice(answer)
        if selector is None:
            return MenuChoice.INVALID
        return MenuChoice.from_selector(selector)

    def choose_battle_action(self) -> BattleAction:
        """Show the battle menu and return the chosen action."""
        table = self._create_table("Choose an action", BATTLE_ENTRIES)
        answer = self.prompt("\n" + ccapture(table) + "\nAction > ")
        selector = self.get_number_choice(answer)
        if selector is None:
            return BattleAction.INVALID
        return BattleAction.from_selector(selector)

    def ask_player_name(self) -> str:
        """
        Ask for the player's name until a non-empty one is given.

        Returns:
            str: The first word typed, since the save file stores a single token.

        """
        while True:
            answer = self.prompt("Enter your name: ").split()
            if answer:
                return answer[0]

    @staticmethod
    def _create_table(title: str, entries: dict) -> Table:
        table = Table(title=title, pad_edge=False)
        table.add_column("#", style="cyan")
        table.add_column("Name", style="bold")
        for selector, label in entries.items():
            table.add_row(selector.value, label)
        return table

    @staticmethod
    def get_number_choice(answer: str) -> int | None:
        """
        Convert the user's answer to an integer.

        Args:
            answer (str): User input string to parse.

        Returns:
            int | None: The integer typed, or None if the input is not an integer.

        """
        try:
            return int(answer.strip())
        except (ValueError, AttributeError):
            return None
