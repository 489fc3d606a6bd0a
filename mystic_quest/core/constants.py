"""
Constants and enumerations for the game.

Defines global constants, enumerations for combatant kinds, battle states,
menu selectors, and the fixed numbers that drive the battle rules.
"""

from enum import Enum

# Starting health of every player; also the reference used when a saved game
# is reconstructed.
PLAYER_MAX_HEALTH = 100

# Starting health of the enemy.
ENEMY_MAX_HEALTH = 50

# Fixed damage dealt by each side.
PLAYER_ATTACK_DAMAGE = 20
ENEMY_ATTACK_DAMAGE = 15

# The enemy faced in every battle.
DEFAULT_ENEMY_NAME = "Goblin"

# Where the game state is written when no path is given.
DEFAULT_SAVE_FILE = "game_state.txt"

# How long the background music plays, in seconds.
DEFAULT_MUSIC_DURATION = 5.0

GAME_TITLE = "Mystic Quest"


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").lower().capitalize()


class CombatantKind(NiceEnum):
    """Defines which side a combatant fights for."""

    PLAYER = "PLAYER"
    ENEMY = "ENEMY"

    @property
    def max_health(self) -> int:
        """Returns the starting health of a combatant of this kind."""
        return {
            CombatantKind.PLAYER: PLAYER_MAX_HEALTH,
            CombatantKind.ENEMY: ENEMY_MAX_HEALTH,
        }[self]

    @property
    def attack_damage(self) -> int:
        """Returns the damage dealt by an attack of a combatant of this kind."""
        return {
            CombatantKind.PLAYER: PLAYER_ATTACK_DAMAGE,
            CombatantKind.ENEMY: ENEMY_ATTACK_DAMAGE,
        }[self]

    @property
    def opponent_label(self) -> str:
        """Returns how this kind refers to whoever it attacks."""
        return {
            CombatantKind.PLAYER: "the enemy",
            CombatantKind.ENEMY: "the player",
        }[self]

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this combatant kind."""
        return {
            CombatantKind.PLAYER: "👤",
            CombatantKind.ENEMY: "👹",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this combatant kind."""
        return {
            CombatantKind.PLAYER: "bold blue",
            CombatantKind.ENEMY: "bold red",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies combatant kind color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class BattleState(NiceEnum):
    """The states of a single battle."""

    IN_PROGRESS = "IN_PROGRESS"
    PLAYER_VICTORY = "PLAYER_VICTORY"
    PLAYER_DEFEATED = "PLAYER_DEFEATED"
    PLAYER_EXITED = "PLAYER_EXITED"

    @property
    def is_terminal(self) -> bool:
        return self != BattleState.IN_PROGRESS


class BattleAction(NiceEnum):
    """The actions a player can pick during a battle."""

    ATTACK = "1"
    COLLECT_TREASURE = "2"
    SAVE_AND_EXIT = "3"
    INVALID = "INVALID"

    @classmethod
    def from_selector(cls, selector: int) -> "BattleAction":
        """Maps a menu number to an action, anything unknown is INVALID."""
        for action in cls:
            if action.value == str(selector):
                return action
        return cls.INVALID


class MenuChoice(NiceEnum):
    """The entries of the top-level menu."""

    START_GAME = "1"
    LOAD_GAME = "2"
    EXIT = "3"
    INVALID = "INVALID"

    @classmethod
    def from_selector(cls, selector: int) -> "MenuChoice":
        """Maps a menu number to a choice, anything unknown is INVALID."""
        for choice in cls:
            if choice.value == str(selector):
                return choice
        return cls.INVALID
