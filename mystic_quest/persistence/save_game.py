"""
Game state saving and loading.

The save file is plain text with the player's name on the first line and the
player's health on the second. Failures are returned as GameError values
instead of being raised.
"""

from pathlib import Path
from typing import Any

from catchery import log_warning
from pydantic import BaseModel, Field

from mystic_quest.combatant import Combatant, create_player
from mystic_quest.core.constants import DEFAULT_SAVE_FILE, PLAYER_MAX_HEALTH
from mystic_quest.core.error_handling import GameError, io_error
from mystic_quest.core.utils import cprint


class SaveRecord(BaseModel):
    """The persisted part of a player: name and health, nothing else."""

    name: str = Field(
        description="The name of the player.",
    )
    health: int = Field(
        description="The health of the player when the game was saved.",
    )

    def to_text(self) -> str:
        return f"{self.name}\n{self.health}\n"

    @classmethod
    def from_text(cls, text: str) -> "SaveRecord":
        """
        Parses the first two whitespace-delimited tokens of a save file.

        Args:
            text (str): The content of the save file.

        Returns:
            SaveRecord: The parsed record.

        Raises:
            ValueError: If there are fewer than two tokens or the health is not an integer.

        """
        tokens = text.split()
        if len(tokens) < 2:
            raise ValueError(f"expected a name and a health value, got {len(tokens)} token(s)")
        name, health = tokens[0], tokens[1]
        try:
            return cls(name=name, health=int(health))
        except ValueError as e:
            raise ValueError(f"health '{health}' is not an integer") from e


def record_from_combatant(player: Combatant) -> SaveRecord:
    """Projects a player onto the data that gets saved."""
    return SaveRecord(name=player.name, health=player.health)


def combatant_from_record(record: SaveRecord) -> Combatant:
    """
    Rebuilds a player from a save record.

    A full-health player is created and then damaged until it reaches the saved
    health. Saved values outside the normal range are absorbed: a negative
    health ends at zero and a health above the maximum stays at the maximum.

    Args:
        record (SaveRecord): The loaded record.

    Returns:
        Combatant: The reconstructed player.

    """
    if not 0 <= record.health <= PLAYER_MAX_HEALTH:
        log_warning(
            f"Saved health {record.health} is outside 0-{PLAYER_MAX_HEALTH}",
            {"name": record.name, "health": record.health},
        )
    player = create_player(record.name)
    player.take_damage(max(0, PLAYER_MAX_HEALTH - record.health))
    return player


def save_game(player: Combatant, path: Path = Path(DEFAULT_SAVE_FILE)) -> GameError | None:
    """
    Writes the player's name and health to the save file, replacing it.

    Args:
        player (Combatant): The player to save.
        path (Path): Where to write. Defaults to the game_state.txt file.

    Returns:
        GameError | None: None on success, an IO error otherwise.

    """
    record = record_from_combatant(player)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(record.to_text())
    except OSError as e:
        return io_error(
            f"Error saving game: {e}",
            _context(path, e),
            exception=e,
        )
    cprint("[green]Game state saved successfully.[/]")
    return None


def load_game(path: Path = Path(DEFAULT_SAVE_FILE)) -> SaveRecord | GameError:
    """
    Reads a save record from the save file.

    Args:
        path (Path): Where to read from. Defaults to the game_state.txt file.

    Returns:
        SaveRecord | GameError: The record, or an IO error if the file is
        missing, unreadable, or does not hold a name and an integer health.

    """
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        return io_error(
            f"Error loading game: {e}",
            _context(path, e),
            exception=e,
        )
    try:
        return SaveRecord.from_text(text)
    except ValueError as e:
        return io_error(
            f"Error loading game: malformed save file {path}: {e}",
            _context(path, e),
            exception=e,
        )


def _context(path: Path, error: Exception) -> dict[str, Any]:
    return {
        "file_path": str(path),
        "error": str(error),
        "context": "save_file_access",
    }
