"""
Runtime configuration for the game.

Collects the few knobs the game exposes (save file location, music length,
log level, enemy name) in a single validated model, built from the command
line by ``GameConfig.from_args``.
"""

import argparse
from pathlib import Path
from typing import Sequence

from pydantic import BaseModel, Field, field_validator

from mystic_quest.core.constants import (
    DEFAULT_ENEMY_NAME,
    DEFAULT_MUSIC_DURATION,
    DEFAULT_SAVE_FILE,
    GAME_TITLE,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GameConfig(BaseModel):
    """Settings for one run of the game."""

    save_path: Path = Field(
        default=Path(DEFAULT_SAVE_FILE),
        description="The file the game state is saved to and loaded from.",
    )
    music_duration: float = Field(
        default=DEFAULT_MUSIC_DURATION,
        ge=0.0,
        description="How long the background music plays, in seconds.",
    )
    log_level: str = Field(
        default="WARNING",
        description="The logging level name.",
    )
    enemy_name: str = Field(
        default=DEFAULT_ENEMY_NAME,
        min_length=1,
        description="The name of the enemy faced in every battle.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @classmethod
    def build_parser(cls) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="mystic-quest",
            description=f"{GAME_TITLE}: a turn-based text adventure.",
        )
        parser.add_argument(
            "--save-file",
            dest="save_path",
            type=Path,
            default=Path(DEFAULT_SAVE_FILE),
            help="Path of the save file (default: %(default)s).",
        )
        parser.add_argument(
            "--music-duration",
            type=float,
            default=DEFAULT_MUSIC_DURATION,
            help="Seconds of background music (default: %(default)s).",
        )
        parser.add_argument(
            "--log-level",
            default="WARNING",
            type=str.upper,
            choices=LOG_LEVELS,
            help="Logging level (default: %(default)s).",
        )
        parser.add_argument(
            "--enemy-name",
            default=DEFAULT_ENEMY_NAME,
            help="Name of the enemy (default: %(default)s).",
        )
        return parser

    @classmethod
    def from_args(cls, argv: Sequence[str] | None = None) -> "GameConfig":
        """
        Builds the configuration from command line arguments.

        Args:
            argv (Sequence[str] | None): The arguments, sys.argv[1:] if None.

        Returns:
            GameConfig: The validated configuration.

        """
        namespace = cls.build_parser().parse_args(argv)
        return cls(**vars(namespace))
