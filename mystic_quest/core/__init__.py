"""
Core system module for Mystic Quest.

This module contains the fundamental components shared by the rest of the
game: constants and enumerations, configuration, error handling, logging and
console output helpers.
"""

from .config import (
    GameConfig,
)
from .constants import (
    BattleAction,
    BattleState,
    CombatantKind,
    MenuChoice,
)
from .error_handling import (
    ERROR_HANDLER,
    ErrorHandler,
    ErrorKind,
    GameError,
    invalid_input,
    io_error,
)
from .utils import (
    ccapture,
    cprint,
    crule,
    make_bar,
)

__all__ = [
    # Import from config.py
    "GameConfig",
    # Import from constants.py
    "BattleAction",
    "BattleState",
    "CombatantKind",
    "MenuChoice",
    # Import from error_handling.py
    "ERROR_HANDLER",
    "ErrorHandler",
    "ErrorKind",
    "GameError",
    "invalid_input",
    "io_error",
    # Import from utils.py
    "ccapture",
    "cprint",
    "crule",
    "make_bar",
]
