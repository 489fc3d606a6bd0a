"""
Centralized error handling for the game.

Recoverable failures are passed around as ``GameError`` values instead of
being raised, and every reported error goes through the shared
``ERROR_HANDLER`` so that it is logged once and kept in the history.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from mystic_quest.core.constants import NiceEnum


class ErrorKind(NiceEnum):
    """The kinds of recoverable errors the game knows about."""

    IO_ERROR = "IO_ERROR"
    INVALID_INPUT = "INVALID_INPUT"


@dataclass
class GameError:
    """Represents a recoverable game error with its kind, context, and cause."""

    message: str
    kind: ErrorKind
    context: dict[str, Any] = field(default_factory=dict)
    exception: Optional[Exception] = None

    def __str__(self) -> str:
        return self.message


class ErrorHandler:
    """Centralized error handling for the game."""

    def __init__(self) -> None:
        """Initialize the ErrorHandler with a logger and empty error history."""
        self.logger = logging.getLogger("mystic_quest.errors")
        self.error_history: list[GameError] = []

    def handle(self, error: GameError) -> GameError:
        """Log an error according to its kind and remember it.

        Returns the same error, so callers can hand it on.
        """
        self.error_history.append(error)

        # Prefix context keys to avoid conflicts with logging system reserved keys
        safe_context = {f"ctx_{key}": value for key, value in error.context.items()}

        if error.kind == ErrorKind.IO_ERROR:
            self.logger.error(f"{error.message}", extra=safe_context)
        else:
            self.logger.warning(f"{error.message}", extra=safe_context)
        return error

    def report(
        self,
        message: str,
        kind: ErrorKind,
        context: Optional[dict[str, Any]] = None,
        exception: Optional[Exception] = None,
    ) -> GameError:
        """Build a GameError from its parts and handle it."""
        return self.handle(
            GameError(
                message=message,
                kind=kind,
                context=context or {},
                exception=exception,
            )
        )

    def clear(self) -> None:
        """Forget every recorded error."""
        self.error_history.clear()


# Global error handler instance
ERROR_HANDLER = ErrorHandler()


def io_error(
    message: str,
    context: Optional[dict[str, Any]] = None,
    exception: Optional[Exception] = None,
) -> GameError:
    """Report a file access failure."""
    return ERROR_HANDLER.report(message, ErrorKind.IO_ERROR, context, exception)


def invalid_input(
    message: str,
    context: Optional[dict[str, Any]] = None,
) -> GameError:
    """Report an unrecognized user selection."""
    return ERROR_HANDLER.report(message, ErrorKind.INVALID_INPUT, context)
