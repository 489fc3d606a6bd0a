"""
Background music for the game.

The music is a timed task running on its own thread. It shares nothing with
the game and cannot be stopped early; the entry point waits for it before
exiting.
"""

import threading
import time

from catchery import log_debug

from mystic_quest.core.constants import DEFAULT_MUSIC_DURATION
from mystic_quest.core.utils import cprint


class BackgroundMusic:
    """Plays a fixed-length track on a separate thread."""

    def __init__(self, duration: float = DEFAULT_MUSIC_DURATION) -> None:
        if duration < 0:
            raise ValueError(f"duration must be non-negative, got {duration}")
        self.duration = duration
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Starts playing. Starting twice is an error."""
        if self._thread is not None:
            raise RuntimeError("The background music has already been started.")
        self._thread = threading.Thread(
            target=self._play, name="background-music", daemon=False
        )
        self._thread.start()

    def _play(self) -> None:
        cprint("[dim]Playing background music...[/]")
        log_debug("Music started", {"duration": self.duration})
        time.sleep(self.duration)
        cprint("[dim]Music ended.[/]")

    def is_playing(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def join(self) -> None:
        """Waits for the track to finish; returns at once if it never started."""
        if self._thread is not None:
            self._thread.join()
