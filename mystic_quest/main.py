"""
Main entry point for Mystic Quest.

Sets up logging, shows the opening screen, starts the background music and
runs the main menu. The music is waited for only once the user has left the
menu.
"""

import sys
from typing import Sequence

from pydantic import ValidationError

from mystic_quest.audio import BackgroundMusic
from mystic_quest.core.config import GameConfig
from mystic_quest.core.logging import setup_logging
from mystic_quest.game import Game


def main(argv: Sequence[str] | None = None) -> int:
    """
    Runs the game.

    Args:
        argv (Sequence[str] | None): Command line arguments, sys.argv[1:] if None.

    Returns:
        int: The process exit code, always 0 once the arguments are valid.

    """
    try:
        config = GameConfig.from_args(argv)
    except ValidationError as e:
        GameConfig.build_parser().error(str(e))

    setup_logging(config.log_level)

    game = Game(config)
    game.display_opening_screen()

    music = BackgroundMusic(config.music_duration)
    music.start()

    game.run()

    # Let the track finish before leaving.
    music.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())
