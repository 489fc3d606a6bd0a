"""
Persistence package for the game.

Saves and loads the minimal player state (name and health) to a flat text
file.
"""

from .save_game import (
    SaveRecord,
    combatant_from_record,
    load_game,
    record_from_combatant,
    save_game,
)

__all__ = [
    "SaveRecord",
    "combatant_from_record",
    "load_game",
    "record_from_combatant",
    "save_game",
]
