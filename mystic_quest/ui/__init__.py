"""
User interface package for the game.
"""

from .cli_interface import PlayerInterface

__all__ = ["PlayerInterface"]
