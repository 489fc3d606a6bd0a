"""
Audio package for the game.
"""

from .background_music import BackgroundMusic

__all__ = ["BackgroundMusic"]
