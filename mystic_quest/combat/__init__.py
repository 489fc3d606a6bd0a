"""
Combat package for the game.
"""

from .battle_manager import BattleManager

__all__ = ["BattleManager"]
