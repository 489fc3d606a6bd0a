"""
Combatant package for the game.

Provides the Combatant record shared by the player and the enemy, along with
its display and treasure tracking modules.
"""

from .combatant_display import CombatantDisplay
from .combatant_progress import PlayerProgress
from .main import Combatant, create_enemy, create_player

__all__ = [
    "Combatant",
    "CombatantDisplay",
    "PlayerProgress",
    "create_enemy",
    "create_player",
]
