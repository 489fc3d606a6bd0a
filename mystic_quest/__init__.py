"""
Mystic Quest, a turn-based text adventure.

This package contains the modules of the game: combatants, the battle loop,
saving and loading, the console interface and the background music.
"""
