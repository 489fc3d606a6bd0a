"""
Shared fixtures for the Mystic Quest tests.
"""

from collections import deque
from typing import Iterable

import pytest

from mystic_quest.combatant import Combatant, create_enemy, create_player
from mystic_quest.core.constants import BattleAction, MenuChoice
from mystic_quest.core.error_handling import ERROR_HANDLER


class ScriptedInterface:
    """Plays back prepared answers instead of reading the console.

    Running out of answers raises EOFError, like a closed stdin would.
    """

    def __init__(
        self,
        menu: Iterable[MenuChoice] = (),
        actions: Iterable[BattleAction] = (),
        names: Iterable[str] = (),
    ) -> None:
        self.menu = deque(menu)
        self.actions = deque(actions)
        self.names = deque(names)

    def choose_menu_option(self) -> MenuChoice:
        if not self.menu:
            raise EOFError
        return self.menu.popleft()

    def choose_battle_action(self) -> BattleAction:
        if not self.actions:
            raise EOFError
        return self.actions.popleft()

    def ask_player_name(self) -> str:
        if not self.names:
            raise EOFError
        return self.names.popleft()


@pytest.fixture(autouse=True)
def clean_error_history():
    """Every test starts with an empty error history."""
    ERROR_HANDLER.clear()
    yield
    ERROR_HANDLER.clear()


@pytest.fixture
def player() -> Combatant:
    return create_player("Ari")


@pytest.fixture
def enemy() -> Combatant:
    return create_enemy()


@pytest.fixture
def scripted():
    """Factory for scripted interfaces."""
    return ScriptedInterface
