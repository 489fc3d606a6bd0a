"""
Tests for the battle loop.
"""

import pytest

from mystic_quest.combat import BattleManager
from mystic_quest.combatant import Combatant, create_enemy
from mystic_quest.core.constants import BattleAction, BattleState, CombatantKind
from mystic_quest.core.error_handling import ERROR_HANDLER, ErrorKind
from mystic_quest.persistence import SaveRecord, combatant_from_record


@pytest.fixture
def manager(player, enemy, scripted, tmp_path):
    return BattleManager(
        player,
        enemy=enemy,
        ui=scripted(),
        save_path=tmp_path / "game_state.txt",
    )


def test_new_battle_faces_a_fresh_goblin(player, scripted):
    battle = BattleManager(player, ui=scripted())
    assert battle.state == BattleState.IN_PROGRESS
    assert battle.enemy.name == "Goblin"
    assert battle.enemy.health == 50


def test_single_attack_and_retaliation(manager):
    """A fresh player hits a fresh goblin once and gets hit back."""
    state = manager.apply_action(BattleAction.ATTACK)
    assert manager.enemy.health == 30
    assert manager.player.health == 85
    assert state == BattleState.IN_PROGRESS
    assert manager.turn_number == 1


def test_killing_blow_is_not_answered(player, scripted):
    enemy = Combatant(CombatantKind.ENEMY, "Goblin", health=15)
    battle = BattleManager(player, enemy=enemy, ui=scripted())
    state = battle.apply_action(BattleAction.ATTACK)
    assert enemy.health == 0
    assert player.health == 100
    assert state == BattleState.PLAYER_VICTORY


def test_player_defeated_by_retaliation(scripted):
    weak_player = Combatant(CombatantKind.PLAYER, "Ari", health=15)
    battle = BattleManager(weak_player, enemy=create_enemy(), ui=scripted())
    state = battle.apply_action(BattleAction.ATTACK)
    assert weak_player.health == 0
    assert state == BattleState.PLAYER_DEFEATED


def test_defeat_takes_precedence_over_victory(manager):
    manager.player.take_damage(100)
    manager.enemy.take_damage(50)
    assert manager.check_outcome() == BattleState.PLAYER_DEFEATED


@pytest.mark.parametrize("enemy_health, retaliates", [(50, True), (21, True), (20, False), (5, False)])
def test_enemy_retaliates_only_when_it_survives(player, scripted, enemy_health, retaliates):
    enemy = Combatant(CombatantKind.ENEMY, "Goblin", health=enemy_health)
    BattleManager(player, enemy=enemy, ui=scripted()).apply_action(BattleAction.ATTACK)
    assert (player.health == 85) is retaliates
    assert enemy.is_alive() is retaliates


def test_collect_treasure_spends_a_turn_without_damage(manager):
    state = manager.apply_action(BattleAction.COLLECT_TREASURE)
    assert state == BattleState.IN_PROGRESS
    assert manager.player.treasures_collected == 1
    assert manager.player.health == 100
    assert manager.enemy.health == 50
    assert manager.turn_number == 1


def test_invalid_action_changes_nothing(manager):
    state = manager.apply_action(BattleAction.INVALID)
    assert state == BattleState.IN_PROGRESS
    assert manager.turn_number == 0
    assert manager.player.health == 100
    assert manager.enemy.health == 50
    assert manager.last_error is not None
    assert manager.last_error.kind == ErrorKind.INVALID_INPUT
    assert ERROR_HANDLER.error_history[-1].kind == ErrorKind.INVALID_INPUT


def test_save_and_exit_writes_the_save_file(manager):
    manager.apply_action(BattleAction.ATTACK)
    state = manager.apply_action(BattleAction.SAVE_AND_EXIT)
    assert state == BattleState.PLAYER_EXITED
    assert manager.last_error is None
    assert manager.save_path.read_text() == "Ari\n85\n"


def test_failed_save_still_leaves_the_battle(player, enemy, scripted, tmp_path):
    # A directory cannot be opened for writing.
    battle = BattleManager(player, enemy=enemy, ui=scripted(), save_path=tmp_path)
    state = battle.apply_action(BattleAction.SAVE_AND_EXIT)
    assert state == BattleState.PLAYER_EXITED
    assert battle.last_error is not None
    assert battle.last_error.kind == ErrorKind.IO_ERROR


def test_actions_after_the_end_are_ignored(manager):
    manager.apply_action(BattleAction.SAVE_AND_EXIT)
    assert manager.apply_action(BattleAction.ATTACK) == BattleState.PLAYER_EXITED
    assert manager.enemy.health == 50


def test_run_until_victory(player, enemy, scripted, capsys):
    ui = scripted(
        actions=[
            BattleAction.ATTACK,
            BattleAction.INVALID,
            BattleAction.COLLECT_TREASURE,
            BattleAction.ATTACK,
            BattleAction.ATTACK,
        ]
    )
    battle = BattleManager(player, enemy=enemy, ui=ui)
    assert battle.run() == BattleState.PLAYER_VICTORY
    assert enemy.health == 0
    assert player.health == 70
    assert player.treasures_collected == 1
    assert battle.turn_number == 4
    # The player is released once the battle is over.
    assert battle.player is None
    assert "You defeated the enemy! Victory!" in capsys.readouterr().out


def test_run_until_defeat(scripted, capsys):
    weak_player = Combatant(CombatantKind.PLAYER, "Ari", health=30)
    ui = scripted(actions=[BattleAction.ATTACK, BattleAction.ATTACK])
    battle = BattleManager(weak_player, enemy=create_enemy(), ui=ui)
    assert battle.run() == BattleState.PLAYER_DEFEATED
    assert weak_player.health == 0
    assert "You have been defeated. Game over." in capsys.readouterr().out


def test_run_stops_right_after_saving(player, enemy, scripted, tmp_path):
    ui = scripted(actions=[BattleAction.SAVE_AND_EXIT, BattleAction.ATTACK])
    battle = BattleManager(player, enemy=enemy, ui=ui, save_path=tmp_path / "save.txt")
    assert battle.run() == BattleState.PLAYER_EXITED
    # The second action was never read.
    assert list(ui.actions) == [BattleAction.ATTACK]
    assert enemy.health == 50


def test_released_player_cannot_be_used(manager):
    manager.ui.actions.append(BattleAction.SAVE_AND_EXIT)
    manager.run()
    with pytest.raises(RuntimeError):
        manager.show_status()


def test_player_loaded_at_zero_health_is_defeated_at_once(scripted, capsys):
    dead_player = combatant_from_record(SaveRecord(name="Ari", health=0))
    ui = scripted(actions=[BattleAction.COLLECT_TREASURE, BattleAction.ATTACK])
    battle = BattleManager(dead_player, enemy=create_enemy(), ui=ui)
    assert battle.state == BattleState.PLAYER_DEFEATED
    assert battle.run() == BattleState.PLAYER_DEFEATED
    # No action was read and nothing was collected.
    assert list(ui.actions) == [BattleAction.COLLECT_TREASURE, BattleAction.ATTACK]
    assert dead_player.treasures_collected == 0
    assert "You have been defeated. Game over." in capsys.readouterr().out


def test_battle_against_a_dead_enemy_is_won_at_once(player, scripted):
    dead_enemy = Combatant(CombatantKind.ENEMY, "Goblin", health=0)
    ui = scripted(actions=[BattleAction.ATTACK])
    battle = BattleManager(player, enemy=dead_enemy, ui=ui)
    assert battle.run() == BattleState.PLAYER_VICTORY
    assert list(ui.actions) == [BattleAction.ATTACK]
