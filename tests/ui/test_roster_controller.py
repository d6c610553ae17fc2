"""
Tests for RosterController.

Covers the mapping from registry failures to user-facing results and the
table refresh after each change.
"""

import pytest
from PySide6.QtWidgets import QApplication

from ui.controllers.roster_controller import RosterController
from ui.models.roster_table_model import RosterTableModel


@pytest.fixture(scope="module")
def qapp():
    """Create QApplication for tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def controller(qapp, registry):
    return RosterController(registry, RosterTableModel(registry))


def test_add_player(controller):
    result = controller.add_player("Alice", "7", 175, 65)

    assert result.success
    assert "Alice" in result.message
    assert controller.table_model.rowCount() == 1


def test_add_player_duplicate_jersey(controller):
    controller.add_player("Alice", 7, 175, 65)
    result = controller.add_player("Bob", 7, 198, 95)

    assert not result.success
    assert result.message == "Jersey number '7' is already taken"
    assert controller.table_model.rowCount() == 1


def test_add_player_invalid_input(controller):
    result = controller.add_player("Alice", 150, 175, 65)
    assert not result.success
    assert "between 0 and 99" in result.message


def test_edit_player_keeps_team(controller, team):
    controller.add_player("Alice", 7, 175, 65)
    assert controller.assign_team("Alice", team).success

    result = controller.edit_player("Alice", jersey_number=30)

    edited = controller.registry.get_person("Alice")
    assert result.success
    assert edited.jersey_number.value == 30
    assert controller.registry.get_team_of(edited) is team
    assert team.get_persons() == [edited]


def test_edit_unknown_player(controller):
    result = controller.edit_player("Ghost", weight=80)
    assert not result.success


def test_assign_team_moves_player(controller, team, other_team):
    controller.add_player("Alice", 7, 175, 65)
    controller.assign_team("Alice", team)

    result = controller.assign_team("Alice", other_team)

    alice = controller.registry.get_person("Alice")
    assert result.success
    assert not team.contains(alice)
    assert other_team.contains(alice)
    assert controller.registry.get_team_of(alice) is other_team


def test_assign_same_team_twice(controller, team):
    controller.add_player("Alice", 7, 175, 65)
    controller.assign_team("Alice", team)
    assert not controller.assign_team("Alice", team).success


def test_lineup_membership(controller, lineups):
    controller.add_player("Alice", 7, 175, 65)

    assert controller.add_to_lineup("Alice", lineups[0]).success
    alice = controller.registry.get_person("Alice")
    assert controller.registry.get_lineups_of(alice) == [lineups[0]]

    assert controller.remove_from_lineup("Alice", lineups[0]).success
    assert controller.registry.get_lineups_of(alice) == []
    assert not lineups[0].contains(alice)
    assert not controller.remove_from_lineup("Alice", lineups[0]).success


def test_delete_player(controller, team):
    controller.add_player("Alice", 7, 175, 65)
    controller.assign_team("Alice", team)

    assert controller.delete_player("Alice").success
    assert team.size() == 0
    assert not controller.delete_player("Alice").success
    assert controller.table_model.rowCount() == 0


def test_sort_players(controller):
    controller.add_player("Alice", 7, 175, 65)
    controller.add_player("Bob", 23, 198, 95)

    result = controller.sort_players("w", "desc")

    assert result.success
    assert result.message == "Sorted players by weight in descending order"
    assert controller.table_model.get_player_at_row(0).name.value == "Bob"


def test_sort_players_bad_criteria(controller):
    result = controller.sort_players("age")
    assert not result.success


def test_available_jersey_numbers_text(controller):
    controller.add_player("Alice", 0, 175, 65)
    text = controller.get_available_jersey_numbers()
    assert text.startswith("1, 2, 3")
    assert text.endswith("99")
