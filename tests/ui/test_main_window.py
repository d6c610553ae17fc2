"""
Tests for MainWindow.

Drives the toolbar actions through the player form and checks the
registry, the table and the status bar message.
"""

import pytest
from PySide6.QtWidgets import QApplication

from ui.main_window import MainWindow


@pytest.fixture(scope="module")
def qapp():
    """Create QApplication for tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def window(qapp, registry):
    win = MainWindow(registry)
    yield win
    win.close()


def fill_form(window, name, jersey, height=190, weight=85):
    window.name_edit.setText(name)
    window.jersey_spin.setValue(jersey)
    window.height_spin.setValue(height)
    window.weight_spin.setValue(weight)


def row_of(window, name):
    for row in range(window.table_model.rowCount()):
        if window.table_model.get_player_at_row(row).name.value == name:
            return row
    return None


def status(window):
    return window.statusBar().currentMessage()


def test_add_action_registers_player(window, registry):
    fill_form(window, "Alice", 7, 175, 65)

    window.add_action.trigger()

    assert registry.contains_name("Alice")
    assert window.table_model.rowCount() == 1
    assert status(window).startswith("New player added")


def test_add_action_reports_duplicate_jersey(window, registry):
    fill_form(window, "Alice", 7)
    window.add_action.trigger()
    fill_form(window, "Bob", 7)

    window.add_action.trigger()

    assert not registry.contains_name("Bob")
    assert status(window) == "Jersey number '7' is already taken"


def test_select_row_loads_form(window):
    fill_form(window, "Alice", 7, 175, 65)
    window.add_action.trigger()
    fill_form(window, "Bob", 23)

    window.select_row(row_of(window, "Alice"))

    assert window.name_edit.text() == "Alice"
    assert window.jersey_spin.value() == 7
    assert window.height_spin.value() == 175
    assert window.selected_player().name.value == "Alice"


def test_edit_action_updates_selected_player(window, registry, team):
    fill_form(window, "Alice", 7, 175, 65)
    window.add_action.trigger()
    alice = registry.get_person("Alice")
    team.add_person(alice)
    registry.set_associated_team(alice, team)

    window.select_row(row_of(window, "Alice"))
    window.weight_spin.setValue(70)
    window.edit_action.trigger()

    edited = registry.get_person("Alice")
    assert edited.weight.value == 70
    assert registry.get_team_of(edited) is team
    assert status(window).startswith("Edited player")


def test_edit_action_rejects_taken_jersey(window, registry):
    fill_form(window, "Alice", 7)
    window.add_action.trigger()
    fill_form(window, "Bob", 23)
    window.add_action.trigger()

    window.select_row(row_of(window, "Bob"))
    window.jersey_spin.setValue(7)
    window.edit_action.trigger()

    assert registry.get_person("Bob").jersey_number.value == 23
    assert status(window) == "Jersey number '7' is already taken"


def test_edit_without_selection(window):
    window.edit_action.trigger()
    assert status(window) == "Select a player to edit"


def test_delete_action_removes_selected_player(window, registry):
    fill_form(window, "Alice", 7)
    window.add_action.trigger()
    fill_form(window, "Bob", 23)
    window.add_action.trigger()

    window.select_row(row_of(window, "Bob"))
    window.delete_action.trigger()

    assert not registry.contains_name("Bob")
    assert registry.contains_name("Alice")
    assert window.table_model.rowCount() == 1
    assert status(window).startswith("Deleted player")


def test_delete_without_selection(window):
    window.delete_action.trigger()
    assert status(window) == "Select a player to delete"
