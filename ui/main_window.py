"""
Main Window for the Roster Manager

Roster table with a player form and toolbar actions for adding, editing
and deleting players.
"""
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QFormLayout, QToolBar, QStatusBar,
    QTableView, QLineEdit, QSpinBox, QAbstractItemView
)
from PySide6.QtCore import QSize
from PySide6.QtGui import QAction

from player_registry.player_registry import PlayerRegistry
from roster.person import Person
from ui.controllers.roster_controller import RosterController, CommandResult
from ui.models.roster_table_model import RosterTableModel


class MainWindow(QMainWindow):
    """
    Main application window.

    Features:
    - Sortable roster table
    - Player form (name, jersey, height, weight) filled from the selected row
    - Toolbar with Add, Edit and Delete actions
    - Status bar showing the outcome of the last action
    """

    def __init__(self, registry: Optional[PlayerRegistry] = None):
        super().__init__()

        self.registry = registry if registry is not None else PlayerRegistry()
        self.table_model = RosterTableModel(self.registry)
        self.controller = RosterController(self.registry, self.table_model)

        self.setWindowTitle("Roster Manager")
        self.resize(900, 600)

        self._create_central_widget()
        self._create_toolbar()
        self._create_statusbar()

    def _create_central_widget(self):
        """Create the player form above the roster table."""
        central = QWidget()
        layout = QVBoxLayout(central)

        form = QFormLayout()
        self.name_edit = QLineEdit()
        self.jersey_spin = QSpinBox()
        self.jersey_spin.setRange(0, 99)
        self.height_spin = QSpinBox()
        self.height_spin.setRange(1, 300)
        self.height_spin.setSuffix(" cm")
        self.height_spin.setValue(180)
        self.weight_spin = QSpinBox()
        self.weight_spin.setRange(1, 300)
        self.weight_spin.setSuffix(" kg")
        self.weight_spin.setValue(80)
        form.addRow("Name:", self.name_edit)
        form.addRow("Jersey:", self.jersey_spin)
        form.addRow("Height:", self.height_spin)
        form.addRow("Weight:", self.weight_spin)
        layout.addLayout(form)

        self.table = QTableView()
        self.table.setModel(self.table_model)
        self.table.setSortingEnabled(True)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.clicked.connect(self._on_row_clicked)
        layout.addWidget(self.table)

        self.setCentralWidget(central)

    def _create_toolbar(self):
        """Create toolbar with roster actions."""
        self.toolbar = QToolBar("Roster")
        self.toolbar.setIconSize(QSize(24, 24))
        self.toolbar.setMovable(False)
        self.addToolBar(self.toolbar)

        self.add_action = self._create_action("Add", self._add_player, "Add the player in the form")
        self.edit_action = self._create_action(
            "Edit", self._edit_player, "Apply the form to the selected player"
        )
        self.delete_action = self._create_action("Delete", self._delete_player, "Delete the selected player")

        self.toolbar.addAction(self.add_action)
        self.toolbar.addAction(self.edit_action)
        self.toolbar.addAction(self.delete_action)

    def _create_statusbar(self):
        statusbar = QStatusBar()
        self.setStatusBar(statusbar)
        statusbar.showMessage(f"{self.registry.size()} players")

    def _create_action(self, text, slot, tooltip=None):
        action = QAction(text, self)
        action.triggered.connect(slot)
        if tooltip:
            action.setToolTip(tooltip)
            action.setStatusTip(tooltip)
        return action

    # Selection

    def select_row(self, row: int):
        """Select a table row and load that player into the form."""
        self.table.selectRow(row)
        self._load_form(self.table_model.get_player_at_row(row))

    def selected_player(self) -> Optional[Person]:
        rows = self.table.selectionModel().selectedRows()
        if not rows:
            return None
        return self.table_model.get_player_at_row(rows[0].row())

    def _on_row_clicked(self, index):
        self._load_form(self.table_model.get_player_at_row(index.row()))

    def _load_form(self, person: Optional[Person]):
        if person is None:
            return
        self.name_edit.setText(person.name.value)
        self.jersey_spin.setValue(person.jersey_number.value)
        self.height_spin.setValue(person.height.value)
        self.weight_spin.setValue(person.weight.value)

    # Action handlers

    def _add_player(self):
        self._show_result(self.controller.add_player(
            self.name_edit.text(),
            self.jersey_spin.value(),
            self.height_spin.value(),
            self.weight_spin.value()
        ))

    def _edit_player(self):
        person = self.selected_player()
        if person is None:
            self._show_result(CommandResult(False, "Select a player to edit"))
            return
        self._show_result(self.controller.edit_player(
            person.name.value,
            name=self.name_edit.text(),
            jersey_number=self.jersey_spin.value(),
            height=self.height_spin.value(),
            weight=self.weight_spin.value()
        ))

    def _delete_player(self):
        person = self.selected_player()
        if person is None:
            self._show_result(CommandResult(False, "Select a player to delete"))
            return
        self._show_result(self.controller.delete_player(person.name.value))

    def _show_result(self, result: CommandResult):
        self.statusBar().showMessage(result.message)
