"""
Roster Controller for the Roster Manager UI

Thin controller between roster views and the PlayerRegistry. Turns view
input into registry calls, maps registry failures to user-facing
messages, and refreshes the table model after each change.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging

from PySide6.QtCore import Qt

from logging_config import log_exception
from player_registry.player_registry import PlayerRegistry
from player_registry.player_sorting import SortCriteria, SortOrder, describe_sort
from player_registry.registry_exceptions import RegistryException
from roster.lineup import Lineup
from roster.person import Person
from roster.team import Team


@dataclass
class CommandResult:
    """Outcome of a roster action, shown to the user as-is."""
    success: bool
    message: str


class RosterController:
    """
    Controller for roster view operations.

    Follows pattern: View → Controller → PlayerRegistry
    """

    def __init__(self, registry: PlayerRegistry, table_model=None):
        """
        Initialize roster controller.

        Args:
            registry: Registry holding the roster
            table_model: Optional RosterTableModel refreshed after changes
        """
        self.registry = registry
        self.table_model = table_model
        self.logger = logging.getLogger(__name__)

    def add_player(self, name: str, jersey_number: Any, height: int, weight: int) -> CommandResult:
        """Create and register a player from form input."""
        try:
            person = Person.create(name, jersey_number, height, weight)
            self.registry.add_person(person)
        except (RegistryException, ValueError) as e:
            return self._failure(e, "add_player", name)
        return self._success(f"New player added: {person}")

    def edit_player(self, name: str, /, **changes: Any) -> CommandResult:
        """
        Edit a registered player's fields.

        Args:
            name: Current name of the player
            **changes: name, jersey_number, height and/or weight
        """
        target = self.registry.get_person(name)
        if target is None:
            return CommandResult(False, f"No player named '{name}'")
        try:
            edited = target.with_changes(**changes)
            self.registry.edit_person(target, edited)
        except (RegistryException, ValueError) as e:
            return self._failure(e, "edit_player", name)
        return self._success(f"Edited player: {edited}")

    def delete_player(self, name: str) -> CommandResult:
        person = self.registry.get_person(name)
        if person is None or not self.registry.remove_person(person):
            return CommandResult(False, f"No player named '{name}'")
        return self._success(f"Deleted player: {person}")

    def assign_team(self, name: str, team: Team) -> CommandResult:
        """Put a registered player on a team, taking them off any previous team."""
        person = self.registry.get_person(name)
        if person is None:
            return CommandResult(False, f"No player named '{name}'")
        try:
            previous = self.registry.get_team_of(person)
            if previous is team:
                return CommandResult(False, f"{person.name} is already on {team.name}")
            team.add_person(person)
            if previous is not None:
                previous.remove_person(person)
            self.registry.set_associated_team(person, team)
        except (RegistryException, ValueError) as e:
            return self._failure(e, "assign_team", name)
        return self._success(f"{person.name} added to team {team.name}")

    def add_to_lineup(self, name: str, lineup: Lineup) -> CommandResult:
        person = self.registry.get_person(name)
        if person is None:
            return CommandResult(False, f"No player named '{name}'")
        try:
            lineup.add_player(person)
            self.registry.add_lineup_association(person, lineup)
        except (RegistryException, ValueError) as e:
            return self._failure(e, "add_to_lineup", name)
        return self._success(f"{person.name} added to lineup {lineup.name}")

    def remove_from_lineup(self, name: str, lineup: Lineup) -> CommandResult:
        person = self.registry.get_person(name)
        if person is None or not self.registry.remove_lineup_association(person, lineup):
            return CommandResult(False, f"'{name}' is not in lineup {lineup.name}")
        if lineup.contains(person):
            lineup.remove_player(person)
        return self._success(f"{person.name} removed from lineup {lineup.name}")

    def sort_players(self, criteria: str, order: str = "asc") -> CommandResult:
        """
        Sort the roster table by height, weight or jersey number.

        Args:
            criteria: "height", "weight", "jersey" or their one-letter prefixes
            order: "asc" or "desc"
        """
        try:
            sort_criteria = SortCriteria.from_string(criteria)
            sort_order = SortOrder.from_string(order)
        except ValueError as e:
            return CommandResult(False, str(e))

        if self.table_model is not None:
            column = {
                SortCriteria.JERSEY_NUMBER: self.table_model.COL_NUMBER,
                SortCriteria.HEIGHT: self.table_model.COL_HEIGHT,
                SortCriteria.WEIGHT: self.table_model.COL_WEIGHT,
            }[sort_criteria]
            qt_order = Qt.DescendingOrder if sort_order == SortOrder.DESCENDING else Qt.AscendingOrder
            self.table_model.sort(column, qt_order)
        return CommandResult(True, describe_sort(sort_criteria, sort_order))

    def get_available_jersey_numbers(self) -> str:
        """Free jersey numbers formatted for display."""
        return ", ".join(str(n) for n in self.registry.available_jersey_numbers())

    def get_summary(self) -> Dict[str, Any]:
        return self.registry.get_summary()

    def _success(self, message: str) -> CommandResult:
        if self.table_model is not None:
            self.table_model.refresh()
        self.logger.info(message)
        return CommandResult(True, message)

    def _failure(self, error: Exception, action: str, name: Optional[str]) -> CommandResult:
        log_exception(self.logger, error, context={"action": action, "name": name}, level="WARNING")
        if isinstance(error, RegistryException):
            return CommandResult(False, error.message)
        return CommandResult(False, str(error))
