"""
Player Registry

Single owner of the four player indexes:
- name -> person
- jersey number -> person
- person -> team (at most one)
- person -> lineups (ordered, zero or more)

Every mutation goes through this class so the indexes stay in lockstep.
The raw dictionaries are never handed out; callers get copies.

Not thread-safe. Confine a registry to one thread, or guard the whole
object with a single lock.
"""

from typing import Any, Dict, Iterable, List, Optional, Union
import logging

from config.roster_settings import RosterSettings
from roster.person import Person, Name, JerseyNumber
from roster.team import Team
from roster.lineup import Lineup
from player_registry.player_sorting import SortCriteria, SortOrder, sort_players
from player_registry.registry_exceptions import (
    PersonNotFoundException,
    CapacityExceededException,
    DuplicateIdentityException,
    InconsistentEditException
)


class PlayerRegistry:
    """
    In-memory registry of players and their team and lineup associations.

    Invariants kept after every public call:
    - the name and jersey indexes hold exactly the same persons
    - population never exceeds capacity
    - no two persons share a name or a jersey number
    - team and lineup associations exist only for registered persons
    - editing a person moves its associations to the edited value

    Membership checks match by name. Association reads and writes match
    the exact registered value; writes reject any other value.
    """

    def __init__(self, capacity: int = RosterSettings.MAXIMUM_CAPACITY):
        """
        Initialize an empty registry.

        Args:
            capacity: Maximum number of registered players

        Raises:
            ValueError: If capacity is not positive
        """
        if capacity <= 0:
            raise ValueError(f"Registry capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._name_to_person: Dict[Name, Person] = {}
        self._jersey_to_person: Dict[JerseyNumber, Person] = {}
        self._person_to_team: Dict[Person, Team] = {}
        self._person_to_lineups: Dict[Person, List[Lineup]] = {}
        self.logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains_name(self, name: Union[Name, str]) -> bool:
        """Check if a player with this name is registered."""
        key = self._name_key(name)
        return key is not None and key in self._name_to_person

    def contains_person(self, person: Person) -> bool:
        """
        Check if the person is registered.

        Two persons with the same name count as the same player here.
        """
        return self.contains_name(person.name)

    def contains_jersey_number(self, number: Union[JerseyNumber, int, str]) -> bool:
        """Check if a jersey number is already taken by some player."""
        key = self._jersey_key(number)
        return key is not None and key in self._jersey_to_person

    def available_jersey_numbers(self) -> List[int]:
        """
        Get every unassigned jersey number, ascending.

        Recomputed on each call from current occupancy.
        """
        taken = {number.value for number in self._jersey_to_person}
        return [n for n in RosterSettings.jersey_number_range() if n not in taken]

    def get_person(self, name: Union[Name, str]) -> Optional[Person]:
        """
        Look up a player by name.

        Returns:
            The registered person, or None if no such player
        """
        key = self._name_key(name)
        if key is None:
            return None
        return self._name_to_person.get(key)

    def get_person_by_jersey_number(self, number: Union[JerseyNumber, int, str]) -> Optional[Person]:
        key = self._jersey_key(number)
        if key is None:
            return None
        return self._jersey_to_person.get(key)

    def get_team_of(self, person: Person) -> Optional[Team]:
        """
        Get the team this exact person value is associated with.

        Returns:
            Team, or None if the person has no team
        """
        return self._person_to_team.get(person)

    def get_lineups_of(self, person: Person) -> List[Lineup]:
        """
        Get the lineups this exact person value belongs to, in the order
        they were associated.

        Returns:
            A new list; empty when the person has no lineup record at all
        """
        return list(self._person_to_lineups.get(person, []))

    def is_full(self) -> bool:
        """Check if the number of players has reached capacity."""
        return len(self._name_to_person) >= self.capacity

    def size(self) -> int:
        return len(self._name_to_person)

    def get_all_persons(self) -> List[Person]:
        """Get all registered players in registration order."""
        return list(self._name_to_person.values())

    def get_sorted_persons(
        self,
        criteria: SortCriteria,
        order: SortOrder = SortOrder.ASCENDING
    ) -> List[Person]:
        """Get all registered players sorted by height, weight or jersey number."""
        return sort_players(self._name_to_person.values(), criteria, order)

    # ------------------------------------------------------------------
    # Population
    # ------------------------------------------------------------------

    def add_person(self, person: Person) -> None:
        """
        Register a new player.

        Args:
            person: Player to add

        Raises:
            CapacityExceededException: If the registry is full
            DuplicateIdentityException: If the name or jersey number is taken
        """
        if self.is_full():
            self.logger.warning(f"Rejected {person.name}: registry full ({self.capacity})")
            raise CapacityExceededException(self.capacity, person.name)

        if person.name in self._name_to_person:
            self.logger.warning(f"Rejected {person.name}: name already registered")
            raise DuplicateIdentityException("name", person.name)

        holder = self._jersey_to_person.get(person.jersey_number)
        if holder is not None:
            self.logger.warning(
                f"Rejected {person.name}: jersey #{person.jersey_number} held by {holder.name}"
            )
            raise DuplicateIdentityException("jersey_number", person.jersey_number, holder.name)

        self._name_to_person[person.name] = person
        self._jersey_to_person[person.jersey_number] = person
        self.logger.info(f"Added player {person}")

    def remove_person(self, person: Person) -> bool:
        """
        Remove a player and sever every team and lineup association.

        The player's team and lineups are also asked to drop the player.

        Args:
            person: Player to remove (matched by name)

        Returns:
            True if the player was removed, False if not registered
        """
        registered = self._name_to_person.get(person.name)
        if registered is None:
            self.logger.warning(f"Cannot remove {person.name}: not registered")
            return False

        team = self._person_to_team.pop(registered, None)
        if team is not None and team.contains(registered):
            team.remove_person(registered)

        for lineup in self._person_to_lineups.pop(registered, []):
            if lineup.contains(registered):
                lineup.remove_player(registered)

        del self._name_to_person[registered.name]
        del self._jersey_to_person[registered.jersey_number]
        self.logger.info(f"Removed player {registered}")
        return True

    # ------------------------------------------------------------------
    # Team associations
    # ------------------------------------------------------------------

    def set_associated_team(self, person: Person, team: Team) -> None:
        """
        Record or overwrite the player's team.

        Raises:
            PersonNotFoundException: If the player is not registered, or is
                registered with different details
        """
        registered = self._require_registered(person)
        previous = self._person_to_team.get(registered)
        self._person_to_team[registered] = team
        if previous is not None and previous is not team:
            self.logger.debug(f"{registered.name} moved from {previous.name} to {team.name}")
        else:
            self.logger.debug(f"{registered.name} associated with team {team.name}")

    def clear_associated_team(self, person: Person, team: Optional[Team] = None) -> bool:
        """
        Remove the player's team association.

        Args:
            person: Player whose association is cleared
            team: If given, clear only when this exact team object is the
                recorded one

        Returns:
            True if an association was removed
        """
        current = self._person_to_team.get(person)
        if current is None:
            return False
        if team is not None and current is not team:
            self.logger.debug(
                f"Kept team {current.name} for {person.name}: expected {team.name}"
            )
            return False
        del self._person_to_team[person]
        return True

    # ------------------------------------------------------------------
    # Lineup associations
    # ------------------------------------------------------------------

    def add_lineup_association(self, person: Person, lineup: Lineup) -> None:
        """
        Append a lineup to the player's lineups. Already-associated
        lineups are left where they are.

        Raises:
            PersonNotFoundException: If the player is not registered
        """
        registered = self._require_registered(person)
        lineups = self._person_to_lineups.setdefault(registered, [])
        if any(existing is lineup for existing in lineups):
            return
        lineups.append(lineup)
        self.logger.debug(f"{registered.name} associated with lineup {lineup.name}")

    def replace_lineup_associations(self, person: Person, lineups: Iterable[Lineup]) -> None:
        """
        Replace the player's whole lineup collection.

        Raises:
            PersonNotFoundException: If the player is not registered
        """
        registered = self._require_registered(person)
        unique: List[Lineup] = []
        for lineup in lineups:
            if not any(existing is lineup for existing in unique):
                unique.append(lineup)
        self._person_to_lineups[registered] = unique

    def remove_lineup_association(self, person: Person, lineup: Lineup) -> bool:
        """
        Remove one lineup from the player's lineups.

        Returns:
            True if removed, False if the lineup was not associated
        """
        lineups = self._person_to_lineups.get(person)
        if not lineups:
            return False
        for index, existing in enumerate(lineups):
            if existing is lineup:
                del lineups[index]
                return True
        return False

    def remove_all_lineup_associations(self, person: Person) -> bool:
        """
        Drop the player's entire lineup record.

        Returns:
            True if a record existed
        """
        return self._person_to_lineups.pop(person, None) is not None

    # ------------------------------------------------------------------
    # Edit
    # ------------------------------------------------------------------

    def edit_person(self, target: Person, edited: Person) -> None:
        """
        Replace a registered player with an edited value.

        The edited player inherits the target's team and lineups, and the
        team and each lineup swap target for edited at the same position.
        All checks run before anything is changed.

        Args:
            target: Player currently registered (matched by name)
            edited: Replacement value

        Raises:
            InconsistentEditException: If target is not registered
            DuplicateIdentityException: If edited's name or jersey number
                belongs to a different player
        """
        registered = self._name_to_person.get(target.name)
        if registered is None:
            self.logger.warning(f"Cannot edit {target.name}: not registered")
            raise InconsistentEditException(target.name)

        name_holder = self._name_to_person.get(edited.name)
        if name_holder is not None and name_holder is not registered:
            raise DuplicateIdentityException("name", edited.name, name_holder.name)

        jersey_holder = self._jersey_to_person.get(edited.jersey_number)
        if jersey_holder is not None and jersey_holder is not registered:
            raise DuplicateIdentityException(
                "jersey_number", edited.jersey_number, jersey_holder.name
            )

        # Capture before any mutation
        team = self._person_to_team.get(registered)
        had_lineup_record = registered in self._person_to_lineups
        lineups = list(self._person_to_lineups.get(registered, []))

        if team is not None:
            team.replace_person(registered, edited)
        for lineup in lineups:
            lineup.replace_player(registered, edited)

        del self._name_to_person[registered.name]
        del self._jersey_to_person[registered.jersey_number]
        self._name_to_person[edited.name] = edited
        self._jersey_to_person[edited.jersey_number] = edited

        self._person_to_team.pop(registered, None)
        self._person_to_lineups.pop(registered, None)
        if team is not None:
            self._person_to_team[edited] = team
        if had_lineup_record:
            self._person_to_lineups[edited] = lineups

        self.logger.info(f"Edited player {registered} -> {edited}")

    # ------------------------------------------------------------------
    # Consistency
    # ------------------------------------------------------------------

    def validate(self) -> bool:
        """
        Check the cross-index invariants.

        Returns:
            True if all indexes agree, False otherwise (each problem is logged)
        """
        problems: List[str] = []

        if len(self._name_to_person) != len(self._jersey_to_person):
            problems.append(
                f"index sizes differ: {len(self._name_to_person)} names vs "
                f"{len(self._jersey_to_person)} jerseys"
            )

        for name, person in self._name_to_person.items():
            if person.name != name:
                problems.append(f"name key {name} maps to {person.name}")
            if self._jersey_to_person.get(person.jersey_number) is not person:
                problems.append(f"{name} missing from jersey index at #{person.jersey_number}")

        if len(self._name_to_person) > self.capacity:
            problems.append(f"population {len(self._name_to_person)} exceeds capacity {self.capacity}")

        for person in list(self._person_to_team) + list(self._person_to_lineups):
            if self._name_to_person.get(person.name) != person:
                problems.append(f"dangling association for {person.name}")

        for problem in problems:
            self.logger.warning(f"Registry inconsistency: {problem}")
        return not problems

    def get_summary(self) -> Dict[str, Any]:
        """
        Get a summary of registry occupancy.

        Returns:
            Dictionary with population and association counts
        """
        return {
            'population': self.size(),
            'capacity': self.capacity,
            'is_full': self.is_full(),
            'available_jersey_numbers': len(self.available_jersey_numbers()),
            'team_associations': len(self._person_to_team),
            'lineup_associations': sum(len(l) for l in self._person_to_lineups.values()),
        }

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_registered(self, person: Person) -> Person:
        # Associations are keyed by the stored value; a stale copy would
        # record an entry that no lookup can reach.
        registered = self._name_to_person.get(person.name)
        if registered is None:
            raise PersonNotFoundException(person.name)
        if registered != person:
            self.logger.warning(f"Rejected association for {person}: registered as {registered}")
            raise PersonNotFoundException(
                person.name,
                f"Player '{person.name}' is registered with different details"
            )
        return registered

    @staticmethod
    def _name_key(name: Union[Name, str]) -> Optional[Name]:
        if isinstance(name, Name):
            return name
        try:
            return Name(name)
        except ValueError:
            return None

    @staticmethod
    def _jersey_key(number: Union[JerseyNumber, int, str]) -> Optional[JerseyNumber]:
        if isinstance(number, JerseyNumber):
            return number
        try:
            return JerseyNumber.parse(number)
        except ValueError:
            return None

    def __len__(self) -> int:
        return len(self._name_to_person)

    def __contains__(self, person: Person) -> bool:
        return self.contains_person(person)

    def __repr__(self) -> str:
        return f"PlayerRegistry(population={self.size()}, capacity={self.capacity})"
