"""
Team Aggregate

A team owns the ordered list of persons on its roster. Teams compare by
identity: two teams with the same name and members are still different
teams.
"""

from typing import List
import logging

from roster.person import Person


class Team:
    """Aggregate root for a team roster."""

    def __init__(self, name: str):
        """
        Initialize an empty team.

        Args:
            name: Display name of the team

        Raises:
            ValueError: If name is blank
        """
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Team name must be a non-empty string")
        self.name = name.strip()
        self._persons: List[Person] = []
        self.logger = logging.getLogger(__name__)

    def add_person(self, person: Person) -> None:
        """
        Put a person on this team.

        Raises:
            ValueError: If the person is already on the team
        """
        if person in self._persons:
            raise ValueError(f"{person.name} is already on team {self.name}")
        self._persons.append(person)

    def remove_person(self, person: Person) -> None:
        """
        Take a person off this team.

        Raises:
            ValueError: If the person is not on the team
        """
        if person not in self._persons:
            raise ValueError(f"{person.name} is not on team {self.name}")
        self._persons.remove(person)

    def replace_person(self, target: Person, edited: Person) -> None:
        """
        Swap target for edited at the same roster position.

        An absent target means the caller's bookkeeping has drifted; the
        edited person is appended so the team still lists them.
        """
        if target in self._persons:
            self._persons[self._persons.index(target)] = edited
            return
        self.logger.warning(
            f"Team {self.name} asked to replace {target.name} which it does not contain"
        )
        if edited not in self._persons:
            self._persons.append(edited)

    def contains(self, person: Person) -> bool:
        return person in self._persons

    def get_persons(self) -> List[Person]:
        return list(self._persons)

    def size(self) -> int:
        return len(self._persons)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Team({self.name!r}, persons={len(self._persons)})"
