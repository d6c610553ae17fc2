"""
Lineup Aggregate

An ordered group of players who take the floor together. Like teams,
lineups compare by identity.
"""

from typing import List, Optional
import logging

from config.roster_settings import RosterSettings
from roster.person import Person


class Lineup:
    """A named, size-limited, ordered set of players."""

    MAXIMUM_SIZE = RosterSettings.MAXIMUM_LINEUP_SIZE

    def __init__(self, name: str, maximum_size: Optional[int] = None):
        """
        Initialize an empty lineup.

        Args:
            name: Display name of the lineup
            maximum_size: Override for MAXIMUM_SIZE

        Raises:
            ValueError: If name is blank or maximum_size is not positive
        """
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Lineup name must be a non-empty string")
        size = self.MAXIMUM_SIZE if maximum_size is None else maximum_size
        if size <= 0:
            raise ValueError(f"Lineup size must be positive, got {size}")
        self.name = name.strip()
        self.maximum_size = size
        self._players: List[Person] = []
        self.logger = logging.getLogger(__name__)

    def add_player(self, person: Person) -> None:
        """
        Add a player to the end of the lineup.

        Raises:
            ValueError: If the player is already in the lineup or it is full
        """
        if person in self._players:
            raise ValueError(f"{person.name} is already in lineup {self.name}")
        if self.is_full():
            raise ValueError(f"Lineup {self.name} is full ({self.maximum_size} players)")
        self._players.append(person)

    def remove_player(self, person: Person) -> None:
        """
        Remove a player from the lineup.

        Raises:
            ValueError: If the player is not in the lineup
        """
        if person not in self._players:
            raise ValueError(f"{person.name} is not in lineup {self.name}")
        self._players.remove(person)

    def replace_player(self, target: Person, edited: Person) -> None:
        """
        Swap target for edited at the same slot.

        Tolerates an absent target by appending edited, ignoring the size
        limit since the registry already counts edited as a member.
        """
        if target in self._players:
            self._players[self._players.index(target)] = edited
            return
        self.logger.warning(
            f"Lineup {self.name} asked to replace {target.name} which it does not contain"
        )
        if edited not in self._players:
            self._players.append(edited)

    def contains(self, person: Person) -> bool:
        return person in self._players

    def get_players(self) -> List[Person]:
        return list(self._players)

    def size(self) -> int:
        return len(self._players)

    def is_full(self) -> bool:
        return len(self._players) >= self.maximum_size

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Lineup({self.name!r}, players={len(self._players)}/{self.maximum_size})"
