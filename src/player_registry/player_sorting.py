"""
Player Sorting

Sort criteria and order for displaying players by height, weight or
jersey number.
"""

from enum import Enum
from typing import Callable, Iterable, List

from roster.person import Person


class SortCriteria(Enum):
    """Player attribute to sort by"""
    HEIGHT = "height"
    WEIGHT = "weight"
    JERSEY_NUMBER = "jersey"

    @classmethod
    def from_string(cls, text: str) -> 'SortCriteria':
        """
        Parse a criteria name or its single-letter prefix.

        Raises:
            ValueError: If text names no criteria
        """
        key = text.strip().lower().rstrip('/')
        aliases = {
            'height': cls.HEIGHT, 'h': cls.HEIGHT,
            'weight': cls.WEIGHT, 'w': cls.WEIGHT,
            'jersey': cls.JERSEY_NUMBER, 'j': cls.JERSEY_NUMBER,
            'jersey_number': cls.JERSEY_NUMBER,
        }
        if key not in aliases:
            raise ValueError(f"Unknown sort criteria: '{text}'")
        return aliases[key]


class SortOrder(Enum):
    """Sort direction"""
    ASCENDING = "asc"
    DESCENDING = "desc"

    @classmethod
    def from_string(cls, text: str) -> 'SortOrder':
        key = text.strip().lower()
        for order in cls:
            if key in (order.value, order.name.lower()):
                return order
        raise ValueError(f"Unknown sort order: '{text}' (expected 'asc' or 'desc')")

    @property
    def label(self) -> str:
        return self.name.lower()


_SORT_KEYS = {
    SortCriteria.HEIGHT: lambda person: person.height,
    SortCriteria.WEIGHT: lambda person: person.weight,
    SortCriteria.JERSEY_NUMBER: lambda person: person.jersey_number,
}


def get_sort_key(criteria: SortCriteria) -> Callable[[Person], object]:
    """Get the key function for a criteria."""
    return _SORT_KEYS[criteria]


def sort_players(
    persons: Iterable[Person],
    criteria: SortCriteria,
    order: SortOrder = SortOrder.ASCENDING
) -> List[Person]:
    """
    Return persons sorted by criteria. The input is left untouched.

    Ties keep their incoming order in both directions.
    """
    return sorted(
        persons,
        key=get_sort_key(criteria),
        reverse=(order == SortOrder.DESCENDING)
    )


def describe_sort(criteria: SortCriteria, order: SortOrder) -> str:
    """User-facing confirmation for a completed sort."""
    return f"Sorted players by {criteria.value} in {order.label} order"
