"""
Person Value Types

Immutable value objects describing a registered player. Name and
JerseyNumber are the identity fields; Height and Weight are only used
for sorting and display.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Union
import re

from config.roster_settings import RosterSettings


_NAME_PATTERN = re.compile(r"^[^\W_][^\W_ ]*(?: [^\W_]+)*$")


@dataclass(frozen=True, order=True)
class Name:
    """A player's full name. Alphanumerics and single spaces only."""
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueError(f"Name must be a string, got {type(self.value).__name__}")
        cleaned = self.value.strip()
        if not _NAME_PATTERN.match(cleaned):
            raise ValueError(
                f"Name must be non-empty and contain only letters, digits and spaces, got '{self.value}'"
            )
        object.__setattr__(self, 'value', cleaned)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class JerseyNumber:
    """Jersey number in range(RosterSettings.MAXIMUM_CAPACITY)."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Jersey number must be an integer, got {self.value!r}")
        upper = RosterSettings.MAXIMUM_CAPACITY
        if not 0 <= self.value < upper:
            raise ValueError(f"Jersey number must be between 0 and {upper - 1}, got {self.value}")

    @classmethod
    def parse(cls, text: Union[str, int]) -> 'JerseyNumber':
        """
        Build a JerseyNumber from user input.

        Args:
            text: Integer or decimal string such as "7"

        Raises:
            ValueError: If text is not a valid jersey number
        """
        if isinstance(text, int):
            return cls(text)
        stripped = str(text).strip()
        if not stripped.isdigit():
            raise ValueError(f"Jersey number must be numeric, got '{text}'")
        return cls(int(stripped))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class Height:
    """Height in centimetres."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value <= 0:
            raise ValueError(f"Height must be a positive integer (cm), got {self.value!r}")

    def __str__(self) -> str:
        return f"{self.value}cm"


@dataclass(frozen=True, order=True)
class Weight:
    """Weight in kilograms."""
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value <= 0:
            raise ValueError(f"Weight must be a positive integer (kg), got {self.value!r}")

    def __str__(self) -> str:
        return f"{self.value}kg"


@dataclass(frozen=True)
class Person:
    """
    A player known to the registry.

    Equality and hashing cover every field, so an edited copy is a
    different registry key than the original even when the name is kept.
    """
    name: Name
    jersey_number: JerseyNumber
    height: Height
    weight: Weight

    @classmethod
    def create(
        cls,
        name: str,
        jersey_number: Union[int, str],
        height: int,
        weight: int
    ) -> 'Person':
        """
        Factory method to create a person from plain values.

        Args:
            name: Full name
            jersey_number: Jersey number as int or numeric string
            height: Height in cm
            weight: Weight in kg

        Returns:
            Person instance

        Raises:
            ValueError: If any field fails validation
        """
        return cls(
            name=Name(name),
            jersey_number=JerseyNumber.parse(jersey_number),
            height=Height(height),
            weight=Weight(weight)
        )

    def with_changes(self, **fields: Any) -> 'Person':
        """
        Return an edited copy. Plain values are wrapped in their value type.

        Example:
            >>> alice.with_changes(jersey_number=23, weight=70)
        """
        factories = {
            'name': (Name, Name),
            'jersey_number': (JerseyNumber, JerseyNumber.parse),
            'height': (Height, Height),
            'weight': (Weight, Weight),
        }
        converted = {}
        for key, value in fields.items():
            if key not in factories:
                raise ValueError(f"Unknown person field: {key}")
            value_type, factory = factories[key]
            converted[key] = value if isinstance(value, value_type) else factory(value)
        return replace(self, **converted)

    def to_dict(self) -> Dict[str, Any]:
        """Convert person to a plain dictionary for display."""
        return {
            'name': self.name.value,
            'jersey_number': self.jersey_number.value,
            'height': self.height.value,
            'weight': self.weight.value,
        }

    def __str__(self) -> str:
        return f"#{self.jersey_number} {self.name} ({self.height}, {self.weight})"
