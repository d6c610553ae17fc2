"""
Player Registry Exception Hierarchy

Exception Hierarchy:
    RegistryException (base)
    ├── PersonNotFoundException
    ├── CapacityExceededException
    ├── DuplicateIdentityException
    └── InconsistentEditException

All exceptions include:
- error_code: Unique identifier for programmatic handling
- context_dict: Relevant context (name, jersey number, capacity, etc.)

Queries never raise; they return None or an empty list for absent data.
"""

from typing import Any, Dict, Optional
from datetime import datetime


class RegistryException(Exception):
    """
    Base exception for all player registry errors.

    Attributes:
        message: Human-readable error message
        error_code: Unique error code (e.g., "REGISTRY_CAPACITY_002")
        context_dict: Additional context
        timestamp: When the exception was raised
    """

    def __init__(
        self,
        message: str,
        error_code: str = "REGISTRY_000",
        context_dict: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.context_dict = context_dict or {}
        self.timestamp = datetime.now().isoformat()

        super().__init__(self._build_error_message())

    def _build_error_message(self) -> str:
        """Build error message with context"""
        message = f"[{self.error_code}] {self.message}"
        if self.context_dict:
            context = ", ".join(f"{k}={v}" for k, v in self.context_dict.items())
            message = f"{message} ({context})"
        return message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context_dict,
            "timestamp": self.timestamp
        }


class PersonNotFoundException(RegistryException):
    """
    Raised when a mutation names a person who is not registered.

    Examples:
    - Associating an unregistered person with a team or lineup
    """

    def __init__(self, name: Any, message: Optional[str] = None):
        super().__init__(
            message=message or f"Player '{name}' is not registered",
            error_code="REGISTRY_NOT_FOUND_001",
            context_dict={"name": str(name)}
        )


class CapacityExceededException(RegistryException):
    """Raised when adding a player to a full registry."""

    def __init__(self, capacity: int, name: Any = None):
        context = {"capacity": capacity}
        if name is not None:
            context["name"] = str(name)
        super().__init__(
            message=f"Registry is full ({capacity} players)",
            error_code="REGISTRY_CAPACITY_002",
            context_dict=context
        )
        self.capacity = capacity


class DuplicateIdentityException(RegistryException):
    """
    Raised when a name or jersey number is already held by another player.

    Attributes:
        field: "name" or "jersey_number"
        value: The conflicting value
    """

    def __init__(self, field: str, value: Any, holder: Any = None):
        context = {"field": field, "value": str(value)}
        if holder is not None:
            context["held_by"] = str(holder)
        label = "Name" if field == "name" else "Jersey number"
        super().__init__(
            message=f"{label} '{value}' is already taken",
            error_code="REGISTRY_DUPLICATE_003",
            context_dict=context
        )
        self.field = field
        self.value = value


class InconsistentEditException(RegistryException):
    """Raised when editing a player who is not currently registered."""

    def __init__(self, name: Any):
        super().__init__(
            message=f"Cannot edit '{name}': player is not registered",
            error_code="REGISTRY_EDIT_004",
            context_dict={"name": str(name)}
        )
