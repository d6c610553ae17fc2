"""Controllers connecting roster views to the player registry."""

from .roster_controller import RosterController, CommandResult

__all__ = [
    'RosterController',
    'CommandResult',
]
