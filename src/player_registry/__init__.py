"""
Player Registry Module

Keeps the name, jersey, team and lineup indexes of the roster consistent.
"""

from .player_registry import PlayerRegistry
from .player_sorting import SortCriteria, SortOrder, sort_players, describe_sort
from .registry_exceptions import (
    RegistryException,
    PersonNotFoundException,
    CapacityExceededException,
    DuplicateIdentityException,
    InconsistentEditException
)

__all__ = [
    'PlayerRegistry',
    'SortCriteria',
    'SortOrder',
    'sort_players',
    'describe_sort',
    'RegistryException',
    'PersonNotFoundException',
    'CapacityExceededException',
    'DuplicateIdentityException',
    'InconsistentEditException'
]
