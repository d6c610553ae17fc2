"""
Roster Domain Module

Value types for players and the team and lineup aggregates that
reference them.
"""

from .person import Person, Name, JerseyNumber, Height, Weight
from .team import Team
from .lineup import Lineup

__all__ = [
    'Person',
    'Name',
    'JerseyNumber',
    'Height',
    'Weight',
    'Team',
    'Lineup'
]
