"""Qt Model/View data models for the Roster Manager UI."""

from .roster_table_model import RosterTableModel

__all__ = [
    'RosterTableModel',
]
