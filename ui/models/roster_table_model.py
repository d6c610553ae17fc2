"""
Roster Table Model for the Roster Manager UI

Qt table model showing every registered player together with the team
and lineups the registry associates with them.
"""

from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex
from PySide6.QtGui import QColor
from typing import List, Optional, Any

from player_registry.player_registry import PlayerRegistry
from player_registry.player_sorting import SortCriteria, SortOrder, describe_sort
from roster.person import Person


class RosterTableModel(QAbstractTableModel):
    """
    Qt table model over a PlayerRegistry.

    Features:
    - 6 columns: #, Name, Team, Lineups, Height, Weight
    - Rows re-read from the registry on refresh()
    - Players without a team are shaded
    - Height, weight and jersey columns sort through player_sorting
    """

    # Column indices
    COL_NUMBER = 0
    COL_NAME = 1
    COL_TEAM = 2
    COL_LINEUPS = 3
    COL_HEIGHT = 4
    COL_WEIGHT = 5

    UNASSIGNED_COLOR = QColor("#F5F5F5")   # Light gray - no team

    _CRITERIA_BY_COLUMN = {
        COL_NUMBER: SortCriteria.JERSEY_NUMBER,
        COL_HEIGHT: SortCriteria.HEIGHT,
        COL_WEIGHT: SortCriteria.WEIGHT,
    }

    def __init__(self, registry: Optional[PlayerRegistry] = None, parent=None):
        """
        Initialize roster table model.

        Args:
            registry: Registry to display (can be set later)
            parent: Qt parent object
        """
        super().__init__(parent)
        self._registry = registry
        self._players: List[Person] = []
        self._headers = ["#", "Name", "Team", "Lineups", "Height", "Weight"]
        self.last_sort_message: Optional[str] = None
        self.refresh()

    def refresh(self):
        """Reload rows from the registry in registration order."""
        self.beginResetModel()
        self._players = self._registry.get_all_persons() if self._registry is not None else []
        self.endResetModel()

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        """Return number of rows (players)."""
        if parent.isValid():
            return 0
        return len(self._players)

    def columnCount(self, parent: QModelIndex = QModelIndex()) -> int:
        """Return number of columns."""
        if parent.isValid():
            return 0
        return len(self._headers)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole) -> Any:
        """Return data for given index and role."""
        if not index.isValid():
            return None

        row = index.row()
        col = index.column()

        if row < 0 or row >= len(self._players):
            return None

        player = self._players[row]

        if role == Qt.BackgroundRole:
            if self._registry is not None and self._registry.get_team_of(player) is None:
                return self.UNASSIGNED_COLOR
            return None

        if role == Qt.TextAlignmentRole:
            if col in (self.COL_NUMBER, self.COL_HEIGHT, self.COL_WEIGHT):
                return Qt.AlignCenter
            return Qt.AlignLeft | Qt.AlignVCenter

        if role == Qt.DisplayRole:
            row_data = player.to_dict()

            if col == self.COL_NUMBER:
                return str(row_data['jersey_number'])

            elif col == self.COL_NAME:
                return row_data['name']

            elif col == self.COL_TEAM:
                team = self._registry.get_team_of(player) if self._registry is not None else None
                return team.name if team else "-"

            elif col == self.COL_LINEUPS:
                lineups = self._registry.get_lineups_of(player) if self._registry is not None else []
                return ", ".join(lineup.name for lineup in lineups)

            elif col == self.COL_HEIGHT:
                return f"{row_data['height']} cm"

            elif col == self.COL_WEIGHT:
                return f"{row_data['weight']} kg"

        return None

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:
        """Return item flags for given index."""
        if not index.isValid():
            return Qt.NoItemFlags
        return Qt.ItemIsEnabled | Qt.ItemIsSelectable

    def headerData(self, section: int, orientation: Qt.Orientation, role: int = Qt.DisplayRole) -> Any:
        """Return header data."""
        if role != Qt.DisplayRole:
            return None

        if orientation == Qt.Horizontal:
            if 0 <= section < len(self._headers):
                return self._headers[section]

        elif orientation == Qt.Vertical:
            return str(section + 1)

        return None

    def sort(self, column: int, order: Qt.SortOrder = Qt.AscendingOrder):
        """Sort roster by column."""
        sort_order = SortOrder.DESCENDING if order == Qt.DescendingOrder else SortOrder.ASCENDING
        reverse = sort_order == SortOrder.DESCENDING

        self.beginResetModel()

        criteria = self._CRITERIA_BY_COLUMN.get(column)
        if criteria is not None and self._registry is not None:
            self._players = self._registry.get_sorted_persons(criteria, sort_order)
            self.last_sort_message = describe_sort(criteria, sort_order)

        elif column == self.COL_NAME:
            self._players.sort(key=lambda p: p.name, reverse=reverse)

        elif column == self.COL_TEAM and self._registry is not None:
            registry = self._registry

            def team_name(player: Person) -> str:
                team = registry.get_team_of(player)
                return team.name if team else ""

            self._players.sort(key=team_name, reverse=reverse)

        elif column == self.COL_LINEUPS and self._registry is not None:
            self._players.sort(key=lambda p: len(self._registry.get_lineups_of(p)), reverse=reverse)

        self.endResetModel()

    def get_player_at_row(self, row: int) -> Optional[Person]:
        """
        Get player at given row index.

        Returns:
            Person or None if invalid row
        """
        if 0 <= row < len(self._players):
            return self._players[row]
        return None

    def clear(self):
        """Detach from the registry and drop all rows."""
        self.beginResetModel()
        self._registry = None
        self._players = []
        self.endResetModel()
