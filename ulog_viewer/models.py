from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex

from .utils.helpers import format_time

RecordRole = Qt.UserRole + 1


class KeyValueTableModel(QAbstractTableModel):
    """Two-column table (info fields, parameters), sorted by key."""

    def __init__(self, rows=None, headers=("Name", "Value")):
        super().__init__()
        self.headers = tuple(headers)
        self._rows = []
        self.set_rows(rows or [])

    def set_rows(self, rows):
        self.beginResetModel()
        self._rows = sorted(((str(k), str(v)) for k, v in rows), key=lambda kv: kv[0])
        self.endResetModel()

    def row_data(self, row):
        return self._rows[row]

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._rows)

    def columnCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return 2

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid() or index.row() >= len(self._rows):
            return None
        if role == Qt.DisplayRole:
            return self._rows[index.row()][index.column()]
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role == Qt.DisplayRole and orientation == Qt.Horizontal and section < len(self.headers):
            return self.headers[section]
        return None


class EventTableModel(QAbstractTableModel):
    """
    Time / Level / Message table for one event track.
    Rows are kept in ingestion order so a row number is also the record's row_id.
    """

    COLUMN_TIME = 0
    COLUMN_LEVEL = 1
    COLUMN_MESSAGE = 2
    HEADERS = ("Time", "Level", "Message")

    def __init__(self, records=None, time_precision=2, tooltip_provider=None):
        super().__init__()
        self._records = list(records or [])
        self.time_precision = time_precision
        self.tooltip_provider = tooltip_provider  # callable(record) -> str

    def set_records(self, records):
        self.beginResetModel()
        self._records = list(records)
        self.endResetModel()

    def set_time_precision(self, precision):
        if precision == self.time_precision:
            return
        self.time_precision = precision
        if self._records:
            top = self.index(0, self.COLUMN_TIME)
            bottom = self.index(len(self._records) - 1, self.COLUMN_TIME)
            self.dataChanged.emit(top, bottom, [Qt.DisplayRole])

    def record(self, row):
        if 0 <= row < len(self._records):
            return self._records[row]
        return None

    def time_text(self, row):
        record = self.record(row)
        if record is None:
            return None
        return format_time(record.seconds, self.time_precision)

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._records)

    def columnCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self.HEADERS)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        record = self.record(index.row())
        if record is None:
            return None

        if role == RecordRole:
            return record

        if role == Qt.DisplayRole:
            column = index.column()
            if column == self.COLUMN_TIME:
                return format_time(record.seconds, self.time_precision)
            if column == self.COLUMN_LEVEL:
                return record.level_name
            if column == self.COLUMN_MESSAGE:
                return getattr(record, "message", None) or getattr(record, "rendered_message", "")

        if role == Qt.ToolTipRole and self.tooltip_provider and index.column() == self.COLUMN_MESSAGE:
            return self.tooltip_provider(record) or None

        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole:
            return None
        if orientation == Qt.Horizontal and section < len(self.HEADERS):
            return self.HEADERS[section]
        return None
