from PySide6.QtCore import QObject, Signal

from .core.time_index import TimeOrderedIndex
from .utils.helpers import parse_time

TRACK_LOGS = "logs"
TRACK_ALERTS = "alerts"
TRACKS = (TRACK_LOGS, TRACK_ALERTS)


class SyncController(QObject):
    """
    Keeps the playback time and the two event tracks (logs, alerts) in step.

    time -> rows:  time_changed() selects, on each track, the last row at or
                   before the new time.
    row -> time:   row_pressed() emits time_requested with the row's time and
                   then updates the other track. The pressed track is the
                   active source and never receives its own selection back.
    """

    time_requested = Signal(float)     # seconds, for the time slider
    log_row_selected = Signal(int)     # row in the logs track
    alert_row_selected = Signal(int)   # row in the alerts track

    IDLE = "idle"
    DRIVING_FROM_TIME = "driving_from_time"
    DRIVING_FROM_ROW = "driving_from_row"

    def __init__(self, log_index=None, alert_index=None):
        super().__init__()
        self.indices = {
            TRACK_LOGS: log_index if log_index is not None else TimeOrderedIndex(TRACK_LOGS),
            TRACK_ALERTS: alert_index if alert_index is not None else TimeOrderedIndex(TRACK_ALERTS),
        }
        self.selected_rows = {track: None for track in TRACKS}
        self.active_source = None
        self.state = self.IDLE

    def index(self, track):
        if track not in self.indices:
            raise ValueError(f"Unknown track: {track}")
        return self.indices[track]

    def selected_row(self, track):
        return self.selected_rows[track]

    def reset(self):
        self.selected_rows = {track: None for track in TRACKS}
        self.active_source = None
        self.state = self.IDLE

    # --- Inbound: time source ---

    def time_changed(self, value):
        # While a row press is in flight the slider only echoes our own value
        if self.state != self.IDLE:
            return

        self.state = self.DRIVING_FROM_TIME
        try:
            self._propagate_time(value)
        finally:
            self.state = self.IDLE

    def time_text_changed(self, text):
        value = parse_time(text)
        if value is None:
            return
        self.time_changed(value)

    # --- Inbound: row pressed in a track ---

    def row_pressed(self, track, row):
        index = self.index(track)
        if self.state != self.IDLE:
            return

        value = index.timestamp_of(row)
        if value is None:
            return

        self.state = self.DRIVING_FROM_ROW
        self.active_source = track
        self.selected_rows[track] = row
        try:
            self.time_requested.emit(value)
            self._propagate_time(value)
        finally:
            self.active_source = None
            self.state = self.IDLE

    def _propagate_time(self, value):
        for track in TRACKS:
            if track == self.active_source:
                continue
            row = self.indices[track].last_row_at_or_before(value)
            if row is None or row == self.selected_rows[track]:
                continue
            self.selected_rows[track] = row
            self._row_signal(track).emit(row)

    def _row_signal(self, track):
        if track == TRACK_LOGS:
            return self.log_row_selected
        return self.alert_row_selected
