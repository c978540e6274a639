from dataclasses import replace

from PySide6.QtCore import QObject, Signal

from .config import get_config
from .controllers import SyncController, TRACK_ALERTS, TRACK_LOGS
from .core.alert_catalog import AlertCatalog
from .core.records import (AlertEventRecord, InfoItem, LogEventRecord, ParameterItem,
                           normalize_log_level)
from .core.time_index import TimeOrderedIndex
from .models import EventTableModel, KeyValueTableModel
from .utils.helpers import format_number


class ParametersPanel(QObject):
    """
    Data side of the flight-log metadata panel.

    Everything is built once from a parser's output: the info and parameter
    tables, the log and alert tracks with their time indices, and the
    SyncController that ties the tracks to the playback time. Views connect
    to the models and to the controller's signals.
    """

    loaded = Signal()

    def __init__(self, parser=None, config=None, catalog=None):
        super().__init__()
        self.config = config if config is not None else get_config()
        self.catalog = catalog
        # Only a catalog the panel loaded itself follows the configured path
        self._owns_catalog = catalog is None
        self.info_model = KeyValueTableModel(headers=("Name", "Value"))
        self.params_model = KeyValueTableModel(headers=("Name", "Value"))
        self.logs_model = EventTableModel(time_precision=self.config.time_precision)
        self.alerts_model = EventTableModel(time_precision=self.config.time_precision,
                                            tooltip_provider=self._alert_tooltip)
        self.log_records = []
        self.alert_records = []
        self.sync = SyncController()

        self.config.timePrecisionChanged.connect(self._on_time_precision_changed)
        self.config.alertDefinitionsPathChanged.connect(self._on_alert_definitions_path_changed)

        if parser is not None:
            self.load(parser)

    @property
    def has_alerts(self):
        # The alerts table is hidden when the log carries none
        return bool(self.alert_records)

    def load(self, parser):
        if self.catalog is None:
            self.catalog = AlertCatalog()
            self.catalog.load(self.config.alert_definitions_path)

        info = [_to_info(item) for item in _items(_call(parser, "get_info"))]
        params = [_to_parameter(item) for item in _items(_call(parser, "get_parameters"))]

        self.log_records = [_to_log_record(row, item)
                            for row, item in enumerate(_call(parser, "get_logs") or [])]
        self.alert_records = [_to_alert_record(row, item, self.catalog)
                              for row, item in enumerate(_call(parser, "get_alerts") or [])]

        self.info_model.set_rows((i.key, i.value) for i in info)
        self.params_model.set_rows((p.name, format_number(p.value, p.is_float)) for p in params)

        self.logs_model.set_records(self.log_records)
        self.alerts_model.set_records(self.alert_records)

        self.sync.indices[TRACK_LOGS] = TimeOrderedIndex.from_records(self.log_records, TRACK_LOGS)
        self.sync.indices[TRACK_ALERTS] = TimeOrderedIndex.from_records(self.alert_records, TRACK_ALERTS)
        self.sync.reset()

        self.loaded.emit()

    # --- View-facing slots ---

    def on_logs_row_pressed(self, row, column=0):
        self.sync.row_pressed(TRACK_LOGS, row)

    def on_alerts_row_pressed(self, row, column=0):
        self.sync.row_pressed(TRACK_ALERTS, row)

    def on_time_changed(self, value):
        self.sync.time_changed(value)

    def _alert_tooltip(self, record):
        if self.catalog is None:
            return ""
        return self.catalog.description(record.code)

    def _on_time_precision_changed(self, precision):
        self.logs_model.set_time_precision(precision)
        self.alerts_model.set_time_precision(precision)

    def _on_alert_definitions_path_changed(self, path):
        if not self._owns_catalog:
            return
        if self.catalog is None:
            self.catalog = AlertCatalog()
        self.catalog.load(path)
        self.rerender_alerts()

    def rerender_alerts(self):
        """Re-renders alert messages from the current catalog. Row ids and times are unchanged."""
        self.alert_records = [
            replace(record, rendered_message=self.catalog.render(record.code, record.raw_params))
            for record in self.alert_records
        ]
        self.alerts_model.set_records(self.alert_records)


def _call(parser, name):
    if isinstance(parser, dict):
        return parser.get(name[len("get_"):])
    method = getattr(parser, name, None)
    return method() if callable(method) else None


def _items(data):
    if data is None:
        return []
    if isinstance(data, dict):
        return list(data.items())
    return list(data)


def _field(item, *names, default=None):
    for name in names:
        if isinstance(item, dict):
            if name in item:
                return item[name]
        elif hasattr(item, name):
            return getattr(item, name)
    return default


def _to_info(item):
    if isinstance(item, InfoItem):
        return item
    if isinstance(item, (tuple, list)):
        key, value = item
    else:
        key, value = _field(item, "key", "name"), _field(item, "value")
    return InfoItem(str(key), "" if value is None else str(value))


def _to_parameter(item):
    if isinstance(item, ParameterItem):
        return item
    if isinstance(item, (tuple, list)):
        name, value = item
        is_float = isinstance(value, float)
    else:
        name = _field(item, "name")
        value = _field(item, "value")
        is_float = _field(item, "is_float", default=isinstance(value, float))
    return ParameterItem(str(name), value, bool(is_float))


def _to_log_record(row, item):
    if isinstance(item, LogEventRecord):
        return item
    return LogEventRecord(
        timestamp=int(_field(item, "timestamp", "ts", default=0)),
        row_id=row,
        level=normalize_log_level(_field(item, "level", default="")),
        message=str(_field(item, "message", "msg", default="")),
    )


def _to_alert_record(row, item, catalog):
    if isinstance(item, AlertEventRecord):
        return item
    code = int(_field(item, "code", default=0))
    params = tuple(str(_field(item, name, default="")) for name in ("param1", "param2", "param3"))
    return AlertEventRecord(
        timestamp=int(_field(item, "timestamp", "ts", default=0)),
        row_id=row,
        code=code,
        level=int(_field(item, "level", default=0)),
        rendered_message=catalog.render(code, params),
        raw_params=params,
    )
