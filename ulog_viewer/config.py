from PySide6.QtCore import QObject, QSettings, Signal


class ConfigManager(QObject):
    """
    Panel settings stored in QSettings.
    Pass a QSettings instance to use a specific store (e.g. an ini file in tests).
    """

    alertDefinitionsPathChanged = Signal(str)
    timePrecisionChanged = Signal(int)

    DEFAULT_ALERT_DEFINITIONS = "alert.json"
    DEFAULT_TIME_PRECISION = 2

    def __init__(self, settings=None):
        super().__init__()
        self.settings = settings if settings is not None else QSettings("ULogViewer", "ULogViewer")

    def get(self, key, default=None):
        return self.settings.value(key, default)

    def set(self, key, value):
        self.settings.setValue(key, value)

    @property
    def alert_definitions_path(self):
        return str(self.settings.value("alerts/definitions_path", self.DEFAULT_ALERT_DEFINITIONS))

    @alert_definitions_path.setter
    def alert_definitions_path(self, value):
        if self.alert_definitions_path != value:
            self.settings.setValue("alerts/definitions_path", value)
            self.alertDefinitionsPathChanged.emit(value)

    @property
    def time_precision(self):
        try:
            return int(self.settings.value("panel/time_precision", self.DEFAULT_TIME_PRECISION))
        except (TypeError, ValueError):
            return self.DEFAULT_TIME_PRECISION

    @time_precision.setter
    def time_precision(self, value):
        value = max(0, int(value))
        if self.time_precision != value:
            self.settings.setValue("panel/time_precision", value)
            self.timePrecisionChanged.emit(value)


# Global instance
_config_instance = None

def get_config():
    global _config_instance
    if _config_instance is None:
        _config_instance = ConfigManager()
    return _config_instance
