from dataclasses import dataclass, field

LOG_LEVELS = {
    '0': "EMERGENCY",
    '1': "ALERT",
    '2': "CRITICAL",
    '3': "ERROR",
    '4': "WARNING",
    '5': "NOTICE",
    '6': "INFO",
    '7': "DEBUG",
}

ALERT_LEVELS = {
    0: "NONE",
    1: "INFO",
    2: "PREFLIGHT",
    3: "WARNING",
    4: "ERROR",
    5: "CRITICAL",
    6: "EMERGENCY",
}


def micros_to_seconds(timestamp):
    """Truncates a microsecond timestamp to milliseconds and returns seconds."""
    return (int(timestamp) // 1000) / 1000.0


def normalize_log_level(level):
    # Dumps may carry the severity as a number instead of its character
    if isinstance(level, int) and not isinstance(level, bool) and 0 <= level <= 9:
        return str(level)
    return level


def log_level_name(level):
    if level in LOG_LEVELS:
        return LOG_LEVELS[level]
    # Unknown codes show their numeric value ('9' -> 57)
    if isinstance(level, str) and len(level) == 1:
        return str(ord(level))
    return str(level)


def alert_level_name(level):
    return ALERT_LEVELS.get(level, f"**Unknown {level} **")


@dataclass(frozen=True)
class InfoItem:
    key: str
    value: str


@dataclass(frozen=True)
class ParameterItem:
    name: str
    value: float
    is_float: bool = False


@dataclass(frozen=True)
class LogEventRecord:
    timestamp: int  # microseconds
    row_id: int
    level: str
    message: str

    @property
    def seconds(self):
        return micros_to_seconds(self.timestamp)

    @property
    def level_name(self):
        return log_level_name(self.level)


@dataclass(frozen=True)
class AlertEventRecord:
    timestamp: int  # microseconds
    row_id: int
    code: int
    level: int
    rendered_message: str
    raw_params: tuple = field(default_factory=tuple)

    @property
    def seconds(self):
        return micros_to_seconds(self.timestamp)

    @property
    def level_name(self):
        return alert_level_name(self.level)
