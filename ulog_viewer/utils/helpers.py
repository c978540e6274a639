from PySide6.QtCore import QtMsgType, qInstallMessageHandler


def format_time(seconds, precision=2):
    return f"{seconds:.{precision}f}"


def parse_time(text):
    """Returns the float value of a time display string, or None if it isn't one."""
    if text is None:
        return None
    try:
        value = float(str(text).strip())
    except ValueError:
        return None
    if value != value:  # NaN
        return None
    return value


def format_number(value, is_float=False):
    # Same output as QString::number: 6 significant digits for reals
    if is_float:
        return f"{float(value):.6g}"
    return str(int(value))


def qt_message_handler(mode, context, message):
    if mode == QtMsgType.QtInfoMsg: mode_str = "Info"
    elif mode == QtMsgType.QtWarningMsg: mode_str = "Warning"
    elif mode == QtMsgType.QtCriticalMsg: mode_str = "Critical"
    elif mode == QtMsgType.QtFatalMsg: mode_str = "Fatal"
    else: mode_str = "Debug"
    print(f"[{mode_str}] {message}")


def install_message_handler(handler=qt_message_handler):
    """Routes qDebug/qWarning output through handler. Returns the previous one."""
    return qInstallMessageHandler(handler)
