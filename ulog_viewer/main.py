import argparse
import json
import sys

from ulog_viewer.config import get_config
from ulog_viewer.core.alert_catalog import AlertCatalog
from ulog_viewer.controllers import TRACK_ALERTS, TRACK_LOGS
from ulog_viewer.panel import ParametersPanel
from ulog_viewer.utils.helpers import install_message_handler


def print_tracks(panel, time_value=None):
    selected = {TRACK_LOGS: None, TRACK_ALERTS: None}
    if time_value is not None:
        panel.sync.log_row_selected.connect(lambda row: selected.__setitem__(TRACK_LOGS, row))
        panel.sync.alert_row_selected.connect(lambda row: selected.__setitem__(TRACK_ALERTS, row))
        panel.on_time_changed(time_value)

    for title, model in (("Info", panel.info_model), ("Parameters", panel.params_model)):
        print(f"== {title}")
        for row in range(model.rowCount()):
            key, value = model.row_data(row)
            print(f"{key}\t{value}")

    tracks = [("Logs", TRACK_LOGS, panel.logs_model)]
    if panel.has_alerts:
        tracks.append(("Alerts", TRACK_ALERTS, panel.alerts_model))

    for title, track, model in tracks:
        print(f"== {title}")
        for row in range(model.rowCount()):
            record = model.record(row)
            marker = ">" if selected[track] == row else " "
            text = getattr(record, "message", None) or getattr(record, "rendered_message", "")
            print(f"{marker} {model.time_text(row)}\t{record.level_name}\t{text}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Flight log metadata panel (text mode)")
    parser.add_argument("dump", help="Parsed log as JSON: {info, parameters, logs, alerts}")
    parser.add_argument("-a", "--alerts", help="Alert definitions file (defaults to the configured path)")
    parser.add_argument("-t", "--time", type=float, help="Playback time in seconds to select rows at")
    args = parser.parse_args(argv)

    install_message_handler()

    config = get_config()
    catalog = AlertCatalog()
    catalog.load(args.alerts or config.alert_definitions_path)

    try:
        with open(args.dump, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        print(f"Error loading {args.dump}: {e}")
        return 1

    panel = ParametersPanel(data, config=config, catalog=catalog)
    print_tracks(panel, args.time)
    return 0


if __name__ == "__main__":
    sys.exit(main())
