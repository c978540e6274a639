import unittest
from unittest.mock import MagicMock

from PySide6.QtCore import QCoreApplication

from ulog_viewer.controllers import SyncController, TRACK_ALERTS, TRACK_LOGS
from ulog_viewer.core.time_index import TimeOrderedIndex


def setUpModule():
    if QCoreApplication.instance() is None:
        QCoreApplication([])


def make_index(times):
    index = TimeOrderedIndex()
    for row, ts in enumerate(times):
        index.insert(ts, row)
    return index


class TestSyncController(unittest.TestCase):
    def setUp(self):
        # logs: 1.0, 2.5, 4.0    alerts: 2.0, 6.0
        self.controller = SyncController(make_index([1.0, 2.5, 4.0]), make_index([2.0, 6.0]))
        self.on_log_row = MagicMock()
        self.on_alert_row = MagicMock()
        self.on_time = MagicMock()
        self.controller.log_row_selected.connect(self.on_log_row)
        self.controller.alert_row_selected.connect(self.on_alert_row)
        self.controller.time_requested.connect(self.on_time)

    def test_time_selects_rows_on_both_tracks(self):
        self.controller.time_changed(3.0)
        self.on_log_row.assert_called_once_with(1)
        self.on_alert_row.assert_called_once_with(0)
        self.on_time.assert_not_called()
        self.assertEqual(self.controller.state, SyncController.IDLE)

    def test_time_before_all_entries(self):
        self.controller.time_changed(0.5)
        self.on_log_row.assert_not_called()
        self.on_alert_row.assert_not_called()

    def test_tracks_resolve_independently(self):
        self.controller.time_changed(1.5)
        self.on_log_row.assert_called_once_with(0)
        self.on_alert_row.assert_not_called()

    def test_same_time_twice_is_idempotent(self):
        self.controller.time_changed(3.0)
        self.controller.time_changed(3.0)
        self.controller.time_changed(3.2)
        self.assertEqual(self.on_log_row.call_count, 1)
        self.assertEqual(self.on_alert_row.call_count, 1)

    def test_row_press_requests_time_and_updates_other_track(self):
        self.controller.row_pressed(TRACK_LOGS, 2)
        self.on_time.assert_called_once_with(4.0)
        self.on_alert_row.assert_called_once_with(0)
        self.on_log_row.assert_not_called()
        self.assertIsNone(self.controller.active_source)
        self.assertEqual(self.controller.state, SyncController.IDLE)
        self.assertEqual(self.controller.selected_row(TRACK_LOGS), 2)

    def test_active_source_suppresses_echo_from_slider(self):
        # A slider that feeds the requested time straight back
        self.controller.time_requested.connect(self.controller.time_changed)
        self.controller.row_pressed(TRACK_ALERTS, 0)
        self.on_time.assert_called_once_with(2.0)
        self.on_alert_row.assert_not_called()
        self.on_log_row.assert_called_once_with(0)

    def test_pressed_row_not_reselected_on_same_track(self):
        # Row 0 and row 1 of logs share a time: pressing row 0 must not jump to row 1
        controller = SyncController(make_index([1.0, 1.0]), make_index([]))
        on_log_row = MagicMock()
        controller.log_row_selected.connect(on_log_row)
        controller.row_pressed(TRACK_LOGS, 0)
        on_log_row.assert_not_called()

    def test_time_after_row_press_rearms_both_tracks(self):
        self.controller.row_pressed(TRACK_LOGS, 0)
        self.controller.time_changed(6.5)
        self.on_log_row.assert_called_once_with(2)
        self.on_alert_row.assert_called_once_with(1)

    def test_unknown_row_emits_nothing(self):
        self.controller.row_pressed(TRACK_LOGS, 99)
        self.on_time.assert_not_called()
        self.on_alert_row.assert_not_called()

    def test_unknown_track(self):
        with self.assertRaises(ValueError):
            self.controller.row_pressed("params", 0)

    def test_time_text(self):
        self.controller.time_text_changed("not a number")
        self.controller.time_text_changed("")
        self.on_log_row.assert_not_called()
        self.controller.time_text_changed(" 2.50 ")
        self.on_log_row.assert_called_once_with(1)

    def test_state_restored_when_receiver_raises(self):
        self.controller.alert_row_selected.connect(MagicMock(side_effect=RuntimeError("boom")))
        try:
            self.controller.row_pressed(TRACK_LOGS, 2)
        except RuntimeError:
            pass
        self.assertIsNone(self.controller.active_source)
        self.assertEqual(self.controller.state, SyncController.IDLE)

    def test_reset(self):
        self.controller.time_changed(3.0)
        self.controller.reset()
        self.controller.time_changed(3.0)
        self.assertEqual(self.on_log_row.call_count, 2)


if __name__ == '__main__':
    unittest.main()
