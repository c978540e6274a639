import unittest

from ulog_viewer.core.records import LogEventRecord, micros_to_seconds
from ulog_viewer.core.time_index import TimeOrderedIndex


class TestTimeOrderedIndex(unittest.TestCase):
    def setUp(self):
        records = [
            LogEventRecord(1_000_000, 0, '6', "boot"),
            LogEventRecord(2_500_000, 1, '4', "low battery"),
            LogEventRecord(4_000_000, 2, '3', "failsafe"),
        ]
        self.index = TimeOrderedIndex.from_records(records, "logs")

    def test_seconds_conversion(self):
        self.assertEqual([ts for ts, _ in self.index], [1.0, 2.5, 4.0])
        self.assertEqual(micros_to_seconds(1_234_999), 1.234)

    def test_last_row_at_or_before(self):
        self.assertEqual(self.index.last_row_at_or_before(3.0), 1)
        self.assertEqual(self.index.last_row_at_or_before(2.5), 1)
        self.assertEqual(self.index.last_row_at_or_before(4.0), 2)
        self.assertEqual(self.index.last_row_at_or_before(100.0), 2)

    def test_before_first_entry(self):
        self.assertIsNone(self.index.last_row_at_or_before(0.999))

    def test_empty_index(self):
        self.assertIsNone(TimeOrderedIndex().last_row_at_or_before(5.0))
        self.assertEqual(len(TimeOrderedIndex()), 0)

    def test_timestamp_of(self):
        self.assertEqual(self.index.timestamp_of(0), 1.0)
        self.assertEqual(self.index.timestamp_of(1), 2.5)
        self.assertIsNone(self.index.timestamp_of(42))

    def test_ties_resolve_to_highest_row(self):
        index = TimeOrderedIndex()
        index.insert(1.0, 0)
        index.insert(2.0, 1)
        index.insert(2.0, 2)
        index.insert(2.0, 3)
        self.assertEqual(index.last_row_at_or_before(2.0), 3)
        self.assertEqual(index.last_row_at_or_before(1.5), 0)

    def test_out_of_order_insert(self):
        index = TimeOrderedIndex()
        for ts, row in [(5.0, 0), (1.0, 1), (3.0, 2), (3.0, 3)]:
            index.insert(ts, row)
        self.assertEqual([key for key in index], [(1.0, 1), (3.0, 2), (3.0, 3), (5.0, 0)])
        self.assertEqual(index.last_row_at_or_before(4.0), 3)
        self.assertEqual(index.timestamp_of(0), 5.0)

    def test_result_is_max_timestamp_not_after_query(self):
        index = TimeOrderedIndex()
        times = [0.0, 0.5, 0.5, 1.25, 3.0, 7.75]
        for row, ts in enumerate(times):
            index.insert(ts, row)
        for t in [0.0, 0.4, 0.5, 1.0, 1.25, 2.9, 3.0, 7.0, 8.0]:
            row = index.last_row_at_or_before(t)
            expected = max(ts for ts in times if ts <= t)
            self.assertEqual(index.timestamp_of(row), expected)


if __name__ == '__main__':
    unittest.main()
