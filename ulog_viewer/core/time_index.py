import bisect
import math


class TimeOrderedIndex:
    """
    Sorted (timestamp_seconds, row_id) pairs for one event track.
    Equal timestamps are ordered by row id, so a query landing on a tie
    returns the highest row among them.
    """

    def __init__(self, name=""):
        self.name = name
        self._keys = []  # sorted list of (seconds, row_id)
        self._times_by_row = {}

    @classmethod
    def from_records(cls, records, name=""):
        index = cls(name)
        for record in records:
            index.insert(record.seconds, record.row_id)
        return index

    def insert(self, timestamp_seconds, row_id):
        key = (float(timestamp_seconds), row_id)
        # Records arrive in time order, so appending is the common case
        if not self._keys or self._keys[-1] <= key:
            self._keys.append(key)
        else:
            bisect.insort_right(self._keys, key)
        self._times_by_row[row_id] = key[0]

    def last_row_at_or_before(self, t):
        if not self._keys:
            return None
        idx = bisect.bisect_right(self._keys, (t, math.inf))
        if idx == 0:
            return None
        return self._keys[idx - 1][1]

    def timestamp_of(self, row_id):
        return self._times_by_row.get(row_id)

    def __len__(self):
        return len(self._keys)

    def __iter__(self):
        return iter(self._keys)
