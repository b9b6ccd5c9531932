"""Weekly time sheet of hour entries with simple statistics."""

from __future__ import annotations

import math

MIN_HOURS = 1
MAX_HOURS = 10


class TimeSheet:
    """A named list of hour entries, bounded in count and value."""

    def __init__(self, name: str, max_entries: int) -> None:
        self._name = name
        self._max_entries = max_entries
        self._entries: list[int] = []

    @property
    def name(self) -> str:
        """The employee name."""
        return self._name

    @property
    def entries(self) -> tuple[int, ...]:
        """The recorded entries in order."""
        return tuple(self._entries)

    def add_time(self, hours: int) -> None:
        """Record hours; ignored when the sheet is full or hours is outside 1..10."""
        if len(self._entries) >= self._max_entries:
            return
        if not MIN_HOURS <= hours <= MAX_HOURS:
            return
        self._entries.append(hours)

    def time_entry(self, index: int) -> int:
        """Return the entry at index; raise IndexError if it was never recorded."""
        if not 0 <= index < len(self._entries):
            raise IndexError("time entry index out of range")
        return self._entries[index]

    def total_time(self) -> int:
        """Sum of all entries."""
        return sum(self._entries)

    def average_time(self) -> float:
        """Mean of the entries, 0.0 when there are none."""
        total = self.total_time()
        return 0.0 if total == 0 else total / len(self._entries)

    def standard_deviation(self) -> float:
        """Population standard deviation of the entries."""
        average = self.average_time()
        spread = sum((entry - average) ** 2 for entry in self._entries)
        return 0.0 if spread == 0 else math.sqrt(spread / len(self._entries))

    def copy(self) -> TimeSheet:
        """Return an independent sheet with the same name, limit and entries."""
        duplicate = TimeSheet(self._name, self._max_entries)
        duplicate._entries = list(self._entries)
        return duplicate

    def __len__(self) -> int:
        return len(self._entries)