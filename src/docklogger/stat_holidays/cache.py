"""Year-keyed cache of persisted stat holiday overrides."""

from __future__ import annotations

import threading

from docklogger.models.holiday import HolidayRecord


class HolidayYearCache:
    """Process-lifetime cache of override tables, one entry per year.

    Entries are published whole and never replaced or removed: callers build
    the full tuple first and ``publish`` it, so a reader sees either no entry
    or a complete one. An empty tuple records "looked up, nothing persisted".
    """

    def __init__(self) -> None:
        self._entries: dict[int, tuple[HolidayRecord, ...]] = {}
        self._lock = threading.Lock()

    def get(self, year: int) -> tuple[HolidayRecord, ...] | None:
        return self._entries.get(year)

    def publish(self, year: int, holidays: tuple[HolidayRecord, ...]) -> tuple[HolidayRecord, ...]:
        """Publish ``holidays`` for ``year`` unless another caller already did.

        Returns the tuple that is now cached (the first one published wins).
        """
        with self._lock:
            return self._entries.setdefault(year, tuple(holidays))

    def __contains__(self, year: object) -> bool:
        return year in self._entries

    def __len__(self) -> int:
        return len(self._entries)
