"""Tests for the year-keyed override cache under concurrent publication."""

from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor
from datetime import date

from docklogger.models.holiday import HolidayRecord
from docklogger.stat_holidays.cache import HolidayYearCache
from docklogger.stat_holidays.engine import CalendarEngine


def _record(name: str) -> HolidayRecord:
    return HolidayRecord(
        name=name, date=date(2030, 1, 1),
        qualification_start=date(2029, 11, 30), qualification_end=date(2029, 12, 28),
    )


class _SlowStore:
    """Holiday store that yields the GIL mid-read so lookups overlap."""

    def __init__(self) -> None:
        self.calls = 0
        self._lock = threading.Lock()

    def get_stat_holidays(self, year: int) -> list[dict]:
        with self._lock:
            self.calls += 1
            n = self.calls
        time.sleep(0.01)
        return [_record(f"Override {n}").to_item()]


class TestHolidayYearCache:
    def test_miss_returns_none(self):
        assert HolidayYearCache().get(2030) is None

    def test_first_publish_wins(self):
        cache = HolidayYearCache()
        first = (_record("first"),)
        assert cache.publish(2030, first) == first
        assert cache.publish(2030, (_record("second"),)) == first
        assert cache.get(2030) == first
        assert len(cache) == 1

    def test_empty_tuple_is_a_cached_entry(self):
        cache = HolidayYearCache()
        cache.publish(2030, ())
        assert 2030 in cache
        assert cache.get(2030) == ()

    def test_concurrent_publishers_agree(self):
        cache = HolidayYearCache()
        barrier = threading.Barrier(16)

        def publish(i: int):
            barrier.wait()
            return cache.publish(2030, (_record(f"holiday {i}"),))

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(publish, range(16)))

        assert all(r == results[0] for r in results)
        assert cache.get(2030) == results[0]


class TestConcurrentResolution:
    def test_all_readers_see_one_complete_table(self):
        store = _SlowStore()
        engine = CalendarEngine(store=store)

        with ThreadPoolExecutor(max_workers=12) as pool:
            results = list(pool.map(lambda _: engine.holidays_for_year(2030), range(12)))

        assert all(r == results[0] for r in results)
        assert len(results[0]) == 1
        assert results[0][0].name.startswith("Override")
        # later reads are served from the cache
        calls = store.calls
        engine.holidays_for_year(2030)
        assert store.calls == calls
