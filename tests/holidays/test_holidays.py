"""
tests/holidays/test_holidays.py

Covers:
  - get_holidays: count, order, year invariant, default source
  - is_holiday: matching days, time of day, non-holidays
  - Source injection and per-call recomputation
  - Concurrent lookups
  - SimulatedHolidaySource construction
"""

import asyncio
from datetime import date, datetime

import numpy as np
import pytest

from datetoolbox.holidays import SimulatedHolidaySource, get_holidays, is_holiday


class RecordingSource:
    """Fake backend that remembers which years were requested."""

    def __init__(self, days=((7, 4),)):
        self.days = days
        self.calls: list[int] = []

    async def fetch(self, year):
        self.calls.append(year)
        return [date(year, m, d) for m, d in self.days]

    def __len__(self):
        # falsy on purpose; must still be used when injected
        return 0


class InFlightSource:
    """Fake backend counting how many fetches are suspended at once."""

    def __init__(self):
        self.active = 0
        self.peak = 0

    async def fetch(self, year):
        self.active += 1
        self.peak = max(self.peak, self.active)
        await asyncio.sleep(0.01)
        self.active -= 1
        return [date(year, 1, 1)]


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def instant():
    """Simulated source without the artificial delay."""
    return SimulatedHolidaySource(delay=0.0)


@pytest.fixture
def recording():
    return RecordingSource()


# ── get_holidays ──────────────────────────────────────────────────────────────

class TestGetHolidays:

    def test_default_source(self):
        assert asyncio.run(get_holidays(2025)) == (
            date(2025, 1, 1),
            date(2025, 12, 25),
            date(2025, 12, 31),
        )

    def test_returns_three_dates(self, instant):
        assert len(asyncio.run(get_holidays(2024, source=instant))) == 3

    @pytest.mark.parametrize("year", [1, 1999, 2024, 2100, 9999])
    def test_every_holiday_in_requested_year(self, instant, year):
        holidays = asyncio.run(get_holidays(year, source=instant))
        assert all(h.year == year for h in holidays)

    def test_calendar_order(self, instant):
        holidays = asyncio.run(get_holidays(2024, source=instant))
        assert [(h.month, h.day) for h in holidays] == [(1, 1), (12, 25), (12, 31)]
        assert list(holidays) == sorted(holidays)

    def test_recomputed_per_call(self, instant):
        first = asyncio.run(get_holidays(2024, source=instant))
        second = asyncio.run(get_holidays(2024, source=instant))
        assert first == second
        assert first is not second

    def test_unrepresentable_year_raises(self, instant):
        with pytest.raises(ValueError):
            asyncio.run(get_holidays(0, source=instant))

    def test_custom_source_is_used(self, recording):
        holidays = asyncio.run(get_holidays(2030, source=recording))
        assert holidays == (date(2030, 7, 4),)
        assert recording.calls == [2030]

    def test_falsy_source_is_not_replaced(self, recording):
        assert not recording
        asyncio.run(get_holidays(2031, source=recording))
        assert recording.calls == [2031]


# ── is_holiday ────────────────────────────────────────────────────────────────

class TestIsHoliday:

    @pytest.mark.parametrize(
        "day", [date(2024, 1, 1), date(2024, 12, 25), date(2024, 12, 31)]
    )
    def test_holidays_match(self, instant, day):
        assert asyncio.run(is_holiday(day, source=instant)) is True

    def test_ordinary_day(self, instant):
        assert asyncio.run(is_holiday(date(2004, 3, 4), source=instant)) is False

    def test_day_before_christmas(self, instant):
        assert asyncio.run(is_holiday(date(2024, 12, 24), source=instant)) is False

    def test_time_of_day_ignored(self, instant):
        assert asyncio.run(is_holiday(datetime(2024, 12, 25, 18, 30), source=instant))

    def test_datetime64_input(self, instant):
        assert asyncio.run(is_holiday(np.datetime64("2023-01-01T08:00"), source=instant))

    def test_default_source(self):
        assert asyncio.run(is_holiday(date(2024, 1, 1))) is True

    def test_fetches_the_dates_year(self, recording):
        assert asyncio.run(is_holiday(date(1998, 7, 4), source=recording)) is True
        assert asyncio.run(is_holiday(date(2001, 1, 1), source=recording)) is False
        assert recording.calls == [1998, 2001]


# ── Concurrency ───────────────────────────────────────────────────────────────

class TestConcurrency:

    def test_concurrent_lookups_are_independent(self, instant):
        async def run():
            return await asyncio.gather(
                is_holiday(date(2024, 1, 1), source=instant),
                is_holiday(date(2024, 6, 1), source=instant),
                get_holidays(1990, source=instant),
            )

        first, second, holidays = asyncio.run(run())
        assert first is True
        assert second is False
        assert holidays[0] == date(1990, 1, 1)

    def test_fetches_overlap(self):
        source = InFlightSource()

        async def run():
            return await asyncio.gather(*(get_holidays(y, source=source) for y in range(2020, 2025)))

        results = asyncio.run(run())
        assert [r[0].year for r in results] == list(range(2020, 2025))
        # every fetch was suspended at the same time
        assert source.peak == 5
        assert source.active == 0


# ── SimulatedHolidaySource ────────────────────────────────────────────────────

class TestSimulatedHolidaySource:

    def test_default_delay(self):
        assert SimulatedHolidaySource().delay == pytest.approx(0.1)

    def test_negative_delay_raises(self):
        with pytest.raises(ValueError):
            SimulatedHolidaySource(delay=-1.0)

    def test_fetch_directly(self, instant):
        assert asyncio.run(instant.fetch(2024))[1] == date(2024, 12, 25)

    @pytest.mark.parametrize("delay", [float("nan"), float("inf"), np.nan])
    def test_non_finite_delay_raises(self, delay):
        with pytest.raises(ValueError):
            SimulatedHolidaySource(delay=delay)

    def test_repr(self):
        assert repr(SimulatedHolidaySource(delay=0.5)) == "SimulatedHolidaySource(delay=0.5)"
