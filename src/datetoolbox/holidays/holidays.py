from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Optional, Protocol, Sequence

import numpy as np

from ..dates import is_same_day
from ..dates._coerce import Instant, to_datetime

logger = logging.getLogger(__name__)


class HolidaySource(Protocol):
    """Anything that can produce the holidays of a given year."""

    async def fetch(self, year: int) -> Sequence[date]: ...


class SimulatedHolidaySource:
    """
    Stand-in for a remote holiday service.  Waits ``delay`` seconds, then
    answers with New Year's Day, Christmas and New Year's Eve of the year.
    """

    _DEFAULT_DELAY: float = 0.1

    def __init__(self, delay: Optional[float] = None) -> None:
        if delay is None:
            delay = self._DEFAULT_DELAY
        if not np.isfinite(delay) or delay < 0.0:
            raise ValueError(f"Delay must be finite and non-negative; got {delay}.")
        self._delay: float = float(delay)

    async def fetch(self, year: int) -> tuple[date, ...]:
        await asyncio.sleep(self._delay)
        return (
            date(year, 1, 1),    # New Year's Day
            date(year, 12, 25),  # Christmas
            date(year, 12, 31),  # New Year's Eve
        )

    @property
    def delay(self) -> float:
        return self._delay

    def __repr__(self) -> str:
        return f"SimulatedHolidaySource(delay={self._delay})"


default_source: HolidaySource = SimulatedHolidaySource()


async def get_holidays(
    year: int, *, source: Optional[HolidaySource] = None
) -> tuple[date, ...]:
    if source is None:
        source = default_source
    logger.debug("Fetching holidays for %d from %r", year, source)
    holidays = tuple(await source.fetch(year))
    logger.debug("Got %d holidays for %d", len(holidays), year)
    return holidays


async def is_holiday(
    value: Instant, *, source: Optional[HolidaySource] = None
) -> bool:
    holidays = await get_holidays(to_datetime(value).year, source=source)
    return any(is_same_day(value, holiday) for holiday in holidays)
