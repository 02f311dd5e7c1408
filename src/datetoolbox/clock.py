"""
Wall-clock access behind a small injectable interface, so that code reading
"now" can be run against a frozen instant in tests.
"""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Optional, Protocol


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    """Host wall clock, local time unless a tzinfo is given."""

    def __init__(self, tz: Optional[tzinfo] = None) -> None:
        self._tz = tz

    def now(self) -> datetime:
        return datetime.now(tz=self._tz)

    def __repr__(self) -> str:
        return f"SystemClock(tz={self._tz!r})"


class FixedClock:
    """Clock frozen at a single instant."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()})"


default_clock: Clock = SystemClock()


def get_current_year(clock: Optional[Clock] = None) -> int:
    if clock is None:
        clock = default_clock
    return int(clock.now().year)
