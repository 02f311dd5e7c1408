# src/datetoolbox/holidays/__init__.py
"""
datetoolbox.holidays
~~~~~~~~~~~~~~~~~~~~

Asynchronous holiday lookup.  Holidays come from a HolidaySource; the default
one is simulated (fixed delay, three fixed dates per year) and can be swapped
for a real backend by passing ``source=``.

Basic usage::

    import asyncio
    from datetime import date
    from datetoolbox.holidays import get_holidays, is_holiday

    asyncio.run(get_holidays(2025))
    # → (date(2025, 1, 1), date(2025, 12, 25), date(2025, 12, 31))
    asyncio.run(is_holiday(date(2024, 12, 25)))       # → True

Public API
----------
get_holidays             Holidays of a year, in calendar order.
is_holiday               Whether a date is one of its year's holidays.
HolidaySource            Protocol for holiday backends.
SimulatedHolidaySource   Default backend, no network I/O.
"""

from __future__ import annotations

from datetoolbox.holidays.holidays import (
    HolidaySource,
    SimulatedHolidaySource,
    get_holidays,
    is_holiday,
)

__all__ = [
    "get_holidays",
    "is_holiday",
    "HolidaySource",
    "SimulatedHolidaySource",
]
