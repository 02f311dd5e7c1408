# src/datetoolbox/__init__.py
"""
datetoolbox
~~~~~~~~~~~

Small date utilities: current year, unit-based date arithmetic, range and
ordering predicates, and a (simulated) asynchronous holiday lookup.

Public API
----------
get_current_year   Year of the (injectable) clock's current instant.
add                Shift a date by DAYS, WEEKS, MONTHS or YEARS.
is_within_range    Inclusive range membership.
is_date_before     Strict ordering.
is_same_day        Calendar-day equality.
get_holidays       Holidays of a year (coroutine).
is_holiday         Holiday membership (coroutine).
DateUnit           Unit enumeration for ``add``.
DateToolboxError   Base exception for all datetoolbox errors.
"""

from __future__ import annotations

import logging

from datetoolbox._exceptions import (
    DateToolboxError,
    InvalidAmountError,
    InvalidDateError,
    InvalidRangeError,
    InvalidUnitError,
)
from datetoolbox.clock import Clock, FixedClock, SystemClock, get_current_year
from datetoolbox.dates import add, is_date_before, is_same_day, is_within_range
from datetoolbox.holidays import (
    HolidaySource,
    SimulatedHolidaySource,
    get_holidays,
    is_holiday,
)
from datetoolbox.units import DateUnit

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "get_current_year",
    "add",
    "is_within_range",
    "is_date_before",
    "is_same_day",
    "get_holidays",
    "is_holiday",
    "DateUnit",
    "Clock",
    "SystemClock",
    "FixedClock",
    "HolidaySource",
    "SimulatedHolidaySource",
    "DateToolboxError",
    "InvalidDateError",
    "InvalidAmountError",
    "InvalidUnitError",
    "InvalidRangeError",
]
