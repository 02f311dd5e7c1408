# src/datetoolbox/dates/__init__.py
"""
datetoolbox.dates
~~~~~~~~~~~~~~~~~

Date arithmetic and comparison predicates.  Calendar stepping is delegated to
``dateutil.relativedelta``; ordering uses plain ``datetime`` comparison, with a
bare ``date`` standing for midnight of that day.

Basic usage::

    from datetime import date
    from datetoolbox.dates import add, is_within_range
    from datetoolbox.units import DateUnit

    add(date(2024, 1, 31), 1, DateUnit.MONTHS)          # → date(2024, 2, 29)
    is_within_range(date(2024, 1, 3),
                    date(2024, 1, 1), date(2024, 1, 5))  # → True

The predicates also accept a sequence or NumPy array as their first argument
and return a boolean array of the same shape::

    import numpy as np
    days = np.array(["2024-01-01", "2024-01-04"], dtype="datetime64[D]")
    is_within_range(days, date(2024, 1, 3), date(2024, 1, 5))  # → [False, True]

Public API
----------
add               Shift a date by a number of DateUnit steps.
is_within_range   Inclusive range membership.
is_date_before    Strict ordering.
is_same_day       Calendar-day equality, ignoring time of day.
"""

from __future__ import annotations

from datetoolbox.dates.dates import add, is_date_before, is_same_day, is_within_range

__all__ = [
    "add",
    "is_within_range",
    "is_date_before",
    "is_same_day",
]
