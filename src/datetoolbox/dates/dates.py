from __future__ import annotations

from datetime import date
from typing import Any, Callable, Sequence, Union

import numpy as np
from dateutil.relativedelta import relativedelta

from .._exceptions import InvalidRangeError
from ..units import DateUnit, DateUnitInput
from ._coerce import Instant, ensure_amount, ensure_date, to_datetime

InstantLike = Union[Instant, Sequence[Instant], "np.ndarray"]
BoolLike = Union[bool, "np.ndarray"]


def _elementwise(
    predicate: Callable[[Instant], bool], value: InstantLike
) -> BoolLike:
    """Apply a scalar predicate, or map it over an array of instants."""
    if np.ndim(value) == 0:
        return bool(predicate(value))
    arr = np.asarray(value)
    if arr.dtype.kind == "M":
        # object conversion only yields datetime objects down to microseconds
        arr = arr.astype("datetime64[us]")
    return np.vectorize(predicate, otypes=[bool])(arr.astype(object))


# ── arithmetic ───────────────────────────────────────────────────────────────

def add(
    value: Any,
    amount: Any,
    unit: DateUnitInput = DateUnit.DAYS,
) -> date:
    """
    Shift ``value`` by ``amount`` units and return a new instant.

    ``value`` is validated before ``amount``.  Fractional amounts are truncated
    toward zero; month and year steps clamp to the last day of the target
    month (Jan 31 + 1 month -> Feb 28/29).
    """
    start = ensure_date(value)
    steps = ensure_amount(amount)
    unit = DateUnit.coerce(unit)
    return start + relativedelta(**{unit.value: steps})


# ── comparisons ──────────────────────────────────────────────────────────────

def is_within_range(value: InstantLike, start: Instant, end: Instant) -> BoolLike:
    lo, hi = to_datetime(start), to_datetime(end)
    if lo > hi:
        raise InvalidRangeError("Invalid range: from date must be before to date")
    return _elementwise(lambda d: lo <= to_datetime(d) <= hi, value)


def is_date_before(value: InstantLike, compare_date: Instant) -> BoolLike:
    other = to_datetime(compare_date)
    return _elementwise(lambda d: to_datetime(d) < other, value)


def is_same_day(value: InstantLike, compare_date: Instant) -> BoolLike:
    day = to_datetime(compare_date).date()
    return _elementwise(lambda d: to_datetime(d).date() == day, value)
