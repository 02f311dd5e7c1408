from __future__ import annotations

import logging
import numbers
from datetime import date, datetime, time
from typing import Any, Union

import numpy as np

from .._exceptions import InvalidAmountError, InvalidDateError

logger = logging.getLogger(__name__)

Instant = Union[date, datetime, np.datetime64]


def _from_datetime64(value: np.datetime64) -> datetime | None:
    if np.isnat(value):
        return None
    # .item() falls back to a plain int outside datetime's year range.
    converted = value.astype("datetime64[us]").item()
    return converted if isinstance(converted, datetime) else None


def ensure_date(value: Any) -> date:
    """Return ``value`` as a ``date``/``datetime`` or raise InvalidDateError."""
    if isinstance(value, date):
        return value
    if isinstance(value, np.datetime64):
        converted = _from_datetime64(value)
        if converted is not None:
            return converted
    logger.debug("Rejected date value %r", value)
    raise InvalidDateError("Invalid date provided")


def ensure_amount(value: Any) -> int:
    """
    Return ``value`` truncated toward zero, or raise InvalidAmountError when it
    is not a finite real scalar.
    """
    # Integers are exact and skip the float check; oversized ones overflow
    # later in the date arithmetic.
    if (
        isinstance(value, (bool, np.bool_))
        or not isinstance(value, numbers.Real)
        or (not isinstance(value, numbers.Integral) and not np.isfinite(float(value)))
    ):
        logger.debug("Rejected amount %r", value)
        raise InvalidAmountError("Invalid amount provided")
    return int(value)


def to_datetime(value: Instant) -> datetime:
    """Promote a calendar instant to ``datetime``; a bare date becomes midnight."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    return ensure_date(value)
