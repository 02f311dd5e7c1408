from __future__ import annotations

from enum import Enum
from typing import Union

from ._exceptions import InvalidUnitError


class DateUnit(str, Enum):
    """
    Granularity of a date addition.

    Values double as the keyword names accepted by ``relativedelta``.
    """

    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
    YEARS = "years"

    @classmethod
    def coerce(cls, value: "DateUnitInput") -> "DateUnit":
        if isinstance(value, cls):
            return value
        token = str(value).strip().lower() if value is not None else ""
        try:
            return cls(token)
        except ValueError:
            raise InvalidUnitError(f"Unknown date unit: {value!r}.") from None


DateUnitInput = Union[str, DateUnit]
