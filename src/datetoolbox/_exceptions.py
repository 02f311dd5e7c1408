class DateToolboxError(Exception):
    """Base exception for all datetoolbox errors."""


class InvalidDateError(DateToolboxError, TypeError):
    """Raised when a value is not a usable calendar date."""


class InvalidAmountError(DateToolboxError, TypeError):
    """Raised when an amount is not a finite real number."""


class InvalidUnitError(DateToolboxError, ValueError):
    """Raised when a unit name does not match any DateUnit."""


class InvalidRangeError(DateToolboxError, ValueError):
    """Raised when a range starts after it ends."""
