"""Calendar value objects for dayspan.

This package contains the functional core:
- Immutable values (Day, Month, DateRange)
- No I/O operations
- Calendar arithmetic delegated to pendulum
- Validation errors raised at construction
"""

from dayspan.domain.date_range import DateRange
from dayspan.domain.day import Day
from dayspan.domain.errors import (
    ConfigError,
    DayspanError,
    EndBeforeStartError,
    InvalidRangeError,
    MethodNotSupportedError,
    ParseError,
    RangeErrorKind,
    RangesDontOverlapError,
    TimezoneMismatchError,
    TimezonesCannotBeComparedError,
)
from dayspan.domain.models import DateString, MonthString, TimezoneName, Unit
from dayspan.domain.month import Month

__all__ = [
    # Values
    "Day",
    "Month",
    "DateRange",
    # Types
    "DateString",
    "MonthString",
    "TimezoneName",
    "Unit",
    # Errors
    "ConfigError",
    "DayspanError",
    "ParseError",
    "InvalidRangeError",
    "RangeErrorKind",
    "EndBeforeStartError",
    "TimezoneMismatchError",
    "RangesDontOverlapError",
    "TimezonesCannotBeComparedError",
    "MethodNotSupportedError",
]
