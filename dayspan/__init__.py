"""dayspan - immutable Day, Month and DateRange values on top of pendulum."""

from dayspan.clock import FixedClock, SystemClock, get_clock, set_clock, use_clock
from dayspan.domain import (
    ConfigError,
    DateRange,
    Day,
    DayspanError,
    EndBeforeStartError,
    InvalidRangeError,
    MethodNotSupportedError,
    Month,
    ParseError,
    RangesDontOverlapError,
    TimezoneMismatchError,
    TimezonesCannotBeComparedError,
    Unit,
)

__version__ = "0.1.0"

__all__ = [
    "Day",
    "Month",
    "DateRange",
    "Unit",
    "FixedClock",
    "SystemClock",
    "get_clock",
    "set_clock",
    "use_clock",
    "DayspanError",
    "ConfigError",
    "ParseError",
    "InvalidRangeError",
    "EndBeforeStartError",
    "TimezoneMismatchError",
    "RangesDontOverlapError",
    "TimezonesCannotBeComparedError",
    "MethodNotSupportedError",
]
