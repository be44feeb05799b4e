"""dayspan exception hierarchy.

Hierarchy:
    DayspanError
    ├── ParseError                      (text is not a date)
    ├── InvalidRangeError               (DateRange construction)
    │   ├── EndBeforeStartError
    │   └── TimezoneMismatchError
    ├── RangesDontOverlapError          (DateRange.get_overlapping)
    ├── TimezonesCannotBeComparedError  (DateRange.get_overlapping)
    ├── MethodNotSupportedError         (shift with an unsupported unit)
    └── ConfigError                     (unusable config.toml value)
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dayspan.domain.date_range import DateRange
    from dayspan.domain.day import Day


class DayspanError(Exception):
    """Base class for all dayspan errors."""


class ParseError(DayspanError, ValueError):
    """Text could not be parsed into a date."""

    def __init__(self, text: str, reason: str | None = None):
        self.text = text
        message = f"Could not parse date '{text}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class RangeErrorKind(str, Enum):
    END_BEFORE_START = "end_before_start"
    TIMEZONE_MISMATCH = "timezone_mismatch"


class InvalidRangeError(DayspanError, ValueError):
    """A DateRange could not be built from the given endpoints."""

    kind: RangeErrorKind

    def __init__(self, start: Day, end: Day, message: str):
        self.start = start
        self.end = end
        super().__init__(message)


class EndBeforeStartError(InvalidRangeError):
    kind = RangeErrorKind.END_BEFORE_START

    def __init__(self, start: Day, end: Day):
        super().__init__(start, end, f"The end date '{end}' is before the start date '{start}'.")


class TimezoneMismatchError(InvalidRangeError):
    kind = RangeErrorKind.TIMEZONE_MISMATCH

    def __init__(self, start: Day, end: Day):
        super().__init__(
            start,
            end,
            f"The start date timezone '{start.timezone_name}' and "
            f"the end date timezone '{end.timezone_name}' are different.",
        )


class RangesDontOverlapError(DayspanError):
    """get_overlapping was asked for the intersection of disjoint ranges."""

    def __init__(self, first: DateRange, second: DateRange):
        self.first = first
        self.second = second
        super().__init__(f"Date range '{first}' and date range '{second}' do not overlap.")


class TimezonesCannotBeComparedError(DayspanError, ValueError):
    """Two ranges in different timezones cannot be intersected."""

    def __init__(self, first: DateRange, second: DateRange):
        self.first = first
        self.second = second
        super().__init__(
            f"Cannot be compared because timezone '{first.timezone_name}' and "
            f"timezone '{second.timezone_name}' do not match."
        )


class MethodNotSupportedError(DayspanError, AttributeError):
    """The value type has no such operation."""

    def __init__(self, type_name: str, method: str):
        self.type_name = type_name
        self.method = method
        super().__init__(f"Call to undefined method {type_name}.{method}()")


class ConfigError(DayspanError, ValueError):
    """A value in the config file cannot be used."""

    def __init__(self, key: str, value: object, reason: str):
        self.key = key
        self.value = value
        super().__init__(f"Invalid '{key}' in config: {reason}")
