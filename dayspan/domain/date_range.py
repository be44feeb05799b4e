"""Inclusive ranges of days.

A DateRange is validated once, on construction:
- start and end must carry the same timezone
- start must not be after end (a one-day range has start == end)

Everything else (containment, overlap, iteration) is derived from the two
endpoints, so an existing range is always valid.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

import pendulum
from pendulum import DateTime, FixedTimezone, Interval, Timezone

from dayspan.clock import Clock
from dayspan.domain.day import Day
from dayspan.domain.errors import (
    EndBeforeStartError,
    RangesDontOverlapError,
    TimezoneMismatchError,
    TimezonesCannotBeComparedError,
)
from dayspan.domain.instants import RawDateTime
from dayspan.domain.models import TimezoneName

logger = logging.getLogger(__name__)

HOURS_PER_DAY = 24


@dataclass(frozen=True)
class DateRange:
    """Immutable range from start to end, both days included."""

    start: Day
    end: Day

    def __post_init__(self) -> None:
        if self.start.timezone_name != self.end.timezone_name:
            logger.debug("Rejected range %s..%s: timezones differ", self.start, self.end)
            raise TimezoneMismatchError(self.start, self.end)

        if self.start.gt(self.end):
            logger.debug("Rejected range %s..%s: end before start", self.start, self.end)
            raise EndBeforeStartError(self.start, self.end)

    @classmethod
    def parse(cls, start: str, end: str, tz: str | None = None, clock: Clock | None = None) -> DateRange:
        """Create a range by parsing two date strings.

        Args:
            start: First day, e.g. "2020-01-01".
            end: Last day, e.g. "2020-01-31".
            tz: Timezone for text without an offset. Defaults to the clock's.
            clock: Clock for the default timezone and missing date fields.

        Raises:
            ParseError: If either text is not a date.
            InvalidRangeError: If the days don't form a valid range.
        """
        return cls(Day.parse(start, tz, clock), Day.parse(end, tz, clock))

    @classmethod
    def from_datetimes(cls, start: RawDateTime, end: RawDateTime) -> DateRange:
        """Create a range from two dates or datetimes, truncated to their days."""
        return cls(Day(start), Day(end))

    @property
    def timezone_name(self) -> TimezoneName:
        return self.start.timezone_name

    def timezone(self) -> Timezone | FixedTimezone:
        return self.start.timezone

    def start_of_days(self) -> DateTime:
        """First instant of the first day."""
        return self.start.start_of_day()

    def end_of_days(self) -> DateTime:
        """Last instant of the last day."""
        return self.end.end_of_day()

    def contains(self, day: Day) -> bool:
        return self.start.lte(day) and self.end.gte(day)

    def overlaps_with(self, other: DateRange) -> bool:
        """True if the ranges share at least one day (touching counts)."""
        return self.end.gte(other.start) and other.end.gte(self.start)

    def get_overlapping(self, other: DateRange) -> DateRange:
        """Intersection of this range and ``other``.

        Raises:
            TimezonesCannotBeComparedError: If the ranges are in different timezones.
            RangesDontOverlapError: If the ranges share no day.
        """
        if self.timezone_name != other.timezone_name:
            raise TimezonesCannotBeComparedError(self, other)

        if not self.overlaps_with(other):
            raise RangesDontOverlapError(self, other)

        return DateRange(
            self.start if self.start.gte(other.start) else other.start,
            self.end if self.end.lte(other.end) else other.end,
        )

    def length_in_days(self) -> int:
        # Calendar dates, so a DST change inside the range doesn't shorten it.
        return self.start.value.date().diff(self.end.value.date()).in_days() + 1

    def per_day(self) -> Iterator[Day]:
        """Each day of the range in ascending order."""
        day = self.start
        while day.lte(self.end):
            yield day
            day = day.next()

    def per_hour(self) -> Iterator[DateTime]:
        """Each hour (0-23) of each day of the range in ascending order.

        Always 24 values per day. On a day the clocks spring forward, the
        skipped hour resolves to the first hour after the gap, so that instant
        appears twice (Europe/London 2021-03-28 yields 00:00, 02:00, 02:00,
        03:00, ...). Hours are wall-clock hours, not elapsed hours.
        """
        for day in self.per_day():
            for hour in range(HOURS_PER_DAY):
                yield day.value.at(hour)

    def to_list(self) -> list[Day]:
        return list(self.per_day())

    def to_interval(self) -> Interval:
        """pendulum Interval from the start of the first day to the start of the last."""
        return pendulum.interval(self.start.value, self.end.value)

    def __iter__(self) -> Iterator[Day]:
        return self.per_day()

    def __len__(self) -> int:
        return self.length_in_days()

    def __contains__(self, item: object) -> bool:
        return isinstance(item, Day) and self.contains(item)

    def __str__(self) -> str:
        return f"{self.start} - {self.end}"
