"""A single calendar day in a timezone."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

import pendulum
from pendulum import DateTime, FixedTimezone, Timezone

from dayspan.clock import Clock, resolve_clock
from dayspan.domain.errors import MethodNotSupportedError
from dayspan.domain.instants import parse_instant, to_instant
from dayspan.domain.models import DateString, TimezoneName, Unit

if TYPE_CHECKING:
    from dayspan.domain.date_range import DateRange
    from dayspan.domain.month import Month


@dataclass(frozen=True, eq=False, repr=False)
class Day:
    """Immutable day, stored as midnight of its timezone.

    Any date or datetime is accepted and truncated to the start of its day.
    Naive values are placed in the ambient clock's timezone.

    Example::

        day = Day.parse("2020-01-31")
        day.add_month()        # Day('2020-02-29')
        str(day.next())        # "2020-02-01"
    """

    value: DateTime

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_instant(self.value).start_of("day"))

    @classmethod
    def parse(cls, text: str, tz: str | None = None, clock: Clock | None = None) -> Day:
        """Create a day by parsing date text.

        Args:
            text: Any date representation pendulum understands, e.g.
                "2020-01-31", "2020/01/31" or "2020-01-31T10:00:00+09:00".
            tz: Timezone for text without an offset. Defaults to the clock's.
            clock: Clock for the default timezone and for fields the text
                leaves out, such as the date of "12:00".

        Raises:
            ParseError: If the text is not a date.
        """
        return cls(parse_instant(text, tz, clock))

    @classmethod
    def today(cls, clock: Clock | None = None) -> Day:
        """Create the day containing the clock's current instant."""
        return cls(resolve_clock(clock).now())

    # ── accessors ────────────────────────────────────────────────────────

    @property
    def date(self) -> date:
        return self.value.date()

    @property
    def timezone_name(self) -> TimezoneName:
        return TimezoneName(self.value.timezone_name or "")

    @property
    def timezone(self) -> Timezone | FixedTimezone:
        return self.value.timezone

    def start_of_day(self) -> DateTime:
        """First instant of the day (midnight)."""
        return self.value

    def end_of_day(self) -> DateTime:
        """Last instant of the day (23:59:59.999999)."""
        return self.value.end_of("day")

    # ── navigation ───────────────────────────────────────────────────────

    def next(self) -> Day:
        return Day(self.value.add(days=1))

    def prev(self) -> Day:
        return Day(self.value.subtract(days=1))

    def month(self) -> Month:
        """Month containing this day."""
        from dayspan.domain.month import Month

        return Month(self.value)

    def range_to(self, end: Day) -> DateRange:
        """Range from this day to ``end``, both inclusive."""
        from dayspan.domain.date_range import DateRange

        return DateRange(self, end)

    def range_from(self, start: Day) -> DateRange:
        """Range from ``start`` to this day, both inclusive."""
        from dayspan.domain.date_range import DateRange

        return DateRange(start, self)

    # ── determination ────────────────────────────────────────────────────

    def is_first_of_month(self) -> bool:
        return self.value.day == 1

    def is_last_of_month(self) -> bool:
        return self.value.day == self.value.days_in_month

    def is_weekday(self) -> bool:
        return not self.is_weekend()

    def is_weekend(self) -> bool:
        return self.value.day_of_week in (pendulum.SATURDAY, pendulum.SUNDAY)

    def is_monday(self) -> bool:
        return self.value.day_of_week == pendulum.MONDAY

    def is_tuesday(self) -> bool:
        return self.value.day_of_week == pendulum.TUESDAY

    def is_wednesday(self) -> bool:
        return self.value.day_of_week == pendulum.WEDNESDAY

    def is_thursday(self) -> bool:
        return self.value.day_of_week == pendulum.THURSDAY

    def is_friday(self) -> bool:
        return self.value.day_of_week == pendulum.FRIDAY

    def is_saturday(self) -> bool:
        return self.value.day_of_week == pendulum.SATURDAY

    def is_sunday(self) -> bool:
        return self.value.day_of_week == pendulum.SUNDAY

    def _now(self, clock: Clock | None) -> DateTime:
        # Relative checks are made in this day's own timezone.
        return resolve_clock(clock).now().in_timezone(self.value.timezone)

    def is_yesterday(self, clock: Clock | None = None) -> bool:
        return self.date == self._now(clock).subtract(days=1).date()

    def is_today(self, clock: Clock | None = None) -> bool:
        return self.date == self._now(clock).date()

    def is_tomorrow(self, clock: Clock | None = None) -> bool:
        return self.date == self._now(clock).add(days=1).date()

    def is_past(self, clock: Clock | None = None) -> bool:
        """True if this day ends before the current day starts."""
        return self.value < self._now(clock).start_of("day")

    def is_future(self, clock: Clock | None = None) -> bool:
        """True if this day starts after the current day starts."""
        return self.value > self._now(clock).start_of("day")

    # ── addition and subtraction ─────────────────────────────────────────

    def shift(self, unit: Unit | str, count: int = 1) -> Day:
        """Move by ``count`` calendar units (negative moves backwards).

        Month-based units follow pendulum's arithmetic, which clamps to the
        last day of a shorter month (2020-01-31 + 1 month is 2020-02-29).

        Raises:
            MethodNotSupportedError: If ``unit`` names no known unit.
        """
        if not isinstance(unit, Unit):
            try:
                unit = Unit.from_name(unit)
            except ValueError as e:
                raise MethodNotSupportedError(type(self).__name__, f"add_{unit}") from e
        return Day(self.value.add(**unit.offset(count)))

    def add_days(self, count: int = 1) -> Day:
        return self.shift(Unit.DAY, count)

    def sub_days(self, count: int = 1) -> Day:
        return self.shift(Unit.DAY, -count)

    def add_weeks(self, count: int = 1) -> Day:
        return self.shift(Unit.WEEK, count)

    def sub_weeks(self, count: int = 1) -> Day:
        return self.shift(Unit.WEEK, -count)

    def add_months(self, count: int = 1) -> Day:
        return self.shift(Unit.MONTH, count)

    def sub_months(self, count: int = 1) -> Day:
        return self.shift(Unit.MONTH, -count)

    def add_quarters(self, count: int = 1) -> Day:
        return self.shift(Unit.QUARTER, count)

    def sub_quarters(self, count: int = 1) -> Day:
        return self.shift(Unit.QUARTER, -count)

    def add_years(self, count: int = 1) -> Day:
        return self.shift(Unit.YEAR, count)

    def sub_years(self, count: int = 1) -> Day:
        return self.shift(Unit.YEAR, -count)

    def add_centuries(self, count: int = 1) -> Day:
        return self.shift(Unit.CENTURY, count)

    def sub_centuries(self, count: int = 1) -> Day:
        return self.shift(Unit.CENTURY, -count)

    add_day = add_days
    sub_day = sub_days
    add_week = add_weeks
    sub_week = sub_weeks
    add_month = add_months
    sub_month = sub_months
    add_quarter = add_quarters
    sub_quarter = sub_quarters
    add_year = add_years
    sub_year = sub_years
    add_century = add_centuries
    sub_century = sub_centuries

    # ── comparison ───────────────────────────────────────────────────────

    def eq(self, other: Day) -> bool:
        return self.date == other.date and self.value == other.value

    def ne(self, other: Day) -> bool:
        return not self.eq(other)

    def lt(self, other: Day) -> bool:
        return self.value < other.value

    def lte(self, other: Day) -> bool:
        return self.value <= other.value

    def gt(self, other: Day) -> bool:
        return self.value > other.value

    def gte(self, other: Day) -> bool:
        return self.value >= other.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self.eq(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self.gte(other)

    def __hash__(self) -> int:
        return hash((self.date, self.value))

    def __str__(self) -> DateString:
        return DateString(self.value.date().isoformat())

    def __repr__(self) -> str:
        return f"Day('{self}', tz='{self.timezone_name}')"
