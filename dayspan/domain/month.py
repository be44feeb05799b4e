"""A calendar month in a timezone."""

from __future__ import annotations

from dataclasses import dataclass

from pendulum import DateTime, FixedTimezone, Timezone

from dayspan.clock import Clock, resolve_clock
from dayspan.domain.date_range import DateRange
from dayspan.domain.day import Day
from dayspan.domain.errors import MethodNotSupportedError
from dayspan.domain.instants import parse_instant, to_instant
from dayspan.domain.models import MonthString, TimezoneName, Unit

# Units finer than a month would leave the first-of-month invariant.
MONTH_UNITS = (Unit.MONTH, Unit.QUARTER, Unit.YEAR, Unit.CENTURY)


@dataclass(frozen=True, eq=False, repr=False)
class Month:
    """Immutable month, stored as midnight of its first day."""

    value: DateTime

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_instant(self.value).start_of("month"))

    @classmethod
    def parse(cls, text: str, tz: str | None = None, clock: Clock | None = None) -> Month:
        """Create a month by parsing date text ("2020-11", "2020-11-22", ...).

        Raises:
            ParseError: If the text is not a date.
        """
        return cls(parse_instant(text, tz, clock))

    @classmethod
    def this_month(cls, clock: Clock | None = None) -> Month:
        return cls(resolve_clock(clock).now())

    @property
    def year(self) -> int:
        return self.value.year

    @property
    def number(self) -> int:
        """Month of the year, 1-12."""
        return self.value.month

    @property
    def days_in_month(self) -> int:
        return self.value.days_in_month

    @property
    def timezone_name(self) -> TimezoneName:
        return TimezoneName(self.value.timezone_name or "")

    @property
    def timezone(self) -> Timezone | FixedTimezone:
        return self.value.timezone

    def label(self) -> str:
        """Human-readable month, e.g. "January 2025"."""
        return self.value.format("MMMM YYYY")

    def next(self) -> Month:
        return Month(self.value.add(months=1))

    def prev(self) -> Month:
        return Month(self.value.subtract(months=1))

    def first_date(self) -> Day:
        return Day(self.start_of_month())

    def last_date(self) -> Day:
        return Day(self.end_of_month())

    def start_of_month(self) -> DateTime:
        return self.value

    def end_of_month(self) -> DateTime:
        """Last instant of the month (23:59:59.999999 on its last day)."""
        return self.value.end_of("month")

    def to_date_range(self) -> DateRange:
        """Every day of the month as an inclusive range."""
        return DateRange(self.first_date(), self.last_date())

    # ── determination ────────────────────────────────────────────────────

    def _current(self, clock: Clock | None) -> Month:
        return Month(resolve_clock(clock).now().in_timezone(self.value.timezone))

    def is_past(self, clock: Clock | None = None) -> bool:
        return self.value < self._current(clock).value

    def is_future(self, clock: Clock | None = None) -> bool:
        return self.value > self._current(clock).value

    def is_current_month(self, clock: Clock | None = None) -> bool:
        return self.eq(self._current(clock))

    def is_next_month(self, clock: Clock | None = None) -> bool:
        return self.eq(self._current(clock).next())

    def is_last_month(self, clock: Clock | None = None) -> bool:
        return self.eq(self._current(clock).prev())

    # ── addition and subtraction ─────────────────────────────────────────

    def shift(self, unit: Unit | str, count: int = 1) -> Month:
        """Move by ``count`` months, quarters, years or centuries.

        Raises:
            MethodNotSupportedError: If ``unit`` is a day or week, or unknown.
        """
        if not isinstance(unit, Unit):
            try:
                unit = Unit.from_name(unit)
            except ValueError as e:
                raise MethodNotSupportedError(type(self).__name__, f"add_{unit}") from e
        if unit not in MONTH_UNITS:
            raise MethodNotSupportedError(type(self).__name__, f"add_{unit.plural}")
        return Month(self.value.add(**unit.offset(count)))

    def add_months(self, count: int = 1) -> Month:
        return self.shift(Unit.MONTH, count)

    def sub_months(self, count: int = 1) -> Month:
        return self.shift(Unit.MONTH, -count)

    def add_quarters(self, count: int = 1) -> Month:
        return self.shift(Unit.QUARTER, count)

    def sub_quarters(self, count: int = 1) -> Month:
        return self.shift(Unit.QUARTER, -count)

    def add_years(self, count: int = 1) -> Month:
        return self.shift(Unit.YEAR, count)

    def sub_years(self, count: int = 1) -> Month:
        return self.shift(Unit.YEAR, -count)

    def add_centuries(self, count: int = 1) -> Month:
        return self.shift(Unit.CENTURY, count)

    def sub_centuries(self, count: int = 1) -> Month:
        return self.shift(Unit.CENTURY, -count)

    add_month = add_months
    sub_month = sub_months
    add_quarter = add_quarters
    sub_quarter = sub_quarters
    add_year = add_years
    sub_year = sub_years
    add_century = add_centuries
    sub_century = sub_centuries

    # ── comparison ───────────────────────────────────────────────────────

    def eq(self, other: Month) -> bool:
        return (self.year, self.number) == (other.year, other.number) and self.value == other.value

    def ne(self, other: Month) -> bool:
        return not self.eq(other)

    def lt(self, other: Month) -> bool:
        return self.value < other.value

    def lte(self, other: Month) -> bool:
        return self.value <= other.value

    def gt(self, other: Month) -> bool:
        return self.value > other.value

    def gte(self, other: Month) -> bool:
        return self.value >= other.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self.eq(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return self.gte(other)

    def __hash__(self) -> int:
        return hash((self.year, self.number, self.value))

    def __str__(self) -> MonthString:
        return MonthString(f"{self.year:04d}-{self.number:02d}")

    def __repr__(self) -> str:
        return f"Month('{self}', tz='{self.timezone_name}')"
