"""Conversion of raw inputs into zoned pendulum instants.

Day and Month accept the same inputs; naive values and offset-less strings are
placed in the ambient clock's timezone. Text missing calendar fields (a bare
time, "March 5") takes them from the clock's current day, never from the
wall clock.
"""

import logging
from datetime import date, datetime

import dateutil.parser
import pendulum
from pendulum import Date, DateTime, FixedTimezone, Time, Timezone

from dayspan.clock import Clock, make_timezone, resolve_clock
from dayspan.domain.errors import ParseError

logger = logging.getLogger(__name__)

RawDateTime = datetime | date


def _zoned(value: datetime, tz: Timezone | FixedTimezone) -> DateTime:
    if value.tzinfo is None:
        return pendulum.datetime(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            tz=tz,
        )
    return pendulum.instance(value)


def to_instant(value: RawDateTime, clock: Clock | None = None) -> DateTime:
    """Convert a date or datetime to a zoned pendulum DateTime.

    Raises:
        TypeError: If value is neither a date nor a datetime.
    """
    tz = make_timezone(resolve_clock(clock).timezone)
    if isinstance(value, datetime):
        return _zoned(value, tz)
    if isinstance(value, date):
        return pendulum.datetime(value.year, value.month, value.day, tz=tz)
    raise TypeError(f"Expected a date or datetime, got {type(value).__name__}")


def parse_instant(text: str, tz: str | None = None, clock: Clock | None = None) -> DateTime:
    """Parse free-form date text into a zoned pendulum DateTime.

    ISO 8601 / RFC 3339 strings are handled by pendulum, anything else
    (e.g. "2020/01/31", "Nov 22 2020") by dateutil.

    Args:
        text: Date text.
        tz: Timezone for text without an offset. Defaults to the clock's.
        clock: Clock supplying the default timezone and the current day.

    Raises:
        ParseError: If the text is not a date.
    """
    clock = resolve_clock(clock)
    timezone = make_timezone(tz or clock.timezone)
    today = clock.now().in_timezone(timezone)
    text = text.strip()

    if text.lower() == "now":
        return today

    try:
        parsed = pendulum.parse(text, tz=timezone, exact=True)
    except (ValueError, OverflowError):
        parsed = None

    if isinstance(parsed, DateTime):
        return parsed
    if isinstance(parsed, Date):
        return pendulum.datetime(parsed.year, parsed.month, parsed.day, tz=timezone)
    if isinstance(parsed, Time):
        return today.at(parsed.hour, parsed.minute, parsed.second, parsed.microsecond)
    if parsed is not None:
        logger.debug("Date text %r parsed to %s, not an instant", text, type(parsed).__name__)
        raise ParseError(text, "not a date")

    try:
        fallback = dateutil.parser.parse(text, default=datetime(today.year, today.month, today.day))
    except (ValueError, OverflowError) as e:
        logger.debug("Rejected date text %r: %s", text, e)
        raise ParseError(text, str(e)) from e
    return _zoned(fallback, timezone)
