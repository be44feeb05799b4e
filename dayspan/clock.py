"""Ambient clock for "today", "this month" and the relative predicates.

Every clock-dependent operation accepts an explicit ``clock=`` argument. When it
is omitted the process-wide default returned by :func:`get_clock` is used,
which is a :class:`SystemClock` in UTC unless replaced with :func:`set_clock`
or :func:`use_clock`.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Protocol

import pendulum
from pendulum import DateTime, FixedTimezone, Timezone

DEFAULT_TIMEZONE = "UTC"

# Fixed offsets as reported by pendulum's timezone_name, e.g. "+09:00"
OFFSET_PATTERN = re.compile(r"^([+-])(\d{2}):(\d{2})$")


def make_timezone(name: str) -> Timezone | FixedTimezone:
    """Resolve a timezone name or a "+HH:MM" offset to a pendulum timezone.

    Raises:
        ValueError: If the name is not a known timezone.
    """
    match = OFFSET_PATTERN.match(name)
    if match:
        sign, hours, minutes = match.groups()
        offset = int(hours) * 3600 + int(minutes) * 60
        return pendulum.fixed_timezone(-offset if sign == "-" else offset)
    try:
        return pendulum.timezone(name)
    except (ValueError, KeyError) as e:
        raise ValueError(f"Unknown timezone '{name}'") from e


class Clock(Protocol):
    """Source of the current instant and of the ambient timezone."""

    timezone: str

    def now(self) -> DateTime: ...


class SystemClock:
    """Wall clock in a fixed timezone."""

    def __init__(self, timezone: str = DEFAULT_TIMEZONE) -> None:
        self._tz = make_timezone(timezone)
        self.timezone = timezone

    def now(self) -> DateTime:
        return pendulum.now(self._tz)

    def __repr__(self) -> str:
        return f"SystemClock(timezone={self.timezone!r})"


class FixedClock:
    """Clock pinned to a single instant, for deterministic tests.

    Args:
        instant: The pinned instant. Strings are parsed with pendulum; naive
            values are placed in ``timezone``.
        timezone: Ambient timezone. Defaults to the instant's own timezone.
    """

    def __init__(self, instant: DateTime | datetime | str, timezone: str | None = None) -> None:
        tz = make_timezone(timezone or DEFAULT_TIMEZONE)
        if isinstance(instant, str):
            parsed = pendulum.parse(instant, tz=tz)
            if not isinstance(parsed, DateTime):
                raise ValueError(f"Not an instant: '{instant}'")
            instant = parsed
        else:
            instant = pendulum.instance(instant, tz=tz)

        self._tz = tz if timezone else instant.timezone
        self.timezone = timezone or instant.timezone_name or DEFAULT_TIMEZONE
        self._instant = instant

    def now(self) -> DateTime:
        return self._instant.in_timezone(self._tz)

    def __repr__(self) -> str:
        return f"FixedClock({self._instant.isoformat()!r}, timezone={self.timezone!r})"


_clock: Clock = SystemClock()


def get_clock() -> Clock:
    """Return the process-wide default clock."""
    return _clock


def set_clock(clock: Clock) -> Clock:
    """Replace the process-wide default clock.

    Returns:
        The clock that was in place before the call.
    """
    global _clock
    previous = _clock
    _clock = clock
    return previous


@contextmanager
def use_clock(clock: Clock) -> Iterator[Clock]:
    """Temporarily install ``clock`` as the default clock."""
    previous = set_clock(clock)
    try:
        yield clock
    finally:
        set_clock(previous)


def resolve_clock(clock: Clock | None) -> Clock:
    return clock if clock is not None else _clock
