"""Shared fixtures for dayspan tests."""

from collections.abc import Iterator

import pytest

from dayspan.clock import FixedClock, SystemClock, set_clock, use_clock


@pytest.fixture(autouse=True)
def _default_clock() -> Iterator[None]:
    """Every test starts from a UTC wall clock, whatever the previous test installed."""
    previous = set_clock(SystemClock("UTC"))
    yield
    set_clock(previous)


@pytest.fixture
def clock() -> FixedClock:
    """Thursday 2020-10-15, 12:00 UTC."""
    return FixedClock("2020-10-15T12:00:00", timezone="UTC")


@pytest.fixture
def pinned(clock: FixedClock) -> Iterator[FixedClock]:
    """Install the fixed clock as the process-wide default."""
    with use_clock(clock):
        yield clock
