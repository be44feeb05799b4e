"""Date utilities for dayspan.

Pure functions for range calculations and formatting.
"""

from dayspan.clock import Clock
from dayspan.domain.date_range import DateRange
from dayspan.domain.day import Day
from dayspan.domain.models import DateString
from dayspan.domain.month import Month


def describe_day(day: Day, clock: Clock | None = None) -> str:
    """Describe a day relative to the clock's current day.

    Returns:
        One of "yesterday", "today", "tomorrow", "past" or "future".
    """
    if day.is_today(clock):
        return "today"
    if day.is_yesterday(clock):
        return "yesterday"
    if day.is_tomorrow(clock):
        return "tomorrow"
    return "past" if day.is_past(clock) else "future"


def describe_month(month: Month, clock: Clock | None = None) -> str:
    """Describe a month relative to the clock's current month.

    Returns:
        One of "last month", "this month", "next month", "past" or "future".
    """
    if month.is_current_month(clock):
        return "this month"
    if month.is_last_month(clock):
        return "last month"
    if month.is_next_month(clock):
        return "next month"
    return "past" if month.is_past(clock) else "future"


def month_range(month: Month) -> tuple[DateString, DateString, str]:
    """Calculate date range and label for a month.

    Args:
        month: Month to describe.

    Returns:
        Tuple of (since_date, until_date, label) where:
        - since_date: First day of month (YYYY-MM-DD)
        - until_date: First day of next month (YYYY-MM-DD)
        - label: Human-readable month (e.g., "January 2025")
    """
    since = str(month.first_date())
    until = str(month.next().first_date())
    return DateString(since), DateString(until), month.label()


def format_range(date_range: DateRange) -> str:
    """Format a range for display, e.g. "2020-01-01 → 2020-01-31 (31 days)".

    Args:
        date_range: Range to format.

    Returns:
        Human-readable range with its length.
    """
    days = date_range.length_in_days()
    unit = "day" if days == 1 else "days"
    return f"{date_range.start} → {date_range.end} ({days} {unit})"
