"""Tests for dayspan.domain.day."""

from datetime import date, datetime, timedelta, timezone

import pendulum
import pytest

from dayspan.clock import FixedClock
from dayspan.domain.date_range import DateRange
from dayspan.domain.day import Day
from dayspan.domain.errors import EndBeforeStartError, MethodNotSupportedError, ParseError
from dayspan.domain.models import Unit
from dayspan.domain.month import Month


class TestConstruct:
    """Tests for building a Day from dates and datetimes."""

    @pytest.mark.parametrize(
        "value",
        [
            datetime(2020, 11, 22, 10, 0, 0),
            datetime(2020, 11, 22, 10, 0, 0, tzinfo=timezone.utc),
            date(2020, 11, 22),
            pendulum.datetime(2020, 11, 22, 10),
        ],
        ids=["naive datetime", "aware datetime", "date", "pendulum"],
    )
    def test_truncates_to_day(self, value: date) -> None:
        """Should keep the calendar date and drop the time."""
        day = Day(value)

        assert str(day) == "2020-11-22"
        assert day.value.to_datetime_string() == "2020-11-22 00:00:00"

    def test_keeps_input_timezone(self) -> None:
        """Should truncate to midnight in the input's own timezone."""
        day = Day(pendulum.datetime(2020, 11, 22, 23, 30, tz="Asia/Tokyo"))

        assert str(day) == "2020-11-22"
        assert day.timezone_name == "Asia/Tokyo"

    def test_naive_input_uses_clock_timezone(self) -> None:
        """Should place naive datetimes in the ambient clock's timezone."""
        from dayspan.clock import use_clock

        with use_clock(FixedClock("2020-01-01T00:00:00", timezone="Europe/London")):
            day = Day(datetime(2020, 6, 1, 12))

        assert day.timezone_name == "Europe/London"

    def test_naive_pendulum_uses_clock_timezone(self) -> None:
        """Should zone naive pendulum datetimes like any other naive value."""
        day = Day(pendulum.naive(2020, 1, 1, 5))

        assert str(day) == "2020-01-01"
        assert day.timezone_name == "UTC"
        assert day.lt(Day.parse("2020-01-02"))

    def test_naive_pendulum_keeps_wall_time(self) -> None:
        """Should keep the calendar date rather than convert from UTC."""
        from dayspan.clock import SystemClock, use_clock

        with use_clock(SystemClock("Asia/Tokyo")):
            day = Day(pendulum.naive(2020, 1, 1, 23, 30))

        assert str(day) == "2020-01-01"
        assert day.timezone_name == "Asia/Tokyo"

    def test_rejects_strings(self) -> None:
        """Should require Day.parse for text."""
        with pytest.raises(TypeError):
            Day("2020-11-22")  # type: ignore[arg-type]

    def test_is_immutable(self) -> None:
        """Should not allow reassigning the value."""
        day = Day.parse("2020-11-22")

        with pytest.raises(AttributeError):
            day.value = pendulum.datetime(2021, 1, 1)  # type: ignore[misc]


class TestParse:
    """Tests for Day.parse."""

    @pytest.mark.parametrize(
        "text",
        ["2020-11-22", "2020/11/22", "2020-11-22 10:00:00", "2020-11-22T10:00:00+00:00"],
    )
    def test_accepted_formats(self, text: str) -> None:
        """Should parse the common date representations."""
        assert str(Day.parse(text)) == "2020-11-22"

    def test_offset_becomes_timezone(self) -> None:
        """Should keep the offset given in the text."""
        day = Day.parse("2020-01-02T00:00:00+09:00")

        assert str(day) == "2020-01-02"
        assert day.timezone_name == "+09:00"

    def test_explicit_timezone(self) -> None:
        """Should place offset-less text in the requested timezone."""
        day = Day.parse("2020-01-02", tz="America/New_York")

        assert day.timezone_name == "America/New_York"

    def test_invalid_text_raises_parse_error(self) -> None:
        """Should raise ParseError carrying the text."""
        with pytest.raises(ParseError) as exc_info:
            Day.parse("not a date")

        assert exc_info.value.text == "not a date"
        assert isinstance(exc_info.value, ValueError)

    def test_time_only_takes_clock_day(self, clock: FixedClock) -> None:
        """Should take the missing date from the given clock."""
        assert str(Day.parse("12:00", clock=clock)) == "2020-10-15"

    def test_time_only_takes_installed_clock_day(self, pinned: FixedClock) -> None:
        """Should take the missing date from the installed clock."""
        assert str(Day.parse("12:00")) == "2020-10-15"
        assert Day.parse("23:59") == Day.today()

    def test_missing_year_takes_clock_year(self, clock: FixedClock) -> None:
        """Should fill a missing year from the clock."""
        assert str(Day.parse("March 5", clock=clock)) == "2020-03-05"

    def test_now(self, clock: FixedClock) -> None:
        """Should read "now" from the clock."""
        assert str(Day.parse("now", clock=clock)) == "2020-10-15"

    def test_time_only_in_requested_timezone(self) -> None:
        """Should take the clock's day in the requested timezone."""
        clock = FixedClock("2020-10-15T20:00:00+00:00", timezone="UTC")

        day = Day.parse("09:00", tz="Asia/Tokyo", clock=clock)

        assert str(day) == "2020-10-16"
        assert day.timezone_name == "Asia/Tokyo"


class TestToday:
    """Tests for Day.today."""

    def test_explicit_clock(self, clock: FixedClock) -> None:
        """Should use the given clock."""
        assert str(Day.today(clock)) == "2020-10-15"

    def test_default_clock(self, pinned: FixedClock) -> None:
        """Should fall back to the installed clock."""
        assert str(Day.today()) == "2020-10-15"

    def test_clock_timezone(self) -> None:
        """Should take today in the clock's timezone."""
        clock = FixedClock("2020-10-15T20:00:00+00:00", timezone="Asia/Tokyo")

        today = Day.today(clock)

        assert str(today) == "2020-10-16"
        assert today.timezone_name == "Asia/Tokyo"


class TestNavigation:
    """Tests for next, prev and month."""

    def test_next(self) -> None:
        """Should return the following day."""
        assert str(Day.parse("2020-11-22").next()) == "2020-11-23"

    def test_next_crosses_year(self) -> None:
        """Should roll over at the end of the year."""
        assert str(Day.parse("2020-12-31").next()) == "2021-01-01"

    def test_prev(self) -> None:
        """Should return the preceding day."""
        assert str(Day.parse("2020-03-01").prev()) == "2020-02-29"

    def test_next_prev_round_trip(self) -> None:
        """Should come back to the same day in both directions."""
        day = Day.parse("2020-01-01")
        for _ in range(366):
            assert day.next().prev() == day
            assert day.prev().next() == day
            day = day.next()

    def test_next_across_dst_change(self) -> None:
        """Should stay at midnight when the clocks change."""
        day = Day.parse("2021-03-27", tz="Europe/London")

        following = day.next()

        assert str(following) == "2021-03-28"
        assert following.value.hour == 0

    def test_month(self) -> None:
        """Should return the enclosing month."""
        month = Day.parse("2020-11-22").month()

        assert isinstance(month, Month)
        assert str(month) == "2020-11"


class TestDetermination:
    """Tests for the day-of-month and day-of-week predicates."""

    def test_first_of_month(self) -> None:
        """Should detect day 1 only."""
        assert Day.parse("2020-11-01").is_first_of_month()
        assert not Day.parse("2020-11-02").is_first_of_month()

    def test_last_of_month(self) -> None:
        """Should respect month lengths and leap years."""
        assert Day.parse("2020-02-29").is_last_of_month()
        assert not Day.parse("2020-02-28").is_last_of_month()
        assert Day.parse("2021-02-28").is_last_of_month()
        assert Day.parse("2020-04-30").is_last_of_month()

    @pytest.mark.parametrize(
        ("text", "predicate"),
        [
            ("2020-10-12", "is_monday"),
            ("2020-10-13", "is_tuesday"),
            ("2020-10-14", "is_wednesday"),
            ("2020-10-15", "is_thursday"),
            ("2020-10-16", "is_friday"),
            ("2020-10-17", "is_saturday"),
            ("2020-10-18", "is_sunday"),
        ],
    )
    def test_day_names(self, text: str, predicate: str) -> None:
        """Should match exactly one day name."""
        names = ["is_monday", "is_tuesday", "is_wednesday", "is_thursday", "is_friday", "is_saturday", "is_sunday"]
        day = Day.parse(text)

        matches = [name for name in names if getattr(day, name)()]

        assert matches == [predicate]

    def test_weekday_weekend_exclusive(self) -> None:
        """Should be either weekday or weekend, never both."""
        for day in DateRange.parse("2020-10-12", "2020-10-25"):
            assert day.is_weekday() != day.is_weekend()
            assert day.is_weekend() == (day.is_saturday() or day.is_sunday())


class TestRelative:
    """Tests for predicates relative to the clock."""

    def test_yesterday_today_tomorrow(self, clock: FixedClock) -> None:
        """Should compare against the clock's current day."""
        assert Day.parse("2020-10-14").is_yesterday(clock)
        assert Day.parse("2020-10-15").is_today(clock)
        assert Day.parse("2020-10-16").is_tomorrow(clock)
        assert not Day.parse("2020-10-16").is_today(clock)

    def test_default_clock(self, pinned: FixedClock) -> None:
        """Should use the installed clock when none is given."""
        assert Day.parse("2020-10-15").is_today()

    def test_past_and_future(self, clock: FixedClock) -> None:
        """Should be strict on both sides of today."""
        assert Day.parse("2020-10-14").is_past(clock)
        assert Day.parse("2020-10-16").is_future(clock)

        today = Day.parse("2020-10-15")
        assert not today.is_past(clock)
        assert not today.is_future(clock)

    def test_relative_in_day_timezone(self) -> None:
        """Should evaluate "today" in the day's own timezone."""
        clock = FixedClock("2020-10-15T20:00:00+00:00", timezone="UTC")

        assert Day.parse("2020-10-16", tz="Asia/Tokyo").is_today(clock)
        assert Day.parse("2020-10-15", tz="UTC").is_today(clock)


class TestArithmetic:
    """Tests for addition and subtraction."""

    def test_add_and_sub_days(self) -> None:
        """Should move by whole days."""
        day = Day.parse("2020-02-27")

        assert str(day.add_day()) == "2020-02-28"
        assert str(day.add_days(3)) == "2020-03-01"
        assert str(day.sub_days(27)) == "2020-01-31"

    def test_weeks(self) -> None:
        """Should move by seven days per week."""
        day = Day.parse("2020-10-15")

        assert str(day.add_week()) == "2020-10-22"
        assert str(day.sub_weeks(2)) == "2020-10-01"

    def test_month_end_clamps(self) -> None:
        """Should clamp to the end of a shorter month."""
        assert str(Day.parse("2020-01-31").add_month()) == "2020-02-29"
        assert str(Day.parse("2020-03-31").sub_month()) == "2020-02-29"

    def test_quarters_years_centuries(self) -> None:
        """Should move by 3 months, 12 months and 100 years."""
        day = Day.parse("2020-01-15")

        assert str(day.add_quarter()) == "2020-04-15"
        assert str(day.sub_quarters(2)) == "2019-07-15"
        assert str(day.add_years(2)) == "2022-01-15"
        assert str(day.sub_year()) == "2019-01-15"
        assert str(day.add_century()) == "2120-01-15"
        assert str(day.sub_centuries(2)) == "1820-01-15"

    def test_leap_day_minus_year(self) -> None:
        """Should land on Feb 28 in a non-leap year."""
        assert str(Day.parse("2020-02-29").sub_year()) == "2019-02-28"

    def test_returns_new_instance(self) -> None:
        """Should leave the original untouched."""
        day = Day.parse("2020-10-15")

        day.add_days(5)

        assert str(day) == "2020-10-15"

    def test_shift_by_name(self) -> None:
        """Should accept singular and plural unit names."""
        day = Day.parse("2020-10-15")

        assert day.shift("months", 2) == day.add_months(2)
        assert day.shift("day", -1) == day.prev()
        assert day.shift(Unit.WEEK) == day.add_week()

    def test_shift_unknown_unit(self) -> None:
        """Should raise MethodNotSupportedError for an unknown unit."""
        with pytest.raises(MethodNotSupportedError) as exc_info:
            Day.parse("2020-10-15").shift("fortnight")

        assert exc_info.value.type_name == "Day"
        assert exc_info.value.method == "add_fortnight"


class TestComparison:
    """Tests for ordering and equality."""

    def test_named_comparisons(self) -> None:
        """Should order days by instant."""
        early = Day.parse("2020-01-01")
        late = Day.parse("2020-01-02")

        assert early.lt(late) and early.lte(late) and early.ne(late)
        assert late.gt(early) and late.gte(early)
        assert early.eq(Day.parse("2020-01-01"))
        assert early.lte(Day.parse("2020-01-01"))

    def test_operators(self) -> None:
        """Should support the Python comparison operators."""
        early = Day.parse("2020-01-01")
        late = Day.parse("2020-01-02")

        assert early < late <= late
        assert late > early >= early
        assert early == Day(datetime(2020, 1, 1, 15, 30))
        assert early != late

    def test_not_equal_to_other_types(self) -> None:
        """Should not compare equal to strings."""
        assert Day.parse("2020-01-01") != "2020-01-01"

    def test_same_instant_different_dates(self) -> None:
        """Should tell apart midnights that coincide in UTC but fall on different dates."""
        kiritimati = Day.parse("2020-01-02", tz="Pacific/Kiritimati")
        honolulu = Day.parse("2020-01-01", tz="Pacific/Honolulu")

        assert kiritimati.value == honolulu.value
        assert kiritimati != honolulu

    def test_hashable(self) -> None:
        """Should deduplicate equal days in a set."""
        days = {Day.parse("2020-01-01"), Day(datetime(2020, 1, 1, 9)), Day.parse("2020-01-02")}

        assert len(days) == 2


class TestBoundaries:
    """Tests for start_of_day and end_of_day."""

    def test_start_of_day(self) -> None:
        """Should be midnight."""
        start = Day(datetime(2020, 11, 22, 10, 15, 30)).start_of_day()

        assert (start.hour, start.minute, start.second) == (0, 0, 0)
        assert start.to_date_string() == "2020-11-22"

    def test_end_of_day(self) -> None:
        """Should be the last microsecond of the day."""
        end = Day.parse("2020-11-22").end_of_day()

        assert end.to_datetime_string() == "2020-11-22 23:59:59"
        assert end.microsecond == 999999
        assert end + timedelta(microseconds=1) == Day.parse("2020-11-23").start_of_day()


class TestRanges:
    """Tests for range_to and range_from."""

    def test_range_to(self) -> None:
        """Should build a range starting at this day."""
        date_range = Day.parse("2020-01-01").range_to(Day.parse("2020-01-31"))

        assert isinstance(date_range, DateRange)
        assert str(date_range.start) == "2020-01-01"
        assert str(date_range.end) == "2020-01-31"

    def test_range_from(self) -> None:
        """Should build a range ending at this day."""
        date_range = Day.parse("2020-01-31").range_from(Day.parse("2020-01-01"))

        assert str(date_range) == "2020-01-01 - 2020-01-31"

    def test_range_to_earlier_day(self) -> None:
        """Should inherit the range validation."""
        with pytest.raises(EndBeforeStartError):
            Day.parse("2020-01-31").range_to(Day.parse("2020-01-01"))


class TestRepresentation:
    """Tests for str and repr."""

    def test_str(self) -> None:
        """Should render as zero-padded YYYY-MM-DD."""
        assert str(Day(date(999, 1, 5))) == "0999-01-05"

    def test_repr(self) -> None:
        """Should include the timezone."""
        assert repr(Day.parse("2020-01-01")) == "Day('2020-01-01', tz='UTC')"
