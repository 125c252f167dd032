"""Tests for period and duration constructors."""

from datetime import datetime, timedelta, timezone

from dateutil.relativedelta import relativedelta

from caltimes import (
    EPOCH,
    abs_duration,
    after,
    after_epoch,
    ago,
    before,
    days,
    hours,
    later,
    millis,
    minutes,
    months,
    seconds,
    standard_days,
    standard_hours,
    standard_minutes,
    standard_seconds,
    weeks,
    years,
)

UTC = timezone.utc


def test_period_constructors():
    assert years(2) == relativedelta(years=2)
    assert months(3) == relativedelta(months=3)
    assert weeks(1) == relativedelta(weeks=1)
    assert days(5) == relativedelta(days=5)
    assert hours(4) == relativedelta(hours=4)
    assert minutes(30) == relativedelta(minutes=30)
    assert seconds(10) == relativedelta(seconds=10)


def test_millis_period():
    assert EPOCH + millis(1500) == EPOCH + timedelta(milliseconds=1500)


def test_periods_are_calendar_aware():
    leap_day = datetime(2024, 2, 29, tzinfo=UTC)
    assert leap_day + years(1) == datetime(2025, 2, 28, tzinfo=UTC)

    jan_31 = datetime(2025, 1, 31, tzinfo=UTC)
    assert jan_31 + months(1) == datetime(2025, 2, 28, tzinfo=UTC)


def test_period_operators():
    assert 3 * months(1) == months(3)
    assert weeks(1) + days(2) == relativedelta(weeks=1, days=2)

    moment = datetime(2025, 6, 1, tzinfo=UTC)
    assert moment + hours(2) + minutes(30) == datetime(2025, 6, 1, 2, 30, tzinfo=UTC)
    assert moment - days(1) == datetime(2025, 5, 31, tzinfo=UTC)


def test_standard_durations():
    assert standard_days(2) == timedelta(days=2)
    assert standard_hours(3) == timedelta(hours=3)
    assert standard_minutes(4) == timedelta(minutes=4)
    assert standard_seconds(5) == timedelta(seconds=5)
    assert abs_duration(-standard_hours(3)) == standard_hours(3)
    assert abs_duration(standard_hours(3)) == standard_hours(3)


def test_before_and_after():
    moment = datetime(2025, 6, 15, tzinfo=UTC)

    assert before(days(15), moment) == datetime(2025, 5, 31, tzinfo=UTC)
    assert after(months(1), moment) == datetime(2025, 7, 15, tzinfo=UTC)
    assert after_epoch(standard_days(1)) == datetime(1970, 1, 2, tzinfo=UTC)


def test_ago_and_later_read_the_clock():
    lower = datetime.now(UTC)
    past = ago(hours(1))
    future = later(hours(1))
    upper = datetime.now(UTC)

    assert lower - timedelta(hours=1) <= past <= upper - timedelta(hours=1)
    assert lower + timedelta(hours=1) <= future <= upper + timedelta(hours=1)
