"""Helpers for building and moving single instants.

All helpers return timezone-aware datetimes. Functions that read the clock
take an IANA ``tz`` name (default UTC).
"""

from datetime import datetime
from zoneinfo import ZoneInfo

from caltimes.interval import Interval
from caltimes.units import CalendarUnit
from caltimes.util import DEFAULT_TZ, MICROS_PER_MILLI, utc, zone


def now(tz: str | ZoneInfo = DEFAULT_TZ) -> datetime:
    return datetime.now(zone(tz))


def today(tz: str | ZoneInfo = DEFAULT_TZ) -> datetime:
    """Return midnight of the current day in ``tz``."""
    return start_of_day(now(tz))


def tomorrow(tz: str | ZoneInfo = DEFAULT_TZ) -> datetime:
    return CalendarUnit.DAY.advance(now(tz))


def yesterday(tz: str | ZoneInfo = DEFAULT_TZ) -> datetime:
    return CalendarUnit.DAY.retreat(now(tz))


def datetime_of(
    year: int,
    month: int = 1,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    millis: int = 0,
    tz: str | ZoneInfo = DEFAULT_TZ,
) -> datetime:
    """
    Build an aware datetime from calendar fields.

    Args:
        year: Calendar year
        month: Month of year (1-12)
        day: Day of month
        hour: Hour of day (0-23)
        minute: Minute of hour
        second: Second of minute
        millis: Millisecond of second (0-999)
        tz: IANA timezone name (e.g., "UTC", "US/Pacific")

    Example:
        >>> datetime_of(2025, 3, 14, 15, 9, 26, 535, tz="Europe/London")
    """
    return datetime(
        year,
        month,
        day,
        hour,
        minute,
        second,
        millis * MICROS_PER_MILLI,
        tzinfo=zone(tz),
    )


def start_of_year(moment: datetime) -> datetime:
    return CalendarUnit.YEAR.floor(moment)


def start_of_month(moment: datetime) -> datetime:
    return CalendarUnit.MONTH.floor(moment)


def start_of_week(moment: datetime) -> datetime:
    """Return midnight of the Monday starting the week of ``moment``."""
    return CalendarUnit.WEEK.floor(moment)


def start_of_day(moment: datetime) -> datetime:
    return CalendarUnit.DAY.floor(moment)


def start_of_hour(moment: datetime) -> datetime:
    return CalendarUnit.HOUR.floor(moment)


def start_of_minute(moment: datetime) -> datetime:
    return CalendarUnit.MINUTE.floor(moment)


def start_of_second(moment: datetime) -> datetime:
    return CalendarUnit.SECOND.floor(moment)


def start_of_millis(moment: datetime) -> datetime:
    return CalendarUnit.MILLISECOND.floor(moment)


def next_unit(moment: datetime, unit: CalendarUnit) -> datetime:
    return unit.advance(moment)


def last_unit(moment: datetime, unit: CalendarUnit) -> datetime:
    return unit.retreat(moment)


def earliest(a: datetime, b: datetime) -> datetime:
    return a if utc(a) <= utc(b) else b


def latest(a: datetime, b: datetime) -> datetime:
    return a if utc(a) >= utc(b) else b


def _unit_interval(moment: datetime, unit: CalendarUnit) -> Interval:
    start = unit.floor(moment)
    return Interval(start=start, end=unit.advance(start))


def day_interval(moment: datetime) -> Interval:
    """Return the interval from midnight of ``moment`` to the next midnight."""
    return _unit_interval(moment, CalendarUnit.DAY)


def month_interval(moment: datetime) -> Interval:
    return _unit_interval(moment, CalendarUnit.MONTH)


def this_second(tz: str | ZoneInfo = DEFAULT_TZ) -> Interval:
    return _unit_interval(now(tz), CalendarUnit.SECOND)


def this_minute(tz: str | ZoneInfo = DEFAULT_TZ) -> Interval:
    return _unit_interval(now(tz), CalendarUnit.MINUTE)


def this_hour(tz: str | ZoneInfo = DEFAULT_TZ) -> Interval:
    return _unit_interval(now(tz), CalendarUnit.HOUR)
