"""Human-friendly period and duration constructors.

Periods are calendar-aware ``relativedelta`` values: ``months(1)`` added to
January 31st lands on the last day of February. Durations are fixed-length
``timedelta`` values. Both support ``+``, ``-`` and ``*`` natively::

    >>> meeting = now() + hours(2)
    >>> quarter = 3 * months(1)
    >>> deadline = after(weeks(2) + days(3), today())
"""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from dateutil.relativedelta import relativedelta

from caltimes.units import CalendarUnit
from caltimes.util import DEFAULT_TZ, EPOCH, zone

Period = relativedelta


def years(n: int) -> Period:
    return CalendarUnit.YEAR.times(n)


def months(n: int) -> Period:
    return CalendarUnit.MONTH.times(n)


def weeks(n: int) -> Period:
    return CalendarUnit.WEEK.times(n)


def days(n: int) -> Period:
    return CalendarUnit.DAY.times(n)


def hours(n: int) -> Period:
    return CalendarUnit.HOUR.times(n)


def minutes(n: int) -> Period:
    return CalendarUnit.MINUTE.times(n)


def seconds(n: int) -> Period:
    return CalendarUnit.SECOND.times(n)


def millis(n: int) -> Period:
    return CalendarUnit.MILLISECOND.times(n)


def standard_days(n: int) -> timedelta:
    return timedelta(days=n)


def standard_hours(n: int) -> timedelta:
    return timedelta(hours=n)


def standard_minutes(n: int) -> timedelta:
    return timedelta(minutes=n)


def standard_seconds(n: int) -> timedelta:
    return timedelta(seconds=n)


def abs_duration(duration: timedelta) -> timedelta:
    return abs(duration)


def ago(period: Period | timedelta, tz: str | ZoneInfo = DEFAULT_TZ) -> datetime:
    """Return the current time minus ``period``."""
    return before(period, datetime.now(zone(tz)))


def later(period: Period | timedelta, tz: str | ZoneInfo = DEFAULT_TZ) -> datetime:
    """Return the current time plus ``period``."""
    return after(period, datetime.now(zone(tz)))


def before(period: Period | timedelta, moment: datetime) -> datetime:
    return moment - period


def after(period: Period | timedelta, moment: datetime) -> datetime:
    return moment + period


def after_epoch(duration: Period | timedelta) -> datetime:
    """Return the instant ``duration`` after 1970-01-01T00:00Z."""
    return EPOCH + duration
