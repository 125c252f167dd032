"""Calendar units and their one-step arithmetic.

Each unit knows how to advance an instant by exactly one of itself and how to
floor an instant to the start of the unit containing it. Units also act as
period factories: ``5 * DAY`` is ``relativedelta(days=5)``.
"""

from datetime import datetime, timedelta, timezone
from enum import Enum

from dateutil.relativedelta import MO, relativedelta

from caltimes.util import MICROS_PER_MILLI


class CalendarUnit(Enum):
    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"

    def times(self, n: int) -> relativedelta:
        """Return a period of ``n`` of this unit."""
        if self is CalendarUnit.MILLISECOND:
            return relativedelta(microseconds=n * MICROS_PER_MILLI)
        return relativedelta(**{f"{self.value}s": n})

    @property
    def is_exact(self) -> bool:
        """True for units of fixed length (hour and below).

        Exact units step through absolute time, so an hour is always 3600
        seconds even across a DST transition. Calendar units (day and above)
        step through wall-clock fields instead.
        """
        return self in _EXACT_UNITS

    def advance(self, instant: datetime, n: int = 1) -> datetime:
        """Return the instant ``n`` units after ``instant``."""
        step = self.times(n)
        if self.is_exact and instant.tzinfo is not None:
            moved = instant.astimezone(timezone.utc) + step
            return moved.astimezone(instant.tzinfo)
        return instant + step

    def retreat(self, instant: datetime, n: int = 1) -> datetime:
        """Return the instant ``n`` units before ``instant``."""
        return self.advance(instant, -n)

    def floor(self, instant: datetime) -> datetime:
        """Return the start of the unit containing ``instant``."""
        if self is CalendarUnit.MILLISECOND:
            micros = instant.microsecond - instant.microsecond % MICROS_PER_MILLI
            return instant.replace(microsecond=micros)

        truncated = instant.replace(microsecond=0)
        if self is CalendarUnit.SECOND:
            return truncated
        truncated = truncated.replace(second=0)
        if self is CalendarUnit.MINUTE:
            return truncated
        truncated = truncated.replace(minute=0)
        if self is CalendarUnit.HOUR:
            return truncated
        truncated = truncated.replace(hour=0)
        if self is CalendarUnit.DAY:
            return truncated
        if self is CalendarUnit.WEEK:
            # Weeks start on Monday
            return truncated + relativedelta(weekday=MO(-1))
        truncated = truncated.replace(day=1)
        if self is CalendarUnit.MONTH:
            return truncated
        return truncated.replace(month=1)

    def __mul__(self, n: int) -> relativedelta:
        if not isinstance(n, int):
            return NotImplemented
        return self.times(n)

    def __rmul__(self, n: int) -> relativedelta:
        return self.__mul__(n)


_EXACT_UNITS = frozenset(
    {
        CalendarUnit.HOUR,
        CalendarUnit.MINUTE,
        CalendarUnit.SECOND,
        CalendarUnit.MILLISECOND,
    }
)


def shift(instant: datetime, period: relativedelta | timedelta) -> datetime:
    """Add ``period`` to ``instant``, splitting it the way units step.

    Years, months, days and absolute fields move the wall clock; hours and
    smaller move absolute time. A ``timedelta`` is a fixed duration. Note
    that ``relativedelta`` folds whole days out of large hour counts, so
    ``hours(24)`` moves the wall clock by a day.
    """
    if isinstance(period, timedelta):
        moved, exact = instant, period
    else:
        exact = timedelta(
            hours=period.hours,
            minutes=period.minutes,
            seconds=period.seconds,
            microseconds=period.microseconds,
        )
        calendar = period - relativedelta(
            hours=period.hours,
            minutes=period.minutes,
            seconds=period.seconds,
            microseconds=period.microseconds,
        )
        moved = instant + calendar if calendar else instant

    if instant.tzinfo is None:
        return moved + exact
    return (moved.astimezone(timezone.utc) + exact).astimezone(moved.tzinfo)


YEAR = CalendarUnit.YEAR
MONTH = CalendarUnit.MONTH
WEEK = CalendarUnit.WEEK
DAY = CalendarUnit.DAY
HOUR = CalendarUnit.HOUR
MINUTE = CalendarUnit.MINUTE
SECOND = CalendarUnit.SECOND
MILLISECOND = CalendarUnit.MILLISECOND
