from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from caltimes import chunking
from caltimes.units import CalendarUnit, shift
from caltimes.util import MICROS_PER_MILLI, utc


@dataclass(frozen=True, kw_only=True)
class Interval:
    """A span of time between two timezone-aware instants.

    ``end`` bounds enumeration: chunking walks up to but not onto it.
    Membership (``in``) is inclusive on both ends. An interval whose start is
    not before its end is empty; reversed intervals are allowed and simply
    enumerate nothing.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        for edge in ("start", "end"):
            value = getattr(self, edge)
            if not isinstance(value, datetime):
                raise TypeError(
                    f"Interval {edge} must be a datetime.\n"
                    f"Got {type(value).__name__!r}: {value!r}"
                )
            if value.tzinfo is None:
                raise TypeError(
                    f"Interval {edge} must be a timezone-aware datetime.\n"
                    f"Got naive datetime: {value!r}\n"
                    f"Hint: Add timezone info:\n"
                    f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))"
                )

    def __str__(self) -> str:
        """Human-friendly string showing the range."""
        return f"Interval({self.start.isoformat()}→{self.end.isoformat()})"

    def __contains__(self, item: "datetime | Interval") -> bool:
        if isinstance(item, Interval):
            return item.start in self and item.end in self
        return utc(self.start) <= utc(item) <= utc(self.end)

    @property
    def is_empty(self) -> bool:
        return utc(self.start) >= utc(self.end)

    @property
    def duration(self) -> timedelta:
        return utc(self.end) - utc(self.start)

    @property
    def millis(self) -> int:
        return self.duration // timedelta(microseconds=MICROS_PER_MILLI)

    def step(self, period: relativedelta | timedelta) -> Iterator[datetime]:
        """Yield ``start + period``, ``start + 2 * period``, ... up to ``end``.

        The start itself is skipped and ``end`` is included when it falls on
        the grid. Hours and smaller parts of the period advance absolute time,
        so stepping by an hour visits both copies of a repeated DST hour.

        Raises:
            ValueError: If ``period`` does not move time forward
        """
        if utc(shift(self.start, period)) <= utc(self.start):
            raise ValueError(
                f"step() requires a positive period, got {period!r}.\n"
                f"Example: interval.step(days(2))"
            )
        end = utc(self.end)

        def generate() -> Iterator[datetime]:
            current = shift(self.start, period)
            while utc(current) <= end:
                yield current
                current = shift(current, period)

        return generate()

    def each(self, unit: CalendarUnit) -> Iterator[datetime]:
        """Yield one instant per unit from ``start`` up to ``end``.

        Day and larger units begin at the start of the unit containing
        ``start`` (``each(DAY)`` begins at midnight); hour and smaller units
        begin at ``start`` itself. ``end`` is included when it falls on the
        grid.
        """
        end = utc(self.end)
        current = self.start if unit.is_exact else unit.floor(self.start)
        while utc(current) <= end:
            yield current
            current = unit.advance(current)

    def chunk(self, unit: CalendarUnit, size: int) -> Iterator[chunking.Chunk]:
        return chunking.chunk(self, unit, size)

    def chunk_year(self, size: int) -> Iterator[chunking.Chunk]:
        return chunking.chunk_year(self, size)

    def chunk_month(self, size: int) -> Iterator[chunking.Chunk]:
        return chunking.chunk_month(self, size)

    def chunk_week(self, size: int) -> Iterator[chunking.Chunk]:
        return chunking.chunk_week(self, size)

    def chunk_day(self, size: int) -> Iterator[chunking.Chunk]:
        return chunking.chunk_day(self, size)

    def chunk_hour(self, size: int) -> Iterator[chunking.Chunk]:
        return chunking.chunk_hour(self, size)

    def chunk_minute(self, size: int) -> Iterator[chunking.Chunk]:
        return chunking.chunk_minute(self, size)

    def chunk_second(self, size: int) -> Iterator[chunking.Chunk]:
        return chunking.chunk_second(self, size)

    def chunk_milli(self, size: int) -> Iterator[chunking.Chunk]:
        return chunking.chunk_milli(self, size)


def span(start: datetime, end: datetime) -> Interval:
    """Build an interval from two instants (``start..end``)."""
    return Interval(start=start, end=end)
