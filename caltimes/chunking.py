"""Chunk an interval into bounded groups of unit-aligned instants.

Every chunking entry point funnels into :func:`chunk`, which walks the
interval one calendar unit at a time from its start and groups the visited
instants by count::

    >>> start = datetime(2025, 1, 1, tzinfo=timezone.utc)
    >>> yearly = span(start, start + years(5))
    >>> [len(c) for c in chunk(yearly, YEAR, 4)]
    [4, 1]

The interval's end is an exclusive bound for the walk: it is never itself a
grid point, so ``start + years(5)`` yields the five instants Y0..Y4.
"""

import logging
from collections.abc import Iterator
from datetime import datetime
from itertools import batched, takewhile
from typing import TYPE_CHECKING

from caltimes.units import CalendarUnit
from caltimes.util import utc

if TYPE_CHECKING:
    from caltimes.interval import Interval

logger = logging.getLogger(__name__)

Chunk = tuple[datetime, ...]


def _walk(start: datetime, unit: CalendarUnit) -> Iterator[datetime]:
    current = start
    while True:
        yield current
        current = unit.advance(current)


def enumerate_steps(interval: "Interval", unit: CalendarUnit) -> Iterator[datetime]:
    """Yield ``start``, ``start + 1 unit``, ... while strictly before ``end``.

    Empty and reversed intervals yield nothing.
    """
    end = utc(interval.end)
    return takewhile(lambda x: utc(x) < end, _walk(interval.start, unit))


def _check_size(size: int) -> None:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(
            f"Chunk size must be an int.\n"
            f"Got {type(size).__name__!r}: {size!r}"
        )
    if size <= 0:
        raise ValueError(
            f"Chunk size must be positive, got {size}.\n"
            f"Example: interval.chunk_day(7)  # groups of up to 7 days"
        )


def chunk(interval: "Interval", unit: CalendarUnit, size: int) -> Iterator[Chunk]:
    """Partition the unit steps of ``interval`` into tuples of up to ``size``.

    Every chunk but the last holds exactly ``size`` instants; the last holds
    the remainder. Boundaries are by count only, so four months per chunk
    means four month starts whatever their lengths in days.

    The size is validated here, before any chunk is produced. The returned
    iterator is single-pass; call again to walk the interval again.

    Raises:
        ValueError: If ``size`` is zero or negative
        TypeError: If ``size`` is not an int
    """
    _check_size(size)
    logger.debug("chunking %s by %s in groups of %d", interval, unit.value, size)
    return batched(enumerate_steps(interval, unit), size)


def chunk_year(interval: "Interval", size: int) -> Iterator[Chunk]:
    return chunk(interval, CalendarUnit.YEAR, size)


def chunk_month(interval: "Interval", size: int) -> Iterator[Chunk]:
    return chunk(interval, CalendarUnit.MONTH, size)


def chunk_week(interval: "Interval", size: int) -> Iterator[Chunk]:
    return chunk(interval, CalendarUnit.WEEK, size)


def chunk_day(interval: "Interval", size: int) -> Iterator[Chunk]:
    return chunk(interval, CalendarUnit.DAY, size)


def chunk_hour(interval: "Interval", size: int) -> Iterator[Chunk]:
    return chunk(interval, CalendarUnit.HOUR, size)


def chunk_minute(interval: "Interval", size: int) -> Iterator[Chunk]:
    return chunk(interval, CalendarUnit.MINUTE, size)


def chunk_second(interval: "Interval", size: int) -> Iterator[Chunk]:
    return chunk(interval, CalendarUnit.SECOND, size)


def chunk_milli(interval: "Interval", size: int) -> Iterator[Chunk]:
    return chunk(interval, CalendarUnit.MILLISECOND, size)
