from .chunking import (
    Chunk,
    chunk,
    chunk_day,
    chunk_hour,
    chunk_milli,
    chunk_minute,
    chunk_month,
    chunk_second,
    chunk_week,
    chunk_year,
    enumerate_steps,
)
from .interval import Interval, span
from .moments import (
    datetime_of,
    day_interval,
    earliest,
    last_unit,
    latest,
    month_interval,
    next_unit,
    now,
    start_of_day,
    start_of_hour,
    start_of_millis,
    start_of_minute,
    start_of_month,
    start_of_second,
    start_of_week,
    start_of_year,
    this_hour,
    this_minute,
    this_second,
    today,
    tomorrow,
    yesterday,
)
from .periods import (
    Period,
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
from .units import (
    DAY,
    HOUR,
    MILLISECOND,
    MINUTE,
    MONTH,
    SECOND,
    WEEK,
    YEAR,
    CalendarUnit,
)
from .util import EPOCH

__all__ = [
    "Interval",
    "span",
    "CalendarUnit",
    "YEAR",
    "MONTH",
    "WEEK",
    "DAY",
    "HOUR",
    "MINUTE",
    "SECOND",
    "MILLISECOND",
    "Chunk",
    "chunk",
    "chunk_year",
    "chunk_month",
    "chunk_week",
    "chunk_day",
    "chunk_hour",
    "chunk_minute",
    "chunk_second",
    "chunk_milli",
    "enumerate_steps",
    "Period",
    "years",
    "months",
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    "millis",
    "standard_days",
    "standard_hours",
    "standard_minutes",
    "standard_seconds",
    "abs_duration",
    "ago",
    "later",
    "before",
    "after",
    "after_epoch",
    "EPOCH",
    "now",
    "today",
    "tomorrow",
    "yesterday",
    "datetime_of",
    "start_of_year",
    "start_of_month",
    "start_of_week",
    "start_of_day",
    "start_of_hour",
    "start_of_minute",
    "start_of_second",
    "start_of_millis",
    "next_unit",
    "last_unit",
    "earliest",
    "latest",
    "day_interval",
    "month_interval",
    "this_second",
    "this_minute",
    "this_hour",
]
