"""Utility constants and helpers for caltimes.

Defaults and small conversions shared across the package.
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

MICROS_PER_MILLI = 1000

# Timezone used whenever a caller does not name one
DEFAULT_TZ = "UTC"

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def zone(tz: str | ZoneInfo) -> ZoneInfo:
    """Resolve an IANA timezone name (or pass a ZoneInfo through)."""
    if isinstance(tz, ZoneInfo):
        return tz
    return ZoneInfo(tz)


def utc(instant: datetime) -> datetime:
    """Return the same instant expressed in UTC.

    Aware datetimes sharing a tzinfo compare by wall clock, which misorders
    instants inside a DST fold. Comparing their UTC forms does not.
    """
    return instant.astimezone(timezone.utc)
