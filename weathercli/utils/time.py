from datetime import datetime, timedelta, timezone
from typing import Optional


def from_unix(timestamp: int, shift_seconds: Optional[int] = None) -> datetime:
    """Convert a provider Unix timestamp into an aware datetime in city-local time.

    ``shift_seconds`` is the provider's ``timezone`` field (offset from UTC).
    Without it the moment is expressed in UTC.
    """

    zone = timezone.utc
    if shift_seconds:
        zone = timezone(timedelta(seconds=shift_seconds))
    return datetime.fromtimestamp(timestamp, tz=zone)


def format_clock(moment: datetime) -> str:

    return moment.strftime("%H:%M")
