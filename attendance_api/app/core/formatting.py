"""
Date and time presentation helpers.

Check-in records carry human-readable ``loginDate`` and ``loginTime``
strings in the Indian English convention (``18/10/2026`` and
``7:05:09 pm``).  All locale rules live here so the storage and
service code only ever handles ``datetime`` objects.
"""

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo


def current_instant(tz_name: Optional[str] = None) -> datetime:
    """Return the current time as an aware ``datetime``.

    ``tz_name`` is an IANA zone name; when omitted the server's local
    zone is used.
    """
    if tz_name:
        return datetime.now(ZoneInfo(tz_name))
    return datetime.now().astimezone()


def format_login_date(moment: datetime) -> str:
    """Format a date as ``D/M/YYYY`` without zero padding."""
    return f"{moment.day}/{moment.month}/{moment.year}"


def format_login_time(moment: datetime) -> str:
    """Format a time as ``h:mm:ss am|pm`` on a 12-hour clock."""
    hour = moment.hour % 12 or 12
    marker = "am" if moment.hour < 12 else "pm"
    return f"{hour}:{moment.minute:02d}:{moment.second:02d} {marker}"


def to_epoch_millis(moment: datetime) -> int:
    """Milliseconds since the Unix epoch.

    Naive datetimes are interpreted in server local time.
    """
    return int(moment.replace(microsecond=0).timestamp()) * 1000 + moment.microsecond // 1000
