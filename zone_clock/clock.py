"""
Current-time formatting.
"""

from datetime import datetime, timezone
from typing import Optional

from zone_clock.timezone_utils import resolve_timezone

TIME_FORMAT = '%Y-%m-%d %H:%M:%S %Z'


def utc_now() -> datetime:
    """Return the present instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_time_in_timezone(identifier: str, now: Optional[datetime] = None) -> str:
    """
    Format an instant in the given timezone, e.g. '2024-06-01 14:23:05 EDT'.

    Args:
        identifier: Timezone identifier accepted by resolve_timezone
        now: Aware instant to format (defaults to the present)

    Returns:
        Formatted timestamp with zone abbreviation

    Raises:
        InvalidTimezoneError: If the identifier cannot be resolved
    """
    tz = resolve_timezone(identifier)
    if now is None:
        now = utc_now()
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(tz).strftime(TIME_FORMAT)
