"""
Request validation utilities.
"""
from typing import List, Optional, Tuple

from zone_clock.timezone_utils import (
    InvalidTimezoneError,
    normalize_timezone_param,
    resolve_timezone,
)


def validate_timezone_param(value: Optional[str]) -> Tuple[Optional[str], List[str]]:
    """
    Validate a raw timezone request parameter.

    Args:
        value: The parameter as received (may be None or empty)

    Returns:
        Tuple of (normalized value, list of error messages). A missing or
        empty parameter is valid and comes back unchanged.
    """
    if not value:
        return value, []

    timezone = normalize_timezone_param(value)
    try:
        resolve_timezone(timezone)
    except InvalidTimezoneError as e:
        return timezone, [f'Invalid timezone: {e.reason}.']

    return timezone, []
