"""
Zone Clock Package

Timezone resolution and current-time formatting used by the clock web app.
"""

from zone_clock.clock import TIME_FORMAT, format_time_in_timezone, utc_now
from zone_clock.config_loader import ClockSettings, load_settings
from zone_clock.timezone_utils import (
    InvalidTimezoneError,
    is_valid_timezone,
    normalize_timezone_param,
    resolve_timezone,
)

__version__ = "0.1.0"
__all__ = [
    "ClockSettings",
    "InvalidTimezoneError",
    "TIME_FORMAT",
    "format_time_in_timezone",
    "is_valid_timezone",
    "load_settings",
    "normalize_timezone_param",
    "resolve_timezone",
    "utc_now",
]
