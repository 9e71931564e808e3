"""
Time rendering service: effective timezone selection and the timezone cookie.
"""
from typing import Mapping, Optional

from flask import current_app
from zone_clock.clock import format_time_in_timezone, utc_now


class TimeService:
    """Service that decides which timezone a request is rendered in."""

    def __init__(self, default_timezone: Optional[str] = None):
        self.default_timezone = default_timezone or current_app.config['DEFAULT_TIMEZONE']

    def resolve_effective_timezone(self, validated: Optional[str], cookies: Mapping[str, str]) -> str:
        """
        Pick the timezone to render in.

        Order: the validated request parameter, then the first cookie the
        client sent (whatever its name), then the default timezone.

        Args:
            validated: Normalized timezone from the validator, or an empty marker
            cookies: Request cookies in the order the client sent them

        Returns:
            Timezone identifier (cookie values are not revalidated)
        """
        if validated:
            return validated

        for value in cookies.values():
            return value

        return self.default_timezone

    def get_current_time(self, timezone: str) -> str:
        """Format the present instant in the given timezone."""
        return format_time_in_timezone(timezone, now=utc_now())
