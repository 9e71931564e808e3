"""
Configuration loader for Zone Clock.

Supports loading settings from:
1. config.ini file ([Clock] section)
2. Environment variables (for automation/Docker)
"""

import configparser
import os
from dataclasses import dataclass

from zone_clock.timezone_utils import is_valid_timezone

DEFAULT_TIMEZONE = 'UTC'
DEFAULT_COOKIE_MAX_AGE = 60 * 60 * 24


@dataclass
class ClockSettings:
    """Settings for the clock endpoint."""

    # Zone used when neither a parameter nor a cookie is present
    default_timezone: str = DEFAULT_TIMEZONE

    # Lifetime of the timezone cookie, in seconds
    cookie_max_age: int = DEFAULT_COOKIE_MAX_AGE


class ConfigLoader:
    """Load configuration from various sources."""

    def __init__(self, config_file: str = "config.ini"):
        """
        Initialize config loader.

        Args:
            config_file: Path to config file (default: config.ini)
        """
        self.config_file = config_file
        self.config = None

    def load_from_file(self) -> bool:
        """
        Load configuration from INI file.

        Returns:
            True if file was loaded successfully, False otherwise
        """
        if not os.path.exists(self.config_file):
            return False

        self.config = configparser.ConfigParser()
        self.config.read(self.config_file)
        return True

    def get_settings(self) -> ClockSettings:
        """
        Get clock settings.

        Returns:
            ClockSettings with configured values

        Raises:
            ValueError: If a configured value is invalid
        """
        if self.config and self.config.has_section('Clock'):
            default_timezone = self.config.get('Clock', 'default_timezone', fallback=DEFAULT_TIMEZONE)
            cookie_max_age = self.config.get('Clock', 'cookie_max_age', fallback=str(DEFAULT_COOKIE_MAX_AGE))
        else:
            default_timezone = os.getenv('CLOCK_DEFAULT_TIMEZONE', DEFAULT_TIMEZONE)
            cookie_max_age = os.getenv('CLOCK_COOKIE_MAX_AGE', str(DEFAULT_COOKIE_MAX_AGE))

        return ClockSettings(
            default_timezone=self._validate_timezone(default_timezone.strip()),
            cookie_max_age=self._parse_max_age(cookie_max_age),
        )

    @staticmethod
    def _validate_timezone(value: str) -> str:
        if not is_valid_timezone(value):
            raise ValueError(f"Invalid default_timezone setting: {value!r}")
        return value

    @staticmethod
    def _parse_max_age(value: str) -> int:
        try:
            max_age = int(str(value).strip())
        except ValueError:
            raise ValueError(f"cookie_max_age must be an integer, got {value!r}")
        if max_age <= 0:
            raise ValueError(f"cookie_max_age must be positive, got {max_age}")
        return max_age


def load_settings(config_file: str = "config.ini") -> ClockSettings:
    """
    Convenience function to load clock settings.

    Args:
        config_file: Path to config file

    Returns:
        ClockSettings

    Raises:
        ValueError: If configuration is invalid
    """
    loader = ConfigLoader(config_file)
    loader.load_from_file()
    return loader.get_settings()
