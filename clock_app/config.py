"""
Flask application configuration.
"""
import os


class Config:
    """Base configuration."""
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    CLOCK_CONFIG_FILE = os.environ.get('CLOCK_CONFIG_FILE') or 'config.ini'

    TIMEZONE_PARAM = 'timezone'
    TIMEZONE_COOKIE_NAME = 'timezone'

    # Overridden from ClockSettings in create_app
    DEFAULT_TIMEZONE = 'UTC'
    TIMEZONE_COOKIE_MAX_AGE = 60 * 60 * 24


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = False
