"""
Flask application factory.
"""
from flask import Flask
from zone_clock.config_loader import load_settings

CONFIG_OBJECTS = {
    'development': 'clock_app.config.DevelopmentConfig',
    'production': 'clock_app.config.ProductionConfig',
    'testing': 'clock_app.config.TestingConfig',
}


def create_app(config_name='development'):
    """Create and configure the Flask application."""
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(CONFIG_OBJECTS.get(config_name, CONFIG_OBJECTS['development']))
    app.logger.setLevel(app.config['LOG_LEVEL'].upper())

    settings = load_settings(app.config['CLOCK_CONFIG_FILE'])
    app.config['DEFAULT_TIMEZONE'] = settings.default_timezone
    app.config['TIMEZONE_COOKIE_MAX_AGE'] = settings.cookie_max_age

    # Register blueprints
    from clock_app.routes.time import time_bp

    app.register_blueprint(time_bp)

    app.logger.info(
        "Clock app ready (default timezone %s, cookie max age %ss)",
        settings.default_timezone, settings.cookie_max_age,
    )
    return app
