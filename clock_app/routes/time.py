"""
Clock routes: timezone validation and current-time rendering.
"""
from flask import Blueprint, current_app, g, make_response, redirect, render_template, request, url_for
from clock_app.services.time_service import TimeService
from clock_app.utils.validators import validate_timezone_param

time_bp = Blueprint('time', __name__)

HTML_CONTENT_TYPE = 'text/html; charset=UTF-8'


@time_bp.route('/')
def index():
    """Redirect root to the clock page."""
    return redirect(url_for('time.current_time'))


@time_bp.before_request
def validate_timezone():
    """Reject requests whose timezone parameter does not resolve."""
    if request.endpoint != 'time.current_time':
        return None

    raw = request.values.get(current_app.config['TIMEZONE_PARAM'])
    timezone, errors = validate_timezone_param(raw)

    if errors:
        current_app.logger.warning("Rejected timezone %r: %s", timezone, '; '.join(errors))
        response = make_response(render_template('invalid_timezone.html', errors=errors), 400)
        response.headers['Content-Type'] = HTML_CONTENT_TYPE
        return response

    if timezone:
        current_app.logger.info("Resolved timezone %r", timezone)
    g.timezone = timezone
    return None


@time_bp.route('/time')
def current_time():
    """Render the current time in the effective timezone."""
    service = TimeService()
    validated = g.get('timezone')
    timezone = service.resolve_effective_timezone(validated, request.cookies)

    html = render_template('time.html', currentTime=service.get_current_time(timezone))
    response = make_response(html, 200)
    response.headers['Content-Type'] = HTML_CONTENT_TYPE

    if validated:
        response.set_cookie(
            current_app.config['TIMEZONE_COOKIE_NAME'],
            validated,
            max_age=current_app.config['TIMEZONE_COOKIE_MAX_AGE'],
        )
    return response
