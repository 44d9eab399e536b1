"""
Main page routes
"""
from flask import Blueprint, current_app, redirect, render_template, request, url_for

from peak_sun_hours.core.location import ReportedLocationProvider, StaticLocationProvider
from peak_sun_hours.export.table_renderer import TableRenderer
from peak_sun_hours.web.app import get_session

main_bp = Blueprint('main', __name__)
table_renderer = TableRenderer()


@main_bp.route('/')
def index():
    """Main page"""
    session = get_session(current_app)
    return render_template(
        'index.html',
        form=session.form,
        error=session.error_message,
        loading=session.loading,
        has_report=session.report is not None,
        tables=table_renderer.context(session.report),
    )


@main_bp.route('/calculate', methods=['POST'])
def calculate():
    """Form submission: run a calculation and show the result"""
    session = get_session(current_app)
    session.calculate(
        request.form.get('latitude'),
        request.form.get('longitude'),
        request.form.get('tilt'),
        request.form.get('azimuth'),
    )
    return redirect(url_for('main.index'))


@main_bp.route('/locate', methods=['POST'])
def locate():
    """Fill the coordinates from the browser position or the default location"""
    session = get_session(current_app)

    if 'unsupported' in request.form:
        provider = None
    elif any(key in request.form for key in ('latitude', 'longitude', 'error')):
        provider = ReportedLocationProvider(
            request.form.get('latitude'),
            request.form.get('longitude'),
            request.form.get('error'),
        )
    else:
        lat, lon = current_app.config['DEFAULT_LOCATION']
        provider = StaticLocationProvider(lat, lon)

    session.locate(provider)
    return redirect(url_for('main.index'))


@main_bp.errorhandler(404)
def not_found(error):
    """404 page"""
    return render_template('error.html',
                           error_code=404,
                           error_message="Page not found."), 404


@main_bp.errorhandler(500)
def internal_error(error):
    """500 page"""
    return render_template('error.html',
                           error_code=500,
                           error_message="Internal server error."), 500
