"""
API endpoint routes
"""
from flask import Blueprint, current_app, jsonify, request

from peak_sun_hours.core.errors import ValidationError
from peak_sun_hours.core.request_builder import parse_number, validate_coordinates
from peak_sun_hours.web.app import get_session

api_bp = Blueprint('api', __name__)


@api_bp.route('/calculate')
def calculate():
    """Run a PVcalc query and return the report"""
    session = get_session(current_app)

    try:
        report = session.calculate(
            request.args.get('lat'),
            request.args.get('lon'),
            request.args.get('tilt'),
            request.args.get('azimuth'),
        )
    except Exception as e:
        current_app.logger.exception("Unexpected calculation failure")
        return jsonify({'success': False, 'error': f'Calculation failed: {str(e)}'}), 500

    if report is not None:
        return jsonify({'success': True, **report.to_dict()})

    if session.error is None:
        # A newer request took over the session
        return jsonify({'success': False, 'error': 'Superseded by a newer request.'}), 409

    status = 400 if isinstance(session.error, ValidationError) else 502
    return jsonify({
        'success': False,
        'error': session.error_message,
        'kind': session.error.kind
    }), status


@api_bp.route('/report')
def get_report():
    """Current session snapshot"""
    session = get_session(current_app)
    return jsonify(session.to_dict())


@api_bp.route('/validate_location')
def validate_location():
    """Coordinate validity check"""
    lat = parse_number(request.args.get('lat'))
    lon = parse_number(request.args.get('lon'))

    if lat is None or lon is None:
        return jsonify({'valid': False, 'message': 'Latitude and Longitude are required.'})

    is_valid = validate_coordinates(lat, lon)
    return jsonify({
        'valid': is_valid,
        'message': 'Valid coordinates.' if is_valid else 'Invalid coordinates.'
    })
