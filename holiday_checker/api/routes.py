from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request

from ..core.countries import country_choices
from ..exceptions import ConfigurationError, HolidayCheckerError
from ..validation import query_from_args


api_bp = Blueprint('api', __name__)


@api_bp.errorhandler(HolidayCheckerError)
def handle_error(e):
    current_app.logger.warning("%s: %s", type(e).__name__, e.message)
    return jsonify({'error': e.message}), e.status_code


@api_bp.route('/health')
def health():
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.now(timezone.utc).isoformat(),
    })


@api_bp.route('/api/countries')
def countries():
    return jsonify(country_choices(current_app.config.get('COUNTRIES')))


@api_bp.route('/api/holidays')
def holidays():
    """Forwards `country` and `year` to Calendarific and returns its JSON as is."""
    client = current_app.extensions['calendarific']
    if not client.api_key:
        raise ConfigurationError('API key not configured')
    country, year = query_from_args(request.args, current_app.config)
    return jsonify(client.fetch_holidays(country, year))
