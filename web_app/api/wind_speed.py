"""API endpoint for wind speed lookups."""

import logging
from flask import Blueprint, jsonify, request

from hazard_tool.models import WindSpeedResult
from hazard_tool.scraper import lookup_wind_speed


logger = logging.getLogger(__name__)

wind_speed_bp = Blueprint('wind_speed', __name__)


@wind_speed_bp.route('/wind-speed', methods=['POST'])
def get_wind_speed():
    """
    Look up the ASCE 7 wind speed for an address.

    Body:
        {'address': '411 Crusaders Dr, Sanford, NC'}

    Returns 200 with the wind speed, 400 when the address is missing,
    500 when the lookup fails.
    """
    data = request.get_json(silent=True) or {}
    address = data.get('address') if isinstance(data, dict) else None

    if not isinstance(address, str) or not address.strip():
        return jsonify({'success': False, 'error': 'Address is required'}), 400

    try:
        result = lookup_wind_speed(address)
    except Exception as e:
        logger.exception(f"Error looking up wind speed for {address}")
        result = WindSpeedResult.failed(address=address, error=str(e))

    status_code = 200 if result.success else 500
    return jsonify(result.to_dict()), status_code
