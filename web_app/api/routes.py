"""Main API routes."""

from flask import Blueprint, jsonify

api_bp = Blueprint('api', __name__)

SERVICE_NAME = 'wind-speed-service'


@api_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    return jsonify({'status': 'ok', 'service': SERVICE_NAME})
