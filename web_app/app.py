"""Flask application factory.

Usage:
    PYTHONPATH=$(pwd) python -m web_app.app
"""

from flask import Flask
from flask_cors import CORS

from common.config import config


def create_app():
    """Create and configure the Flask application."""
    app = Flask(__name__)

    # A wildcard config answers with a literal '*'; a list echoes the allowed origin
    origins = config.get_cors_origins()
    CORS(app, origins=origins, send_wildcard=(origins == '*'))

    # Register health check
    from web_app.api.routes import api_bp
    app.register_blueprint(api_bp)

    # Register wind speed API
    from web_app.api.wind_speed import wind_speed_bp
    app.register_blueprint(wind_speed_bp, url_prefix='/api')

    return app


if __name__ == '__main__':
    from common.logger import configure_service_logging

    config.validate()
    logger = configure_service_logging()

    port = config.get_port()
    app = create_app()

    logger.info(f"Wind Speed Service running on port {port}")
    logger.info(f"Health check: http://localhost:{port}/health")
    logger.info(f"API endpoint: POST http://localhost:{port}/api/wind-speed")

    # One thread per request; each lookup launches its own browser
    app.run(host=config.HOST, port=port, threaded=True)
