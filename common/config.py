"""Configuration management for the Wind Speed Service."""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _env_flag(name, default):
    return os.getenv(name, default).lower() == 'true'


class Config:
    """Application configuration loaded from environment variables."""

    # Server
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = os.getenv('PORT', '3000')
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    # Target site
    HAZARD_TOOL_URL = os.getenv('HAZARD_TOOL_URL', 'https://ascehazardtool.org/')

    # Browser
    HEADLESS = _env_flag('HEADLESS', 'true')
    CAPTURE_SCREENSHOTS = _env_flag('CAPTURE_SCREENSHOTS', 'true')

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls):
        """Validate configuration values."""
        errors = []

        try:
            port = int(cls.PORT)
            if not 0 < port < 65536:
                errors.append(f"PORT out of range: {cls.PORT}")
        except ValueError:
            errors.append(f"PORT is not a number: {cls.PORT}")

        if cls.LOG_LEVEL.upper() not in VALID_LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True

    @classmethod
    def get_port(cls) -> int:
        """Get the HTTP listen port as an integer."""
        return int(cls.PORT)

    @classmethod
    def get_cors_origins(cls):
        """Get allowed CORS origins ('*' or a list of origins)."""
        origins = [o.strip() for o in cls.CORS_ORIGINS.split(',') if o.strip()]
        if not origins or origins == ['*']:
            return '*'
        return origins


# Create a singleton instance
config = Config()
