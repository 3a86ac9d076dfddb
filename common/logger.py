"""Logging configuration for the Wind Speed Service.

Both entry points (the Flask server and the lookup CLI) log through the
'web_app' and 'hazard_tool' logger trees. Module loggers created with
logging.getLogger(__name__) inherit the handler installed here.
"""

import logging
import sys

from common.config import config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

SERVICE_LOGGERS = ('web_app', 'hazard_tool')


def _is_service_handler(handler: logging.Handler) -> bool:
    return getattr(handler, 'wind_speed_service', False)


def setup_logger(name: str, level: str = None) -> logging.Logger:
    """
    Attach the service's stdout handler to a logger and set its level.

    Calling this again for the same logger only updates the level, so the
    server reloader and repeated CLI runs in one process never duplicate
    output lines.

    Args:
        name: Logger name, e.g. 'hazard_tool'
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL (default from config)

    Returns:
        Configured logger instance
    """
    if level is None:
        level = config.LOG_LEVEL
    numeric_level = getattr(logging, level.upper())

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    handler = next((h for h in logger.handlers if _is_service_handler(h)), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler.wind_speed_service = True
        logger.addHandler(handler)
    handler.setLevel(numeric_level)

    return logger


def configure_service_logging(level: str = None) -> logging.Logger:
    """Set up every service logger tree. Returns the 'web_app' logger."""
    loggers = [setup_logger(name, level) for name in SERVICE_LOGGERS]
    return loggers[0]
