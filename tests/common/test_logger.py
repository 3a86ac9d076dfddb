"""Tests for service logging setup."""

import logging

import pytest

from common.logger import (
    DATE_FORMAT,
    LOG_FORMAT,
    SERVICE_LOGGERS,
    configure_service_logging,
    setup_logger,
)


def _service_handlers(logger):
    return [h for h in logger.handlers if getattr(h, 'wind_speed_service', False)]


@pytest.fixture
def clean_loggers():
    """Remove service handlers added during a test."""
    names = ('test_wind_speed_logger',) + SERVICE_LOGGERS
    yield
    for name in names:
        logger = logging.getLogger(name)
        for handler in _service_handlers(logger):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


class TestSetupLogger:
    """Tests for setup_logger()."""

    def test_adds_formatted_stdout_handler(self, clean_loggers):
        logger = setup_logger('test_wind_speed_logger', 'INFO')

        handlers = _service_handlers(logger)
        assert len(handlers) == 1
        assert handlers[0].formatter._fmt == LOG_FORMAT
        assert handlers[0].formatter.datefmt == DATE_FORMAT

    def test_handler_added_once(self, clean_loggers):
        setup_logger('test_wind_speed_logger', 'INFO')
        logger = setup_logger('test_wind_speed_logger', 'INFO')

        assert len(_service_handlers(logger)) == 1

    def test_repeat_call_updates_level(self, clean_loggers):
        setup_logger('test_wind_speed_logger', 'INFO')
        logger = setup_logger('test_wind_speed_logger', 'debug')

        assert logger.level == logging.DEBUG
        assert _service_handlers(logger)[0].level == logging.DEBUG

    def test_foreign_handler_does_not_block_setup(self, clean_loggers):
        logger = logging.getLogger('test_wind_speed_logger')
        other = logging.NullHandler()
        logger.addHandler(other)
        try:
            setup_logger('test_wind_speed_logger', 'INFO')
            assert len(_service_handlers(logger)) == 1
        finally:
            logger.removeHandler(other)

    def test_level_defaults_to_config(self, clean_loggers, monkeypatch):
        from common.config import config
        monkeypatch.setattr(config, 'LOG_LEVEL', 'WARNING')

        logger = setup_logger('test_wind_speed_logger')

        assert logger.level == logging.WARNING


class TestConfigureServiceLogging:
    """Tests for configure_service_logging()."""

    def test_sets_up_every_service_logger(self, clean_loggers):
        logger = configure_service_logging('ERROR')

        assert logger.name == 'web_app'
        for name in SERVICE_LOGGERS:
            service_logger = logging.getLogger(name)
            assert service_logger.level == logging.ERROR
            assert len(_service_handlers(service_logger)) == 1

    def test_module_loggers_inherit_handler(self, clean_loggers, capsys):
        configure_service_logging('INFO')

        logging.getLogger('hazard_tool.scraper').info('Starting wind speed lookup')

        out = capsys.readouterr().out
        assert 'hazard_tool.scraper - INFO - Starting wind speed lookup' in out
