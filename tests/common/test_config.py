"""Tests for configuration management."""

import pytest
from unittest import mock

from common.config import Config


class TestValidate:
    """Tests for Config.validate."""

    def test_defaults_are_valid(self):
        with mock.patch.object(Config, 'PORT', '3000'), mock.patch.object(Config, 'LOG_LEVEL', 'INFO'):
            assert Config.validate() is True

    def test_non_numeric_port(self):
        with mock.patch.object(Config, 'PORT', 'abc'):
            with pytest.raises(ValueError, match='PORT is not a number'):
                Config.validate()

    def test_port_out_of_range(self):
        with mock.patch.object(Config, 'PORT', '70000'):
            with pytest.raises(ValueError, match='PORT out of range'):
                Config.validate()

    def test_unknown_log_level(self):
        with mock.patch.object(Config, 'PORT', '3000'), mock.patch.object(Config, 'LOG_LEVEL', 'LOUD'):
            with pytest.raises(ValueError, match='LOG_LEVEL'):
                Config.validate()


class TestCorsOrigins:
    """Tests for Config.get_cors_origins."""

    def test_wildcard(self):
        with mock.patch.object(Config, 'CORS_ORIGINS', '*'):
            assert Config.get_cors_origins() == '*'

    def test_origin_list(self):
        with mock.patch.object(Config, 'CORS_ORIGINS', 'http://localhost:5173, https://example.com'):
            assert Config.get_cors_origins() == ['http://localhost:5173', 'https://example.com']

    def test_empty_means_wildcard(self):
        with mock.patch.object(Config, 'CORS_ORIGINS', ''):
            assert Config.get_cors_origins() == '*'


def test_get_port():
    with mock.patch.object(Config, 'PORT', '8080'):
        assert Config.get_port() == 8080
