"""Tests for the lookup CLI."""

import base64
import json

import pytest
from unittest import mock

from hazard_tool.models import Screenshot, WindSpeedResult
from hazard_tool.run_lookup import main, save_screenshots


ADDRESS = '411 Crusaders Dr, Sanford, NC'


def _success():
    return WindSpeedResult.succeeded(
        address=ADDRESS,
        raw_value='Vmph = 115',
        wind_speed=115,
        screenshots=[Screenshot(name='1_after_load', data=base64.b64encode(b'png').decode('ascii'))],
    )


@pytest.fixture(autouse=True)
def mock_logging_setup():
    with mock.patch('hazard_tool.run_lookup.configure_service_logging') as mock_configure:
        yield mock_configure


class TestMain:
    """Tests for main entry point."""

    @mock.patch('hazard_tool.run_lookup.lookup_wind_speed')
    def test_configures_logging(self, mock_lookup, mock_logging_setup):
        mock_lookup.return_value = _success()

        main([ADDRESS])

        mock_logging_setup.assert_called_once_with()

    @mock.patch('hazard_tool.run_lookup.lookup_wind_speed')
    def test_prints_wind_speed(self, mock_lookup, capsys):
        mock_lookup.return_value = _success()

        assert main([ADDRESS]) == 0
        assert '115 mph' in capsys.readouterr().out
        mock_lookup.assert_called_once_with(ADDRESS, capture_screenshots=True, headless=None)

    @mock.patch('hazard_tool.run_lookup.lookup_wind_speed')
    def test_json_output_lists_screenshot_names(self, mock_lookup, capsys):
        mock_lookup.return_value = _success()

        main([ADDRESS, '--json'])

        data = json.loads(capsys.readouterr().out)
        assert data['windSpeed'] == 115
        assert data['screenshots'] == ['1_after_load']

    @mock.patch('hazard_tool.run_lookup.lookup_wind_speed')
    def test_failure_exit_code(self, mock_lookup, capsys):
        mock_lookup.return_value = WindSpeedResult.failed(address=ADDRESS, error='Could not input address')

        assert main([ADDRESS, '--no-screenshots', '--headed']) == 1
        assert 'Could not input address' in capsys.readouterr().err
        mock_lookup.assert_called_once_with(ADDRESS, capture_screenshots=False, headless=False)


def test_save_screenshots(tmp_path):
    count = save_screenshots(_success(), str(tmp_path / 'shots'))

    assert count == 1
    assert (tmp_path / 'shots' / '1_after_load.png').read_bytes() == b'png'
