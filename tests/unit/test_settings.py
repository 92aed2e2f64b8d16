"""
Unit tests for settings.py
Tests configuration loading and environment variables
"""
import importlib
import os

import pytest
from unittest.mock import patch

from shared.config import settings


@pytest.fixture(autouse=True)
def restore_settings():
    yield
    importlib.reload(settings)


class TestSettings:
    """Tests for Settings configuration"""

    @patch.dict(os.environ, {
        'YEAR_FETCH_INTERVAL_SECONDS': '0.5',
        'CLIMATE_MODEL_RETRY_ATTEMPTS': '4',
        'CACHE_SWEEP_INTERVAL_SECONDS': '60',
        'CLIMATE_MODEL_COVERAGE_END_YEAR': '2040',
        'CORS_ORIGIN': 'https://test.example.com'
    })
    def test_settings_from_environment(self):
        importlib.reload(settings)

        assert settings.YEAR_FETCH_INTERVAL_SECONDS == 0.5
        assert settings.CLIMATE_MODEL_RETRY_ATTEMPTS == 4
        assert settings.CACHE_SWEEP_INTERVAL_SECONDS == 60.0
        assert settings.CLIMATE_MODEL_COVERAGE_END_YEAR == 2040
        assert settings.CORS_ORIGIN == 'https://test.example.com'

    def test_open_meteo_urls(self):
        assert settings.OPENMETEO_ARCHIVE_URL.startswith('https://archive-api.open-meteo.com')
        assert settings.OPENMETEO_CLIMATE_URL.startswith('https://climate-api.open-meteo.com')

    @pytest.mark.parametrize("value,expected", [('false', False), ('0', False), ('TRUE', True), ('yes', True)])
    def test_cache_enabled_flag(self, value, expected):
        with patch.dict(os.environ, {'CACHE_ENABLED': value}):
            importlib.reload(settings)

            assert settings.CACHE_ENABLED is expected
