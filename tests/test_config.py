"""
Test configuration management.
"""

import os
from unittest.mock import patch

from fitutils.config import Settings, get_settings
from fitutils.const import DEFAULT_FIT_SUMMARY_FILE, DEFAULT_GPX_SUMMARY_FILE, DEFAULT_TCX_SUMMARY_FILE


class TestSettings:
    """Test settings configuration."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.log_file is None
        assert settings.fit_summary_file == DEFAULT_FIT_SUMMARY_FILE
        assert settings.gpx_summary_file == DEFAULT_GPX_SUMMARY_FILE
        assert settings.tcx_summary_file == DEFAULT_TCX_SUMMARY_FILE

    def test_environment_override(self):
        with patch.dict(os.environ, {
            "FITUTILS_LOG_LEVEL": "DEBUG",
            "FITUTILS_LOG_FILE": "/tmp/fitutils.log",
            "FITUTILS_GPX_SUMMARY_FILE": "all-gpx.csv",
        }):
            settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.log_file == "/tmp/fitutils.log"
        assert settings.gpx_summary_file == "all-gpx.csv"

    def test_unprefixed_variables_ignored(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}, clear=True):
            settings = Settings()

        assert settings.log_level == "INFO"


class TestGetSettings:
    """Test the cached settings accessor."""

    def test_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
