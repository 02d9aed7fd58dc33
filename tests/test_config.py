"""
Tests for configuration module.
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from async_custom_resource.config.settings import Settings, get_settings


class TestSettings:
    """Tests for Settings class."""

    @pytest.mark.unit
    def test_defaults(self):
        settings = Settings()

        assert settings.CALLBACK_TIMEOUT_SECONDS == 10.0
        assert settings.MAX_REASON_LENGTH == 1024
        assert settings.MAX_RESPONSE_BYTES == 4096

    @pytest.mark.unit
    def test_settings_with_env_vars(self):
        with patch.dict(
            os.environ, {"MAX_RESPONSE_BYTES": "2048", "CALLBACK_TIMEOUT_SECONDS": "3"}
        ):
            settings = Settings()

        assert settings.MAX_RESPONSE_BYTES == 2048
        assert settings.CALLBACK_TIMEOUT_SECONDS == 3.0

    @pytest.mark.unit
    def test_settings_are_case_sensitive(self):
        with patch.dict(os.environ, {"max_response_bytes": "2048"}):
            settings = Settings()

        assert settings.MAX_RESPONSE_BYTES == 4096

    @pytest.mark.unit
    def test_invalid_values_rejected(self):
        with patch.dict(os.environ, {"MAX_REASON_LENGTH": "0"}):
            with pytest.raises(ValidationError):
                Settings()

    @pytest.mark.unit
    def test_settings_inheritance(self):
        class BucketSettings(Settings):
            BUCKET_PREFIX: str = "stack-"

        settings = BucketSettings()
        assert isinstance(settings, Settings)
        assert settings.BUCKET_PREFIX == "stack-"
        assert settings.MAX_RESPONSE_BYTES == 4096


class TestGetSettings:
    """Tests for get_settings."""

    @pytest.mark.unit
    def test_get_settings_cached(self):
        assert get_settings(Settings) is get_settings(Settings)

    @pytest.mark.unit
    def test_get_settings_different_classes(self):
        class Settings1(Settings):
            pass

        class Settings2(Settings):
            pass

        settings1 = get_settings(Settings1)
        settings2 = get_settings(Settings2)

        assert isinstance(settings1, Settings1)
        assert isinstance(settings2, Settings2)
        assert settings1 is not settings2
