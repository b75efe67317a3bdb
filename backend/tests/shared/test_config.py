"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.app_name == "Startup Mentor API"
        assert settings.debug is False
        assert settings.port == 8000
        assert settings.host == "0.0.0.0"
        assert settings.app_version == "0.1.0"
        assert settings.environment == "development"
        assert settings.supabase_url == ""
        assert settings.enable_auth_diagnostics is None
        assert settings.cors_origin_regex == ".*"
        assert settings.cors_allow_credentials is True

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000

    def test_loads_supabase_config_from_env(self):
        """Settings should load Supabase configuration from environment variables."""
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_ANON_KEY": "test-anon-key",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
        }, clear=True):
            settings = Settings(_env_file=None)
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_anon_key == "test-anon-key"
            assert settings.supabase_service_role_key == "test-service-key"

    def test_accepts_public_variable_names(self):
        """The browser-facing variable names work as fallbacks."""
        with patch.dict(os.environ, {
            "NEXT_PUBLIC_SUPABASE_URL": "https://public.supabase.co",
            "NEXT_PUBLIC_SUPABASE_ANON_KEY": "public-anon-key",
            "NODE_ENV": "production",
        }, clear=True):
            settings = Settings(_env_file=None)
            assert settings.supabase_url == "https://public.supabase.co"
            assert settings.supabase_anon_key == "public-anon-key"
            assert settings.environment == "production"

    @pytest.mark.parametrize("environment, expected", [
        ("production", True),
        ("Production", True),
        ("development", False),
        ("test", False),
    ])
    def test_is_production(self, environment, expected):
        assert Settings(_env_file=None, environment=environment).is_production is expected


class TestAuthDiagnosticsFlag:
    def test_enabled_outside_production(self):
        settings = Settings(_env_file=None, environment="development")
        assert settings.auth_diagnostics_enabled is True

    def test_disabled_in_production(self):
        settings = Settings(_env_file=None, environment="production")
        assert settings.auth_diagnostics_enabled is False

    def test_explicit_flag_wins(self):
        assert Settings(
            _env_file=None, environment="production", enable_auth_diagnostics=True
        ).auth_diagnostics_enabled is True
        assert Settings(
            _env_file=None, environment="development", enable_auth_diagnostics=False
        ).auth_diagnostics_enabled is False


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_caches(self):
        """get_settings should return cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
