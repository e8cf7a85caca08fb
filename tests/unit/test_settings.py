"""
Unit tests for backend/settings.py
"""

import pytest
from pydantic import ValidationError

from backend.settings import Settings, get_settings


# Environment variables that CI might set which we need to clear for default tests
CI_ENV_VARS = [
    "ENVIRONMENT",
    "SUPABASE_URL",
    "SUPABASE_SERVICE_ROLE_KEY",
    "SUPABASE_ANON_KEY",
    "SYNC_CHUNK_SIZE",
    "SYNC_CHUNK_PAUSE_SECONDS",
    "LOG_LEVEL",
    "SENTRY_DSN",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Clear CI environment variables to test true defaults."""
    for var in CI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.mark.unit
class TestSettingsDefaults:
    """Test that Settings applies correct defaults."""

    def test_environment_default(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.environment == "development"

    def test_supabase_fields_default_to_none(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.supabase_url is None
        assert settings.supabase_service_role_key is None
        assert settings.supabase_anon_key is None
        assert settings.supabase_configured is False

    def test_sync_defaults(self, clean_env):
        """Chunking defaults: 100 records, no pause."""
        settings = Settings(_env_file=None)
        assert settings.sync_chunk_size == 100
        assert settings.sync_chunk_pause_seconds == 0.0

    def test_observability_defaults(self, clean_env):
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.sentry_dsn is None


@pytest.mark.unit
class TestSettingsValidation:
    """Test Settings validation behavior."""

    def test_valid_environments_accepted(self):
        for env in ["development", "staging", "production", "test"]:
            settings = Settings(_env_file=None, environment=env)
            assert settings.environment == env

    def test_environment_case_insensitive(self):
        settings = Settings(_env_file=None, environment="PRODUCTION")
        assert settings.environment == "production"

    def test_invalid_environment_raises_error(self):
        with pytest.raises(ValidationError) as exc_info:
            Settings(_env_file=None, environment="invalid")
        assert "Invalid environment" in str(exc_info.value)

    @pytest.mark.parametrize("size", [0, -5, 10001])
    def test_chunk_size_bounds(self, size):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, sync_chunk_size=size)

    def test_negative_pause_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, sync_chunk_pause_seconds=-1)

    def test_log_level_normalized(self):
        settings = Settings(_env_file=None, log_level="debug")
        assert settings.log_level == "DEBUG"

    def test_invalid_log_level_raises_error(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")


@pytest.mark.unit
class TestSettingsProperties:
    """Test Settings computed properties."""

    def test_supabase_key_prefers_service_role(self, clean_env):
        settings = Settings(
            _env_file=None,
            supabase_service_role_key="service-key",
            supabase_anon_key="anon-key",
        )
        assert settings.supabase_key == "service-key"

    def test_supabase_key_falls_back_to_anon(self, clean_env):
        settings = Settings(
            _env_file=None,
            supabase_service_role_key=None,
            supabase_anon_key="anon-key",
        )
        assert settings.supabase_key == "anon-key"

    def test_supabase_configured_requires_url_and_key(self, clean_env):
        assert Settings(_env_file=None, supabase_url="https://x.supabase.co").supabase_configured is False
        assert Settings(
            _env_file=None, supabase_url="https://x.supabase.co", supabase_anon_key="anon"
        ).supabase_configured is True


@pytest.mark.unit
class TestGetSettings:
    """Test get_settings() function."""

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert isinstance(settings1, Settings)
        assert settings1 is settings2

    def test_get_settings_cache_can_be_cleared(self):
        get_settings.cache_clear()
        settings1 = get_settings()
        get_settings.cache_clear()
        settings2 = get_settings()
        assert settings1 is not settings2


@pytest.mark.unit
class TestSettingsFromEnv:
    """Test Settings loading from environment variables."""

    def test_settings_loads_from_env(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "staging")
        monkeypatch.setenv("SUPABASE_URL", "https://test.supabase.co")
        monkeypatch.setenv("SYNC_CHUNK_SIZE", "250")
        monkeypatch.setenv("SYNC_CHUNK_PAUSE_SECONDS", "0.05")

        settings = Settings(_env_file=None)

        assert settings.environment == "staging"
        assert settings.supabase_url == "https://test.supabase.co"
        assert settings.sync_chunk_size == 250
        assert settings.sync_chunk_pause_seconds == pytest.approx(0.05)

    def test_env_names_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("sync_chunk_size", "42")

        settings = Settings(_env_file=None)

        assert settings.sync_chunk_size == 42
