import pytest

from storefront.utils.settings import get_settings, refresh_settings_cache

_ENV_VARS = (
    "LOG_LEVEL",
    "APP_ENV",
    "HOST",
    "PORT",
    "DB_SYNC",
    "CORS_ORIGINS",
    "GOOGLE_CLIENT_ID",
    "GOOGLE_CLIENT_SECRET",
    "GOOGLE_REDIRECT_URI",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Clear env + cached values for each test to avoid cross-contamination."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    refresh_settings_cache()
    yield
    refresh_settings_cache()


def test_defaults():
    settings = get_settings()
    assert settings.log_level == "INFO"
    assert settings.app_env == "development"
    assert settings.port == 3000
    assert settings.db_sync is False
    assert "http://localhost:3000" in settings.cors_origins
    assert settings.is_production is False
    assert settings.google_oauth_configured is False


def test_cached_until_refreshed(monkeypatch):
    assert get_settings().port == 3000
    monkeypatch.setenv("PORT", "8080")
    assert get_settings().port == 3000
    refresh_settings_cache()
    assert get_settings().port == 8080


@pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("off", False), ("junk", False)])
def test_db_sync_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("DB_SYNC", raw)
    assert get_settings().db_sync is expected


def test_invalid_port_falls_back(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    assert get_settings().port == 3000


def test_cors_origins_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", " https://shop.example.com , 'https://admin.example.com',")
    assert get_settings().cors_origins == ("https://shop.example.com", "https://admin.example.com")


def test_google_configuration_needs_all_three(monkeypatch):
    monkeypatch.setenv("GOOGLE_CLIENT_ID", "id")
    monkeypatch.setenv("GOOGLE_CLIENT_SECRET", "secret")
    refresh_settings_cache()
    assert get_settings().google_oauth_configured is False

    monkeypatch.setenv("GOOGLE_REDIRECT_URI", "http://localhost:3000/auth/google/callback")
    refresh_settings_cache()
    assert get_settings().google_oauth_configured is True


def test_production_flag(monkeypatch):
    monkeypatch.setenv("APP_ENV", " Production ")
    assert get_settings().is_production is True
