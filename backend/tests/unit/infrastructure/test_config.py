"""Tests for environment configuration."""

import pytest

from infrastructure.config import (
    DEVELOPMENT_ORIGINS,
    PRODUCTION_ORIGINS,
    get_settings,
    load_settings,
    reset_settings,
)

VARS = [
    "APP_ENV",
    "PORT",
    "HOST",
    "LOG_LEVEL",
    "APP_VERSION",
    "CORS_ORIGINS",
    "JWT_SECRET",
    "JWT_EXPIRES_IN",
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "WINE_REPOSITORY",
    "USER_REPOSITORY",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = load_settings()

    assert settings.app_env == "development"
    assert settings.port == 3001
    assert settings.log_level == "INFO"
    assert settings.jwt_expires_in == "7d"
    assert settings.supabase_url is None
    assert settings.wine_repository == "inmemory"
    assert settings.allowed_origins() == DEVELOPMENT_ORIGINS


def test_reads_environment(clean_env):
    clean_env.setenv("APP_ENV", "production")
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("SUPABASE_URL", "https://db.example.co")

    settings = load_settings()

    assert settings.is_production is True
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.supabase_url == "https://db.example.co"
    assert settings.allowed_origins() == PRODUCTION_ORIGINS


def test_cors_override(clean_env):
    clean_env.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")

    settings = load_settings()

    assert settings.allowed_origins() == ["http://a.test", "http://b.test"]


@pytest.mark.parametrize("name, value", [
    ("APP_ENV", "staging"),
    ("PORT", "abc"),
    ("LOG_LEVEL", "verbose"),
    ("WINE_REPOSITORY", "mongodb"),
    ("USER_REPOSITORY", "postgres"),
])
def test_invalid_values_raise(clean_env, name, value):
    clean_env.setenv(name, value)

    with pytest.raises(ValueError):
        load_settings()


def test_get_settings_is_cached(clean_env):
    first = get_settings()

    assert get_settings() is first

    reset_settings()
    assert get_settings() is not first
