"""Tests for environment-based repository selection."""

import pytest

from infrastructure.config import reset_settings
from infrastructure.persistence.factory import (
    create_user_repository,
    create_wine_repository,
    get_user_repository,
    get_wine_repository,
    reset_repositories,
)
from infrastructure.persistence.in_memory import (
    InMemoryUserRepository,
    InMemoryWineRepository,
)


def test_defaults_to_in_memory(monkeypatch):
    monkeypatch.delenv("WINE_REPOSITORY", raising=False)
    monkeypatch.delenv("USER_REPOSITORY", raising=False)
    reset_settings()

    assert isinstance(create_wine_repository(), InMemoryWineRepository)
    assert isinstance(create_user_repository(), InMemoryUserRepository)


def test_unknown_backend_raises(monkeypatch):
    monkeypatch.setenv("WINE_REPOSITORY", "mongodb")
    reset_settings()

    with pytest.raises(ValueError, match="wine_repository"):
        create_wine_repository()


def test_unknown_user_backend_raises(monkeypatch):
    monkeypatch.setenv("USER_REPOSITORY", "postgres")
    reset_settings()

    with pytest.raises(ValueError, match="user_repository"):
        create_user_repository()


def test_getters_return_singletons():
    assert get_wine_repository() is get_wine_repository()
    assert get_user_repository() is get_user_repository()


def test_reset_creates_fresh_instances():
    first = get_wine_repository()

    reset_repositories()

    assert get_wine_repository() is not first
