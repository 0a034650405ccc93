"""Tests for register user command."""

import uuid

import pytest

from application.user.commands.register_user import RegisterUserCommand
from domain.shared.errors import DomainError, DomainErrorKind
from infrastructure.persistence.in_memory.user_repository import InMemoryUserRepository


@pytest.fixture
def repository():
    """Create in-memory repository."""
    return InMemoryUserRepository()


@pytest.fixture
def command(repository):
    return RegisterUserCommand(repository)


@pytest.mark.asyncio
async def test_register_user_success(command, repository):
    user = await command.execute("ana@example.com")

    assert user.email == "ana@example.com"
    uuid.UUID(user.id)
    assert await repository.find_by_id(user.id) == user


@pytest.mark.asyncio
async def test_register_user_strips_email(command):
    user = await command.execute("  ana@example.com ")

    assert user.email == "ana@example.com"


@pytest.mark.asyncio
async def test_register_blank_email_raises_error(command, repository):
    with pytest.raises(DomainError) as exc_info:
        await command.execute("   ")

    assert exc_info.value.kind == DomainErrorKind.INVALID_DATA
    assert repository.count() == 0


@pytest.mark.asyncio
async def test_register_duplicate_email_raises_error(command, repository):
    await command.execute("ana@example.com")

    with pytest.raises(DomainError) as exc_info:
        await command.execute("ANA@example.com")

    assert exc_info.value.kind == DomainErrorKind.INVALID_DATA
    assert "already registered" in exc_info.value.message
    assert repository.count() == 1
