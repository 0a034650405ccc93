"""Shared test fixtures.

Loads .env.test when present, pins APP_ENV=test and gives every test a
fresh set of settings and in-memory repositories. The ``client`` fixture
drives the FastAPI app in-process through httpx.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, AsyncIterator, Generator, cast

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

os.environ.setdefault("APP_ENV", "test")

from infrastructure.config import reset_settings  # noqa: E402
from infrastructure.persistence.factory import reset_repositories  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_state() -> Generator[None, None, None]:
    """Reset settings and repository singletons around each test."""
    reset_settings()
    reset_repositories()
    try:
        yield
    finally:
        reset_settings()
        reset_repositories()


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the ASGI app."""
    from app import app

    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as ac:
        yield ac
