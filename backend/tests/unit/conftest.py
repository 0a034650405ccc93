"""Unit test configuration.

Unit tests do not import app.py; they build entities and in-memory
repositories directly.
"""

from datetime import datetime, timezone
from typing import Any, Callable

import pytest

from domain.wine.core.entities.wine import Wine


def build_wine(**overrides: Any) -> Wine:
    """Create a Wine with sensible defaults, overridable per field."""
    fields: dict[str, Any] = {
        "id": "wine-1",
        "user_id": "user-1",
        "name": "Clos Mogador",
        "vintage": 2019,
        "coupage": "Garnacha, Cariñena, Syrah",
        "type": "red",
        "cellar_entry_date": datetime(2020, 1, 1, tzinfo=timezone.utc),
        "quantity": 6,
        "alcohol_content": 14.5,
        "denomination": "DOQ Priorat",
        "winery": "Clos Mogador",
    }
    fields.update(overrides)
    return Wine.create(**fields)


@pytest.fixture
def make_wine() -> Callable[..., Wine]:
    """Factory fixture for Wine entities."""
    return build_wine
