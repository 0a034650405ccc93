"""User entity - owner of a cellar."""

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Dict

from domain.shared.types import ensure_utc, utc_now


@dataclass(frozen=True)
class User:
    """User entity.

    Identity record only: no mutators, so updated_at >= created_at holds
    for every user built by ``create``. The email format is not validated
    at this layer.

    Examples:
        >>> user = User.create(id="u-1", email="ana@example.com")
        >>> user.created_at == user.updated_at
        True
    """

    id: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(cls, id: str, email: str) -> "User":
        """Create a new user, stamping both timestamps to now."""
        now = utc_now()
        return cls(id=id, email=email, created_at=now, updated_at=now)

    @classmethod
    def reconstitute(
        cls, id: str, email: str, created_at: datetime, updated_at: datetime
    ) -> "User":
        """Rebuild a stored user; timestamps are passed through unchanged."""
        return cls(
            id=id,
            email=email,
            created_at=ensure_utc(created_at),
            updated_at=ensure_utc(updated_at),
        )

    def to_plain_object(self) -> Dict[str, Any]:
        return asdict(self)
