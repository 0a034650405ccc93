"""In-memory User repository."""

from typing import Dict, Optional

from domain.shared.errors import DomainError
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


class InMemoryUserRepository(IUserRepository):
    """In-memory implementation of User repository.

    Stores users keyed by id. Email lookups are case-insensitive.
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._users: Dict[str, User] = {}

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        needle = email.strip().lower()
        for user in self._users.values():
            if user.email.lower() == needle:
                return user
        return None

    async def save(self, user: User) -> None:
        self._users[user.id] = user

    async def delete(self, user_id: str) -> None:
        """Delete user by id.

        Raises:
            DomainError: NOT_FOUND if user doesn't exist
        """
        if user_id not in self._users:
            raise DomainError.not_found("User", user_id)
        del self._users[user_id]

    def clear(self) -> None:
        """Clear all users from memory.

        Useful for test cleanup.
        """
        self._users.clear()

    def count(self) -> int:
        """Get total number of users in memory."""
        return len(self._users)
