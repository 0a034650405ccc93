"""User repository port (interface)."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.user.core.entities.user import User


class IUserRepository(ABC):
    """Repository interface for the User entity."""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by id.

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by email (case-insensitive).

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> None:
        """Persist a user (insert or replace)."""
        pass

    @abstractmethod
    async def delete(self, user_id: str) -> None:
        """Delete user by id.

        Raises:
            DomainError: NOT_FOUND if no user has this id
        """
        pass
