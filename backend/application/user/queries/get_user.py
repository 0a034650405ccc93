"""Get user query."""

from dataclasses import dataclass
from typing import Optional

from domain.shared.errors import DomainError
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository


@dataclass
class GetUserQuery:
    """Query to get user by identifier.

    Read-only operation that retrieves user from repository.
    """

    repository: IUserRepository

    async def by_id(self, user_id: str) -> User:
        """Get user by id.

        Raises:
            DomainError: NOT_FOUND if no user has this id
        """
        user = await self.repository.find_by_id(user_id)
        if user is None:
            raise DomainError.not_found("User", user_id)
        return user

    async def by_email(self, email: str) -> Optional[User]:
        return await self.repository.find_by_email(email)
