"""Register user command."""

import logging
import uuid
from dataclasses import dataclass

from domain.shared.errors import DomainError
from domain.user.core.entities.user import User
from domain.user.core.ports.user_repository import IUserRepository

logger = logging.getLogger(__name__)


@dataclass
class RegisterUserCommand:
    """Command to register a cellar owner.

    Examples:
        >>> command = RegisterUserCommand(repository)
        >>> user = await command.execute("ana@example.com")
    """

    repository: IUserRepository

    async def execute(self, email: str) -> User:
        """Create and persist a user with a generated id.

        Raises:
            DomainError: INVALID_DATA if email is blank or already registered
        """
        email = email.strip()
        if not email:
            raise DomainError.invalid_data("User", "email is required")

        if await self.repository.find_by_email(email) is not None:
            raise DomainError.invalid_data("User", f"email {email} already registered")

        user = User.create(id=str(uuid.uuid4()), email=email)
        await self.repository.save(user)

        logger.info("user.registered", extra={"user_id": user.id})
        return user
