"""Wine repository port (interface)."""

from abc import ABC, abstractmethod
from typing import List, Optional

from domain.wine.core.entities.wine import Wine


class IWineRepository(ABC):
    """Repository interface for the Wine entity.

    Implementations own serialization; the domain only sees Wine objects.

    Examples:
        >>> class PostgresWineRepository(IWineRepository):
        ...     async def save(self, wine: Wine) -> None:
        ...         ...
    """

    @abstractmethod
    async def find_by_id(self, wine_id: str) -> Optional[Wine]:
        """Find a wine by id.

        Returns:
            Wine if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: str) -> List[Wine]:
        """List every wine owned by a user (empty list if none)."""
        pass

    @abstractmethod
    async def save(self, wine: Wine) -> None:
        """Persist a new wine."""
        pass

    @abstractmethod
    async def update(self, wine: Wine) -> None:
        """Persist changes to an existing wine.

        Raises:
            DomainError: NOT_FOUND if the wine was never saved
        """
        pass

    @abstractmethod
    async def delete(self, wine_id: str) -> None:
        """Delete a wine by id.

        Raises:
            DomainError: NOT_FOUND if no wine has this id
        """
        pass
