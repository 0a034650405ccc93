"""Get wine query."""

from dataclasses import dataclass

from domain.shared.errors import DomainError
from domain.wine.core.entities.wine import Wine
from domain.wine.core.ports.wine_repository import IWineRepository


@dataclass
class GetWineQuery:
    """Query to get a single wine."""

    repository: IWineRepository

    async def by_id(self, wine_id: str) -> Wine:
        """Raises DomainError (NOT_FOUND)."""
        wine = await self.repository.find_by_id(wine_id)
        if wine is None:
            raise DomainError.not_found("Wine", wine_id)
        return wine
