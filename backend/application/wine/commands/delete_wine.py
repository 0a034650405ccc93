"""Delete wine command."""

import logging
from dataclasses import dataclass

from domain.wine.core.ports.wine_repository import IWineRepository

logger = logging.getLogger(__name__)


@dataclass
class DeleteWineCommand:
    """Command to remove a wine from the cellar records."""

    repository: IWineRepository

    async def execute(self, wine_id: str) -> None:
        """Raises DomainError (NOT_FOUND) if the wine doesn't exist."""
        await self.repository.delete(wine_id)
        logger.info("wine.deleted", extra={"wine_id": wine_id})
