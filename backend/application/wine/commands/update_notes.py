"""Update notes command."""

import logging
from dataclasses import dataclass

from domain.shared.errors import DomainError
from domain.wine.core.entities.wine import Wine
from domain.wine.core.ports.wine_repository import IWineRepository

logger = logging.getLogger(__name__)


@dataclass
class UpdateNotesCommand:
    """Command to replace the tasting notes of a wine (empty allowed)."""

    repository: IWineRepository

    async def execute(self, wine_id: str, notes: str) -> Wine:
        wine = await self.repository.find_by_id(wine_id)
        if wine is None:
            raise DomainError.not_found("Wine", wine_id)

        wine.update_notes(notes)
        await self.repository.update(wine)

        logger.info("wine.notes_updated", extra={"wine_id": wine.id})
        return wine
