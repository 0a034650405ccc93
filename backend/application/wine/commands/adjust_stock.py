"""Adjust stock command - add, remove or set bottle counts."""

import logging
from dataclasses import dataclass

from domain.shared.errors import DomainError
from domain.wine.core.entities.wine import Wine
from domain.wine.core.ports.wine_repository import IWineRepository

logger = logging.getLogger(__name__)


@dataclass
class AdjustStockCommand:
    """Command to change how many bottles of a wine are in the cellar.

    The entity validates every change; a rejected change is not persisted.

    Examples:
        >>> command = AdjustStockCommand(repository)
        >>> wine = await command.remove(wine_id, 2)
    """

    repository: IWineRepository

    async def add(self, wine_id: str, amount: int) -> Wine:
        """Raises DomainError (NOT_FOUND, INVALID_AMOUNT)."""
        wine = await self._load(wine_id)
        wine.add_bottles(amount)
        return await self._store(wine, "wine.bottles_added", amount)

    async def remove(self, wine_id: str, amount: int) -> Wine:
        """Raises DomainError (NOT_FOUND, INVALID_AMOUNT, INSUFFICIENT_STOCK)."""
        wine = await self._load(wine_id)
        wine.remove_bottles(amount)
        return await self._store(wine, "wine.bottles_removed", amount)

    async def set(self, wine_id: str, quantity: int) -> Wine:
        """Raises DomainError (NOT_FOUND, INVALID_QUANTITY)."""
        wine = await self._load(wine_id)
        wine.update_quantity(quantity)
        return await self._store(wine, "wine.quantity_set", quantity)

    async def _load(self, wine_id: str) -> Wine:
        wine = await self.repository.find_by_id(wine_id)
        if wine is None:
            raise DomainError.not_found("Wine", wine_id)
        return wine

    async def _store(self, wine: Wine, event: str, amount: int) -> Wine:
        await self.repository.update(wine)
        logger.info(
            event,
            extra={"wine_id": wine.id, "amount": amount, "quantity": wine.quantity},
        )
        return wine
