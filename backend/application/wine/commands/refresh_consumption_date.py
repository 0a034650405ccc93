"""Refresh consumption date command."""

import logging
from dataclasses import dataclass

from domain.shared.errors import DomainError
from domain.wine.calculation.optimal_consumption_calculator import (
    OptimalConsumptionCalculator,
)
from domain.wine.core.entities.wine import Wine
from domain.wine.core.ports.wine_repository import IWineRepository

logger = logging.getLogger(__name__)


@dataclass
class RefreshConsumptionDateCommand:
    """Recompute the heuristic consumption date and write it back.

    The wine's age moves with the calendar, so the suggestion for the same
    wine can change from one year to the next.
    """

    repository: IWineRepository

    async def execute(self, wine_id: str) -> Wine:
        """Raises DomainError (NOT_FOUND)."""
        wine = await self.repository.find_by_id(wine_id)
        if wine is None:
            raise DomainError.not_found("Wine", wine_id)

        suggested = OptimalConsumptionCalculator.suggest_consumption_date(wine)
        wine.update_suggested_consumption_date(suggested)
        await self.repository.update(wine)

        logger.info(
            "wine.consumption_date_refreshed",
            extra={"wine_id": wine.id, "suggested": suggested.isoformat()},
        )
        return wine
