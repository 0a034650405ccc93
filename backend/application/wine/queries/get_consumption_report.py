"""Consumption report query.

Combines OptimalConsumptionCalculator results for one wine, or for a
whole cellar, into read models for the HTTP layer.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from domain.shared.errors import DomainError
from domain.wine.calculation.optimal_consumption_calculator import (
    OptimalConsumptionCalculator,
)
from domain.wine.core.entities.wine import Wine
from domain.wine.core.ports.wine_repository import IWineRepository
from domain.wine.core.value_objects.consumption_status import ConsumptionStatus


@dataclass(frozen=True)
class ConsumptionReport:
    """Read model: where a wine stands in its drinking window."""

    wine_id: str
    status: ConsumptionStatus
    is_optimal: bool
    days_until_optimal: Optional[int]
    suggested_consumption_date: Optional[datetime]

    @classmethod
    def of(cls, wine: Wine) -> "ConsumptionReport":
        return cls(
            wine_id=wine.id,
            status=OptimalConsumptionCalculator.get_consumption_status(wine),
            is_optimal=OptimalConsumptionCalculator.is_optimal_to_consume(wine),
            days_until_optimal=OptimalConsumptionCalculator.days_until_optimal(wine),
            suggested_consumption_date=wine.suggested_consumption_date,
        )


@dataclass
class GetConsumptionReportQuery:
    """Query consumption status for wines."""

    repository: IWineRepository

    async def for_wine(self, wine_id: str) -> ConsumptionReport:
        """Raises DomainError (NOT_FOUND)."""
        wine = await self.repository.find_by_id(wine_id)
        if wine is None:
            raise DomainError.not_found("Wine", wine_id)
        return ConsumptionReport.of(wine)

    async def for_user(self, user_id: str) -> List[ConsumptionReport]:
        wines = await self.repository.find_by_user_id(user_id)
        return [ConsumptionReport.of(w) for w in wines]

    async def ready_to_drink(self, user_id: str) -> List[Wine]:
        """Wines at or past their suggested date that still have bottles."""
        wines = await self.repository.find_by_user_id(user_id)
        return [
            w
            for w in wines
            if not w.is_empty()
            and OptimalConsumptionCalculator.get_consumption_status(w)
            == ConsumptionStatus.OPTIMAL
        ]
