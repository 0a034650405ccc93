"""Add wine command."""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from domain.shared.errors import DomainError
from domain.user.core.ports.user_repository import IUserRepository
from domain.wine.calculation.optimal_consumption_calculator import (
    OptimalConsumptionCalculator,
)
from domain.wine.core.entities.wine import Wine
from domain.wine.core.ports.wine_repository import IWineRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddWineInput:
    """Data for a wine entering the cellar."""

    user_id: str
    name: str
    vintage: int
    coupage: str
    type: str
    cellar_entry_date: datetime
    quantity: int
    alcohol_content: float
    denomination: str
    winery: str
    suggested_consumption_date: Optional[datetime] = None
    notes: Optional[str] = None


@dataclass
class AddWineCommand:
    """Command to add a wine to a user's cellar.

    When no suggested consumption date is supplied, the heuristic one from
    OptimalConsumptionCalculator is stored.

    Examples:
        >>> command = AddWineCommand(wines, users)
        >>> wine = await command.execute(AddWineInput(user_id="u-1", ...))
    """

    wine_repository: IWineRepository
    user_repository: IUserRepository

    async def execute(self, data: AddWineInput) -> Wine:
        """Create and persist the wine.

        Raises:
            DomainError: NOT_FOUND if the owner doesn't exist,
                INVALID_DATA if name is blank or type unknown,
                INVALID_QUANTITY if quantity is negative
        """
        if await self.user_repository.find_by_id(data.user_id) is None:
            raise DomainError.not_found("User", data.user_id)

        if not data.name.strip():
            raise DomainError.invalid_data("Wine", "name is required")

        wine = Wine.create(
            id=str(uuid.uuid4()),
            user_id=data.user_id,
            name=data.name.strip(),
            vintage=data.vintage,
            coupage=data.coupage,
            type=data.type,
            cellar_entry_date=data.cellar_entry_date,
            quantity=data.quantity,
            alcohol_content=data.alcohol_content,
            denomination=data.denomination,
            winery=data.winery,
            suggested_consumption_date=data.suggested_consumption_date,
            notes=data.notes,
        )

        if wine.suggested_consumption_date is None:
            wine.update_suggested_consumption_date(
                OptimalConsumptionCalculator.suggest_consumption_date(wine)
            )

        await self.wine_repository.save(wine)

        logger.info(
            "wine.added",
            extra={
                "wine_id": wine.id,
                "user_id": wine.user_id,
                "quantity": wine.quantity,
            },
        )
        return wine
