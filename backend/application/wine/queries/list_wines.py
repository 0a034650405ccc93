"""List wines query."""

from dataclasses import dataclass
from typing import List

from domain.wine.core.entities.wine import Wine
from domain.wine.core.ports.wine_repository import IWineRepository


@dataclass
class ListWinesQuery:
    """Query listing the wines in a user's cellar."""

    repository: IWineRepository

    async def by_user(self, user_id: str, include_empty: bool = True) -> List[Wine]:
        """Wines owned by ``user_id``.

        Args:
            user_id: Owner id
            include_empty: When False, wines with no bottles left are skipped
        """
        wines = await self.repository.find_by_user_id(user_id)
        if include_empty:
            return wines
        return [w for w in wines if not w.is_empty()]
