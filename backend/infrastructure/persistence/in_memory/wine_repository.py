"""In-memory Wine repository."""

from copy import deepcopy
from typing import Dict, List, Optional

from domain.shared.errors import DomainError
from domain.wine.core.entities.wine import Wine
from domain.wine.core.ports.wine_repository import IWineRepository


class InMemoryWineRepository(IWineRepository):
    """Dict-backed implementation of IWineRepository.

    Keeps entity snapshots keyed by wine id. Used by the BFF until a real
    store is wired in, and by the test suite.

    Stores and returns deep copies: a loaded wine changes the store only
    through ``update``.

    Examples:
        >>> repo = InMemoryWineRepository()
        >>> await repo.save(wine)
        >>> await repo.find_by_id(wine.id)
    """

    def __init__(self) -> None:
        self._wines: Dict[str, Wine] = {}

    async def find_by_id(self, wine_id: str) -> Optional[Wine]:
        wine = self._wines.get(wine_id)
        if wine is None:
            return None
        return deepcopy(wine)

    async def find_by_user_id(self, user_id: str) -> List[Wine]:
        """Wines of a user, oldest cellar entry first."""
        wines = [w for w in self._wines.values() if w.user_id == user_id]
        wines.sort(key=lambda w: w.cellar_entry_date)
        return [deepcopy(wine) for wine in wines]

    async def save(self, wine: Wine) -> None:
        self._wines[wine.id] = deepcopy(wine)

    async def update(self, wine: Wine) -> None:
        if wine.id not in self._wines:
            raise DomainError.not_found("Wine", wine.id)
        self._wines[wine.id] = deepcopy(wine)

    async def delete(self, wine_id: str) -> None:
        if wine_id not in self._wines:
            raise DomainError.not_found("Wine", wine_id)
        del self._wines[wine_id]

    def clear(self) -> None:
        """Clear all wines from memory.

        Useful for test cleanup.
        """
        self._wines.clear()

    def count(self) -> int:
        return len(self._wines)
