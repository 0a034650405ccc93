"""In-memory repository implementations."""

from .user_repository import InMemoryUserRepository
from .wine_repository import InMemoryWineRepository

__all__ = ["InMemoryUserRepository", "InMemoryWineRepository"]
