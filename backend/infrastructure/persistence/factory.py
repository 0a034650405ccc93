"""Repository Factory for Persistence Layer.

Environment-based repository selection:
- WINE_REPOSITORY: "inmemory" (default)
- USER_REPOSITORY: "inmemory" (default)

Usage:
    from infrastructure.persistence.factory import (
        get_wine_repository,
        get_user_repository,
    )

    repo = get_wine_repository()  # Singleton instance
"""

from typing import Callable, Dict, Optional

from domain.user.core.ports.user_repository import IUserRepository
from domain.wine.core.ports.wine_repository import IWineRepository
from infrastructure.config import get_settings
from infrastructure.persistence.in_memory import (
    InMemoryUserRepository,
    InMemoryWineRepository,
)


_WINE_BACKENDS: Dict[str, Callable[[], IWineRepository]] = {
    "inmemory": InMemoryWineRepository,
}
_USER_BACKENDS: Dict[str, Callable[[], IUserRepository]] = {
    "inmemory": InMemoryUserRepository,
}


def create_wine_repository() -> IWineRepository:
    """Create wine repository based on WINE_REPOSITORY.

    Unknown backends are rejected when settings load.
    """
    return _WINE_BACKENDS[get_settings().wine_repository]()


def create_user_repository() -> IUserRepository:
    """Create user repository based on USER_REPOSITORY."""
    return _USER_BACKENDS[get_settings().user_repository]()


# Singleton instances (lazy initialization)
_wine_repository: Optional[IWineRepository] = None
_user_repository: Optional[IUserRepository] = None


def get_wine_repository() -> IWineRepository:
    """Get singleton wine repository instance."""
    global _wine_repository

    if _wine_repository is None:
        _wine_repository = create_wine_repository()

    return _wine_repository


def get_user_repository() -> IUserRepository:
    """Get singleton user repository instance."""
    global _user_repository

    if _user_repository is None:
        _user_repository = create_user_repository()

    return _user_repository


def reset_repositories() -> None:
    """Reset the singletons (for testing purposes)."""
    global _wine_repository, _user_repository
    _wine_repository = None
    _user_repository = None
