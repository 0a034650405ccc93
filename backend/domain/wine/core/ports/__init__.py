"""Wine ports."""

from .wine_repository import IWineRepository

__all__ = ["IWineRepository"]
