"""Wine entities."""

from .wine import Wine, WineProps

__all__ = ["Wine", "WineProps"]
