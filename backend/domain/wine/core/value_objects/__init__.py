"""Wine value objects."""

from .consumption_status import ConsumptionStatus
from .wine_type import WineType

__all__ = ["ConsumptionStatus", "WineType"]
