"""Wine domain module.

Cellar inventory (the Wine entity) and the heuristics that suggest when
each wine should be opened.
"""

from .calculation.optimal_consumption_calculator import OptimalConsumptionCalculator
from .core.entities.wine import Wine
from .core.ports.wine_repository import IWineRepository
from .core.value_objects.consumption_status import ConsumptionStatus
from .core.value_objects.wine_type import WineType

__all__ = [
    "ConsumptionStatus",
    "IWineRepository",
    "OptimalConsumptionCalculator",
    "Wine",
    "WineType",
]
