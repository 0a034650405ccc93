"""Wine calculation services."""

from .optimal_consumption_calculator import (
    APPROACHING_WINDOW_DAYS,
    OptimalConsumptionCalculator,
)

__all__ = ["APPROACHING_WINDOW_DAYS", "OptimalConsumptionCalculator"]
