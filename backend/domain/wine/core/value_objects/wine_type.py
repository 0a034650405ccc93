"""WineType value object - style of wine in the cellar."""

from enum import Enum


class WineType(str, Enum):
    """Wine style.

    Drives the consumption heuristic in OptimalConsumptionCalculator.
    """

    RED = "red"
    WHITE = "white"
    ROSE = "rose"
    SPARKLING = "sparkling"
