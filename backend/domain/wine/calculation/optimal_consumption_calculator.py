"""OptimalConsumptionCalculator - when a cellared wine should be opened."""

import math
from datetime import datetime, timedelta
from typing import Optional

from domain.shared.types import utc_now
from domain.wine.core.entities.wine import Wine
from domain.wine.core.value_objects.consumption_status import ConsumptionStatus
from domain.wine.core.value_objects.wine_type import WineType

# Window in days before the suggested date reported as APPROACHING
APPROACHING_WINDOW_DAYS = 90


class OptimalConsumptionCalculator:
    """Derive drinking-window values from a Wine's read accessors.

    Stateless: every method is a static function of the wine and the
    current time. Nothing here mutates the entity; callers write results
    back with ``Wine.update_suggested_consumption_date``.

    The suggestion heuristic is a simplified placeholder based only on
    type and age, not an oenological model.
    """

    @staticmethod
    def is_optimal_to_consume(wine: Wine) -> bool:
        """True when a suggested date is set and has been reached."""
        suggested = wine.suggested_consumption_date
        if suggested is None:
            return False
        return utc_now() >= suggested

    @staticmethod
    def days_until_optimal(wine: Wine) -> Optional[int]:
        """Days until the suggested date, rounded up.

        Elapsed time divided by 24h, so a date 1 hour away counts as 1 day.
        Zero or negative once the date has arrived.

        Returns:
            None if the wine has no suggested date
        """
        suggested = wine.suggested_consumption_date
        if suggested is None:
            return None
        return math.ceil((suggested - utc_now()) / timedelta(days=1))

    @staticmethod
    def suggest_consumption_date(wine: Wine) -> datetime:
        """Suggest a consumption date from wine type and age.

        Rules (years added to the cellar entry date):
            red:       age < 3 -> 2, age < 10 -> 1, else 0
            white:     age < 2 -> 1, else 0
            rose:      0
            sparkling: age < 3 -> 1, else 0

        Example:
            >>> # red of last year's vintage, entered 2020-01-01
            >>> OptimalConsumptionCalculator.suggest_consumption_date(wine)
            datetime.datetime(2022, 1, 1, 0, 0, tzinfo=datetime.timezone.utc)
        """
        age = wine.age
        years_to_wait = 0

        if wine.type == WineType.RED:
            if age < 3:
                years_to_wait = 2  # Young reds need time
            elif age < 10:
                years_to_wait = 1
        elif wine.type == WineType.WHITE:
            if age < 2:
                years_to_wait = 1
        elif wine.type == WineType.SPARKLING:
            if age < 3:
                years_to_wait = 1
        # Rosé is drunk young

        return _add_years(wine.cellar_entry_date, years_to_wait)

    @staticmethod
    def get_consumption_status(wine: Wine) -> ConsumptionStatus:
        """Classify the wine against its suggested date.

        UNKNOWN without a date, OPTIMAL at or past it, APPROACHING within
        90 days (inclusive), NOT_READY beyond that.
        """
        days = OptimalConsumptionCalculator.days_until_optimal(wine)

        if days is None:
            return ConsumptionStatus.UNKNOWN

        if days <= 0:
            return ConsumptionStatus.OPTIMAL

        if days <= APPROACHING_WINDOW_DAYS:
            return ConsumptionStatus.APPROACHING

        return ConsumptionStatus.NOT_READY


def _add_years(value: datetime, years: int) -> datetime:
    """Shift the year component, keeping month, day and time.

    Feb 29 moved to a non-leap year rolls over to Mar 1.
    """
    if years == 0:
        return value
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, month=3, day=1)
