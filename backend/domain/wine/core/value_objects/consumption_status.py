"""ConsumptionStatus value object - coarse readiness classification."""

from enum import Enum


class ConsumptionStatus(str, Enum):
    """Where a wine stands relative to its suggested consumption date.

    - OPTIMAL: suggested date reached or passed
    - APPROACHING: suggested date within the next 90 days
    - NOT_READY: suggested date more than 90 days away
    - UNKNOWN: no suggested date recorded
    """

    OPTIMAL = "optimal"
    APPROACHING = "approaching"
    NOT_READY = "not-ready"
    UNKNOWN = "unknown"
