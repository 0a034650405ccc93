"""
Domain errors.

A single tagged error type shared by every bounded context: callers
branch on ``DomainError.kind`` instead of on exception subclasses.
"""

from __future__ import annotations

from enum import Enum


class DomainErrorKind(str, Enum):
    """Kinds of domain failure.

    - INVALID_QUANTITY: inventory set to a negative count
    - INVALID_AMOUNT: non-positive number of bottles added/removed
    - INSUFFICIENT_STOCK: removal of more bottles than present
    - NOT_FOUND: entity lookup failed
    - INVALID_DATA: input rejected by the application layer
    """

    INVALID_QUANTITY = "INVALID_QUANTITY"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INSUFFICIENT_STOCK = "INSUFFICIENT_STOCK"
    NOT_FOUND = "NOT_FOUND"
    INVALID_DATA = "INVALID_DATA"


class DomainError(Exception):
    """
    Domain failure carrying a kind and a human readable message.

    Example:
        >>> try:
        ...     wine.remove_bottles(10)
        ... except DomainError as e:
        ...     e.kind
        <DomainErrorKind.INSUFFICIENT_STOCK: 'INSUFFICIENT_STOCK'>
    """

    def __init__(self, kind: DomainErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"DomainError(kind={self.kind.value}, message={self.message!r})"

    @classmethod
    def invalid_quantity(cls, message: str = "Quantity cannot be negative") -> "DomainError":
        return cls(DomainErrorKind.INVALID_QUANTITY, message)

    @classmethod
    def invalid_amount(cls, message: str = "Amount must be positive") -> "DomainError":
        return cls(DomainErrorKind.INVALID_AMOUNT, message)

    @classmethod
    def insufficient_stock(
        cls, message: str = "Not enough bottles in cellar"
    ) -> "DomainError":
        return cls(DomainErrorKind.INSUFFICIENT_STOCK, message)

    @classmethod
    def not_found(cls, entity: str, identifier: str) -> "DomainError":
        """Lookup failure, e.g. ``Wine with id 42 not found``."""
        return cls(DomainErrorKind.NOT_FOUND, f"{entity} with id {identifier} not found")

    @classmethod
    def invalid_data(cls, entity: str, message: str) -> "DomainError":
        """Validation failure, e.g. ``Invalid wine data: name is required``."""
        return cls(DomainErrorKind.INVALID_DATA, f"Invalid {entity.lower()} data: {message}")
