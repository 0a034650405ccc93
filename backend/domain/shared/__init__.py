"""Shared domain building blocks."""

from .errors import DomainError, DomainErrorKind
from .types import ensure_utc, utc_now

__all__ = ["DomainError", "DomainErrorKind", "ensure_utc", "utc_now"]
