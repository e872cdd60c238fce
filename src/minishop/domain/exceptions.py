"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the menu can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minishop.domain.model.order import Order


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InsufficientStockError(ValidationError):
    """Requested quantity exceeds the stock currently available."""

    def __init__(self, message: str, product_name: str, requested: int, available: int) -> None:
        super().__init__(message)
        self.product_name = product_name
        self.requested = requested
        self.available = available


class PersistenceError(DomainException):
    """The order log could not be written or read.

    When raised after a committed checkout, ``order`` holds the order that
    was placed but not recorded.
    """

    def __init__(self, message: str, order: Order | None = None) -> None:
        super().__init__(message)
        self.order = order
