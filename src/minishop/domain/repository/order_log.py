"""Abstract store for committed orders.

Defined in the domain layer so the domain never depends on
infrastructure. The text-file implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from minishop.domain.model.order import Order


class OrderLog(ABC):

    @abstractmethod
    def append(self, order: Order) -> None:
        """Append a committed order. Never rewrites earlier entries."""

    @abstractmethod
    def read_all(self) -> list[str] | None:
        """Return every line of the log in order, or None if no log exists yet."""
