"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry formatted data from the application handlers to the menu
without exposing domain internals.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineDTO:
    """A single cart entry as displayed to the user."""

    position: int  # 1-based
    product_id: int
    product_name: str
    quantity: int
    line_total: str  # formatted, e.g. "₹998.00"

    def __str__(self) -> str:
        return f"{self.product_name} x {self.quantity} = {self.line_total}"


@dataclass(frozen=True)
class CartDTO:
    lines: list[CartLineDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class OrderDTO:
    """A committed order as displayed to the user."""

    id: str
    total: str
