"""Product entity.

Products are created once when the catalog is seeded and live until the
process exits. Identity (id, name, description) never changes; price and
stock do.
"""

from __future__ import annotations

from dataclasses import dataclass

from minishop.domain.exceptions import ValidationError
from minishop.domain.model.value_objects import Money


@dataclass(eq=False)
class Product:
    """A product in the catalog.

    Compared by identity: two Product objects are the same product only if
    they are the same object held by the catalog.
    """

    id: int
    name: str
    description: str
    price: Money
    stock: int = 0

    def __post_init__(self) -> None:
        if self.stock < 0:
            raise ValidationError(f"Stock for {self.name} cannot be negative")

    def reduce_stock(self, quantity: int) -> bool:
        """Take *quantity* units out of stock.

        Returns False and leaves stock alone if not enough is available.
        """
        if quantity <= self.stock:
            self.stock -= quantity
            return True
        return False

    def increase_stock(self, quantity: int) -> None:
        self.stock += quantity

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Committed orders keep the price they were placed at.
        """
        self.price = new_price

    def __str__(self) -> str:
        return f"[{self.id}] {self.name} - {self.price} (stock: {self.stock}) - {self.description}"
