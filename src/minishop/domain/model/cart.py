"""Shopping cart: accumulates intended purchases before checkout.

Adding never checks stock; availability is re-validated at checkout.
"""

from __future__ import annotations

from dataclasses import dataclass

from minishop.domain.model.product import Product
from minishop.domain.model.value_objects import Money, Quantity


@dataclass
class CartItem:
    """A product reference plus the quantity requested so far."""

    product: Product
    quantity: int

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity

    def __str__(self) -> str:
        return f"{self.product.name} x {self.quantity} = {self.line_total}"


class Cart:
    """Insertion-ordered mapping of product id -> CartItem.

    Invariant: at most one CartItem per product id.
    """

    def __init__(self) -> None:
        self._items: dict[int, CartItem] = {}

    def add(self, product: Product, quantity: int) -> CartItem:
        """Add *quantity* of *product*, merging with an existing entry."""
        qty = Quantity(quantity).value
        item = self._items.get(product.id)
        if item is None:
            item = CartItem(product=product, quantity=qty)
            self._items[product.id] = item
        else:
            item.quantity += qty
        return item

    def remove(self, product_id: int) -> None:
        """Remove the entry for *product_id*; absent ids are ignored."""
        self._items.pop(product_id, None)

    def items(self) -> list[CartItem]:
        return list(self._items.values())

    def get(self, product_id: int) -> CartItem | None:
        return self._items.get(product_id)

    def total(self) -> Money:
        result = Money.zero()
        for item in self._items.values():
            result = result + item.line_total
        return result

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)
