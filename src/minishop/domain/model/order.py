"""Order: an immutable snapshot of the cart taken at checkout.

Line items are copied out of the cart, so later cart or price changes
never reach a committed order.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from minishop.domain.exceptions import ValidationError
from minishop.domain.model.cart import Cart
from minishop.domain.model.value_objects import Money, Quantity

ORDER_ID_PREFIX = "ORD"


@dataclass(frozen=True)
class OrderLineItem:
    """Price snapshot of one cart entry at checkout time."""

    product_id: int
    product_name: str
    quantity: Quantity
    unit_price: Money  # locked at checkout

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    def __str__(self) -> str:
        return f"{self.product_name} x {self.quantity} = {self.line_total}"


@dataclass(frozen=True)
class Order:
    """Committed order. Use ``Order.from_cart()`` at checkout."""

    id: str
    items: tuple[OrderLineItem, ...]
    total: Money
    created_at: datetime = field(default_factory=lambda: datetime.now().astimezone())

    @staticmethod
    def from_cart(cart: Cart, order_id: str, created_at: datetime | None = None) -> Order:
        if cart.is_empty():
            raise ValidationError("Order must contain at least one item")

        items = tuple(
            OrderLineItem(
                product_id=ci.product.id,
                product_name=ci.product.name,
                quantity=Quantity(ci.quantity),
                unit_price=ci.product.price,
            )
            for ci in cart.items()
        )
        total = Money.zero()
        for item in items:
            total = total + item.line_total

        if created_at is None:
            created_at = datetime.now().astimezone()
        return Order(id=order_id, items=items, total=total, created_at=created_at)


class OrderIdGenerator:
    """Issues ``ORD<epoch-millis>`` ids, unique within the process.

    If the clock has not moved past the last issued value, the next value
    is the last one plus one.
    """

    def __init__(
        self,
        prefix: str = ORDER_ID_PREFIX,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self._prefix = prefix
        self._clock = clock or (lambda: time.time_ns() // 1_000_000)
        self._last = 0

    def next_id(self) -> str:
        value = max(self._clock(), self._last + 1)
        self._last = value
        return f"{self._prefix}{value}"
