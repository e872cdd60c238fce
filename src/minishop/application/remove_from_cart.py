"""Application service: Remove From Cart use case."""

from __future__ import annotations

import logging

from minishop.application.dto import CartLineDTO
from minishop.domain.exceptions import EntityNotFoundError
from minishop.domain.model.cart import Cart

logger = logging.getLogger(__name__)


class RemoveFromCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self, position: int) -> CartLineDTO:
        """Remove the entry at 1-based *position* and return what was removed."""
        items = self._cart.items()
        if position <= 0 or position > len(items):
            raise EntityNotFoundError("Invalid item number.")

        item = items[position - 1]
        self._cart.remove(item.product.id)
        logger.info("Removed %s from cart", item.product.name)

        return CartLineDTO(
            position=position,
            product_id=item.product.id,
            product_name=item.product.name,
            quantity=item.quantity,
            line_total=str(item.line_total),
        )
