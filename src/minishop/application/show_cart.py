"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from minishop.application.dto import CartDTO, CartLineDTO
from minishop.domain.model.cart import Cart


class ShowCartHandler:

    def __init__(self, cart: Cart) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        return to_cart_dto(self._cart)


def to_cart_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        lines=[
            CartLineDTO(
                position=position,
                product_id=item.product.id,
                product_name=item.product.name,
                quantity=item.quantity,
                line_total=str(item.line_total),
            )
            for position, item in enumerate(cart.items(), start=1)
        ],
        total=str(cart.total()),
    )
