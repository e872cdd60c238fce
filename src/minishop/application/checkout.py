"""Application service: Checkout use case.

Checkout is a small state machine driven by the menu:

    IDLE -> CONFIRMING -> VALIDATING -> COMMITTED -> IDLE

``start()`` moves to CONFIRMING and hands back a cart summary to show.
``confirm()`` either cancels back to IDLE or validates the whole cart
against current stock and commits it. Any gate that fails returns to
IDLE without touching stock or the cart.

Stock is decremented and the cart cleared *before* the order is written
to the log, so a log failure leaves the order placed but unrecorded.
"""

from __future__ import annotations

import logging
from enum import Enum

from minishop.application.dto import CartDTO, OrderDTO
from minishop.application.show_cart import to_cart_dto
from minishop.domain.exceptions import (
    InsufficientStockError,
    PersistenceError,
    ValidationError,
)
from minishop.domain.model.cart import Cart
from minishop.domain.model.catalog import Catalog
from minishop.domain.model.order import Order, OrderIdGenerator
from minishop.domain.repository.order_log import OrderLog
from minishop.domain.service.stock_service import StockService

logger = logging.getLogger(__name__)

ACCEPT_TOKEN = "yes"


class CheckoutState(Enum):
    IDLE = "IDLE"
    CONFIRMING = "CONFIRMING"
    VALIDATING = "VALIDATING"
    COMMITTED = "COMMITTED"


class CheckoutHandler:

    def __init__(
        self,
        catalog: Catalog,
        cart: Cart,
        order_log: OrderLog,
        id_generator: OrderIdGenerator | None = None,
    ) -> None:
        self._cart = cart
        self._order_log = order_log
        self._stock = StockService(catalog)
        self._ids = id_generator or OrderIdGenerator()
        self.state = CheckoutState.IDLE

    def start(self) -> CartDTO:
        """Begin checkout and return the summary to confirm."""
        if self._cart.is_empty():
            self._transition(CheckoutState.IDLE)
            raise ValidationError("Cart is empty. Nothing to checkout.")
        self._transition(CheckoutState.CONFIRMING)
        return to_cart_dto(self._cart)

    def confirm(self, answer: str) -> OrderDTO | None:
        """Finish checkout with the user's answer to the confirmation prompt.

        Returns the placed order, or None if the user declined.

        Raises:
            ValidationError: checkout was not started.
            InsufficientStockError: some entry no longer fits current stock;
                nothing was changed.
            PersistenceError: the order was committed but could not be
                written to the log. ``exc.order`` holds the committed order.
        """
        if self.state != CheckoutState.CONFIRMING:
            raise ValidationError(
                f"Cannot confirm checkout, current state is {self.state.value}, "
                f"expected CONFIRMING"
            )

        if answer.strip().lower() != ACCEPT_TOKEN:
            self._transition(CheckoutState.IDLE)
            logger.info("Checkout cancelled by user")
            return None

        self._transition(CheckoutState.VALIDATING)
        try:
            self._stock.commit(self._cart)
        except InsufficientStockError as exc:
            self._transition(CheckoutState.IDLE)
            logger.warning(
                "Checkout aborted: %s requested %d, %d available",
                exc.product_name, exc.requested, exc.available,
            )
            raise

        order = Order.from_cart(self._cart, order_id=self._ids.next_id())
        self._cart.clear()
        self._transition(CheckoutState.COMMITTED)
        logger.info("Order %s committed, total %s", order.id, order.total)

        try:
            self._order_log.append(order)
        except PersistenceError as exc:
            exc.order = order
            raise
        finally:
            self._transition(CheckoutState.IDLE)

        return to_order_dto(order)

    def _transition(self, new_state: CheckoutState) -> None:
        if new_state != self.state:
            logger.debug("Checkout %s -> %s", self.state.value, new_state.value)
        self.state = new_state


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(id=order.id, total=str(order.total))
