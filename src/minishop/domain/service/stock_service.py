"""Domain service: stock commitment for a cart.

Coordinates the cross-entity operation of taking every cart entry out of
catalog stock. Validation runs over the whole cart before any stock is
touched, so a shortfall on one item never leaves the others decremented.
"""

from __future__ import annotations

import logging

from minishop.domain.exceptions import InsufficientStockError
from minishop.domain.model.cart import Cart
from minishop.domain.model.catalog import Catalog
from minishop.domain.model.product import Product

logger = logging.getLogger(__name__)


class StockService:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def validate(self, cart: Cart) -> list[tuple[Product, int]]:
        """Re-check every cart entry against current catalog stock.

        Returns the (product, quantity) pairs to commit. Raises
        InsufficientStockError for the first entry that no longer fits.
        """
        to_commit: list[tuple[Product, int]] = []
        for item in cart.items():
            product = self._catalog.find_by_id(item.product.id)
            available = product.stock if product is not None else 0
            if product is None or item.quantity > product.stock:
                raise InsufficientStockError(
                    f"Stock changed. Cannot complete order for {item.product.name}",
                    product_name=item.product.name,
                    requested=item.quantity,
                    available=available,
                )
            to_commit.append((product, item.quantity))
        return to_commit

    def commit(self, cart: Cart) -> None:
        """Validate the whole cart, then decrement stock for every entry."""
        # Phase 1: validate everything before mutating anything
        to_commit = self.validate(cart)

        # Phase 2: mutate
        for product, qty in to_commit:
            self._catalog.reduce_stock(product, qty)
            logger.debug("Stock for %s reduced by %d to %d", product.name, qty, product.stock)
