"""Application service: Add To Cart use case.

Checks the request against the stock visible right now. Stock is not
reserved; checkout validates again before committing.
"""

from __future__ import annotations

import logging

from minishop.application.dto import CartLineDTO
from minishop.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from minishop.domain.model.cart import Cart
from minishop.domain.model.catalog import Catalog
from minishop.domain.model.product import Product

logger = logging.getLogger(__name__)


class AddToCartHandler:

    def __init__(self, catalog: Catalog, cart: Cart) -> None:
        self._catalog = catalog
        self._cart = cart

    def find_product(self, product_id: int) -> Product:
        product = self._catalog.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found.")
        return product

    def handle(self, product_id: int, quantity: int) -> CartLineDTO:
        """Add *quantity* units of a product to the cart.

        Raises:
            EntityNotFoundError: no product has that id.
            ValidationError: quantity is below 1.
            InsufficientStockError: quantity exceeds current stock.
        """
        product = self.find_product(product_id)

        if quantity <= 0:
            raise ValidationError("Quantity must be >= 1")
        if quantity > product.stock:
            raise InsufficientStockError(
                f"Not enough stock. Available: {product.stock}",
                product_name=product.name,
                requested=quantity,
                available=product.stock,
            )

        item = self._cart.add(product, quantity)
        logger.info("Added %d x %s to cart (now %d)", quantity, product.name, item.quantity)

        position = next(
            i for i, ci in enumerate(self._cart.items(), start=1) if ci is item
        )
        return CartLineDTO(
            position=position,
            product_id=product.id,
            product_name=product.name,
            quantity=quantity,
            line_total=str(product.price * quantity),
        )
