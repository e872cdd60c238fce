"""The in-memory product catalog.

Holds the authoritative product list and stock levels for the session.
"""

from __future__ import annotations

from minishop.domain.exceptions import ValidationError
from minishop.domain.model.product import Product


class Catalog:

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = []
        for product in products or []:
            self.add(product)

    def add(self, product: Product) -> None:
        if self.find_by_id(product.id) is not None:
            raise ValidationError(f"Product ID {product.id} already exists")
        self._products.append(product)

    def find_by_id(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._products)

    def reduce_stock(self, product: Product, quantity: int) -> bool:
        return product.reduce_stock(quantity)

    def increase_stock(self, product: Product, quantity: int) -> None:
        product.increase_stock(quantity)
