"""Composition root: builds the session's catalog, cart and order log.

This is the only place in the codebase that knows about *all* layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from minishop.domain.model.cart import Cart
from minishop.domain.model.catalog import Catalog
from minishop.domain.model.product import Product
from minishop.domain.model.value_objects import Money
from minishop.domain.repository.order_log import OrderLog
from minishop.infrastructure.persistence.text_order_log import TextFileOrderLog

DEFAULT_ORDERS_FILE = Path("orders.txt")

# (id, name, description, price, stock)
SEED_PRODUCTS = [
    (1, "Wireless Mouse", "Ergonomic mouse", "499.00", 10),
    (2, "USB-C Cable", "1m fast charging cable", "199.00", 25),
    (3, "Bluetooth Headset", "Noise-cancelling", "1599.00", 8),
    (4, "Notebook", "200 pages ruled", "99.00", 50),
    (5, "Water Bottle", "500 ml stainless", "349.00", 20),
]


@dataclass
class ShopSession:
    """Everything one run of the shop owns."""

    catalog: Catalog
    cart: Cart
    order_log: OrderLog


def seed_catalog() -> Catalog:
    return Catalog([
        Product(id=pid, name=name, description=desc, price=Money.of(price), stock=stock)
        for pid, name, desc, price, stock in SEED_PRODUCTS
    ])


def order_log(file_path: Path = DEFAULT_ORDERS_FILE) -> TextFileOrderLog:
    return TextFileOrderLog(file_path)


def new_session(orders_file: Path = DEFAULT_ORDERS_FILE) -> ShopSession:
    return ShopSession(catalog=seed_catalog(), cart=Cart(), order_log=order_log(orders_file))
