"""Interactive menu: reads choices in a loop and dispatches to the handlers."""

from __future__ import annotations

from collections.abc import Callable

import click

from minishop.application.add_to_cart import AddToCartHandler
from minishop.application.checkout import CheckoutHandler
from minishop.application.dto import CartDTO
from minishop.application.remove_from_cart import RemoveFromCartHandler
from minishop.application.show_cart import ShowCartHandler
from minishop.application.show_orders import ShowOrdersHandler
from minishop.domain.exceptions import DomainException, PersistenceError
from minishop.infrastructure.bootstrap import ShopSession
from minishop.infrastructure.cli.prompts import read_int, read_line

WELCOME = "=== Welcome to Mini E-Commerce ==="
GOODBYE = "Thank you for visiting. Goodbye!"


class MenuController:

    def __init__(self, session: ShopSession, orders_label: str = "orders.txt") -> None:
        self._catalog = session.catalog
        self._cart = session.cart
        self._orders_label = orders_label

        self._add_to_cart = AddToCartHandler(session.catalog, session.cart)
        self._remove_from_cart = RemoveFromCartHandler(session.cart)
        self._show_cart = ShowCartHandler(session.cart)
        self._checkout = CheckoutHandler(session.catalog, session.cart, session.order_log)
        self._show_orders = ShowOrdersHandler(session.order_log)

        self._actions: dict[int, Callable[[], None]] = {
            1: self.browse_products,
            2: self.add_to_cart,
            3: self.view_cart,
            4: self.remove_from_cart,
            5: self.checkout,
            6: self.view_orders,
        }

    def run(self) -> None:
        click.echo(WELCOME)
        while True:
            self._print_menu()
            choice = read_int("Choose option: ")
            if choice == 0:
                click.echo(GOODBYE)
                return
            action = self._actions.get(choice)
            if action is None:
                click.echo("Invalid option. Try again.")
                continue
            try:
                action()
            except DomainException as exc:
                click.echo(str(exc))

    def _print_menu(self) -> None:
        click.echo()
        click.echo("Main Menu:")
        click.echo("1. Browse products")
        click.echo("2. Add product to cart")
        click.echo("3. View cart")
        click.echo("4. Remove item from cart")
        click.echo("5. Checkout")
        click.echo(f"6. View past orders ({self._orders_label})")
        click.echo("0. Exit")

    # --- Actions --------------------------------------------------------------

    def browse_products(self) -> None:
        click.echo()
        click.echo("Available Products:")
        for product in self._catalog.list_all():
            click.echo(str(product))

    def add_to_cart(self) -> None:
        self.browse_products()
        product_id = read_int("Enter product id to add: ")
        product = self._add_to_cart.find_product(product_id)
        click.echo(f"Selected: {product.name} (stock: {product.stock})")
        quantity = read_int("Enter quantity: ")
        line = self._add_to_cart.handle(product_id, quantity)
        click.echo(f"{line.quantity} x {line.product_name} added to cart.")

    def view_cart(self) -> None:
        click.echo()
        click.echo("Your Cart:")
        self._display_cart(self._show_cart.handle())

    def remove_from_cart(self) -> None:
        if self._cart.is_empty():
            click.echo("Cart is empty.")
            return
        self.view_cart()
        position = read_int("Enter item number to remove (1..): ")
        removed = self._remove_from_cart.handle(position)
        click.echo(f"Removed: {removed.product_name}")

    def checkout(self) -> None:
        summary = self._checkout.start()
        click.echo()
        click.echo("Checkout Summary:")
        click.echo("Your Cart:")
        self._display_cart(summary)

        answer = read_line("Confirm checkout? (yes/no): ")
        try:
            order = self._checkout.confirm(answer)
        except PersistenceError as exc:
            click.echo(str(exc))
            if exc.order is not None:
                click.echo(f"Order placed successfully! Order ID: {exc.order.id}")
            return

        if order is None:
            click.echo("Checkout cancelled.")
            return
        click.echo(f"Order placed successfully! Order ID: {order.id}")
        click.echo(f"Amount charged: {order.total}")

    def view_orders(self) -> None:
        click.echo()
        click.echo(f"Past Orders (from {self._orders_label}):")
        lines = self._show_orders.handle()
        if lines is None:
            click.echo("No orders yet.")
            return
        for line in lines:
            click.echo(line)

    # --- Display helpers ------------------------------------------------------

    @staticmethod
    def _display_cart(cart: CartDTO) -> None:
        if cart.is_empty:
            click.echo("Cart is empty.")
            return
        for line in cart.lines:
            click.echo(f"{line.position}. {line}")
        click.echo(f"Cart Total: {cart.total}")
