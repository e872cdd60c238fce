"""End-to-end tests of the interactive menu, driven through click's CliRunner."""

import click

from minishop.domain.model.cart import Cart
from minishop.infrastructure.bootstrap import ShopSession, seed_catalog
from minishop.infrastructure.cli.main import cli
from minishop.infrastructure.cli.menu import MenuController
from minishop.infrastructure.persistence.text_order_log import TextFileOrderLog


def _run(cli_runner, orders_file, *lines: str):
    return cli_runner.invoke(
        cli, ["--orders-file", str(orders_file)], input="\n".join(lines) + "\n"
    )


class TestMenuLoop:

    def test_exit(self, cli_runner, orders_file):
        result = _run(cli_runner, orders_file, "0")
        assert result.exit_code == 0
        assert "=== Welcome to Mini E-Commerce ===" in result.output
        assert "Thank you for visiting. Goodbye!" in result.output

    def test_non_integer_reprompts(self, cli_runner, orders_file):
        result = _run(cli_runner, orders_file, "abc", "", "0")
        assert result.exit_code == 0
        assert result.output.count("Please enter a valid integer.") == 2

    def test_unknown_option(self, cli_runner, orders_file):
        result = _run(cli_runner, orders_file, "9", "0")
        assert result.exit_code == 0
        assert "Invalid option. Try again." in result.output
        assert result.output.count("Main Menu:") == 2

    def test_end_of_input_aborts(self, cli_runner, orders_file):
        result = cli_runner.invoke(cli, ["--orders-file", str(orders_file)], input="")
        assert result.exit_code == 1

    def test_browse(self, cli_runner, orders_file):
        result = _run(cli_runner, orders_file, "1", "0")
        assert "[1] Wireless Mouse - ₹499.00 (stock: 10) - Ergonomic mouse" in result.output
        assert "[5] Water Bottle - ₹349.00 (stock: 20) - 500 ml stainless" in result.output

    def test_menu_names_orders_file(self, cli_runner, orders_file):
        result = _run(cli_runner, orders_file, "0")
        assert f"6. View past orders ({orders_file})" in result.output


class TestCartCommands:

    def test_add_and_view(self, cli_runner, orders_file):
        result = _run(cli_runner, orders_file, "2", "1", "2", "3", "0")
        assert "Selected: Wireless Mouse (stock: 10)" in result.output
        assert "2 x Wireless Mouse added to cart." in result.output
        assert "1. Wireless Mouse x 2 = ₹998.00" in result.output
        assert "Cart Total: ₹998.00" in result.output

    def test_add_unknown_product(self, cli_runner, orders_file):
        result = _run(cli_runner, orders_file, "2", "99", "0")
        assert "Product not found." in result.output
        assert result.exit_code == 0

    def test_add_zero_quantity(self, cli_runner, orders_file):
        result = _run(cli_runner, orders_file, "2", "1", "0", "3", "0")
        assert "Quantity must be >= 1" in result.output
        assert "Cart is empty." in result.output

    def test_add_more_than_stock(self, cli_runner, orders_file):
        result = _run(cli_runner, orders_file, "2", "3", "9", "0")
        assert "Not enough stock. Available: 8" in result.output

    def test_add_non_integer_quantity_reprompts(self, cli_runner, orders_file):
        result = _run(cli_runner, orders_file, "2", "1", "two", "2", "0")
        assert "Please enter a valid integer." in result.output
        assert "2 x Wireless Mouse added to cart." in result.output

    def test_view_empty_cart(self, cli_runner, orders_file):
        result = _run(cli_runner, orders_file, "3", "0")
        assert "Cart is empty." in result.output

    def test_remove_from_empty_cart(self, cli_runner, orders_file):
        result = _run(cli_runner, orders_file, "4", "0")
        assert "Cart is empty." in result.output

    def test_remove_invalid_then_valid(self, cli_runner, orders_file):
        result = _run(
            cli_runner, orders_file,
            "2", "1", "1",
            "2", "2", "1",
            "4", "5",
            "4", "1",
            "3", "0",
        )
        assert "Invalid item number." in result.output
        assert "Removed: Wireless Mouse" in result.output
        assert "1. USB-C Cable x 1 = ₹199.00" in result.output.split("Removed: Wireless Mouse")[1]


class TestCheckoutCommand:

    def test_empty_cart(self, cli_runner, orders_file):
        result = _run(cli_runner, orders_file, "5", "0")
        assert "Cart is empty. Nothing to checkout." in result.output
        assert not orders_file.exists()

    def test_cancelled(self, cli_runner, orders_file):
        result = _run(cli_runner, orders_file, "2", "1", "1", "5", "no", "1", "0")
        assert "Checkout Summary:" in result.output
        assert "Checkout cancelled." in result.output
        assert "(stock: 10)" in result.output.split("Checkout cancelled.")[1]
        assert not orders_file.exists()

    def test_success_writes_log_and_empties_cart(self, cli_runner, orders_file):
        result = _run(cli_runner, orders_file, "2", "1", "2", "5", "YES", "3", "1", "0")
        assert "Order placed successfully! Order ID: ORD" in result.output
        after = result.output.split("Order placed successfully!")[1]
        assert "Cart is empty." in after
        assert "[1] Wireless Mouse - ₹499.00 (stock: 8) - Ergonomic mouse" in after

        content = orders_file.read_text(encoding="utf-8")
        assert content.startswith("----\nOrderId: ORD")
        assert "  Wireless Mouse x 2 = ₹998.00\n" in content
        assert "Total: ₹998.00\n" in content
        assert "Amount charged: ₹998.00" in result.output

    def test_stock_shortfall_aborts(self, cli_runner, orders_file):
        result = _run(
            cli_runner, orders_file,
            "2", "1", "5",
            "2", "1", "5",
            "2", "1", "1",
            "5", "yes",
            "1", "3", "0",
        )
        assert "Stock changed. Cannot complete order for Wireless Mouse" in result.output
        after = result.output.split("Stock changed.")[1]
        assert "(stock: 10)" in after
        assert "1. Wireless Mouse x 11 = ₹5489.00" in after
        assert not orders_file.exists()

    def test_log_failure_still_places_order(self, cli_runner, tmp_path):
        unwritable = tmp_path / "missing" / "orders.txt"
        result = _run(cli_runner, unwritable, "2", "1", "1", "5", "yes", "3", "0")
        assert "Failed to save order:" in result.output
        assert "Order placed successfully! Order ID: ORD" in result.output
        assert result.exit_code == 0


class TestOrderHistoryCommand:

    def test_no_orders_yet(self, cli_runner, orders_file):
        result = _run(cli_runner, orders_file, "6", "0")
        assert "No orders yet." in result.output

    def test_history_lists_every_order(self, cli_runner, orders_file):
        result = _run(
            cli_runner, orders_file,
            "2", "1", "1", "5", "yes",
            "2", "4", "3", "5", "yes",
            "6", "0",
        )
        history = result.output.split("Past Orders (from")[1]
        assert history.count("----") == 2
        assert history.index("Wireless Mouse x 1 = ₹499.00") < history.index("Notebook x 3 = ₹297.00")
        assert "Total: ₹297.00" in history

    def test_undecodable_log_reported_and_menu_continues(self, cli_runner, orders_file):
        orders_file.write_bytes(b"----\nOrderId: ORD1\n  Caf\xe9 x 1 = 10.00\n")
        result = _run(cli_runner, orders_file, "6", "1", "0")
        assert result.exit_code == 0
        assert "Unable to read orders file:" in result.output
        after = result.output.split("Unable to read orders file:")[1]
        assert "Main Menu:" in after
        assert "[1] Wireless Mouse" in after
        assert "Thank you for visiting. Goodbye!" in after

    def test_unreadable_log_directory_reported_and_menu_continues(self, cli_runner, tmp_path):
        session = ShopSession(
            catalog=seed_catalog(), cart=Cart(), order_log=TextFileOrderLog(tmp_path)
        )

        @click.command()
        def shop() -> None:
            MenuController(session, orders_label=str(tmp_path)).run()

        result = cli_runner.invoke(shop, input="6\n0\n")
        assert result.exit_code == 0
        assert "Unable to read orders file:" in result.output
        assert "Main Menu:" in result.output.split("Unable to read orders file:")[1]

    def test_directory_orders_file_rejected_at_startup(self, cli_runner, tmp_path):
        result = cli_runner.invoke(cli, ["--orders-file", str(tmp_path)], input="0\n")
        assert result.exit_code == 2
        assert "is a directory" in result.output
