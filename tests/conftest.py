"""Shared test fixtures."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner():
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def orders_file(tmp_path):
    """Path to a not-yet-created orders log."""
    return tmp_path / "orders.txt"
