import logging
from pathlib import Path

import click

from minishop.infrastructure.bootstrap import DEFAULT_ORDERS_FILE, new_session
from minishop.infrastructure.cli.menu import MenuController

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    # Diagnostics go to stderr so they never interleave with the menu on stdout.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


@click.command()
@click.option(
    "--orders-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_ORDERS_FILE,
    show_default=True,
    help="Text file that completed orders are appended to.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(orders_file: Path, verbose: bool) -> None:
    """Mini Shop: browse, fill a cart and check out from the console."""
    configure_logging(verbose)
    session = new_session(orders_file)
    MenuController(session, orders_label=str(orders_file)).run()
