"""Plain-text, append-only implementation of OrderLog.

Each order is written as a block::

    ----
    OrderId: ORD1729345678901
    Date: Mon Oct 19 14:03:11 IST 2026
      Wireless Mouse x 2 = ₹998.00
    Total: ₹998.00
    <blank line>
"""

from __future__ import annotations

import logging
from pathlib import Path

from minishop.domain.exceptions import PersistenceError
from minishop.domain.model.order import Order
from minishop.domain.repository.order_log import OrderLog

logger = logging.getLogger(__name__)

SEPARATOR = "----"
DATE_FORMAT = "%a %b %d %H:%M:%S %Z %Y"


class TextFileOrderLog(OrderLog):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- OrderLog interface ---------------------------------------------------

    def append(self, order: Order) -> None:
        try:
            with self._file_path.open("a", encoding="utf-8") as fh:
                fh.write("\n".join(self._format(order)) + "\n")
                fh.flush()
        except OSError as exc:
            raise PersistenceError(f"Failed to save order: {exc}") from exc
        logger.info("Order %s appended to %s", order.id, self._file_path)

    def read_all(self) -> list[str] | None:
        if not self._file_path.exists():
            return None
        try:
            with self._file_path.open("r", encoding="utf-8") as fh:
                return fh.read().splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"Unable to read orders file: {exc}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _format(order: Order) -> list[str]:
        lines = [
            SEPARATOR,
            f"OrderId: {order.id}",
            f"Date: {order.created_at.strftime(DATE_FORMAT)}",
        ]
        lines.extend(f"  {item}" for item in order.items)
        lines.append(f"Total: {order.total}")
        lines.append("")
        return lines
