"""Application service: Show Order History use case (query)."""

from __future__ import annotations

from minishop.domain.repository.order_log import OrderLog


class ShowOrdersHandler:

    def __init__(self, order_log: OrderLog) -> None:
        self._order_log = order_log

    def handle(self) -> list[str] | None:
        """Return the order log lines, or None if nothing was ever ordered."""
        return self._order_log.read_all()
