"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordercore.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every committed order."""

    @abstractmethod
    def commit(self, order: Order, stock_deltas: dict[int, int]) -> None:
        """Durably persist a new order in a single atomic write.

        The header, every detail row and the stock decrement of each
        product in *stock_deltas* become visible together or not at all.
        On success ``order.id`` and each detail's ``id``/``order_id`` are
        assigned.  Raises StorageError if the write fails.
        """
