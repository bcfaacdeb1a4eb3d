"""Abstract repository for the append-only sale history."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordercore.domain.model.sale_history import SaleHistoryRecord


class SaleHistoryRepository(ABC):

    @abstractmethod
    def append(self, records: list[SaleHistoryRecord]) -> list[SaleHistoryRecord]:
        """Append records whose ``key`` is not yet present.

        Returns the records actually appended, with ``sale_id`` assigned.
        Records already in the history are skipped, so replaying a
        projection never creates duplicates.
        """

    @abstractmethod
    def list_all(self) -> list[SaleHistoryRecord]:
        """Return the whole history in append order."""

    @abstractmethod
    def list_for_order(self, order_id: int) -> list[SaleHistoryRecord]:
        """Return the records derived from one order."""
