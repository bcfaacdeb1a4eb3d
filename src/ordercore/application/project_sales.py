"""Application service: replay the sale history projection.

Projection runs automatically after every order commit.  This handler
re-runs it for one committed order, or for all of them, after a crash
or a failed append.  Records already in the history are skipped.
"""

from __future__ import annotations

import logging

from ordercore.domain.exceptions import EntityNotFoundError
from ordercore.domain.repository.order_repository import OrderRepository
from ordercore.domain.repository.sale_history_repository import (
    SaleHistoryRepository,
)
from ordercore.domain.service.sale_history_projector import SaleHistoryProjector

logger = logging.getLogger(__name__)


class ProjectSalesHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        sale_history_repo: SaleHistoryRepository,
        projector: SaleHistoryProjector | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._sale_history_repo = sale_history_repo
        self._projector = projector or SaleHistoryProjector()

    def handle(self, order_id: int) -> int:
        """Project one order; return the number of records newly appended."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        appended = self._sale_history_repo.append(self._projector.project_order(order))
        logger.info("Projected order #%d: %d new sale record(s)", order_id, len(appended))
        return len(appended)

    def handle_all(self) -> int:
        """Project every committed order; return the number of new records."""
        total = 0
        for order in self._order_repo.list_all():
            total += len(
                self._sale_history_repo.append(self._projector.project_order(order))
            )
        logger.info("Projected all orders: %d new sale record(s)", total)
        return total
