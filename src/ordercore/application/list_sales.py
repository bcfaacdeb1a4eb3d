"""Application service: List Sale History use case (query)."""

from __future__ import annotations

from ordercore.application.dto import SaleRecordDTO
from ordercore.application.mapping import sale_to_dto
from ordercore.domain.repository.sale_history_repository import (
    SaleHistoryRepository,
)


class ListSalesHandler:

    def __init__(self, sale_history_repo: SaleHistoryRepository) -> None:
        self._sale_history_repo = sale_history_repo

    def handle(self, order_id: int | None = None) -> list[SaleRecordDTO]:
        if order_id is None:
            records = self._sale_history_repo.list_all()
        else:
            records = self._sale_history_repo.list_for_order(order_id)
        return [sale_to_dto(record) for record in records]
