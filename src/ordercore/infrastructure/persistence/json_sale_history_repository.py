"""JSON-document-backed implementation of SaleHistoryRepository."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal

from ordercore.domain.model.sale_history import SaleHistoryRecord
from ordercore.domain.model.value_objects import Money
from ordercore.domain.repository.sale_history_repository import (
    SaleHistoryRepository,
)
from ordercore.infrastructure.persistence.json_store import JsonDocumentStore, next_id


class JsonSaleHistoryRepository(SaleHistoryRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    def append(self, records: list[SaleHistoryRecord]) -> list[SaleHistoryRecord]:
        appended: list[SaleHistoryRecord] = []
        with self._store.transaction() as doc:
            rows = doc["sale_history"]
            existing = {(row["order_id"], row["product_id"]) for row in rows}
            sale_id = next_id(rows)
            for record in records:
                if record.key in existing:
                    continue
                stored = replace(record, sale_id=sale_id)
                rows.append(self._to_raw(stored))
                existing.add(record.key)
                appended.append(stored)
                sale_id += 1
        return appended

    def list_all(self) -> list[SaleHistoryRecord]:
        return [self._to_domain(row) for row in self._store.read()["sale_history"]]

    def list_for_order(self, order_id: int) -> list[SaleHistoryRecord]:
        return [
            self._to_domain(row)
            for row in self._store.read()["sale_history"]
            if row["order_id"] == order_id
        ]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: SaleHistoryRecord) -> dict:
        return {
            "id": record.sale_id,
            "order_id": record.order_id,
            "customer_id": record.customer_id,
            "product_id": record.product_id,
            "quantity": record.quantity,
            "order_date": record.order_date.isoformat(),
            "total_amount": str(record.total_amount.amount),
            "currency": record.total_amount.currency,
        }

    @staticmethod
    def _to_domain(row: dict) -> SaleHistoryRecord:
        return SaleHistoryRecord(
            sale_id=row["id"],
            order_id=row["order_id"],
            customer_id=row["customer_id"],
            product_id=row["product_id"],
            quantity=row["quantity"],
            order_date=date.fromisoformat(row["order_date"]),
            total_amount=Money(Decimal(row["total_amount"]), row.get("currency", "USD")),
        )
