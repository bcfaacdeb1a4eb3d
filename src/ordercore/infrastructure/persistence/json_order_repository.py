"""JSON-document-backed implementation of OrderRepository.

An order is stored as one record with its detail rows nested inside, and
the stock it consumed is subtracted from the product rows in the same
document write.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from ordercore.domain.exceptions import StorageError
from ordercore.domain.model.order import Order, OrderDetail
from ordercore.domain.model.value_objects import Money, Quantity
from ordercore.domain.repository.order_repository import OrderRepository
from ordercore.infrastructure.persistence.json_store import JsonDocumentStore, next_id


class JsonOrderRepository(OrderRepository):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._store.read()["orders"]:
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._store.read()["orders"]]

    def commit(self, order: Order, stock_deltas: dict[int, int]) -> None:
        if order.id is not None:
            raise StorageError(f"Order #{order.id} is already committed")

        with self._store.transaction() as doc:
            products = {raw["id"]: raw for raw in doc["products"]}
            for product_id, delta in stock_deltas.items():
                raw = products.get(product_id)
                if raw is None:
                    raise StorageError(f"Product {product_id} does not exist")
                if raw["stock_quantity"] < delta:
                    raise StorageError(
                        f"Stock of product {product_id} cannot go below zero"
                    )
                raw["stock_quantity"] -= delta

            order_id = next_id(doc["orders"])
            first_detail_id = self._next_detail_id(doc["orders"])
            detail_ids = [first_detail_id + i for i in range(len(order.details))]
            doc["orders"].append(self._to_raw(order, order_id, detail_ids))

        # Identity is only handed out once the write has landed.
        order.id = order_id
        for detail, detail_id in zip(order.details, detail_ids):
            detail.id = detail_id
            detail.order_id = order_id

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _next_detail_id(orders: list[dict]) -> int:
        ids = [d["id"] for o in orders for d in o["details"]]
        return max(ids) + 1 if ids else 1

    @staticmethod
    def _to_raw(order: Order, order_id: int, detail_ids: list[int]) -> dict:
        return {
            "id": order_id,
            "customer_id": order.customer_id,
            "order_date": order.order_date.isoformat(),
            "total_amount": str(order.total_amount.amount),
            "details": [
                {
                    "id": detail_id,
                    "product_id": detail.product_id,
                    "quantity": detail.quantity.value,
                    "unit_price": str(detail.unit_price.amount),
                    "currency": detail.unit_price.currency,
                }
                for detail, detail_id in zip(order.details, detail_ids)
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        details = [
            OrderDetail(
                id=d["id"],
                order_id=raw["id"],
                product_id=d["product_id"],
                quantity=Quantity(d["quantity"]),
                unit_price=Money(Decimal(d["unit_price"]), d.get("currency", "USD")),
            )
            for d in raw["details"]
        ]
        return Order(
            id=raw["id"],
            customer_id=raw["customer_id"],
            details=details,
            order_date=date.fromisoformat(raw["order_date"]),
        )
