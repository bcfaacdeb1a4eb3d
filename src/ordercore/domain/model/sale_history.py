"""Append-only sale history records derived from committed order details."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ordercore.domain.model.value_objects import Money


@dataclass(frozen=True)
class SaleHistoryRecord:
    """One sale, i.e. one OrderDetail row of a committed order.

    ``sale_id`` is None until the record has been appended to the
    history; ``key`` identifies the originating detail row.
    """

    order_id: int
    customer_id: int
    product_id: int
    quantity: int
    order_date: date
    total_amount: Money
    sale_id: int | None = None

    @property
    def key(self) -> tuple[int, int]:
        return (self.order_id, self.product_id)
