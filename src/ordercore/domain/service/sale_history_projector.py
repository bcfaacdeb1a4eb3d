"""Domain service: Sale History projection.

Derives one SaleHistoryRecord per detail row of a committed order.  The
projection is pure; appending the records (and skipping ones already
present) is the repository's job.
"""

from __future__ import annotations

from datetime import date

from ordercore.domain.exceptions import ValidationError
from ordercore.domain.model.order import Order, OrderDetail
from ordercore.domain.model.sale_history import SaleHistoryRecord


class SaleHistoryProjector:

    def project(
        self,
        order_id: int,
        order_date: date,
        customer_id: int,
        details: list[OrderDetail],
    ) -> list[SaleHistoryRecord]:
        return [
            SaleHistoryRecord(
                order_id=order_id,
                customer_id=customer_id,
                product_id=detail.product_id,
                quantity=detail.quantity.value,
                order_date=order_date,
                total_amount=detail.line_total,
            )
            for detail in details
        ]

    def project_order(self, order: Order) -> list[SaleHistoryRecord]:
        """Project a committed order.  Uncommitted orders are refused."""
        if not order.is_committed:
            raise ValidationError("Cannot project sales for an uncommitted order")
        return self.project(order.id, order.order_date, order.customer_id, order.details)
