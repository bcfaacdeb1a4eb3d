"""Domain -> DTO mapping shared by the application handlers."""

from __future__ import annotations

from ordercore.application.dto import OrderDetailDTO, OrderDTO, SaleRecordDTO
from ordercore.domain.model.order import Order
from ordercore.domain.model.sale_history import SaleHistoryRecord


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_id=order.customer_id,
        order_date=order.order_date.isoformat(),
        details=[
            OrderDetailDTO(
                product_id=detail.product_id,
                quantity=detail.quantity.value,
                unit_price=str(detail.unit_price),
                line_total=str(detail.line_total),
            )
            for detail in order.details
        ],
        total_amount=str(order.total_amount),
    )


def sale_to_dto(record: SaleHistoryRecord) -> SaleRecordDTO:
    return SaleRecordDTO(
        sale_id=record.sale_id,  # type: ignore[arg-type]
        order_id=record.order_id,
        customer_id=record.customer_id,
        product_id=record.product_id,
        quantity=record.quantity,
        order_date=record.order_date.isoformat(),
        total_amount=str(record.total_amount),
    )
