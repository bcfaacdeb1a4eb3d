"""Application service: Place Order use case.

The only entry point for creating orders.  Stock is reserved line by
line through the StockLedger; if any line cannot be reserved, or the
durable commit fails, every reservation already taken for the order is
released so the ledger looks as if the order never happened.

Sale history is projected only after the commit.  A projection failure
does not undo the order; it is logged and can be replayed with
``ProjectSalesHandler``.
"""

from __future__ import annotations

import logging
from datetime import date

from ordercore.application.dto import OrderDTO, OrderItemSpec
from ordercore.application.mapping import order_to_dto
from ordercore.domain.exceptions import (
    DomainException,
    EmptyOrderError,
    EntityNotFoundError,
    InsufficientStockError,
    PersistenceFailedError,
    StockUnavailableError,
    StorageError,
    ValidationError,
)
from ordercore.domain.model.order import Order, OrderDetail
from ordercore.domain.model.value_objects import Quantity
from ordercore.domain.repository.catalog_repository import CustomerRepository
from ordercore.domain.repository.order_repository import OrderRepository
from ordercore.domain.repository.sale_history_repository import (
    SaleHistoryRepository,
)
from ordercore.domain.service.sale_history_projector import SaleHistoryProjector
from ordercore.domain.service.stock_ledger import Reservation, StockLedger

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        customer_repo: CustomerRepository,
        sale_history_repo: SaleHistoryRepository,
        ledger: StockLedger,
        projector: SaleHistoryProjector | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._customer_repo = customer_repo
        self._sale_history_repo = sale_history_repo
        self._ledger = ledger
        self._projector = projector or SaleHistoryProjector()

    def handle(
        self,
        customer_id: int,
        item_specs: list[OrderItemSpec],
        order_date: date | None = None,
    ) -> OrderDTO:
        """Place a new order.

        Steps:
        1. Validate the request (items present, customer known, no
           product listed twice, quantities positive).
        2. Reserve stock for each line; the reservation carries the
           unit price.
        3. Build the Order and commit it with its stock deltas.
        4. Commit the reservations and project sale history.
        """
        self._validate(customer_id, item_specs)

        reservations: list[Reservation] = []
        try:
            for spec in item_specs:
                try:
                    reservations.append(
                        self._ledger.reserve(spec.product_id, spec.quantity)
                    )
                except InsufficientStockError as exc:
                    raise StockUnavailableError(
                        exc.product_id, exc.requested, exc.available
                    ) from exc

            order = Order.create(
                customer_id=customer_id,
                details=[
                    OrderDetail(
                        product_id=r.product_id,
                        quantity=Quantity(r.quantity),
                        unit_price=r.unit_price,  # <-- price snapshot
                    )
                    for r in reservations
                ],
                order_date=order_date,
            )

            try:
                self._order_repo.commit(
                    order, {r.product_id: r.quantity for r in reservations}
                )
            except StorageError as exc:
                logger.error("Commit of order for customer %d failed: %s", customer_id, exc)
                raise PersistenceFailedError(
                    f"Order for customer {customer_id} was not saved: {exc}"
                ) from exc
        except Exception:
            self._release_all(reservations)
            raise

        for reservation in reservations:
            self._ledger.commit(reservation)

        logger.info(
            "Placed order #%d for customer %d (%d lines, total %s)",
            order.id, customer_id, len(order.details), order.total_amount,
        )
        self._project(order)
        return order_to_dto(order)

    # --- Internal helpers -----------------------------------------------------

    def _validate(self, customer_id: int, item_specs: list[OrderItemSpec]) -> None:
        if not item_specs:
            raise EmptyOrderError()

        if self._customer_repo.get_by_id(customer_id) is None:
            raise EntityNotFoundError(f"Customer {customer_id} not found")

        seen: set[int] = set()
        for spec in item_specs:
            Quantity(spec.quantity)
            if spec.product_id in seen:
                raise ValidationError(
                    f"Product {spec.product_id} is listed more than once"
                )
            seen.add(spec.product_id)

    def _release_all(self, reservations: list[Reservation]) -> None:
        for reservation in reversed(reservations):
            self._ledger.release(reservation)
        if reservations:
            logger.info("Released %d reservation(s) of a failed order", len(reservations))

    def _project(self, order: Order) -> None:
        try:
            records = self._projector.project_order(order)
            self._sale_history_repo.append(records)
        except DomainException:
            logger.exception(
                "Sale history projection failed for order #%d; "
                "replay it with 'ordercore sales project --order %d'",
                order.id, order.id,
            )
