"""Order aggregate: a header that owns its detail rows.

An Order and its OrderDetail rows are created together and never
mutated after the durable commit.  Identity is assigned by the
repository at commit time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from ordercore.domain.exceptions import EmptyOrderError, ValidationError
from ordercore.domain.model.value_objects import Money, Quantity

# NUMERIC(10,2)
MAX_ORDER_TOTAL = Money(Decimal("99999999.99"))


@dataclass
class OrderDetail:
    """One line of an order.

    ``unit_price`` is the price captured when stock was reserved; it is
    decoupled from any later change to the product's live price.
    """

    product_id: int
    quantity: Quantity
    unit_price: Money
    id: int | None = None
    order_id: int | None = None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.create()`` for new orders.  The ``__init__`` stays simple
    so the repository can reconstitute persisted orders without
    re-validating.
    """

    id: int | None
    customer_id: int
    details: list[OrderDetail]
    order_date: date = field(default_factory=date.today)

    @staticmethod
    def create(
        customer_id: int,
        details: list[OrderDetail],
        order_date: date | None = None,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not details:
            raise EmptyOrderError()

        seen: set[int] = set()
        for detail in details:
            if detail.product_id in seen:
                raise ValidationError(
                    f"Product {detail.product_id} is listed more than once"
                )
            seen.add(detail.product_id)

        order = Order(
            id=None,
            customer_id=customer_id,
            details=list(details),
            order_date=order_date or date.today(),
        )
        if order.total_amount > MAX_ORDER_TOTAL:
            raise ValidationError(
                f"Order total {order.total_amount} exceeds maximum {MAX_ORDER_TOTAL}"
            )
        return order

    # --- Computed properties --------------------------------------------------

    @property
    def total_amount(self) -> Money:
        result = Money.zero()
        for detail in self.details:
            result = result + detail.line_total
        return result

    @property
    def is_committed(self) -> bool:
        return self.id is not None
