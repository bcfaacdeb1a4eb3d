"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product ID + quantity)."""

    product_id: int
    quantity: int


@dataclass(frozen=True)
class OrderDetailDTO:
    """Output: a single order detail row as displayed to the user."""

    product_id: int
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_id: int
    order_date: str
    details: list[OrderDetailDTO]
    total_amount: str


@dataclass(frozen=True)
class SaleRecordDTO:
    sale_id: int
    order_id: int
    customer_id: int
    product_id: int
    quantity: int
    order_date: str
    total_amount: str


@dataclass(frozen=True)
class StockLineDTO:
    product_id: int
    product_name: str
    price: str
    available: int
