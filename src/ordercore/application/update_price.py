"""Application service: Update Product Price use case."""

from __future__ import annotations

from ordercore.domain.model.value_objects import Money
from ordercore.domain.service.stock_ledger import StockLedger


class UpdatePriceHandler:

    def __init__(self, ledger: StockLedger) -> None:
        self._ledger = ledger

    def handle(self, product_id: int, new_price: str) -> Money:
        """Change the live price.

        This does NOT affect any existing orders because each order
        detail keeps the price captured when its stock was reserved.
        """
        price = Money.of(new_price)
        self._ledger.update_price(product_id, price)
        return price
