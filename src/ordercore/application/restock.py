"""Application service: Restock use case.

Stock is only ever written through the StockLedger, so restocking goes
through it as well.
"""

from __future__ import annotations

from ordercore.domain.service.stock_ledger import StockLedger


class RestockHandler:

    def __init__(self, ledger: StockLedger) -> None:
        self._ledger = ledger

    def handle(self, product_id: int, quantity: int) -> int:
        """Add *quantity* units; return the new available level."""
        return self._ledger.restock(product_id, quantity)
