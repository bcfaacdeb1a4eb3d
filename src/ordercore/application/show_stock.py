"""Application service: Show Stock use case (query).

Reports the ledger's live availability, which already excludes units
held by orders still in flight.
"""

from __future__ import annotations

from ordercore.application.dto import StockLineDTO
from ordercore.domain.repository.catalog_repository import ProductRepository
from ordercore.domain.service.stock_ledger import StockLedger


class ShowStockHandler:

    def __init__(self, product_repo: ProductRepository, ledger: StockLedger) -> None:
        self._product_repo = product_repo
        self._ledger = ledger

    def handle(self) -> list[StockLineDTO]:
        return [
            StockLineDTO(
                product_id=product.id,
                product_name=product.name,
                price=str(product.price),
                available=self._ledger.available(product.id),
            )
            for product in sorted(self._product_repo.list_all(), key=lambda p: p.id)
        ]
