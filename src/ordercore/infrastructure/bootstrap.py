"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ordercore.application.add_category import AddCategoryHandler
from ordercore.application.add_product import AddProductHandler
from ordercore.application.list_categories import ListCategoriesHandler
from ordercore.application.list_sales import ListSalesHandler
from ordercore.application.place_order import PlaceOrderHandler
from ordercore.application.project_sales import ProjectSalesHandler
from ordercore.application.register_customer import RegisterCustomerHandler
from ordercore.application.restock import RestockHandler
from ordercore.application.show_order import ShowOrderHandler
from ordercore.application.show_stock import ShowStockHandler
from ordercore.application.update_price import UpdatePriceHandler
from ordercore.domain.exceptions import ValidationError
from ordercore.domain.service.sale_history_projector import SaleHistoryProjector
from ordercore.domain.service.stock_ledger import DEFAULT_LOCK_TIMEOUT, StockLedger
from ordercore.infrastructure.persistence.json_catalog_repository import (
    JsonCategoryRepository,
    JsonCustomerRepository,
    JsonProductRepository,
)
from ordercore.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from ordercore.infrastructure.persistence.json_sale_history_repository import (
    JsonSaleHistoryRepository,
)
from ordercore.infrastructure.persistence.json_store import JsonDocumentStore

STORE_FILE_NAME = "store.json"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = field(default_factory=lambda: Path.cwd() / "data")
    lock_timeout: float = DEFAULT_LOCK_TIMEOUT

    def __post_init__(self) -> None:
        if self.lock_timeout <= 0:
            raise ValidationError("Lock timeout must be positive")

    @property
    def store_path(self) -> Path:
        return self.data_dir / STORE_FILE_NAME


class Container:
    """Holds one process-wide set of wired components.

    The StockLedger must be shared by every handler that touches stock,
    so handlers are built from the single instance kept here.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.store = JsonDocumentStore(settings.store_path)
        self.category_repo = JsonCategoryRepository(self.store)
        self.product_repo = JsonProductRepository(self.store)
        self.customer_repo = JsonCustomerRepository(self.store)
        self.order_repo = JsonOrderRepository(self.store)
        self.sale_history_repo = JsonSaleHistoryRepository(self.store)
        self.ledger = StockLedger(self.product_repo, lock_timeout=settings.lock_timeout)
        self.projector = SaleHistoryProjector()

    # --- Handlers -------------------------------------------------------------

    def place_order(self) -> PlaceOrderHandler:
        return PlaceOrderHandler(
            order_repo=self.order_repo,
            customer_repo=self.customer_repo,
            sale_history_repo=self.sale_history_repo,
            ledger=self.ledger,
            projector=self.projector,
        )

    def show_order(self) -> ShowOrderHandler:
        return ShowOrderHandler(self.order_repo)

    def project_sales(self) -> ProjectSalesHandler:
        return ProjectSalesHandler(self.order_repo, self.sale_history_repo, self.projector)

    def list_sales(self) -> ListSalesHandler:
        return ListSalesHandler(self.sale_history_repo)

    def show_stock(self) -> ShowStockHandler:
        return ShowStockHandler(self.product_repo, self.ledger)

    def restock(self) -> RestockHandler:
        return RestockHandler(self.ledger)

    def update_price(self) -> UpdatePriceHandler:
        return UpdatePriceHandler(self.ledger)

    def add_category(self) -> AddCategoryHandler:
        return AddCategoryHandler(self.category_repo)

    def list_categories(self) -> ListCategoriesHandler:
        return ListCategoriesHandler(self.category_repo)

    def add_product(self) -> AddProductHandler:
        return AddProductHandler(self.product_repo, self.category_repo)

    def register_customer(self) -> RegisterCustomerHandler:
        return RegisterCustomerHandler(self.customer_repo)
