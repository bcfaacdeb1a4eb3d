"""Concurrent order placement against the JSON document store."""

import threading

from ordercore.application.dto import OrderItemSpec
from ordercore.domain.exceptions import StockUnavailableError
from ordercore.domain.model.catalog import Category, Customer, Product
from ordercore.domain.model.value_objects import Money
from ordercore.infrastructure.bootstrap import Container, Settings


def _container(tmp_path, stock: dict[int, int]) -> Container:
    container = Container(Settings(data_dir=tmp_path, lock_timeout=5.0))
    container.category_repo.add(Category(1, "Hardware"))
    for product_id, quantity in stock.items():
        container.product_repo.add(
            Product(product_id, 1, f"Product {product_id}", "test", Money.of("15.00"), quantity)
        )
    container.customer_repo.add(Customer(1, "Ada", "Lovelace", "ada@example.com", "hash"))
    return container


def _race(container: Container, orders: list[list[OrderItemSpec]]):
    handler = container.place_order()
    barrier = threading.Barrier(len(orders))
    placed, rejected = [], []
    lock = threading.Lock()

    def worker(items):
        barrier.wait()
        try:
            dto = handler.handle(1, items)
        except StockUnavailableError as exc:
            with lock:
                rejected.append(exc)
        else:
            with lock:
                placed.append(dto)

    threads = [threading.Thread(target=worker, args=(items,)) for items in orders]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return placed, rejected


class TestConcurrentOrdersOnDisk:

    def test_two_orders_of_three_from_five(self, tmp_path):
        container = _container(tmp_path, {211: 5})
        placed, rejected = _race(container, [[OrderItemSpec(211, 3)]] * 2)

        assert len(placed) == 1
        assert len(rejected) == 1
        assert rejected[0].requested == 3
        assert rejected[0].available == 2
        assert container.product_repo.get_by_id(211).stock_quantity == 2

    def test_thirty_orders_for_twenty_units(self, tmp_path):
        container = _container(tmp_path, {211: 20})
        placed, rejected = _race(container, [[OrderItemSpec(211, 1)]] * 30)

        assert len(placed) == 20
        assert len(rejected) == 10

        # A fresh container reads everything back from disk.
        reloaded = Container(Settings(data_dir=tmp_path))
        assert reloaded.product_repo.get_by_id(211).stock_quantity == 0
        assert reloaded.ledger.available(211) == 0
        orders = reloaded.order_repo.list_all()
        assert len(orders) == 20
        assert len({o.id for o in orders}) == 20
        assert len({d.id for o in orders for d in o.details}) == 20
        assert len(reloaded.sale_history_repo.list_all()) == 20

    def test_last_unit_sold_once(self, tmp_path):
        container = _container(tmp_path, {211: 1})
        placed, rejected = _race(container, [[OrderItemSpec(211, 1)]] * 4)

        assert len(placed) == 1
        assert len(rejected) == 3
        assert container.product_repo.get_by_id(211).stock_quantity == 0
