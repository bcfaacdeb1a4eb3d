import logging
from pathlib import Path

import click

from ordercore.domain.exceptions import DomainException
from ordercore.domain.service.stock_ledger import DEFAULT_LOCK_TIMEOUT
from ordercore.infrastructure.bootstrap import Container, Settings
from ordercore.infrastructure.cli.catalog_commands import (
    category_add,
    category_list,
    customer_add,
    product_add,
    product_price,
)
from ordercore.infrastructure.cli.order_commands import order_place, order_show
from ordercore.infrastructure.cli.sales_commands import sales_list, sales_project
from ordercore.infrastructure.cli.stock_commands import stock_restock, stock_show

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("data"),
    show_default=True,
    envvar="ORDERCORE_DATA_DIR",
    help="Directory holding store.json.",
)
@click.option(
    "--lock-timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_LOCK_TIMEOUT,
    show_default=True,
    envvar="ORDERCORE_LOCK_TIMEOUT",
    help="Seconds to wait for a product's stock lock.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, lock_timeout: float, verbose: bool) -> None:
    """ordercore: transactional order ingestion"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    try:
        ctx.obj = Container(Settings(data_dir=data_dir, lock_timeout=lock_timeout))
    except DomainException as exc:
        raise click.ClickException(str(exc))


@cli.group()
def order() -> None:
    """Place and inspect orders."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def stock() -> None:
    """Inspect and replenish stock."""


@cli.group()
def sales() -> None:
    """Inspect and replay the sale history."""


# Register subcommands
order.add_command(order_place)
order.add_command(order_show)
product.add_command(product_add)
product.add_command(product_price)
category.add_command(category_add)
category.add_command(category_list)
customer.add_command(customer_add)
stock.add_command(stock_show)
stock.add_command(stock_restock)
sales.add_command(sales_list)
sales.add_command(sales_project)
