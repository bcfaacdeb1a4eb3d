"""CLI commands for stock."""

from __future__ import annotations

import click

from ordercore.domain.exceptions import DomainException
from ordercore.infrastructure.bootstrap import Container


@click.command("show")
@click.pass_obj
def stock_show(container: Container) -> None:
    """Show price and available stock for every product."""
    try:
        lines = container.show_stock().handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lines:
        click.echo("No products in the catalog.")
        return

    click.echo(f"  {'ID':<6} {'Product':<30} {'Price':>10} {'Available':>10}")
    click.echo(f"  {'-'*59}")
    for line in lines:
        click.echo(
            f"  {line.product_id:<6} {line.product_name:<30} {line.price:>10} {line.available:>10}"
        )


@click.command("restock")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--qty", required=True, type=int, help="Units to add.")
@click.pass_obj
def stock_restock(container: Container, product_id: int, qty: int) -> None:
    """Add units to a product's stock."""
    try:
        level = container.restock().handle(product_id, qty)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} restocked: {level} available")
