"""CLI commands for orders."""

from __future__ import annotations

import click

from ordercore.application.dto import OrderDTO, OrderItemSpec
from ordercore.domain.exceptions import DomainException
from ordercore.infrastructure.bootstrap import Container


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '211:3,212:1' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        pid_str, qty_str = pair.split(":", 1)
        try:
            product_id = int(pid_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid item '{pair}'; both parts must be integers.")
        specs.append(OrderItemSpec(product_id=product_id, quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (date={dto.order_date})")
    click.echo(f"Customer: {dto.customer_id}")
    click.echo()
    click.echo(f"  {'Product':<10} {'Qty':>5} {'Price':>10} {'Total':>12}")
    click.echo(f"  {'-'*40}")
    for item in dto.details:
        click.echo(
            f"  {item.product_id:<10} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>12}"
        )
    click.echo(f"  {'-'*40}")
    click.echo(f"  {'Order Total':<16} {dto.total_amount:>23}")


@click.command("place")
@click.option("--customer", "customer_id", required=True, type=int, help="Customer ID.")
@click.option("--items", default="", help="Items as 'ProductID:Qty,ProductID:Qty'.")
@click.pass_obj
def order_place(container: Container, customer_id: int, items: str) -> None:
    """Place a new order (reserves stock and commits atomically)."""
    specs = _parse_items(items)

    try:
        dto = container.place_order().handle(customer_id=customer_id, item_specs=specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} placed")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(container: Container, order_id: int) -> None:
    """Show details of an existing order."""
    try:
        dto = container.show_order().handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
