"""CLI commands for the sale history."""

from __future__ import annotations

import click

from ordercore.domain.exceptions import DomainException
from ordercore.infrastructure.bootstrap import Container


@click.command("list")
@click.option("--order", "order_id", type=int, default=None, help="Only this order.")
@click.pass_obj
def sales_list(container: Container, order_id: int | None) -> None:
    """List sale history records."""
    try:
        records = container.list_sales().handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not records:
        click.echo("No sales recorded.")
        return

    click.echo(
        f"  {'Sale':<6} {'Order':<6} {'Customer':<9} {'Product':<8} "
        f"{'Qty':>5} {'Date':<11} {'Total':>12}"
    )
    click.echo(f"  {'-'*63}")
    for r in records:
        click.echo(
            f"  {r.sale_id:<6} {r.order_id:<6} {r.customer_id:<9} {r.product_id:<8} "
            f"{r.quantity:>5} {r.order_date:<11} {r.total_amount:>12}"
        )


@click.command("project")
@click.option("--order", "order_id", type=int, default=None, help="Order to project.")
@click.option("--all", "all_orders", is_flag=True, help="Project every order.")
@click.pass_obj
def sales_project(container: Container, order_id: int | None, all_orders: bool) -> None:
    """Replay the sale history projection; existing records are kept."""
    if (order_id is None) == (not all_orders):
        raise click.UsageError("Give exactly one of --order or --all.")

    handler = container.project_sales()
    try:
        added = handler.handle_all() if all_orders else handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{added} sale record(s) added")
