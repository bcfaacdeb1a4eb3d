"""CLI commands for the catalog: categories, products and customers."""

from __future__ import annotations

import click

from ordercore.domain.exceptions import DomainException
from ordercore.infrastructure.bootstrap import Container


@click.command("add")
@click.option("--name", required=True, help="Category name.")
@click.pass_obj
def category_add(container: Container, name: str) -> None:
    """Add a category."""
    try:
        created = container.add_category().handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category {created.id} added: {created.name}")


@click.command("list")
@click.pass_obj
def category_list(container: Container) -> None:
    """List categories."""
    try:
        categories = container.list_categories().handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not categories:
        click.echo("No categories.")
        return

    for item in categories:
        click.echo(f"  {item.id:<6} {item.name}")

@click.command("add")
@click.option("--category", "category_id", required=True, type=int, help="Category ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Short description.")
@click.option("--price", required=True, help="Unit price, e.g. 19.99.")
@click.option("--stock", "stock_quantity", default=0, show_default=True, type=int,
              help="Opening stock.")
@click.pass_obj
def product_add(
    container: Container,
    category_id: int,
    name: str,
    description: str,
    price: str,
    stock_quantity: int,
) -> None:
    """Add a product to the catalog."""
    try:
        created = container.add_product().handle(
            category_id, name, description, price, stock_quantity
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product {created.id} added: {created.name} at {created.price} "
        f"({created.stock_quantity} in stock)"
    )


@click.command("price")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", required=True, help="New unit price.")
@click.pass_obj
def product_price(container: Container, product_id: int, price: str) -> None:
    """Change a product's price (existing orders keep theirs)."""
    try:
        new_price = container.update_price().handle(product_id, price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {product_id} now costs {new_price}")


@click.command("add")
@click.option("--first-name", required=True)
@click.option("--last-name", required=True)
@click.option("--email", required=True)
@click.password_option()
@click.pass_obj
def customer_add(
    container: Container,
    first_name: str,
    last_name: str,
    email: str,
    password: str,
) -> None:
    """Register a customer."""
    try:
        created = container.register_customer().handle(
            first_name, last_name, email, password
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer {created.id} registered: {created.full_name} <{created.email}>")
