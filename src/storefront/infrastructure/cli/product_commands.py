"""CLI commands for the Product aggregate.

``add`` and ``update`` apply the same discount rules as the HTTP API.
"""

from __future__ import annotations

from datetime import date, datetime

import click

from storefront.application.create_product import CreateProductHandler
from storefront.application.dto import ProductInput
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.bootstrap import discount_policy, product_service
from storefront.infrastructure.config import Settings

on_option = click.option(
    "--on",
    "on",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Evaluate discounts as of this date (default: today).",
)


def _clock(on: datetime | None):
    return (lambda: on.date()) if on else date.today


def _product_input(name: str, price: str) -> ProductInput:
    return ProductInput(name=name, price=Money.of(price))


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@on_option
@click.pass_obj
def product_add(settings: Settings, name: str, price: str, on: datetime | None) -> None:
    """Add a new product to the catalog."""
    try:
        handler = CreateProductHandler(
            product_service(settings), discount_policy(settings), _clock(on)
        )
        dto = handler.handle(_product_input(name, price))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' added at ${dto.price:.2f}")


@click.command("list")
@click.pass_obj
def product_list(settings: Settings) -> None:
    """List all products in the catalog."""
    try:
        products = product_service(settings).list_products()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10}")
    click.echo("-" * 38)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>10}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_show(settings: Settings, product_id: int) -> None:
    """Show a single product."""
    try:
        product = product_service(settings).get_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if product is None:
        raise click.ClickException(f"Product #{product_id} not found")
    click.echo(f"Product #{product.id} '{product.name}' at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="New product name.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
@on_option
@click.pass_obj
def product_update(
    settings: Settings, product_id: int, name: str, price: str, on: datetime | None
) -> None:
    """Update a product's name and price."""
    try:
        handler = UpdateProductHandler(
            product_service(settings), discount_policy(settings), _clock(on)
        )
        dto = handler.handle(product_id, _product_input(name, price))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.name}' updated to ${dto.price:.2f}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_delete(settings: Settings, product_id: int) -> None:
    """Delete a product (no error if it does not exist)."""
    try:
        product_service(settings).delete_product(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted")
