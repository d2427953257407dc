from __future__ import annotations

import click

from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import configure_logging
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from storefront.infrastructure.config import Settings
from storefront.infrastructure.http.app import create_app


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Storefront — product catalog API"""
    try:
        settings = Settings.from_env()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    configure_logging(settings)
    ctx.obj = settings


@cli.command()
@click.option("--host", default=None, help="Bind address (default: STOREFRONT_HOST).")
@click.option("--port", type=int, default=None, help="Bind port (default: STOREFRONT_PORT).")
@click.pass_obj
def serve(settings: Settings, host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    create_app(settings).run(host=host or settings.host, port=port or settings.port)


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
