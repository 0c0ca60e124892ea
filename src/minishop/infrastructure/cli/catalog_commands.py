"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from minishop.domain.exceptions import DomainException
from minishop.infrastructure.bootstrap import Storefront
from minishop.infrastructure.cli.views import display_product, display_products


@click.command("list")
@click.pass_obj
def catalog_list(storefront: Storefront) -> None:
    """List all products in the catalog."""
    display_products(storefront.browse.handle())


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID to display.")
@click.pass_obj
def catalog_show(storefront: Storefront, product_id: str) -> None:
    """Show details of a single product."""
    try:
        dto = storefront.browse.show(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_product(dto)
