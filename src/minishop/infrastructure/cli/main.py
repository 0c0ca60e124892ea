import logging
from pathlib import Path

import click

from minishop.application.place_order import DEFAULT_CHECKOUT_DELAY
from minishop.infrastructure.bootstrap import build_storefront
from minishop.infrastructure.cli.catalog_commands import catalog_list, catalog_show
from minishop.infrastructure.cli.shop_commands import shop


@click.group()
@click.option(
    "--catalog",
    "catalog_path",
    envvar="MINISHOP_CATALOG",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON catalog file (defaults to the built-in demo catalog).",
)
@click.option(
    "--checkout-delay",
    envvar="MINISHOP_CHECKOUT_DELAY",
    type=click.FloatRange(min=0),
    default=DEFAULT_CHECKOUT_DELAY,
    show_default=True,
    help="Simulated order processing time in seconds.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, catalog_path: Path | None, checkout_delay: float, verbose: bool) -> None:
    """Mini Shop: browse products, fill a cart, check out."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = build_storefront(catalog_path=catalog_path, checkout_delay=checkout_delay)


@cli.group()
def catalog() -> None:
    """Browse the product catalog."""


# Register subcommands
catalog.add_command(catalog_list)
catalog.add_command(catalog_show)
cli.add_command(shop)
