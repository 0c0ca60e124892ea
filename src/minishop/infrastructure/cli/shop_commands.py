"""Interactive shopping session.

Reads one command per line from stdin so a whole session (browse, fill
the cart, check out) runs against the single in-memory CartStore.
"""

from __future__ import annotations

import asyncio
import sys

import click

from minishop.application.dto import ShippingDetails
from minishop.domain.exceptions import DomainException
from minishop.infrastructure.bootstrap import Storefront
from minishop.infrastructure.cli.views import (
    CartBadge,
    display_cart,
    display_confirmation,
    display_products,
)

HELP_TEXT = """\
Commands:
  list              show the catalog
  add <id>          add one unit of a product
  remove <id>       remove one unit of a product
  remove-all <id>   remove a product from the cart
  clear             empty the cart
  cart              show the cart
  checkout          place the order
  help              show this help
  quit              leave the shop"""


def _read_line(prompt: str) -> str | None:
    """Echo *prompt* and read one line; None at end of input."""
    click.echo(prompt, nl=False)
    line = sys.stdin.readline()
    if not line:
        click.echo()
        return None
    return line.strip()


def _require_id(args: list[str]) -> str:
    if len(args) != 1:
        raise click.UsageError("Expected exactly one product id")
    return args[0]


def _checkout(storefront: Storefront) -> None:
    cart = storefront.show_cart.handle()
    if not cart.lines:
        click.echo("Your cart is empty.")
        return

    display_cart(cart)
    name = _read_line("Full name: ")
    phone = _read_line("Phone: ")
    address = _read_line("Address: ")
    details = ShippingDetails(name=name or "", phone=phone or "", address=address or "")

    storefront.place_order.validate(details)
    click.echo("Placing order...")
    confirmation = asyncio.run(storefront.place_order.handle(details))
    display_confirmation(confirmation)


def _dispatch(storefront: Storefront, command: str, args: list[str]) -> None:
    if command == "list":
        display_products(storefront.browse.handle())
    elif command == "add":
        storefront.add_to_cart.handle(_require_id(args))
    elif command == "remove":
        storefront.remove_from_cart.handle(_require_id(args))
    elif command == "remove-all":
        storefront.remove_from_cart.handle(_require_id(args), remove_all=True)
    elif command == "clear":
        storefront.clear_cart.handle()
    elif command == "cart":
        display_cart(storefront.show_cart.handle())
    elif command == "checkout":
        _checkout(storefront)
    elif command == "help":
        click.echo(HELP_TEXT)
    else:
        raise click.UsageError(f"Unknown command '{command}'. Type 'help'.")


@click.command("shop")
@click.pass_obj
def shop(storefront: Storefront) -> None:
    """Start an interactive shopping session."""
    badge = storefront.cart.subscribe(CartBadge())
    click.echo("Mini Shop. Type 'help' for commands.")
    try:
        while True:
            line = _read_line("> ")
            if line is None:
                break
            if not line:
                continue
            command, *args = line.split()
            if command in ("quit", "exit"):
                break
            try:
                _dispatch(storefront, command, args)
            except (DomainException, click.UsageError) as exc:
                click.echo(f"Error: {exc}")
    finally:
        storefront.cart.unsubscribe(badge)
