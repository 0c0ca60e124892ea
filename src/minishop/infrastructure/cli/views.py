"""Terminal rendering of catalog and cart, plus the cart badge."""

from __future__ import annotations

import click

from minishop.application.dto import CartDTO, OrderConfirmationDTO, ProductDTO
from minishop.domain.model.cart import CartStore


def display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products available.")
        return

    click.echo(f"{'ID':<6} {'Title':<20} {'Price':>10} {'In cart':>8}")
    click.echo("-" * 47)
    for p in products:
        click.echo(f"{p.id:<6} {p.title:<20} {p.price:>10} {p.in_cart:>8}")


def display_product(product: ProductDTO) -> None:
    click.echo(f"{product.title}  ({product.id})")
    click.echo(f"Price:   {product.price}")
    click.echo(f"In cart: {product.in_cart}")
    click.echo(f"Image:   {product.image_url}")
    click.echo()
    click.echo(product.description)


def display_cart(cart: CartDTO) -> None:
    if not cart.lines:
        click.echo("Your cart is empty")
        return

    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for line in cart.lines:
        click.echo(
            f"  {line.title:<20} {line.quantity:>5} {line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Total':<27} {cart.total_price:>20}")


def display_confirmation(confirmation: OrderConfirmationDTO) -> None:
    click.echo("Order Confirmed!")
    click.echo(
        f"Thanks, {confirmation.customer_name}! "
        f"Your order of {confirmation.total} has been placed."
    )


class CartBadge:
    """Item counter shown next to the cart, refreshed on every change."""

    def __init__(self) -> None:
        self.count = 0

    def __call__(self, cart: CartStore) -> None:
        self.count = cart.total_items
        if self.count == 0:
            click.echo("Cart is empty")
        else:
            click.echo(f"Cart: {self.count} item(s)")
