"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog entry as displayed on a product card."""

    id: str
    title: str
    description: str
    price: str  # formatted, e.g. "₹49.99"
    image_url: str
    in_cart: int  # current quantity in the cart, 0 if absent


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: str
    title: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart."""

    lines: list[CartLineDTO]
    total_items: int
    total_price: str


@dataclass(frozen=True)
class ShippingDetails:
    """Input: what the checkout form collected."""

    name: str
    phone: str
    address: str


@dataclass(frozen=True)
class OrderConfirmationDTO:
    """Output: what the customer sees once the order went through."""

    customer_name: str
    total: str
    item_count: int
