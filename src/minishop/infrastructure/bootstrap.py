"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
It creates the one CartStore of the process and hands the same instance
to every handler that needs it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from minishop.application.browse_catalog import BrowseCatalogHandler
from minishop.application.place_order import DEFAULT_CHECKOUT_DELAY, PlaceOrderHandler
from minishop.application.show_cart import ShowCartHandler
from minishop.application.update_cart import (
    AddToCartHandler,
    ClearCartHandler,
    RemoveFromCartHandler,
)
from minishop.domain.model.cart import CartStore
from minishop.domain.repository.catalog_source import CatalogSource
from minishop.infrastructure.catalog.json_catalog import JsonCatalogSource
from minishop.infrastructure.catalog.static_catalog import StaticCatalogSource


def catalog_source(path: Path | None = None) -> CatalogSource:
    if path is None:
        return StaticCatalogSource()
    return JsonCatalogSource(path)


@dataclass
class Storefront:
    """Everything a view needs, built once at startup."""

    catalog: CatalogSource
    cart: CartStore
    checkout_delay: float = DEFAULT_CHECKOUT_DELAY
    browse: BrowseCatalogHandler = field(init=False)
    add_to_cart: AddToCartHandler = field(init=False)
    remove_from_cart: RemoveFromCartHandler = field(init=False)
    clear_cart: ClearCartHandler = field(init=False)
    show_cart: ShowCartHandler = field(init=False)
    place_order: PlaceOrderHandler = field(init=False)

    def __post_init__(self) -> None:
        self.browse = BrowseCatalogHandler(self.catalog, self.cart)
        self.add_to_cart = AddToCartHandler(self.catalog, self.cart)
        self.remove_from_cart = RemoveFromCartHandler(self.catalog, self.cart)
        self.clear_cart = ClearCartHandler(self.cart)
        self.show_cart = ShowCartHandler(self.cart)
        self.place_order = PlaceOrderHandler(self.cart, delay=self.checkout_delay)


def build_storefront(
    catalog_path: Path | None = None,
    checkout_delay: float = DEFAULT_CHECKOUT_DELAY,
) -> Storefront:
    return Storefront(
        catalog=catalog_source(catalog_path),
        cart=CartStore(),
        checkout_delay=checkout_delay,
    )
