"""Application service: cart mutation use cases.

Views identify products by id; these handlers resolve the id against
the catalog and forward to the CartStore.  The store itself never fails,
so the only error here is an id the catalog does not know.
"""

from __future__ import annotations

from minishop.domain.exceptions import EntityNotFoundError
from minishop.domain.model.cart import CartStore
from minishop.domain.model.product import Product
from minishop.domain.repository.catalog_source import CatalogSource


class _CartCommandHandler:

    def __init__(self, catalog: CatalogSource, cart: CartStore) -> None:
        self._catalog = catalog
        self._cart = cart

    def _resolve(self, product_id: str) -> Product:
        product = self._catalog.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")
        return product


class AddToCartHandler(_CartCommandHandler):

    def handle(self, product_id: str) -> int:
        """Add one unit and return the product's new quantity."""
        product = self._resolve(product_id)
        self._cart.add(product)
        return self._cart.qty_of(product)


class RemoveFromCartHandler(_CartCommandHandler):

    def handle(self, product_id: str, remove_all: bool = False) -> int:
        """Remove one unit (or the whole line) and return what is left."""
        product = self._resolve(product_id)
        if remove_all:
            self._cart.remove_all(product)
        else:
            self._cart.remove_single(product)
        return self._cart.qty_of(product)


class ClearCartHandler:

    def __init__(self, cart: CartStore) -> None:
        self._cart = cart

    def handle(self) -> None:
        self._cart.clear()
