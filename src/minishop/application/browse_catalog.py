"""Application service: Browse Catalog use case (query)."""

from __future__ import annotations

import logging

from minishop.application.dto import ProductDTO
from minishop.domain.exceptions import CatalogUnavailableError, EntityNotFoundError
from minishop.domain.model.cart import CartStore
from minishop.domain.model.product import Product
from minishop.domain.repository.catalog_source import CatalogSource

logger = logging.getLogger(__name__)


class BrowseCatalogHandler:

    def __init__(self, catalog: CatalogSource, cart: CartStore) -> None:
        self._catalog = catalog
        self._cart = cart

    def handle(self) -> list[ProductDTO]:
        """List every product along with how many of it are in the cart.

        A catalog that cannot be loaded is shown as an empty one.
        """
        try:
            products = self._catalog.list_all()
        except CatalogUnavailableError as exc:
            logger.warning("Catalog unavailable, showing no products: %s", exc)
            return []
        return [self._to_dto(p) for p in products]

    def show(self, product_id: str) -> ProductDTO:
        product = self._catalog.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_id}'")
        return self._to_dto(product)

    def _to_dto(self, product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            title=product.title,
            description=product.description,
            price=str(product.price),
            image_url=product.image_url,
            in_cart=self._cart.qty_of(product),
        )
