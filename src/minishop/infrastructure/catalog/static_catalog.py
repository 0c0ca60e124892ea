"""Built-in, in-memory catalog."""

from __future__ import annotations

from decimal import Decimal

from minishop.domain.model.product import Product
from minishop.domain.model.value_objects import Money
from minishop.domain.repository.catalog_source import CatalogSource

DEMO_PRODUCT_COUNT = 8


def demo_products(count: int = DEMO_PRODUCT_COUNT) -> list[Product]:
    """Build the demo catalog: p0..p7, starting at 49.99 in steps of 10."""
    return [
        Product(
            id=f"p{i}",
            title=f"Product {i}",
            description=(
                f"This is a nice product number {i}. "
                "Great quality, compact, and value for money."
            ),
            price=Money(Decimal("49.99") + i * 10),
            image_url=f"https://picsum.photos/seed/p{i}/400/300",
        )
        for i in range(count)
    ]


class StaticCatalogSource(CatalogSource):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products = list(products) if products is not None else demo_products()

    def list_all(self) -> list[Product]:
        return list(self._products)
