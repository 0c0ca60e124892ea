"""Abstract source of catalog products.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (built-in demo list, JSON file)
live in the infrastructure layer.

Implementations that can fail (a file, later a network service) raise
CatalogUnavailableError; callers are expected to treat that as an empty
catalog rather than a fatal error.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from minishop.domain.model.product import Product


class CatalogSource(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product, always in the same order."""

    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""
        for product in self.list_all():
            if product.id == product_id:
                return product
        return None
