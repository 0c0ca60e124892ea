"""Read-only, JSON-file-backed implementation of CatalogSource.

The file is read once, on first access, and the resulting Product
instances are reused for the lifetime of the source so that cart lines
and catalog views share the same objects.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from minishop.domain.exceptions import CatalogUnavailableError, ValidationError
from minishop.domain.model.product import Product
from minishop.domain.model.value_objects import Money
from minishop.domain.repository.catalog_source import CatalogSource

logger = logging.getLogger(__name__)


class JsonCatalogSource(CatalogSource):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._products: list[Product] | None = None

    # --- CatalogSource interface ----------------------------------------------

    def list_all(self) -> list[Product]:
        if self._products is None:
            self._products = self._load()
            logger.info(
                "Loaded %d products from %s", len(self._products), self._file_path
            )
        return list(self._products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> list[Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise CatalogUnavailableError(
                f"Catalog file not found: {self._file_path}"
            ) from exc
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogUnavailableError(
                f"Cannot read catalog {self._file_path}: {exc}"
            ) from exc

        if not isinstance(raw, list):
            raise CatalogUnavailableError(
                f"Catalog {self._file_path} must contain a JSON array"
            )

        products: list[Product] = []
        seen: set[str] = set()
        for index, item in enumerate(raw):
            product = self._to_domain(item, index)
            if product.id in seen:
                raise CatalogUnavailableError(
                    f"Duplicate product id '{product.id}' in {self._file_path}"
                )
            seen.add(product.id)
            products.append(product)
        return products

    def _to_domain(self, item: dict, index: int) -> Product:
        try:
            return Product(
                id=str(item["id"]),
                title=item["title"],
                description=item.get("description", ""),
                price=Money.of(item["price"]),
                image_url=item.get("image_url", ""),
            )
        except (KeyError, TypeError, AttributeError) as exc:
            raise CatalogUnavailableError(
                f"Malformed product record #{index} in {self._file_path}"
            ) from exc
        except ValidationError as exc:
            raise CatalogUnavailableError(
                f"Invalid product record #{index} in {self._file_path}: {exc}"
            ) from exc
