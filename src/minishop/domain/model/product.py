"""Product entity.

Products are loaded once by a catalog source and never change afterwards.
Cart lines hold references to the very same instances, so the product's
``id`` is the only thing used to match a product to a cart line.
"""

from __future__ import annotations

from dataclasses import dataclass

from minishop.domain.exceptions import ValidationError
from minishop.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """An entry in the catalog.

    Frozen: nothing may mutate a product after the catalog is loaded.
    ``image_url`` is an opaque reference for the presentation layer and
    is never validated or fetched here.
    """

    id: str
    title: str
    description: str
    price: Money
    image_url: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValidationError("Product id is required")
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValidationError(f"Product '{self.id}' must have a title")
        if not isinstance(self.price, Money):
            raise ValidationError(
                f"Product price must be Money, got {type(self.price).__name__}"
            )
