"""Cart aggregate: the single authority for what is in the shopping cart.

The CartStore owns one CartLine per product id.  Totals are never stored;
they are recomputed from the lines on every read.  Views register plain
callables with ``subscribe()`` and are called synchronously after every
mutation that actually changed something.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable

from minishop.domain.exceptions import ValidationError
from minishop.domain.model.product import Product
from minishop.domain.model.value_objects import Money

logger = logging.getLogger(__name__)

CartListener = Callable[["CartStore"], None]


@dataclass(frozen=True)
class CartLine:
    """One distinct product in the cart and how many of it.

    Immutable: the store swaps in a new line on every quantity change, so
    lines handed out by ``items`` never change underneath a view.
    """

    product: Product
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValidationError("Cart line quantity must be at least 1")

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity


class CartStore:
    """Aggregate root for the shopping cart.

    Invariants:
    - exactly one line per product id
    - every line's quantity is >= 1
    - ``total_items`` and ``total_price`` are derived from the lines on
      each read and are never cached
    """

    def __init__(self) -> None:
        self._lines: dict[str, CartLine] = {}
        self._listeners: list[CartListener] = []

    # --- Subscriptions --------------------------------------------------------

    def subscribe(self, listener: CartListener) -> CartListener:
        """Register *listener* to be called with the store after each change.

        Returns the listener so it can be used as a decorator.  Subscribing
        the same callable twice keeps a single registration.
        """
        if listener not in self._listeners:
            self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: CartListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product) -> None:
        """Add one unit of *product*, creating its line if needed."""
        line = self._lines.get(product.id)
        if line is None:
            self._lines[product.id] = CartLine(product=product)
        else:
            self._lines[product.id] = replace(line, quantity=line.quantity + 1)
        logger.debug("Added %s (qty=%d)", product.id, self._lines[product.id].quantity)
        self._notify()

    def remove_single(self, product: Product) -> None:
        """Remove one unit of *product*; drop the line when it reaches zero.

        No-op (and no notification) if the product is not in the cart.
        """
        line = self._lines.get(product.id)
        if line is None:
            return
        if line.quantity > 1:
            self._lines[product.id] = replace(line, quantity=line.quantity - 1)
        else:
            del self._lines[product.id]
        logger.debug("Removed one %s (qty=%d)", product.id, self.qty_of(product))
        self._notify()

    def remove_all(self, product: Product) -> None:
        """Drop the whole line for *product*, if there is one."""
        if product.id not in self._lines:
            return
        del self._lines[product.id]
        logger.debug("Removed line %s", product.id)
        self._notify()

    def clear(self) -> None:
        """Empty the cart.

        Always notifies, even when the cart was already empty.
        """
        self._lines.clear()
        logger.debug("Cart cleared")
        self._notify()

    # --- Queries --------------------------------------------------------------

    def qty_of(self, product: Product) -> int:
        line = self._lines.get(product.id)
        return line.quantity if line is not None else 0

    def line_for(self, product: Product) -> CartLine | None:
        return self._lines.get(product.id)

    @property
    def items(self) -> list[CartLine]:
        """Snapshot of the current lines, in the mapping's iteration order."""
        return list(self._lines.values())

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def total_items(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    @property
    def total_price(self) -> Money:
        result = Money.zero()
        for line in self._lines.values():
            result = result + line.line_total
        return result

    # --- Internal helpers -----------------------------------------------------

    def _notify(self) -> None:
        # Copy so listeners may unsubscribe while being notified.
        for listener in tuple(self._listeners):
            listener(self)
