"""Application service: Place Order use case (mock checkout).

There is no real order backend.  Placing an order validates the shipping
form, waits for a simulated processing delay, then captures the cart
total and empties the cart.

The delay is the only point where anything can interleave with the cart,
so the handler refuses a second submission while one is in flight.  The
total must be read before ``clear()`` since clearing destroys it.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

from minishop.application.dto import OrderConfirmationDTO, ShippingDetails
from minishop.domain.exceptions import CheckoutInProgressError, ValidationError
from minishop.domain.model.cart import CartStore

logger = logging.getLogger(__name__)

DEFAULT_CHECKOUT_DELAY = 2.0


class PlaceOrderHandler:

    def __init__(
        self,
        cart: CartStore,
        delay: float = DEFAULT_CHECKOUT_DELAY,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._cart = cart
        self._delay = delay
        self._sleep = sleep
        self._in_progress = False

    @property
    def in_progress(self) -> bool:
        return self._in_progress

    async def handle(self, details: ShippingDetails) -> OrderConfirmationDTO:
        """Place the order for whatever is currently in the cart.

        Steps:
        1. Reject re-entrant submissions.
        2. Validate the shipping form and that the cart is not empty.
        3. Await the simulated processing delay.
        4. Read the total, then clear the cart exactly once.
        """
        if self._in_progress:
            raise CheckoutInProgressError("An order is already being placed")

        name = self.validate(details)

        self._in_progress = True
        try:
            logger.debug("Placing order for %s", name)
            await self._sleep(self._delay)

            total = self._cart.total_price
            item_count = self._cart.total_items
            self._cart.clear()
        finally:
            self._in_progress = False

        logger.info("Order placed for %s: %d item(s), %s", name, item_count, total)
        return OrderConfirmationDTO(
            customer_name=name,
            total=str(total),
            item_count=item_count,
        )

    def validate(self, details: ShippingDetails) -> str:
        """Check the form and the cart; return the cleaned customer name."""
        name = self._require("name", details.name)
        self._require("phone", details.phone)
        self._require("address", details.address)
        if self._cart.is_empty:
            raise ValidationError("Cart is empty")
        return name

    @staticmethod
    def _require(field_name: str, value: str) -> str:
        if not value or not value.strip():
            raise ValidationError(f"Enter {field_name}")
        return value.strip()
