"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from minishop.application.dto import CartDTO, CartLineDTO
from minishop.domain.model.cart import CartStore


class ShowCartHandler:

    def __init__(self, cart: CartStore) -> None:
        self._cart = cart

    def handle(self) -> CartDTO:
        return CartDTO(
            lines=[
                CartLineDTO(
                    product_id=line.product.id,
                    title=line.product.title,
                    quantity=line.quantity,
                    unit_price=str(line.product.price),
                    line_total=str(line.line_total),
                )
                for line in self._cart.items
            ],
            total_items=self._cart.total_items,
            total_price=str(self._cart.total_price),
        )
