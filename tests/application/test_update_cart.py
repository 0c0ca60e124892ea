"""Integration tests for the cart mutation and Show Cart use cases."""

import pytest

from minishop.application.show_cart import ShowCartHandler
from minishop.application.update_cart import (
    AddToCartHandler,
    ClearCartHandler,
    RemoveFromCartHandler,
)
from minishop.domain.exceptions import EntityNotFoundError
from minishop.domain.model.cart import CartStore
from tests.fakes import FakeCatalogSource, RecordingListener, make_product


def _setup():
    catalog = FakeCatalogSource([make_product("a", "10.00"), make_product("b", "25.50")])
    cart = CartStore()
    return (
        AddToCartHandler(catalog, cart),
        RemoveFromCartHandler(catalog, cart),
        cart,
    )


class TestAddToCart:

    def test_returns_new_quantity(self):
        add, _, _ = _setup()
        assert add.handle("a") == 1
        assert add.handle("a") == 2

    def test_shares_catalog_instance(self):
        catalog = FakeCatalogSource([make_product("a")])
        cart = CartStore()
        AddToCartHandler(catalog, cart).handle("a")
        assert cart.items[0].product is catalog.get_by_id("a")

    def test_unknown_product_rejected_without_touching_cart(self):
        add, _, cart = _setup()
        listener = cart.subscribe(RecordingListener())
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            add.handle("zzz")
        assert cart.is_empty
        assert listener.calls == 0


class TestRemoveFromCart:

    def test_remove_single(self):
        add, remove, _ = _setup()
        add.handle("a")
        add.handle("a")
        assert remove.handle("a") == 1

    def test_remove_all(self):
        add, remove, cart = _setup()
        add.handle("a")
        add.handle("a")
        add.handle("b")
        assert remove.handle("a", remove_all=True) == 0
        assert cart.total_items == 1

    def test_remove_product_not_in_cart_is_noop(self):
        _, remove, cart = _setup()
        assert remove.handle("b") == 0
        assert cart.is_empty


class TestClearAndShowCart:

    def test_show_cart(self):
        add, _, cart = _setup()
        add.handle("a")
        add.handle("a")
        add.handle("b")
        dto = ShowCartHandler(cart).handle()
        assert dto.total_items == 3
        assert dto.total_price == "₹45.50"
        assert [(line.product_id, line.quantity) for line in dto.lines] == [("a", 2), ("b", 1)]
        assert dto.lines[0].line_total == "₹20.00"

    def test_clear(self):
        add, _, cart = _setup()
        add.handle("a")
        ClearCartHandler(cart).handle()
        dto = ShowCartHandler(cart).handle()
        assert dto.lines == []
        assert dto.total_price == "₹0.00"
