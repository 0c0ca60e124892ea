"""Tests for the built-in and JSON catalog sources."""

import json
from decimal import Decimal

import pytest

from minishop.domain.exceptions import CatalogUnavailableError
from minishop.domain.model.value_objects import Money
from minishop.infrastructure.catalog.json_catalog import JsonCatalogSource
from minishop.infrastructure.catalog.static_catalog import StaticCatalogSource, demo_products


class TestStaticCatalog:

    def test_demo_catalog(self):
        products = StaticCatalogSource().list_all()
        assert [p.id for p in products] == [f"p{i}" for i in range(8)]
        assert products[0].price == Money(Decimal("49.99"))
        assert products[7].price == Money(Decimal("119.99"))
        assert products[3].image_url == "https://picsum.photos/seed/p3/400/300"
        assert products[2].description.startswith("This is a nice product number 2.")

    def test_same_instances_every_call(self):
        catalog = StaticCatalogSource()
        assert catalog.list_all()[0] is catalog.list_all()[0]

    def test_list_is_a_copy(self):
        catalog = StaticCatalogSource()
        catalog.list_all().clear()
        assert len(catalog.list_all()) == 8

    def test_get_by_id(self):
        catalog = StaticCatalogSource(demo_products(2))
        assert catalog.get_by_id("p1").title == "Product 1"
        assert catalog.get_by_id("p5") is None


def _write(tmp_path, payload) -> JsonCatalogSource:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return JsonCatalogSource(path)


class TestJsonCatalog:

    def test_loads_products_in_file_order(self, tmp_path):
        catalog = _write(tmp_path, [
            {"id": "mug", "title": "Mug", "description": "A mug", "price": "249.00", "image_url": "u1"},
            {"id": "tote", "title": "Tote", "price": 399.5},
        ])
        products = catalog.list_all()
        assert [p.id for p in products] == ["mug", "tote"]
        assert products[0].price == Money.of("249.00")
        assert products[1].price == Money.of("399.5")
        assert products[1].description == ""

    def test_reads_file_once(self, tmp_path):
        catalog = _write(tmp_path, [{"id": "a", "title": "A", "price": "1"}])
        first = catalog.list_all()
        (tmp_path / "catalog.json").write_text("[]", encoding="utf-8")
        assert catalog.list_all()[0] is first[0]

    def test_never_writes(self, tmp_path):
        path = tmp_path / "missing.json"
        with pytest.raises(CatalogUnavailableError, match="not found"):
            JsonCatalogSource(path).list_all()
        assert not path.exists()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogUnavailableError, match="Cannot read catalog"):
            JsonCatalogSource(path).list_all()

    def test_not_an_array(self, tmp_path):
        with pytest.raises(CatalogUnavailableError, match="JSON array"):
            _write(tmp_path, {"id": "a"}).list_all()

    def test_missing_field(self, tmp_path):
        with pytest.raises(CatalogUnavailableError, match="Malformed product record #0"):
            _write(tmp_path, [{"id": "a", "price": "1"}]).list_all()

    def test_negative_price(self, tmp_path):
        with pytest.raises(CatalogUnavailableError, match="Invalid product record #0"):
            _write(tmp_path, [{"id": "a", "title": "A", "price": "-1"}]).list_all()

    def test_infinite_price_string(self, tmp_path):
        with pytest.raises(CatalogUnavailableError, match="Invalid product record #0"):
            _write(tmp_path, [{"id": "a", "title": "A", "price": "Infinity"}]).list_all()

    def test_overflowing_numeric_price(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text('[{"id": "a", "title": "A", "price": 1e400}]', encoding="utf-8")
        with pytest.raises(CatalogUnavailableError, match="Invalid product record #0"):
            JsonCatalogSource(path).list_all()

    def test_duplicate_ids(self, tmp_path):
        with pytest.raises(CatalogUnavailableError, match="Duplicate product id 'a'"):
            _write(tmp_path, [
                {"id": "a", "title": "A", "price": "1"},
                {"id": "a", "title": "Again", "price": "2"},
            ]).list_all()
