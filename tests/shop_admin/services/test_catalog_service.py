from __future__ import annotations

from pathlib import Path

import pytest

from shop_admin.config.model import TableConfig
from shop_admin.core.exceptions import CatalogError
from shop_admin.services.catalog_service import CatalogService, next_id, row_id
from shop_admin.services.forms import CategoryData, ProductData


def _make_catalog() -> CatalogService:
    products = TableConfig.from_raw(
        {
            "key": "products",
            "title": "Products",
            "enable_pagination": True,
            "initial_page_size": 5,
            "columns": [
                {"key": "id", "label": "ID"},
                {"key": "name", "label": "Name"},
                {"key": "category", "label": "Category"},
            ],
            "records": [
                {"id": 1, "name": "Item A", "category": "Category 1"},
                {"id": 2, "name": "Item B", "category": "Category 2"},
                {"id": 3, "name": "Item C", "category": "Category 1"},
            ],
        },
        source_path=Path("products.json"),
        index=0,
    )
    categories = TableConfig.from_raw(
        {
            "key": "categories",
            "columns": [{"key": "id", "label": "ID"}, {"key": "name", "label": "Name"}],
            "records": [],
        },
        source_path=Path("categories.json"),
        index=1,
    )
    return CatalogService({"products": products, "categories": categories})


def test_seed_records_are_copies():
    catalog = _make_catalog()
    records = catalog.seed_records("products")
    records[0]["name"] = "changed"
    assert catalog.seed_records("products")[0]["name"] == "Item A"


def test_unknown_table_raises_key_error():
    with pytest.raises(KeyError):
        _make_catalog()["orders"]


def test_row_id_and_next_id():
    assert row_id({"id": 7}) == "7"
    assert next_id([{"id": 3}, {"id": 9}]) == 10
    assert next_id([]) == 1


def test_create_product_appends_without_mutating_input():
    catalog = _make_catalog()
    records = catalog.seed_records("products")

    updated = catalog.create_product(records, ProductData.from_form(name="Kale", price="2.50"))

    assert len(records) == 3
    assert updated[-1]["id"] == 4
    assert updated[-1]["name"] == "Kale"
    assert updated[-1]["price"] == 2.5
    assert updated[-1]["category"] == "electronics"


def test_create_product_requires_name():
    catalog = _make_catalog()
    with pytest.raises(CatalogError):
        catalog.create_product([], ProductData.from_form(name="   "))


def test_create_category_starts_ids_at_one():
    catalog = _make_catalog()
    updated = catalog.create_category([], CategoryData.from_form(name="Vegetables", description="green"))
    assert updated == [{"id": 1, "name": "Vegetables", "description": "green", "image_url": ""}]


def test_delete_records_removes_by_string_identity():
    catalog = _make_catalog()
    records = catalog.seed_records("products")

    kept = catalog.delete_records(records, ["1", "3", "99"])

    assert [r["id"] for r in kept] == [2]
    assert len(records) == 3


def test_build_grid_uses_table_config():
    catalog = _make_catalog()
    deleted = []
    grid = catalog.build_grid("products", catalog.seed_records("products"), on_delete_selected=deleted.extend)

    assert grid.options.enable_pagination is True
    assert grid.page_size == 5
    assert [c.key for c in grid.options.columns] == ["id", "name", "category"]

    grid.set_search("category 1")
    assert grid.visible_ids() == ["1", "3"]

    grid.toggle_select_all()
    grid.delete_selected()
    assert deleted == ["1", "3"]
