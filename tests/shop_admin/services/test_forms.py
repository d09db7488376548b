from __future__ import annotations

import pytest

from shop_admin.core.exceptions import CatalogError
from shop_admin.services.forms import ProductData, parse_price


def test_blank_price_is_zero():
    assert parse_price("") == 0.0
    assert parse_price(None) == 0.0


def test_numeric_price_parses():
    assert parse_price("19.99") == 19.99
    assert parse_price(3) == 3.0


def test_invalid_price_raises_catalog_error():
    with pytest.raises(CatalogError):
        parse_price("cheap")


def test_product_form_defaults_and_trimming():
    data = ProductData.from_form(name="  Phone  ", category=None, condition="", description=None)
    assert data.name == "Phone"
    assert data.category == "electronics"
    assert data.condition == "new"
    assert data.description == ""
    assert data.image_filename is None
