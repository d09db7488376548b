from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from shop_admin.core.exceptions import CatalogError

PRODUCT_CATEGORIES = ["electronics", "fashion", "home", "sports"]
PRODUCT_CONDITIONS = ["new", "used"]


def _clean(value: Any) -> str:
    return "" if value is None else str(value).strip()


def parse_price(value: Any) -> float:
    """Price input is free text; blank means 0."""
    text = _clean(value)
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        raise CatalogError(f"Invalid price {text!r}") from None


@dataclass
class ProductData:
    """
    Values submitted by the Create Product modal.
    """
    name: str
    category: str = PRODUCT_CATEGORIES[0]
    condition: str = PRODUCT_CONDITIONS[0]
    description: str = ""
    price: float = 0.0
    image_url: str = ""
    image_filename: Optional[str] = None

    @classmethod
    def from_form(
        cls,
        *,
        name: Any,
        category: Any = None,
        condition: Any = None,
        description: Any = None,
        price: Any = None,
        image_url: Any = None,
        image_filename: Optional[str] = None,
    ) -> ProductData:
        return cls(
            name=_clean(name),
            category=_clean(category) or PRODUCT_CATEGORIES[0],
            condition=_clean(condition) or PRODUCT_CONDITIONS[0],
            description=_clean(description),
            price=parse_price(price),
            image_url=_clean(image_url),
            image_filename=image_filename or None,
        )


@dataclass
class CategoryData:
    """
    Values submitted by the Create Category modal.
    """
    name: str
    description: str = ""
    image_url: str = ""
    image_filename: Optional[str] = None

    @classmethod
    def from_form(
        cls,
        *,
        name: Any,
        description: Any = None,
        image_url: Any = None,
        image_filename: Optional[str] = None,
    ) -> CategoryData:
        return cls(
            name=_clean(name),
            description=_clean(description),
            image_url=_clean(image_url),
            image_filename=image_filename or None,
        )
