from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional

from shop_admin.config.model import TableConfig
from shop_admin.core.exceptions import CatalogError
from shop_admin.core.grid import DataGrid, GridOptions, GridState
from shop_admin.services.forms import CategoryData, ProductData

logger = logging.getLogger(__name__)

Record = Dict[str, Any]

PRODUCTS = "products"
CATEGORIES = "categories"


def row_id(record: Mapping[str, Any]) -> str:
    """Identity used for selection; ids are stored as ints, selected as strings."""
    return str(record["id"])


def next_id(records: Iterable[Mapping[str, Any]]) -> int:
    ids = [int(r["id"]) for r in records]
    return max(ids) + 1 if ids else 1


class CatalogService(Mapping[str, TableConfig]):
    """
    Owner of the admin tables' datasets.

    Records live in the browser session (a dcc.Store per table), so every
    operation takes the current list and returns a new one. Implements the
    Mapping interface (table key -> TableConfig) for the UI layer.
    """

    def __init__(self, cfg_by_key: Dict[str, TableConfig]):
        self._cfg_by_key = cfg_by_key

    def __getitem__(self, key: str) -> TableConfig:
        cfg = self._cfg_by_key.get(key)
        if cfg is None:
            raise KeyError(f"Unknown table '{key}'")
        return cfg

    def __iter__(self) -> Iterator[str]:
        return iter(self._cfg_by_key)

    def __len__(self) -> int:
        return len(self._cfg_by_key)

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------

    def seed_records(self, key: str) -> List[Record]:
        return self[key].records

    def create_product(self, records: List[Record], data: ProductData) -> List[Record]:
        if not data.name:
            raise CatalogError("Product name is required.")

        record: Record = {
            "id": next_id(records),
            "name": data.name,
            "category": data.category,
            "condition": data.condition,
            "description": data.description,
            "price": data.price,
            "image_url": data.image_url,
        }
        logger.info("Product created", extra={"table": PRODUCTS, "record_id": record["id"]})
        return [*records, record]

    def create_category(self, records: List[Record], data: CategoryData) -> List[Record]:
        if not data.name:
            raise CatalogError("Category name is required.")

        record: Record = {
            "id": next_id(records),
            "name": data.name,
            "description": data.description,
            "image_url": data.image_url,
        }
        logger.info("Category created", extra={"table": CATEGORIES, "record_id": record["id"]})
        return [*records, record]

    def delete_records(self, records: List[Record], ids: Iterable[str]) -> List[Record]:
        doomed = set(ids)
        kept = [r for r in records if row_id(r) not in doomed]
        logger.info(
            "Records deleted",
            extra={"n_requested": len(doomed), "n_deleted": len(records) - len(kept)},
        )
        return kept

    # ------------------------------------------------------------------
    # Grid wiring
    # ------------------------------------------------------------------

    def build_grid(
        self,
        key: str,
        records: List[Record],
        state: Optional[GridState] = None,
        *,
        on_create: Optional[Callable[[], None]] = None,
        on_delete_selected: Optional[Callable[[List[str]], None]] = None,
    ) -> DataGrid[Record]:
        """
        A DataGrid over one table's records, configured from its TableConfig.
        """
        cfg = self[key]
        options: GridOptions[Record] = GridOptions(
            columns=cfg.columns,
            identity=row_id,
            on_create=on_create,
            on_delete_selected=on_delete_selected,
            search_placeholder=cfg.search_placeholder,
            title=cfg.title,
            initial_page_size=cfg.initial_page_size,
            enable_pagination=cfg.enable_pagination,
        )
        return DataGrid(records, options, state)
