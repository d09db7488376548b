from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from shop_admin.core.columns import ColumnSpec
from shop_admin.core.pagination import DEFAULT_PAGE_SIZE

DEFAULT_PAGE_SIZE_OPTIONS = [5, 10, 25]


@dataclass
class TableConfig:
    """
    Parsed config entry for a single admin table (products, categories, ...).
    """
    raw: Dict[str, Any]
    source_path: Path
    index: int

    @property
    def key(self) -> str:
        return self.raw.get("key", f"table-{self.index}")

    @property
    def title(self) -> str:
        return self.raw.get("title", "Data Table")

    @property
    def heading(self) -> str:
        return self.raw.get("heading", self.title)

    @property
    def search_placeholder(self) -> str:
        return self.raw.get("search_placeholder", "Search...")

    @property
    def enable_pagination(self) -> bool:
        return bool(self.raw.get("enable_pagination", False))

    @property
    def initial_page_size(self) -> int:
        return int(self.raw.get("initial_page_size", DEFAULT_PAGE_SIZE))

    @property
    def columns(self) -> List[ColumnSpec]:
        return [ColumnSpec.from_dict(c) for c in self.raw.get("columns", [])]

    @property
    def records(self) -> List[Dict[str, Any]]:
        return [dict(r) for r in self.raw.get("records", [])]

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], source_path: Path, index: int) -> TableConfig:
        return cls(raw=raw, source_path=source_path, index=index)


@dataclass(frozen=True)
class AuthConfig:
    """
    Mock account and registration rules used by the auth stubs.
    """
    demo_email: str = "test@example.com"
    demo_password: str = "password123"
    min_password_length: int = 6


@dataclass
class GlobalConfig:
    ui_title: str
    subtitle: str
    tables: List[TableConfig]
    auth: AuthConfig = field(default_factory=AuthConfig)
    page_size_options: List[int] = field(default_factory=lambda: list(DEFAULT_PAGE_SIZE_OPTIONS))
