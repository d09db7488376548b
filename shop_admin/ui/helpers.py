from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence
from urllib.parse import unquote

from shop_admin.core.grid import DataGrid

# "Rows per page" option meaning "the whole filtered set"
PAGE_SIZE_ALL = 0


@dataclass(frozen=True)
class Crumb:
    label: str
    href: str
    is_last: bool


def breadcrumb_segments(pathname: str | None) -> List[Crumb]:
    """
    Turn a pathname into breadcrumb entries.

    "/dashboard/settings/sub-category" ->
        Dashboard (/dashboard) / Settings (/dashboard/settings) / Sub-category

    Labels get their first character upper-cased and are URL-decoded; hrefs
    keep the raw segments so the links route.
    """
    segments = [s for s in (pathname or "").split("/") if s != ""]

    crumbs: List[Crumb] = []
    cumulative = ""
    for i, segment in enumerate(segments):
        cumulative += f"/{segment}"
        label = unquote(segment[:1].upper() + segment[1:])
        crumbs.append(Crumb(label=label, href=cumulative, is_last=i == len(segments) - 1))
    return crumbs


def page_size_options(sizes: Sequence[int]) -> List[dict]:
    options = [{"label": str(n), "value": n} for n in sizes]
    options.append({"label": "All", "value": PAGE_SIZE_ALL})
    return options


def resolve_page_size(value: int | None, grid: DataGrid) -> int:
    """
    Map the page-size dropdown value to a concrete size.

    "All" is pinned to the filtered row count at the moment it is chosen
    (at least 1, so an empty result still has a valid size).
    """
    if value is None:
        return grid.page_size
    value = int(value)
    if value == PAGE_SIZE_ALL:
        return max(len(grid.filtered_rows()), 1)
    return value


def page_label(grid: DataGrid) -> str:
    return f"Page {grid.page} of {grid.total_pages}"
