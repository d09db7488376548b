from __future__ import annotations

from shop_admin.core.columns import ColumnSpec
from shop_admin.core.grid import DataGrid, GridOptions
from shop_admin.ui.helpers import (
    PAGE_SIZE_ALL,
    Crumb,
    breadcrumb_segments,
    page_label,
    page_size_options,
    resolve_page_size,
)


def _make_grid(n_rows: int = 8) -> DataGrid:
    rows = [{"id": i, "name": f"Item {i}"} for i in range(1, n_rows + 1)]
    options = GridOptions(
        columns=[ColumnSpec("id", "ID"), ColumnSpec("name", "Name")],
        identity=lambda r: str(r["id"]),
        enable_pagination=True,
    )
    return DataGrid(rows, options)


def test_breadcrumb_segments_capitalise_labels_and_keep_raw_hrefs():
    crumbs = breadcrumb_segments("/dashboard/settings/sub-category")
    assert crumbs == [
        Crumb("Dashboard", "/dashboard", False),
        Crumb("Settings", "/dashboard/settings", False),
        Crumb("Sub-category", "/dashboard/settings/sub-category", True),
    ]


def test_breadcrumb_segments_skip_empty_segments_and_decode():
    crumbs = breadcrumb_segments("//dashboard/my%20items/")
    assert [c.label for c in crumbs] == ["Dashboard", "My items"]
    assert crumbs[-1].href == "/dashboard/my%20items"


def test_breadcrumb_segments_for_root_is_empty():
    assert breadcrumb_segments("/") == []
    assert breadcrumb_segments(None) == []


def test_page_size_options_end_with_all():
    options = page_size_options([5, 10])
    assert options[-1] == {"label": "All", "value": PAGE_SIZE_ALL}
    assert [o["value"] for o in options[:-1]] == [5, 10]


def test_resolve_page_size_all_uses_filtered_count():
    grid = _make_grid()
    grid.set_search("item 1")
    assert resolve_page_size(PAGE_SIZE_ALL, grid) == 1


def test_resolve_page_size_all_on_empty_result_is_one():
    grid = _make_grid()
    grid.set_search("nothing here")
    assert resolve_page_size(PAGE_SIZE_ALL, grid) == 1


def test_resolve_page_size_passes_through_numbers():
    grid = _make_grid()
    assert resolve_page_size(10, grid) == 10
    assert resolve_page_size("25", grid) == 25
    assert resolve_page_size(None, grid) == grid.page_size


def test_page_label():
    grid = _make_grid()
    grid.next_page()
    assert page_label(grid) == "Page 2 of 2"
