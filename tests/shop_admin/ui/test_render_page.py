from __future__ import annotations

from pathlib import Path

import dash_bootstrap_components as dbc
import pytest
from dash import html

from shop_admin.config.loader import load_table_registry
from shop_admin.services.auth_service import AuthService
from shop_admin.services.catalog_service import CatalogService
from shop_admin.ui.callbacks.callbacks_navigation import render_page
from shop_admin.ui.config import AppConfig
from shop_admin.ui.ids import GridIDs, IDs
from shop_admin.ui.layout.build_data_table_panel import build_grid_table

CONFIG_ROOT = Path(__file__).resolve().parents[3] / "config"


@pytest.fixture
def ctx():
    global_config, cfg_by_key = load_table_registry(CONFIG_ROOT)
    return AppConfig(
        config_root=CONFIG_ROOT,
        global_config=global_config,
        catalog=CatalogService(cfg_by_key),
        auth_service=AuthService(global_config.auth),
    )


def _find_ids(component):
    """All component ids under `component` (string ids only)."""
    found = []
    stack = [component]
    while stack:
        node = stack.pop()
        if isinstance(node, (list, tuple)):
            stack.extend(node)
            continue
        node_id = getattr(node, "id", None)
        if isinstance(node_id, str):
            found.append(node_id)
        children = getattr(node, "children", None)
        if children is not None:
            stack.append(children)
    return found


def test_root_and_login_render_login_page(ctx):
    assert IDs.Control.LOGIN_SUBMIT in _find_ids(render_page("/", ctx))
    assert IDs.Control.LOGIN_SUBMIT in _find_ids(render_page("/auth/login/", ctx))


def test_register_page(ctx):
    assert IDs.Control.REGISTER_SUBMIT in _find_ids(render_page("/auth/register", ctx))


def test_products_page_is_wrapped_in_dashboard_shell(ctx):
    page = render_page("/dashboard/products", ctx)
    found = _find_ids(page)
    ids = GridIDs("products")

    assert IDs.Control.BREADCRUMB in found
    assert IDs.Control.SIDEBAR_SETTINGS_TOGGLE in found
    assert ids.SEARCH in found
    assert ids.STATE in found
    assert ids.MODAL in found


def test_category_page(ctx):
    found = _find_ids(render_page("/dashboard/settings/category", ctx))
    assert GridIDs("categories").TABLE in found


def test_unknown_dashboard_path_keeps_shell(ctx):
    found = _find_ids(render_page("/dashboard/orders", ctx))
    assert IDs.Control.BREADCRUMB in found


def test_unknown_path_outside_dashboard(ctx):
    page = render_page("/nowhere", ctx)
    assert IDs.Control.BREADCRUMB not in _find_ids(page)


def test_grid_table_renders_visible_page(ctx):
    grid = ctx.catalog.build_grid(
        "products",
        ctx.catalog.seed_records("products"),
        on_delete_selected=lambda _ids: None,
    )
    grid.toggle_row("2")

    table = build_grid_table(grid, "products")

    assert isinstance(table, dbc.Table)
    _thead, tbody = table.children
    assert len(tbody.children) == 5

    second_row = tbody.children[1]
    checkbox = second_row.children[0].children
    assert checkbox.value is True
    assert [td.children for td in second_row.children[1:]] == ["2", "Item B", "Category 2"]


def test_grid_table_without_delete_handler_has_no_checkboxes(ctx):
    grid = ctx.catalog.build_grid("products", ctx.catalog.seed_records("products"))
    _thead, tbody = build_grid_table(grid, "products").children
    assert tbody.children[0].children[0].children is None


def test_grid_table_empty_result(ctx):
    grid = ctx.catalog.build_grid("products", ctx.catalog.seed_records("products"))
    grid.set_search("no such item")
    _thead, tbody = build_grid_table(grid, "products").children
    (only_row,) = tbody.children
    assert isinstance(only_row.children, html.Td)
    assert only_row.children.children == "No items found."
