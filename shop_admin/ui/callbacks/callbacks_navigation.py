from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, html

from shop_admin.services.catalog_service import CATEGORIES, PRODUCTS
from shop_admin.ui.ids import IDs
from shop_admin.ui.layout.build_auth_pages import (
    build_dashboard_home,
    build_login_page,
    build_register_page,
)
from shop_admin.ui.layout.build_data_table_panel import build_data_table_page
from shop_admin.ui.layout.build_layout import build_dashboard_shell, build_not_found
from shop_admin.ui.layout.build_modals import build_category_modal, build_product_modal
from shop_admin.ui.layout.build_sidebar import SETTINGS_CLOSED, SETTINGS_OPEN

if TYPE_CHECKING:
    from shop_admin.ui.config import AppConfig

logger = logging.getLogger(__name__)

LOGIN_PATHS = {"/", "/auth/login"}
REGISTER_PATH = "/auth/register"
DASHBOARD_PATH = "/dashboard"

# dashboard path -> (table key, modal builder)
TABLE_PAGES = {
    "/dashboard/products": (PRODUCTS, build_product_modal),
    "/dashboard/settings/category": (CATEGORIES, build_category_modal),
}


def render_page(pathname: str | None, ctx: AppConfig):
    """
    Resolve a pathname to page content. Everything under /dashboard gets the
    sidebar + breadcrumb shell.
    """
    path = (pathname or "/").rstrip("/") or "/"

    if path in LOGIN_PATHS:
        return build_login_page()
    if path == REGISTER_PATH:
        return build_register_page()

    if path == DASHBOARD_PATH:
        return build_dashboard_shell(build_dashboard_home(), path)

    if path in TABLE_PAGES:
        table_key, build_modal = TABLE_PAGES[path]
        if table_key not in ctx.catalog:
            logger.warning("No table config for page", extra={"path": path, "table": table_key})
            return build_dashboard_shell(build_not_found(path), path)
        page = build_data_table_page(
            ctx.catalog[table_key],
            ctx.global_config.page_size_options,
            modal=build_modal(table_key),
        )
        return build_dashboard_shell(page, path)

    if path.startswith(DASHBOARD_PATH + "/"):
        return build_dashboard_shell(build_not_found(path), path)

    return build_not_found(path)


def register_navigation_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Router
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.PAGE_CONTENT, "children"),
        Input(IDs.Control.URL, "pathname"),
    )
    def update_page(pathname: str | None):
        return render_page(pathname, ctx)

    # ---------------------------------------------------------
    # Sidebar settings menu
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SIDEBAR_SETTINGS_COLLAPSE, "is_open"),
        Output(IDs.Control.SIDEBAR_SETTINGS_TOGGLE, "children"),
        Input(IDs.Control.SIDEBAR_SETTINGS_TOGGLE, "n_clicks"),
        State(IDs.Control.SIDEBAR_SETTINGS_COLLAPSE, "is_open"),
        prevent_initial_call=True,
    )
    def toggle_settings_menu(n_clicks, is_open):
        if not n_clicks:
            raise dash.exceptions.PreventUpdate

        now_open = not bool(is_open)
        arrow = SETTINGS_OPEN if now_open else SETTINGS_CLOSED
        return now_open, ["Settings ", html.Span(arrow, className="ms-1 small")]
