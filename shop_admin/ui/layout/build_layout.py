from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc, html

from shop_admin.ui.helpers import breadcrumb_segments
from shop_admin.ui.ids import GridIDs, IDs
from shop_admin.ui.layout.build_navbar import build_navbar
from shop_admin.ui.layout.build_sidebar import build_sidebar

if TYPE_CHECKING:
    from shop_admin.ui.config import AppConfig


def build_layout(ctx: AppConfig):
    """
    App shell: URL router, one record store per table, navbar and the page slot.

    Record stores sit at the app level so a table's rows survive navigating
    between pages; the grid state (search, page, selection) lives inside each
    table page and is dropped when the page is left.
    """
    record_stores = [
        dcc.Store(
            id=GridIDs(key).DATA,
            storage_type="session",
            data=ctx.catalog.seed_records(key),
        )
        for key in ctx.catalog
    ]

    return dbc.Container(
        fluid=True,
        className="sa-root",
        children=[
            dcc.Location(id=IDs.Control.URL, refresh=False),
            *record_stores,
            build_navbar(ctx.global_config),
            html.Div(id=IDs.Control.PAGE_CONTENT),
        ],
    )


def build_dashboard_shell(content, pathname: str | None) -> dbc.Row:
    """Sidebar on the left, breadcrumb + page content on the right."""
    return dbc.Row(
        [
            dbc.Col(build_sidebar(), md=2, className="sa-sidebar p-3"),
            dbc.Col(
                [
                    html.Nav(build_breadcrumb(pathname), id=IDs.Control.BREADCRUMB, className="mb-3"),
                    content,
                ],
                md=10,
                className="p-4",
            ),
        ],
        className="gx-0 min-vh-100",
    )


def build_not_found(pathname: str | None) -> html.Div:
    return html.Div(
        [
            html.H2("Page not found", className="fw-bold"),
            html.Div(f"No page at {pathname or '/'}.", className="text-muted"),
        ],
        className="mt-2",
    )


def build_breadcrumb(pathname: str | None) -> dbc.Breadcrumb:
    """Breadcrumb trail for the current path; the last entry is not a link."""
    items = []
    for crumb in breadcrumb_segments(pathname):
        if crumb.is_last:
            items.append({"label": crumb.label, "active": True})
        else:
            items.append({"label": crumb.label, "href": crumb.href})
    return dbc.Breadcrumb(items=items, className="text-muted")
