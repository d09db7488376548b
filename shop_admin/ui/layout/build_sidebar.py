from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from shop_admin.ui.ids import IDs

SETTINGS_CLOSED = "▼"
SETTINGS_OPEN = "▲"


def build_sidebar() -> html.Aside:
    """
    Dashboard navigation. The Settings entry toggles a nested menu.
    """
    def link(label: str, href: str) -> html.Li:
        return html.Li(dcc.Link(label, href=href, className="text-primary"))

    return html.Aside(
        html.Nav(
            html.Ul(
                [
                    link("Home", "/dashboard"),
                    link("Products", "/dashboard/products"),
                    link("Orders", "/dashboard/orders"),
                    html.Li(
                        [
                            html.Button(
                                ["Settings ", html.Span(SETTINGS_CLOSED, className="ms-1 small")],
                                id=IDs.Control.SIDEBAR_SETTINGS_TOGGLE,
                                type="button",
                                n_clicks=0,
                                className="btn btn-link p-0 fw-bold fs-5 text-decoration-none",
                            ),
                            dbc.Collapse(
                                html.Ul(
                                    [
                                        link("Category", "/dashboard/settings/category"),
                                        link("Sub-category", "/dashboard/settings/sub-category"),
                                    ],
                                    className="list-unstyled ms-3 mt-1",
                                ),
                                id=IDs.Control.SIDEBAR_SETTINGS_COLLAPSE,
                                is_open=False,
                            ),
                        ]
                    ),
                ],
                className="list-unstyled fs-5 fw-bold d-grid gap-2",
            )
        ),
        className="h-100",
    )
