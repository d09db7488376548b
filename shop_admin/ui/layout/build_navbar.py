from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from shop_admin.config.model import GlobalConfig


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    title = getattr(global_config, "ui_title", "Shop Admin")
    subtitle = getattr(global_config, "subtitle", "Dashboard")

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                html.Div(
                    [
                        html.H2(title, className="mb-0"),
                        html.Small(subtitle, className="text-muted"),
                    ],
                    className="d-flex flex-column justify-content-center",
                ),
            ],
        ),
        dark=False,
        className="shadow-sm sa-navbar",
    )
