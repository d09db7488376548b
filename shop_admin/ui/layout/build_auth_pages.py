from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from shop_admin.ui.ids import IDs


def _auth_card(title: str, body: list) -> dbc.Row:
    return dbc.Row(
        dbc.Col(
            dbc.Card(
                [
                    dbc.CardHeader(html.H1(title, className="h4 mb-0")),
                    dbc.CardBody(body, className="d-grid gap-3"),
                ],
                className="shadow-sm",
            ),
            md=4,
        ),
        justify="center",
        className="mt-5",
    )


def build_login_page() -> dbc.Row:
    """Email + password form; Register links to the registration page."""
    c = IDs.Control
    return _auth_card(
        "Login",
        [
            html.Div(
                [
                    dbc.Label("Email", html_for=c.LOGIN_EMAIL, className="fw-semibold"),
                    dbc.Input(id=c.LOGIN_EMAIL, type="email", value=""),
                ]
            ),
            html.Div(
                [
                    dbc.Label("Password", html_for=c.LOGIN_PASSWORD, className="fw-semibold"),
                    dbc.Input(id=c.LOGIN_PASSWORD, type="password", value=""),
                ]
            ),
            html.Div(
                [
                    dbc.Button("Login", id=c.LOGIN_SUBMIT, color="primary", n_clicks=0),
                    dcc.Link(
                        dbc.Button("Register", color="primary", outline=True, className="w-100"),
                        href="/auth/register",
                    ),
                ],
                className="d-grid gap-2",
                style={"gridTemplateColumns": "1fr 1fr"},
            ),
            html.P(id=c.LOGIN_MESSAGE, className="text-center text-danger mb-0"),
        ],
    )


def build_register_page() -> dbc.Row:
    c = IDs.Control
    return _auth_card(
        "Register",
        [
            html.Div(
                [
                    dbc.Label("Name", html_for=c.REGISTER_NAME, className="fw-semibold"),
                    dbc.Input(id=c.REGISTER_NAME, type="text", value=""),
                ]
            ),
            html.Div(
                [
                    dbc.Label("Age", html_for=c.REGISTER_AGE, className="fw-semibold"),
                    dbc.Input(id=c.REGISTER_AGE, type="number", value=None),
                ]
            ),
            html.Div(
                [
                    dbc.Label("Email", html_for=c.REGISTER_EMAIL, className="fw-semibold"),
                    dbc.Input(id=c.REGISTER_EMAIL, type="email", value=""),
                ]
            ),
            html.Div(
                [
                    dbc.Label("Password", html_for=c.REGISTER_PASSWORD, className="fw-semibold"),
                    dbc.Input(id=c.REGISTER_PASSWORD, type="password", value=""),
                ]
            ),
            dbc.Button("Register", id=c.REGISTER_SUBMIT, color="primary", n_clicks=0),
            dcc.Link("Back to login", href="/auth/login", className="text-center small"),
            html.P(id=c.REGISTER_MESSAGE, className="text-center mb-0"),
        ],
    )


def build_dashboard_home() -> html.Div:
    return html.Div(
        [
            html.H1("Dashboard", className="h3 fw-bold"),
            html.P("Pick a section from the sidebar.", className="text-muted"),
        ]
    )
