from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, no_update

from shop_admin.ui.ids import IDs

if TYPE_CHECKING:
    from shop_admin.ui.config import AppConfig

logger = logging.getLogger(__name__)

LOGIN_REDIRECT = "/dashboard"


def register_auth_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    c = IDs.Control

    # ---------------------------------------------------------
    # Login
    # ---------------------------------------------------------
    @app.callback(
        Output(c.LOGIN_MESSAGE, "children"),
        Output(c.URL, "pathname"),
        Input(c.LOGIN_SUBMIT, "n_clicks"),
        State(c.LOGIN_EMAIL, "value"),
        State(c.LOGIN_PASSWORD, "value"),
        prevent_initial_call=True,
    )
    def submit_login(n_clicks, email, password):
        if not n_clicks:
            raise dash.exceptions.PreventUpdate

        result = ctx.auth_service.login(email, password)
        if result.ok:
            return "Login successful! Redirecting...", LOGIN_REDIRECT
        return result.error or "Invalid credentials", no_update

    # ---------------------------------------------------------
    # Register
    # ---------------------------------------------------------
    @app.callback(
        Output(c.REGISTER_MESSAGE, "children"),
        Output(c.REGISTER_MESSAGE, "className"),
        Input(c.REGISTER_SUBMIT, "n_clicks"),
        State(c.REGISTER_EMAIL, "value"),
        State(c.REGISTER_PASSWORD, "value"),
        State(c.REGISTER_AGE, "value"),
        State(c.REGISTER_NAME, "value"),
        prevent_initial_call=True,
    )
    def submit_register(n_clicks, email, password, age, name):
        if not n_clicks:
            raise dash.exceptions.PreventUpdate

        result = ctx.auth_service.register(email, password, age, name)
        if result.ok:
            return "Registration successful!", "text-center text-success mb-0"
        return result.error or "Registration failed.", "text-center text-danger mb-0"
