from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State, no_update

from shop_admin.core.exceptions import CatalogError
from shop_admin.services.forms import (
    PRODUCT_CATEGORIES,
    PRODUCT_CONDITIONS,
    CategoryData,
    ProductData,
)
from shop_admin.ui.ids import GridIDs

if TYPE_CHECKING:
    from shop_admin.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_product_modal_callbacks(app: dash.Dash, ctx: AppConfig, table_key: str) -> None:
    ids = GridIDs(table_key)

    @app.callback(
        Output(ids.DATA, "data", allow_duplicate=True),
        Output(ids.MODAL, "is_open", allow_duplicate=True),
        Output(ids.MODAL_MESSAGE, "children"),
        Output(ids.FORM_NAME, "value"),
        Output(ids.FORM_CATEGORY, "value"),
        Output(ids.FORM_CONDITION, "value"),
        Output(ids.FORM_DESCRIPTION, "value"),
        Output(ids.FORM_PRICE, "value"),
        Output(ids.FORM_IMAGE_URL, "value"),
        Input(ids.MODAL_SUBMIT, "n_clicks"),
        Input(ids.MODAL_CANCEL, "n_clicks"),
        State(ids.FORM_NAME, "value"),
        State(ids.FORM_CATEGORY, "value"),
        State(ids.FORM_CONDITION, "value"),
        State(ids.FORM_DESCRIPTION, "value"),
        State(ids.FORM_PRICE, "value"),
        State(ids.FORM_IMAGE_URL, "value"),
        State(ids.FORM_IMAGE_FILE, "filename"),
        State(ids.DATA, "data"),
        prevent_initial_call=True,
    )
    def submit_product(
        _submit, _cancel, name, category, condition, description, price, image_url, image_filename,
        records,
    ):
        cleared = ("", PRODUCT_CATEGORIES[0], PRODUCT_CONDITIONS[0], "", None, "")
        triggered = dash.ctx.triggered_id

        if triggered == ids.MODAL_CANCEL:
            return (no_update, False, "") + cleared
        if triggered != ids.MODAL_SUBMIT:
            raise dash.exceptions.PreventUpdate

        try:
            data = ProductData.from_form(
                name=name,
                category=category,
                condition=condition,
                description=description,
                price=price,
                image_url=image_url,
                image_filename=image_filename,
            )
            new_records = ctx.catalog.create_product(records or [], data)
        except CatalogError as e:
            logger.info("Product form rejected", extra={"table": table_key, "error": str(e)})
            return (no_update, no_update, str(e)) + (no_update,) * len(cleared)

        return (new_records, False, "") + cleared


def register_category_modal_callbacks(app: dash.Dash, ctx: AppConfig, table_key: str) -> None:
    ids = GridIDs(table_key)

    @app.callback(
        Output(ids.DATA, "data", allow_duplicate=True),
        Output(ids.MODAL, "is_open", allow_duplicate=True),
        Output(ids.MODAL_MESSAGE, "children"),
        Output(ids.FORM_NAME, "value"),
        Output(ids.FORM_DESCRIPTION, "value"),
        Output(ids.FORM_IMAGE_URL, "value"),
        Input(ids.MODAL_SUBMIT, "n_clicks"),
        Input(ids.MODAL_CANCEL, "n_clicks"),
        State(ids.FORM_NAME, "value"),
        State(ids.FORM_DESCRIPTION, "value"),
        State(ids.FORM_IMAGE_URL, "value"),
        State(ids.FORM_IMAGE_FILE, "filename"),
        State(ids.DATA, "data"),
        prevent_initial_call=True,
    )
    def submit_category(_submit, _cancel, name, description, image_url, image_filename, records):
        cleared = ("", "", "")
        triggered = dash.ctx.triggered_id

        if triggered == ids.MODAL_CANCEL:
            return (no_update, False, "") + cleared
        if triggered != ids.MODAL_SUBMIT:
            raise dash.exceptions.PreventUpdate

        try:
            data = CategoryData.from_form(
                name=name,
                description=description,
                image_url=image_url,
                image_filename=image_filename,
            )
            new_records = ctx.catalog.create_category(records or [], data)
        except CatalogError as e:
            logger.info("Category form rejected", extra={"table": table_key, "error": str(e)})
            return (no_update, no_update, str(e)) + (no_update,) * len(cleared)

        return (new_records, False, "") + cleared
