from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from shop_admin.services.forms import PRODUCT_CATEGORIES, PRODUCT_CONDITIONS
from shop_admin.ui.ids import GridIDs


def _field(label: str, control, html_for: str | None = None) -> html.Div:
    return html.Div(
        [
            dbc.Label(label, html_for=html_for, className="fw-semibold mb-1"),
            control,
        ]
    )


def _image_fields(ids: GridIDs) -> list:
    return [
        _field(
            "Image URL",
            dbc.Input(id=ids.FORM_IMAGE_URL, type="url", placeholder="https://...", value=""),
            ids.FORM_IMAGE_URL,
        ),
        _field(
            "Image File",
            dcc.Upload(
                id=ids.FORM_IMAGE_FILE,
                children=html.Div(["Drag and drop or ", html.A("select an image")]),
                accept="image/*",
                multiple=False,
                className="border rounded p-2 text-center small",
            ),
        ),
    ]


def _modal(ids: GridIDs, title: str, body: list, submit_label: str) -> dbc.Modal:
    return dbc.Modal(
        [
            dbc.ModalHeader(dbc.ModalTitle(title), close_button=False),
            dbc.ModalBody(
                [
                    *body,
                    html.Div(id=ids.MODAL_MESSAGE, className="small text-danger"),
                ],
                className="d-grid gap-3",
            ),
            dbc.ModalFooter(
                [
                    dbc.Button("Cancel", id=ids.MODAL_CANCEL, color="secondary", n_clicks=0),
                    dbc.Button(submit_label, id=ids.MODAL_SUBMIT, color="primary", n_clicks=0),
                ]
            ),
        ],
        id=ids.MODAL,
        is_open=False,
        centered=True,
    )


def build_product_modal(table_key: str) -> dbc.Modal:
    """
    Create Product form: name, category, condition, description, price, image.
    """
    ids = GridIDs(table_key)

    body = [
        _field(
            "Product Name",
            dbc.Input(id=ids.FORM_NAME, type="text", placeholder="e.g. iPhone 12", value=""),
            ids.FORM_NAME,
        ),
        _field(
            "Category",
            dcc.Dropdown(
                id=ids.FORM_CATEGORY,
                options=[{"label": c.title(), "value": c} for c in PRODUCT_CATEGORIES],
                value=PRODUCT_CATEGORIES[0],
                clearable=False,
            ),
        ),
        _field(
            "Condition",
            dbc.RadioItems(
                id=ids.FORM_CONDITION,
                options=[{"label": c.title(), "value": c} for c in PRODUCT_CONDITIONS],
                value=PRODUCT_CONDITIONS[0],
                inline=True,
            ),
        ),
        _field(
            "Description",
            dbc.Textarea(id=ids.FORM_DESCRIPTION, rows=3, placeholder="Describe the product...", value=""),
            ids.FORM_DESCRIPTION,
        ),
        _field(
            "Price",
            dbc.Input(id=ids.FORM_PRICE, type="number", step=0.01, placeholder="0.00", value=None),
            ids.FORM_PRICE,
        ),
        *_image_fields(ids),
    ]
    return _modal(ids, "Create Product", body, "Create Product")


def build_category_modal(table_key: str) -> dbc.Modal:
    """
    Create Category form: name, image, description.
    """
    ids = GridIDs(table_key)

    body = [
        _field(
            "Category Name",
            dbc.Input(id=ids.FORM_NAME, type="text", placeholder="e.g. Vegetables", value=""),
            ids.FORM_NAME,
        ),
        *_image_fields(ids),
        _field(
            "Description",
            dbc.Textarea(id=ids.FORM_DESCRIPTION, rows=3, placeholder="Category description", value=""),
            ids.FORM_DESCRIPTION,
        ),
    ]
    return _modal(ids, "Create Category", body, "Create Category")
