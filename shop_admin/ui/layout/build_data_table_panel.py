from __future__ import annotations

from typing import Any, List, Sequence

import dash_bootstrap_components as dbc
from dash import dcc, html

from shop_admin.config.model import TableConfig
from shop_admin.core.columns import field_value
from shop_admin.core.filtering import stringify
from shop_admin.core.grid import DataGrid, GridState
from shop_admin.ui.helpers import page_size_options
from shop_admin.ui.ids import GridIDs, row_select_id, select_all_id

FONT_FAMILY = 'system-ui, -apple-system, BlinkMacSystemFont, "SF Pro Text", "Segoe UI", sans-serif'

HEADER_STYLE = {
    "fontFamily": FONT_FAMILY,
    "fontSize": "12px",
    "fontWeight": "600",
    "backgroundColor": "#f3f4f6",
    "borderBottom": "1px solid #e5e7eb",
    "color": "#111827",
    "padding": "8px 12px",
    "whiteSpace": "nowrap",
}

CELL_STYLE = {
    "fontFamily": FONT_FAMILY,
    "fontSize": "12px",
    "padding": "6px 12px",
    "borderBottom": "1px solid #e5e7eb",
    "color": "#374151",
    "verticalAlign": "middle",
    "whiteSpace": "nowrap",
}


def build_data_table_page(
    cfg: TableConfig,
    sizes: Sequence[int],
    modal: Any = None,
) -> html.Div:
    """
    One admin table page:

    - heading + table title
    - search box, Create and Delete Selected buttons
    - table (filled by the render callback)
    - rows-per-page selector and Prev / Next controls
    - the page's create modal

    The grid-state store is created here, so leaving the page discards the
    search term, page pointer and selection.
    """
    ids = GridIDs(cfg.key)
    initial_state = GridState(page_size=cfg.initial_page_size)

    toolbar = html.Div(
        [
            dbc.Input(
                id=ids.SEARCH,
                type="text",
                value="",
                debounce=False,
                placeholder=cfg.search_placeholder,
                style={"maxWidth": "320px"},
            ),
            dbc.Button("Create", id=ids.CREATE_BTN, color="primary", n_clicks=0),
            dbc.Button(
                "Delete Selected",
                id=ids.DELETE_BTN,
                color="danger",
                n_clicks=0,
                disabled=True,
            ),
        ],
        className="d-flex align-items-center gap-2",
    )

    # rows-per-page defaults to the configured size when it is one of the options
    size_value = cfg.initial_page_size if cfg.initial_page_size in sizes else None

    pagination = html.Div(
        [
            html.Div(
                [
                    html.Span("Rows per page:"),
                    dcc.Dropdown(
                        id=ids.PAGE_SIZE,
                        options=page_size_options(sizes),
                        value=size_value,
                        clearable=False,
                        searchable=False,
                        style={"width": "90px"},
                    ),
                ],
                className="d-flex align-items-center gap-1",
            ),
            html.Div(
                [
                    html.Span(id=ids.PAGE_LABEL),
                    dbc.Button("Prev", id=ids.PREV_BTN, color="light", size="sm", n_clicks=0),
                    dbc.Button("Next", id=ids.NEXT_BTN, color="light", size="sm", n_clicks=0),
                ],
                className="d-flex align-items-center gap-1",
            ),
        ],
        id=ids.PAGINATION,
        className="d-flex align-items-center justify-content-between gap-2",
        style={} if cfg.enable_pagination else {"display": "none"},
    )

    return html.Div(
        [
            dcc.Store(id=ids.STATE, storage_type="memory", data=initial_state.to_dict()),
            html.H1(cfg.heading, className="h3 fw-bold"),
            modal if modal is not None else html.Div(),
            html.Div(
                [
                    html.H2(cfg.title, className="h4 fw-bold"),
                    toolbar,
                    html.Div(id=ids.TABLE, style={"overflowX": "auto"}),
                    pagination,
                ],
                className="d-grid gap-3",
            ),
        ],
        className="sa-table-page",
    )


def build_grid_table(grid: DataGrid, table_key: str) -> dbc.Table:
    """
    Render the visible page of `grid` as a dbc.Table with a select-all
    checkbox in the header and one checkbox per row.
    """
    columns = list(grid.options.columns)
    with_selection = grid.options.on_delete_selected is not None

    header_cells: List[Any] = [
        html.Th(
            dbc.Checkbox(id=select_all_id(table_key), value=grid.all_visible_selected)
            if with_selection else None,
            style=HEADER_STYLE,
        )
    ]
    header_cells += [html.Th(col.label, style=HEADER_STYLE) for col in columns]

    rows = []
    for row in grid.visible_rows():
        rid = grid.options.identity(row)
        select_cell = html.Td(
            dbc.Checkbox(id=row_select_id(table_key, rid), value=grid.is_selected(rid))
            if with_selection else None,
            style=CELL_STYLE,
        )
        rows.append(
            html.Tr(
                [select_cell] + [html.Td(stringify(field_value(row, col.key)), style=CELL_STYLE) for col in columns],
                key=rid,
            )
        )

    if not rows:
        rows.append(
            html.Tr(
                html.Td(
                    "No items found.",
                    colSpan=len(columns) + 1,
                    className="text-center text-muted p-4",
                )
            )
        )

    return dbc.Table(
        [html.Thead(html.Tr(header_cells)), html.Tbody(rows)],
        bordered=False,
        hover=True,
        responsive=True,
        className="mb-0",
        style={"border": "1px solid #e5e7eb", "borderRadius": "4px"},
    )
