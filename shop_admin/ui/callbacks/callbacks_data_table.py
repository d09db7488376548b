from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional

import dash
import dash_bootstrap_components as dbc
from dash import ALL, Input, Output, State, no_update

from shop_admin.core.exceptions import ShopAdminError
from shop_admin.core.grid import DataGrid, GridState
from shop_admin.ui.helpers import page_label, resolve_page_size
from shop_admin.ui.ids import GridIDs, IDs
from shop_admin.ui.layout.build_data_table_panel import build_grid_table

if TYPE_CHECKING:
    from shop_admin.ui.config import AppConfig

logger = logging.getLogger(__name__)


def _parse_state(data: object, default_page_size: int) -> GridState:
    if not isinstance(data, dict) or not data:
        return GridState(page_size=default_page_size)
    try:
        return GridState.from_dict(data)
    except (TypeError, ValueError):
        logger.exception("Invalid grid-state: %r", data)
        return GridState(page_size=default_page_size)


def apply_grid_event(
    grid: DataGrid,
    triggered: List[Dict[str, Any]],
    ids: GridIDs,
    *,
    search: Optional[str] = None,
    page_size: Optional[int] = None,
) -> bool:
    """
    Apply the UI events in `triggered` (dash.ctx.triggered entries) to `grid`.

    Checkbox events are reconciled against the current selection rather than
    blindly flipped: re-rendering the table re-fires them with unchanged
    values, which must be a no-op.

    Returns True if any transition was applied.
    """
    changed = False

    for entry in triggered:
        prop_id = entry.get("prop_id", "")
        component_id = prop_id.rpartition(".")[0]
        value = entry.get("value")

        if component_id == ids.SEARCH:
            grid.set_search(search or "")
            changed = True
        elif component_id == ids.PREV_BTN:
            grid.previous_page()
            changed = True
        elif component_id == ids.NEXT_BTN:
            grid.next_page()
            changed = True
        elif component_id == ids.PAGE_SIZE:
            grid.set_page_size(resolve_page_size(page_size, grid))
            changed = True
        elif component_id == ids.CREATE_BTN:
            grid.create()
            changed = True
        elif component_id == ids.DELETE_BTN:
            changed = grid.delete_selected() or changed
        else:
            pattern = _parse_pattern_id(component_id)
            if pattern is None or pattern.get("table") != ids.key:
                continue
            if pattern.get("type") == IDs.Pattern.ROW_SELECT:
                row_id = str(pattern.get("index"))
                if bool(value) != grid.is_selected(row_id):
                    grid.toggle_row(row_id)
                    changed = True
            elif pattern.get("type") == IDs.Pattern.SELECT_ALL:
                if bool(value) != grid.all_visible_selected:
                    grid.toggle_select_all()
                    changed = True

    return changed


def _parse_pattern_id(component_id: str) -> Optional[Dict[str, Any]]:
    # pattern-matching ids arrive as the JSON string form of the id dict
    if not component_id.startswith("{"):
        return None
    try:
        parsed = json.loads(component_id)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


def register_data_table_callbacks(app: dash.Dash, ctx: AppConfig, table_key: str) -> None:
    ids = GridIDs(table_key)
    cfg = ctx.catalog[table_key]

    # ---------------------------------------------------------
    # Render the visible page + pagination controls
    # ---------------------------------------------------------
    @app.callback(
        Output(ids.TABLE, "children"),
        Output(ids.PAGE_LABEL, "children"),
        Output(ids.DELETE_BTN, "disabled"),
        Output(ids.PREV_BTN, "disabled"),
        Output(ids.NEXT_BTN, "disabled"),
        Input(ids.STATE, "data"),
        Input(ids.DATA, "data"),
    )
    def render_table(state_data, records):
        state = _parse_state(state_data, cfg.initial_page_size)
        try:
            grid = ctx.catalog.build_grid(
                table_key,
                records or [],
                state,
                on_delete_selected=lambda _ids: None,
            )
            table = build_grid_table(grid, table_key)
        except ShopAdminError as e:
            logger.error("Cannot render table", extra={"table": table_key, "error": str(e)})
            return dbc.Alert(str(e), color="danger"), "", True, True, True

        n_pages = grid.total_pages
        return (
            table,
            page_label(grid),
            len(grid.selected_ids()) == 0,
            grid.page == 1,
            grid.page == n_pages or n_pages == 0,
        )

    # ---------------------------------------------------------
    # Search / paging / selection / create / delete
    # ---------------------------------------------------------
    @app.callback(
        Output(ids.STATE, "data"),
        Output(ids.DATA, "data", allow_duplicate=True),
        Output(ids.MODAL, "is_open", allow_duplicate=True),
        Input(ids.SEARCH, "value"),
        Input(ids.PREV_BTN, "n_clicks"),
        Input(ids.NEXT_BTN, "n_clicks"),
        Input(ids.PAGE_SIZE, "value"),
        Input({"type": IDs.Pattern.ROW_SELECT, "table": table_key, "index": ALL}, "value"),
        Input({"type": IDs.Pattern.SELECT_ALL, "table": table_key, "scope": ALL}, "value"),
        Input(ids.CREATE_BTN, "n_clicks"),
        Input(ids.DELETE_BTN, "n_clicks"),
        State(ids.STATE, "data"),
        State(ids.DATA, "data"),
        prevent_initial_call=True,
    )
    def handle_grid_event(
        search, _prev, _next, page_size, _row_values, _select_all, _create, _delete,
        state_data, records,
    ):
        triggered = [t for t in dash.ctx.triggered if t.get("prop_id") not in (None, ".")]
        if not triggered:
            raise dash.exceptions.PreventUpdate

        records = records or []
        deleted: List[str] = []
        opened: List[bool] = []

        try:
            grid = ctx.catalog.build_grid(
                table_key,
                records,
                _parse_state(state_data, cfg.initial_page_size),
                on_create=lambda: opened.append(True),
                on_delete_selected=deleted.extend,
            )
            changed = apply_grid_event(grid, triggered, ids, search=search, page_size=page_size)
        except ShopAdminError as e:
            logger.error("Grid event rejected", extra={"table": table_key, "error": str(e)})
            raise dash.exceptions.PreventUpdate

        if not changed:
            raise dash.exceptions.PreventUpdate

        new_records = ctx.catalog.delete_records(records, deleted) if deleted else no_update
        modal_open = True if opened else no_update
        return grid.state.to_dict(), new_records, modal_open
