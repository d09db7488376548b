from __future__ import annotations

import logging
from pathlib import Path

import dash_bootstrap_components as dbc
from dash import Dash

from .config import AppConfig
from shop_admin.api.auth_routes import register_auth_routes
from shop_admin.config.loader import load_table_registry
from shop_admin.services.auth_service import AuthService
from shop_admin.services.catalog_service import CATEGORIES, PRODUCTS, CatalogService
from shop_admin.ui.callbacks.callbacks_auth import register_auth_callbacks
from shop_admin.ui.callbacks.callbacks_data_table import register_data_table_callbacks
from shop_admin.ui.callbacks.callbacks_modals import (
    register_category_modal_callbacks,
    register_product_modal_callbacks,
)
from shop_admin.ui.callbacks.callbacks_navigation import register_navigation_callbacks
from shop_admin.ui.layout.build_layout import build_layout

logger = logging.getLogger(__name__)

MODAL_CALLBACKS = {
    PRODUCTS: register_product_modal_callbacks,
    CATEGORIES: register_category_modal_callbacks,
}


def create_dash_app(config_root: Path | str = Path("config")) -> Dash:
    config_root = Path(config_root)

    # 1) Load Config
    global_config, cfg_by_key = load_table_registry(config_root)
    if not cfg_by_key:
        raise RuntimeError("No table configs were loaded from config")

    # 2) Initialize Service Layer
    catalog = CatalogService(cfg_by_key)
    auth_service = AuthService(global_config.auth)

    # 3) App Context
    ctx = AppConfig(
        config_root=config_root,
        global_config=global_config,
        catalog=catalog,
        auth_service=auth_service,
    )
    ctx.validate()

    app = Dash(
        __name__,
        external_stylesheets=[dbc.themes.FLATLY],
        # pages are rendered by the router, so most ids are not in the initial layout
        suppress_callback_exceptions=True,
    )
    app.title = global_config.ui_title

    app.layout = build_layout(ctx)

    # Register callbacks
    register_navigation_callbacks(app, ctx)
    register_auth_callbacks(app, ctx)
    for table_key, register_modal in MODAL_CALLBACKS.items():
        if table_key not in catalog:
            logger.warning("Table missing from config", extra={"table": table_key})
            continue
        register_data_table_callbacks(app, ctx, table_key)
        register_modal(app, ctx, table_key)

    # JSON endpoints for the auth stubs
    register_auth_routes(app.server, auth_service)

    logger.info("Dash app created", extra={"tables": sorted(catalog)})
    return app
