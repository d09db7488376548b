from __future__ import annotations

from pathlib import Path

import pytest
from dash import Dash

from shop_admin.ui.dash_app import create_dash_app

CONFIG_ROOT = Path(__file__).resolve().parents[3] / "config"


def test_create_dash_app_wires_layout_and_api():
    app = create_dash_app(CONFIG_ROOT)

    assert isinstance(app, Dash)
    assert app.title == "Shop Admin"

    client = app.server.test_client()
    resp = client.post("/api/auth/login", json={"email": "test@example.com", "password": "password123"})
    assert resp.status_code == 200


def test_create_dash_app_without_tables_fails(tmp_path):
    (tmp_path / "global.json").write_text("{}")
    with pytest.raises(RuntimeError):
        create_dash_app(tmp_path)
