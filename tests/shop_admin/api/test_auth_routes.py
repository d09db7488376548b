from __future__ import annotations

import pytest
from flask import Flask

from shop_admin.api.auth_routes import register_auth_routes
from shop_admin.services.auth_service import AuthService


@pytest.fixture
def client():
    server = Flask(__name__)
    register_auth_routes(server, AuthService())
    return server.test_client()


def test_login_success(client):
    resp = client.post("/api/auth/login", json={"email": "test@example.com", "password": "password123"})
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True}


def test_login_bad_credentials(client):
    resp = client.post("/api/auth/login", json={"email": "test@example.com", "password": "nope"})
    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Invalid email or password"}


def test_login_missing_fields_is_unauthorised(client):
    resp = client.post("/api/auth/login", json={})
    assert resp.status_code == 401


def test_login_malformed_body_is_server_error(client):
    resp = client.post("/api/auth/login", data="{not json", content_type="application/json")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Something went wrong"}


def test_register_validation_error(client):
    resp = client.post("/api/auth/register", json={"email": "a@b.c", "password": "123", "age": 20, "name": "Ann"})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Password must be at least 6 characters long."}


def test_register_success(client):
    resp = client.post(
        "/api/auth/register",
        json={"email": "a@b.c", "password": "123456", "age": 20, "name": "Ann"},
    )
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True}


def test_register_malformed_body_is_server_error(client):
    resp = client.post("/api/auth/register", data="[1, 2", content_type="application/json")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Something went wrong during registration."}
