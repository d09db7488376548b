from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from shop_admin.services.auth_service import AuthService

logger = logging.getLogger(__name__)


def register_auth_routes(server: Flask, auth_service: AuthService) -> None:
    """
    JSON endpoints for the login / register stubs, mounted on Dash's Flask server.
    """

    @server.post("/api/auth/login")
    def api_login():
        try:
            body = request.get_json(force=True)
            result = auth_service.login(body.get("email"), body.get("password"))
        except Exception:
            logger.exception("Login error")
            return jsonify({"error": "Something went wrong"}), 500

        return jsonify(result.to_payload()), result.status

    @server.post("/api/auth/register")
    def api_register():
        try:
            body = request.get_json(force=True)
            result = auth_service.register(
                body.get("email"),
                body.get("password"),
                body.get("age"),
                body.get("name"),
            )
        except Exception:
            logger.exception("Registration error")
            return jsonify({"error": "Something went wrong during registration."}), 500

        return jsonify(result.to_payload()), result.status
