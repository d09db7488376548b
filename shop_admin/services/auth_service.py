from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from shop_admin.config.model import AuthConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AuthResult:
    ok: bool
    status: int
    error: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        if self.ok:
            return {"success": True}
        return {"error": self.error}


def _blank(value: Any) -> bool:
    # None, "" and 0 count as missing; whitespace-only strings do not
    return value is None or value == "" or (isinstance(value, (int, float)) and value == 0)


class AuthService:
    """
    Mock authentication: one hard-wired account for login, field checks
    only for registration. Nothing is stored.
    """

    def __init__(self, config: Optional[AuthConfig] = None):
        self.config = config or AuthConfig()

    def login(self, email: Any, password: Any) -> AuthResult:
        if email == self.config.demo_email and password == self.config.demo_password:
            logger.info("Login succeeded", extra={"email": email})
            return AuthResult(ok=True, status=200)

        logger.info("Login rejected", extra={"email": email})
        return AuthResult(ok=False, status=401, error="Invalid email or password")

    def register(self, email: Any, password: Any, age: Any, name: Any) -> AuthResult:
        if any(_blank(v) for v in (email, password, age, name)):
            return AuthResult(ok=False, status=400, error="All fields are required.")

        min_len = self.config.min_password_length
        if len(str(password)) < min_len:
            return AuthResult(
                ok=False,
                status=400,
                error=f"Password must be at least {min_len} characters long.",
            )

        logger.info("Registration accepted", extra={"email": email})
        return AuthResult(ok=True, status=200)
