from __future__ import annotations

import json
import logging

import pytest
from pythonjsonlogger import jsonlogger

from shop_admin.logging_config import configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_is_default(monkeypatch):
    monkeypatch.delenv("SHOP_ADMIN_LOG_FORMAT", raising=False)
    configure_logging()

    (handler,) = logging.getLogger().handlers
    assert isinstance(handler.formatter, jsonlogger.JsonFormatter)


def test_plain_format_from_env(monkeypatch):
    monkeypatch.setenv("SHOP_ADMIN_LOG_FORMAT", "plain")
    configure_logging()

    (handler,) = logging.getLogger().handlers
    assert not isinstance(handler.formatter, jsonlogger.JsonFormatter)


def test_level_from_env(monkeypatch):
    monkeypatch.setenv("SHOP_ADMIN_LOG_LEVEL", "debug")
    configure_logging()
    assert logging.getLogger().level == logging.DEBUG

    monkeypatch.setenv("SHOP_ADMIN_LOG_LEVEL", "not-a-level")
    configure_logging()
    assert logging.getLogger().level == logging.INFO


def test_extra_fields_become_json_keys():
    configure_logging(force_format="json")
    (handler,) = logging.getLogger().handlers

    record = logging.LogRecord("shop_admin.test", logging.INFO, __file__, 1, "Records deleted", None, None)
    record.n_deleted = 3

    payload = json.loads(handler.formatter.format(record))
    assert payload["message"] == "Records deleted"
    assert payload["n_deleted"] == 3
    assert payload["name"] == "shop_admin.test"
