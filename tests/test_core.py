import json
import logging

import pytest

from expense_api.core.config import Settings
from expense_api.core.logging import JsonFormatter, RequestIdFilter, request_id_ctx


def test_settings_prefix_normalized():
    settings = Settings(api_prefix=" api/ ")
    settings.init_post_load()
    assert settings.api_prefix == "/api"


def test_settings_empty_origin_rejected():
    settings = Settings(cors_allow_origin=" ")
    with pytest.raises(ValueError):
        settings.init_post_load()


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("SEED_DEMO_DATA", "false")
    monkeypatch.setenv("APP_NAME", "Ledger")
    settings = Settings()
    assert settings.seed_demo_data is False
    assert settings.app_name == "Ledger"


def _record(msg="hello", **extra):
    record = logging.LogRecord("expense_api.test", logging.INFO, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_request_id_and_fields():
    token = request_id_ctx.set("rid-1")
    try:
        record = _record(fields={"expense_id": "e9"})
        RequestIdFilter().filter(record)
        line = json.loads(JsonFormatter().format(record))
    finally:
        request_id_ctx.reset(token)
    assert line["message"] == "hello"
    assert line["level"] == "INFO"
    assert line["logger"] == "expense_api.test"
    assert line["request_id"] == "rid-1"
    assert line["expense_id"] == "e9"


def test_request_id_defaults_to_dash():
    record = _record()
    RequestIdFilter().filter(record)
    assert json.loads(JsonFormatter().format(record))["request_id"] == "-"
