# tests/core/test_config_logging.py
import json
import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from soulsync.core.config import (
    get_database_settings,
    get_openai_settings,
    get_settings,
)
from soulsync.core.exceptions import ConflictError, NotFoundError, ValidationError
from soulsync.core.logging_config import CustomJsonFormatter, setup_logging


@pytest.fixture
def fresh_settings():
    for getter in (get_settings, get_database_settings, get_openai_settings):
        getter.cache_clear()
    yield
    for getter in (get_settings, get_database_settings, get_openai_settings):
        getter.cache_clear()


# --- Settings ---

def test_settings_read_prefixed_env(monkeypatch, fresh_settings):
    monkeypatch.setenv("SOULSYNC_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db/soulsync")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("OPENAI_MAX_RETRIES", "5")

    assert get_settings().log_level == "DEBUG"
    assert get_database_settings().url == "postgresql+asyncpg://u:p@db/soulsync"
    openai = get_openai_settings()
    assert openai.api_key == "sk-test"
    assert openai.max_retries == 5
    assert openai.model == "gpt-4o"


def test_openai_key_is_optional(monkeypatch, fresh_settings):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    assert get_openai_settings().api_key is None


# --- Logging ---

def test_json_formatter_fields():
    formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(module)s %(lineno)d %(message)s')
    record = logging.LogRecord("soulsync.test", logging.WARNING, __file__, 12, "profile %s", ("saved",), None)
    output = json.loads(formatter.format(record))
    assert output["level"] == "WARNING"
    assert output["message"] == "profile saved"
    assert output["name"] == "soulsync.test"
    assert output["lineno"] == 12
    assert output["service"] == "soulsync"
    assert "timestamp" in output


def test_formatter_uses_current_json_module():
    assert issubclass(CustomJsonFormatter, JsonFormatter)


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    setup_logging("INFO")
    setup_logging("WARNING")
    json_handlers = [h for h in root.handlers if isinstance(h.formatter, CustomJsonFormatter)]
    assert len(json_handlers) == 1
    assert root.level == logging.WARNING
    assert logging.getLogger("httpx").level == logging.WARNING
    setup_logging("INFO")


# --- Errors ---

def test_error_payloads():
    assert NotFoundError("Conversation", 3).to_dict() == {
        "error": "not_found",
        "message": "Conversation 3 not found",
        "details": "id=3",
    }
    assert ConflictError("Assessment is already complete").status_code == 409
    error = ValidationError("Bad value", field="rootAnswer")
    assert error.status_code == 400
    assert error.details == "field=rootAnswer"
