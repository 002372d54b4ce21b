"""Formatter and logging configuration tests."""

import json
import logging
import sys

from notetaking.core.logging import (
    ColoredFormatter,
    JSONFormatter,
    build_logging_config,
    get_log_level,
    get_logger,
)


def _record(msg="hello", **extra):
    record = logging.LogRecord("notetaking.test", logging.INFO, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    line = JSONFormatter().format(_record(request_id="abc", status_code=200))
    data = json.loads(line)

    assert data["message"] == "hello"
    assert data["level"] == "INFO"
    assert data["logger"] == "notetaking.test"
    assert data["extra"] == {"request_id": "abc", "status_code": 200}


def test_json_formatter_includes_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()

    data = json.loads(JSONFormatter().format(record))
    assert data["exception"]["type"] == "ValueError"
    assert "bad" in data["exception"]["traceback"]


def test_colored_formatter_leaves_record_untouched():
    record = _record()
    ColoredFormatter("%(levelname)s %(message)s").format(record)
    assert record.levelname == "INFO"


def test_get_log_level():
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("nonsense") == logging.INFO


def test_get_logger_namespace():
    assert get_logger("x").name == "notetaking.x"


def test_file_handlers_only_when_enabled(monkeypatch, tmp_path):
    from notetaking.core import logging as logging_module

    config = build_logging_config()
    assert set(config["handlers"]) == {"console"}

    settings = logging_module.get_settings().model_copy(
        update={"log_to_file": True, "log_dir": str(tmp_path)}
    )
    monkeypatch.setattr(logging_module, "get_settings", lambda: settings)
    config = build_logging_config()
    assert set(config["handlers"]) == {"console", "file", "error_file"}
    assert config["loggers"]["notetaking"]["handlers"] == ["console", "file", "error_file"]
