import json
import logging
import sys
from unittest.mock import patch

from functions_client.core import logging_config


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="functions_client.client",
        level=logging.WARNING,
        pathname="client.py",
        lineno=10,
        msg="Invocation of '%s' failed",
        args=("hello",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_custom_json_formatter_includes_extra_fields():
    formatter = logging_config.CustomJsonFormatter()
    log_json = json.loads(formatter.format(_record(error_kind="http", status_code=500)))

    assert log_json["message"] == "Invocation of 'hello' failed"
    assert log_json["level"] == "WARNING"
    assert log_json["logger"] == "functions_client.client"
    assert log_json["error_kind"] == "http"
    assert log_json["status_code"] == 500
    assert "_time" in log_json
    assert "lineno" not in log_json


def test_custom_json_formatter_includes_exception():
    formatter = logging_config.CustomJsonFormatter()
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()

    log_json = json.loads(formatter.format(record))
    assert "RuntimeError: boom" in log_json["exception"]


def test_setup_logging_falls_back_without_config(tmp_path):
    with patch("logging.basicConfig") as basic_config:
        logging_config.setup_logging(str(tmp_path / "missing.yml"), level="debug")

    basic_config.assert_called_once_with(level="DEBUG")


def test_setup_logging_substitutes_log_level(tmp_path, monkeypatch):
    config_file = tmp_path / "logging.yml"
    config_file.write_text(
        "\n".join(
            [
                "version: 1",
                "disable_existing_loggers: false",
                "loggers:",
                "  functions_client_test_setup:",
                "    level: ${LOG_LEVEL}",
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    logging_config.setup_logging(str(config_file))
    assert logging.getLogger("functions_client_test_setup").level == logging.ERROR

    logging_config.setup_logging(str(config_file), level="debug")
    assert logging.getLogger("functions_client_test_setup").level == logging.DEBUG


def test_packaged_logging_config_exists():
    assert logging_config.DEFAULT_CONFIG_PATH.name == "logging.yml"
    assert logging_config.DEFAULT_CONFIG_PATH.exists()
