import json
import logging
from unittest.mock import patch

import pytest

from lama.config import DEFAULT_LOG_CONFIG_PATH
from lama.core import logging_config
from lama.core.logging_config import CustomJsonFormatter
from lama.core.request_context import set_request_id


def _record(msg="Test message", **extra):
    record = logging.LogRecord(
        name="lama.test",
        level=logging.INFO,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=None,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formatter_basic_fields():
    output = json.loads(CustomJsonFormatter().format(_record()))

    assert output["message"] == "Test message"
    assert output["level"] == "INFO"
    assert output["logger"] == "lama.test"
    assert "_time" in output
    assert "aws_request_id" not in output


def test_formatter_includes_request_id_from_context():
    set_request_id("req-42")
    output = json.loads(CustomJsonFormatter().format(_record()))
    assert output["aws_request_id"] == "req-42"


def test_formatter_includes_extra_fields():
    output = json.loads(CustomJsonFormatter().format(_record(path="/x", status_code=200)))
    assert output["path"] == "/x"
    assert output["status_code"] == 200


@pytest.fixture
def lama_logger():
    return logging.getLogger("lama")


def test_setup_logging_missing_file_falls_back_to_basic_config(tmp_path):
    with patch.object(logging_config.logging, "basicConfig") as mock_basic:
        logging_config.setup_logging(str(tmp_path / "missing.yml"))
    mock_basic.assert_called_once_with(level=logging.INFO)


def test_setup_logging_substitutes_environment(tmp_path, monkeypatch, lama_logger):
    config_file = tmp_path / "logging.yml"
    config_file.write_text(
        "version: 1\n"
        "disable_existing_loggers: false\n"
        "loggers:\n"
        "  lama:\n"
        "    level: ${LOG_LEVEL}\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    logging_config.setup_logging(str(config_file))

    assert lama_logger.level == logging.DEBUG


def test_packaged_config_uses_json_formatter(monkeypatch, lama_logger):
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    logging_config.setup_logging(DEFAULT_LOG_CONFIG_PATH)

    assert lama_logger.level == logging.INFO
    assert any(
        isinstance(handler.formatter, CustomJsonFormatter)
        for handler in lama_logger.handlers
    )
