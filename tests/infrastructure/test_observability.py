"""Structured Logging — tests for JSONFormatter and setup_logging."""

import json
import sys
import logging

import pytest

from meeting_assistant.infrastructure.observability import JSONFormatter, setup_logging


def _record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="meeting_assistant.test", level=logging.INFO, pathname=__file__,
        lineno=1, msg=msg, args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    data = json.loads(JSONFormatter().format(_record()))
    assert data["level"] == "INFO"
    assert data["logger"] == "meeting_assistant.test"
    assert data["message"] == "hello"
    assert "timestamp" in data


def test_json_formatter_includes_known_extras():
    record = _record(request_type="summary", status_code=200, content_chars=12)
    data = json.loads(JSONFormatter().format(record))
    assert data["request_type"] == "summary"
    assert data["status_code"] == 200
    assert data["content_chars"] == 12


def test_json_formatter_drops_unknown_extras():
    data = json.loads(JSONFormatter().format(_record(content="秘密会议内容")))
    assert "content" not in data


def test_json_formatter_keeps_non_ascii():
    output = JSONFormatter().format(_record("会议纪要已生成"))
    assert "会议纪要已生成" in output


def test_json_formatter_renders_exception():
    try:
        raise ValueError("bad")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    data = json.loads(JSONFormatter().format(record))
    assert "ValueError: bad" in data["exception"]


@pytest.fixture
def restore_root_logger():
    level = logging.root.level
    handlers = list(logging.root.handlers)
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)


@pytest.mark.usefixtures("restore_root_logger")
def test_setup_logging_json():
    handler = setup_logging("warning", "json")
    assert handler in logging.root.handlers
    assert isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.WARNING


@pytest.mark.usefixtures("restore_root_logger")
def test_setup_logging_text_and_unknown_level():
    handler = setup_logging("chatty", "text")
    assert not isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.INFO
