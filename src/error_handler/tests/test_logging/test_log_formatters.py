import json
import logging
import sys

from error_handler.core.logging.formatters import ColorFormatter, JsonFormatter


def make_record(exc_info=None):
    return logging.LogRecord("error_handler.api", logging.ERROR, __file__, 10, "Unhandled exception for %s", ("/crash",), exc_info)


def test_json_formatter_basic_fields():
    rec = make_record()
    rec.request_id = "req-1"
    rec.status = 500
    rec.error_type = "ZeroDivisionError"

    data = json.loads(JsonFormatter(env="testing", service="svc").format(rec))

    assert data["message"] == "Unhandled exception for /crash"
    assert data["level"] == "ERROR"
    assert data["service"] == "svc"
    assert data["env"] == "testing"
    assert data["request_id"] == "req-1"
    assert data["status"] == 500
    assert data["error_type"] == "ZeroDivisionError"
    assert "timestamp" in data
    assert "version" in data
    # standard LogRecord attributes are not repeated as extras
    assert "args" not in data
    assert "msg" not in data


def test_json_formatter_includes_traceback():
    try:
        1 / 0
    except ZeroDivisionError:
        rec = make_record(exc_info=sys.exc_info())

    data = json.loads(JsonFormatter().format(rec))
    assert "ZeroDivisionError" in data["exc_info"]


def test_json_formatter_non_serializable_extra():
    class Opaque:
        def __repr__(self):
            return "<Opaque>"

    rec = make_record()
    rec.obj = Opaque()

    data = json.loads(JsonFormatter().format(rec))
    assert data["obj"] == "<Opaque>"


def test_color_formatter_line_layout():
    rec = make_record()
    rec.request_id = "req-9"

    line = ColorFormatter().format(rec)

    assert "req-9" in line
    assert line.endswith("Unhandled exception for /crash")
    assert ColorFormatter.COLOR_CODES["ERROR"] in line
