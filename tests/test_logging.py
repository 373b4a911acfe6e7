import json
import logging

from emojified.core.logging import JsonFormatter, RequestIdFilter, request_id_var


def _record(msg="hello"):
    return logging.LogRecord("emojified.test", logging.INFO, __file__, 1, msg, None, None)


def test_json_formatter_payload():
    out = json.loads(JsonFormatter().format(_record()))
    assert out == {"level": "INFO", "msg": "hello", "logger": "emojified.test"}


def test_request_id_filter_uses_context():
    record = _record()
    token = request_id_var.set("rid-1")
    try:
        assert RequestIdFilter().filter(record) is True
    finally:
        request_id_var.reset(token)
    assert json.loads(JsonFormatter().format(record))["request_id"] == "rid-1"


def test_no_request_id_outside_requests():
    record = _record()
    RequestIdFilter().filter(record)
    assert "request_id" not in json.loads(JsonFormatter().format(record))
