"""
Structured Logging Tests

Tests the JSON formatter, the request-id filter and the access-log middleware.
"""

import json
import logging

from cms_sdk.middleware.logging import RequestIdFilter, StructuredFormatter, request_id_var


def _record(**extra):
    record = logging.LogRecord("cms.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    def test_formats_json_line(self):
        data = json.loads(StructuredFormatter().format(_record(request_id="r-1")))
        assert data["message"] == "hello world"
        assert data["level"] == "WARNING"
        assert data["logger"] == "cms.test"
        assert data["request_id"] == "r-1"
        assert "timestamp" in data

    def test_includes_request_fields(self):
        data = json.loads(StructuredFormatter().format(_record(path="/v1/render", status_code=400, error_code="X")))
        assert data["path"] == "/v1/render"
        assert data["status_code"] == 400
        assert data["error_code"] == "X"

    def test_omits_absent_fields(self):
        data = json.loads(StructuredFormatter().format(_record()))
        assert "method" not in data
        assert data["request_id"] == ""


class TestRequestIdFilter:
    def test_attaches_current_request_id(self):
        token = request_id_var.set("req-9")
        try:
            record = _record()
            assert RequestIdFilter().filter(record) is True
            assert record.request_id == "req-9"
        finally:
            request_id_var.reset(token)


class TestRequestLoggingMiddleware:
    def test_logs_requests(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="cms.access"):
            client.get("/v1/pages/missing")
        messages = [r.getMessage() for r in caplog.records if r.name == "cms.access"]
        assert any("GET /v1/pages/missing - 404" in message for message in messages)

    def test_health_not_logged(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="cms.access"):
            client.get("/health")
        assert not [r for r in caplog.records if r.name == "cms.access"]
