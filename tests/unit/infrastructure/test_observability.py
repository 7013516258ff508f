"""Unit tests for correlation ids, log helpers and request metrics."""

import logging
import uuid
from types import SimpleNamespace

import pytest

from warden.infrastructure.observability import (
    CorrelationIdFilter,
    RequestMetrics,
    correlation_id_var,
    endpoint_label,
    resolve_correlation_id,
)
from warden.infrastructure.observability.context import is_valid_correlation_id
from warden.infrastructure.observability.logging import REDACTED, sanitize
from warden.infrastructure.observability.metrics import UNMATCHED_ENDPOINT

VALID_ID = "3f2b8c1e-9d4a-4f6e-8a7b-1c2d3e4f5a6b"


class TestResolveCorrelationId:
    @pytest.mark.parametrize(
        "header", ["X-Correlation-ID", "X-Request-ID", "X-Trace-ID"]
    )
    def test_echoes_valid_uuid_from_any_header(self, header):
        assert resolve_correlation_id({header: VALID_ID}) == VALID_ID

    def test_header_priority(self):
        other = str(uuid.uuid4())
        headers = {"X-Request-ID": other, "X-Correlation-ID": VALID_ID}

        assert resolve_correlation_id(headers) == VALID_ID

    def test_malformed_value_is_replaced(self):
        result = resolve_correlation_id({"X-Correlation-ID": "not-a-uuid"})

        assert result != "not-a-uuid"
        assert uuid.UUID(result).version == 4

    def test_malformed_first_header_does_not_fall_through(self):
        headers = {"X-Correlation-ID": "garbage", "X-Request-ID": VALID_ID}

        assert resolve_correlation_id(headers) != VALID_ID

    def test_generates_when_absent(self):
        first = resolve_correlation_id({})
        second = resolve_correlation_id({})

        assert is_valid_correlation_id(first)
        assert first != second

    @pytest.mark.parametrize("value", [None, "", "123", "zzzzzzzz-zzzz"])
    def test_is_valid_correlation_id_rejects(self, value):
        assert is_valid_correlation_id(value) is False


class TestCorrelationIdFilter:
    def _record(self):
        return logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)

    def test_stamps_current_id(self):
        token = correlation_id_var.set(VALID_ID)
        try:
            record = self._record()
            assert CorrelationIdFilter().filter(record) is True
            assert record.correlation_id == VALID_ID
        finally:
            correlation_id_var.reset(token)

    def test_placeholder_outside_request(self):
        record = self._record()
        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"


class TestSanitize:
    def test_redacts_sensitive_keys_case_insensitively(self):
        values = {"Authorization": "Bearer x", "user-agent": "curl", "Cookie": "a=b"}

        assert sanitize(values) == {
            "Authorization": REDACTED,
            "user-agent": "curl",
            "Cookie": REDACTED,
        }


class TestRequestMetrics:
    def test_endpoint_label_is_route_template(self):
        route = SimpleNamespace(path_format="/user/{user_id}")

        assert endpoint_label({"route": route, "path": f"/user/{VALID_ID}"}) == (
            "/user/{user_id}"
        )

    @pytest.mark.parametrize(
        "scope",
        [
            {"path": "/wp-admin.php"},
            {"path": "/x", "route": None},
            {"path": "/x", "route": SimpleNamespace()},
        ],
    )
    def test_endpoint_label_without_matched_route(self, scope):
        assert endpoint_label(scope) == UNMATCHED_ENDPOINT

    def test_render_contains_recorded_series(self):
        metrics = RequestMetrics()
        metrics.record_request("/user", "GET", 200, 0.012)
        metrics.record_error("/user", "GET", "FORBIDDEN")

        body, content_type = metrics.render()
        text = body.decode()

        assert content_type.startswith("text/plain")
        assert (
            'warden_http_requests_total{endpoint="/user",method="GET",status="200"} 1.0'
            in text
        )
        assert "warden_http_request_duration_seconds_bucket" in text
        assert 'error_type="FORBIDDEN"' in text

    def test_unknown_methods_share_one_label(self):
        metrics = RequestMetrics()
        for method in ("PROPFIND", "brew", "XYZZY"):
            metrics.record_request(UNMATCHED_ENDPOINT, method, 405, 0.001)

        text = metrics.render()[0].decode()

        assert (
            'warden_http_requests_total{endpoint="unmatched",method="OTHER",status="405"} 3.0'
            in text
        )
        assert "PROPFIND" not in text

    def test_registries_are_independent(self):
        first, second = RequestMetrics(), RequestMetrics()
        first.record_request("/user", "GET", 200, 0.01)

        assert b"/user" not in second.render()[0]
