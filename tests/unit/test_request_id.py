"""Tests for request id sanitizing and log record enrichment."""

import logging
import uuid

from firmdesk.middleware.request_id import sanitize_request_id
from firmdesk.shared.telemetry.logging import RequestIdFilter, request_id_var


def test_safe_client_id_is_kept() -> None:
    assert sanitize_request_id("  abc-123_XYZ ") == "abc-123_XYZ"


def test_unsafe_or_missing_id_is_replaced() -> None:
    for raw in (None, "", "has space", "line\nbreak", "x" * 65):
        value = sanitize_request_id(raw)
        assert str(uuid.UUID(value)) == value


def test_filter_adds_current_request_id() -> None:
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    token = request_id_var.set("req-42")
    try:
        assert RequestIdFilter().filter(record)
    finally:
        request_id_var.reset(token)
    assert record.request_id == "req-42"
