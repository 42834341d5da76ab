"""
Tests for the structured logging configuration.
"""

from __future__ import annotations

import json
import logging

import pytest

from ads_strategist.logging_config import (
    StructuredFormatter,
    TimingContext,
    generate_request_id,
    request_id,
    setup_logging,
)


def _make_record(msg="test message", level=logging.INFO, **extra):
    record = logging.LogRecord("ads_strategist.test", level, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:

    def test_required_fields(self):
        entry = json.loads(StructuredFormatter("svc").format(_make_record()))

        assert entry["level"] == "INFO"
        assert entry["message"] == "test message"
        assert entry["service"] == "svc"
        assert entry["logger"] == "ads_strategist.test"
        assert entry["timestamp"].endswith("Z")

    def test_extra_fields_included(self):
        entry = json.loads(StructuredFormatter().format(_make_record(business_type="Real Estate")))
        assert entry["business_type"] == "Real Estate"
        assert "lineno" not in entry

    def test_request_id_included(self):
        token = request_id.set("abcd1234")
        try:
            entry = json.loads(StructuredFormatter().format(_make_record()))
        finally:
            request_id.reset(token)
        assert entry["request_id"] == "abcd1234"

    def test_non_ascii_kept(self):
        entry = StructuredFormatter().format(_make_record("مزید جانیں"))
        assert "مزید جانیں" in entry


class TestHelpers:

    def test_setup_logging_configures_package_logger(self):
        logger = setup_logging("svc", "debug")
        assert logger.name == "ads_strategist"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_request_id_length(self):
        assert len(generate_request_id()) == 8

    def test_timing_context_records_duration(self):
        logger = logging.getLogger("ads_strategist.test.timing")
        with TimingContext("unit", logger) as timer:
            pass
        assert timer.duration_ms is not None and timer.duration_ms >= 0

    def test_timing_context_does_not_swallow(self):
        logger = logging.getLogger("ads_strategist.test.timing")
        with pytest.raises(RuntimeError):
            with TimingContext("unit", logger):
                raise RuntimeError("boom")
