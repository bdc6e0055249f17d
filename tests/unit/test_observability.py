"""Tests for observability/logger.py and observability/metrics.py."""

from __future__ import annotations

import io
import json
import logging
import sys

from buildinify.observability import (
    MetricsHook,
    NoopMetricsHook,
    StructuredFormatter,
    get_logger,
    resolve_metrics,
)


class TestStructuredFormatter:
    def _get_record(self, msg, level=logging.INFO, exc_info=None, extra_fields=None):
        record = logging.LogRecord(
            name="test",
            level=level,
            pathname="",
            lineno=0,
            msg=msg,
            args=(),
            exc_info=exc_info,
        )
        if extra_fields is not None:
            record.extra_fields = extra_fields
        return record

    def test_basic_format(self):
        result = json.loads(StructuredFormatter().format(self._get_record("hello")))
        assert result["message"] == "hello"
        assert result["level"] == "INFO"
        assert result["logger"] == "test"
        assert "ts" in result

    def test_extra_fields_merged(self):
        record = self._get_record("msg", extra_fields={"page_id": "abc", "blocks": 5})
        result = json.loads(StructuredFormatter().format(record))
        assert result["page_id"] == "abc"
        assert result["blocks"] == 5

    def test_exception_included(self):
        try:
            raise ValueError("test error")
        except ValueError:
            exc_info = sys.exc_info()
        result = json.loads(StructuredFormatter().format(self._get_record("err", exc_info=exc_info)))
        assert "ValueError" in result["exception"]

    def test_non_ascii_kept(self):
        line = StructuredFormatter().format(self._get_record("页面 📄"))
        assert "页面 📄" in line

    def test_unserialisable_extra_uses_str(self):
        record = self._get_record("msg", extra_fields={"obj": object()})
        result = json.loads(StructuredFormatter().format(record))
        assert result["obj"].startswith("<object object")


class TestGetLogger:
    def test_writes_json_lines(self):
        stream = io.StringIO()
        log = get_logger("buildinify.test.json", stream=stream)
        log.info("ready", extra={"extra_fields": {"op": "start"}})
        entry = json.loads(stream.getvalue().strip())
        assert entry["message"] == "ready"
        assert entry["op"] == "start"
        assert entry["logger"] == "buildinify.test.json"

    def test_idempotent(self):
        first = get_logger("buildinify.test.idem", stream=io.StringIO())
        second = get_logger("buildinify.test.idem", stream=io.StringIO())
        assert first is second
        assert len(first.handlers) == 1

    def test_does_not_propagate(self):
        assert get_logger("buildinify.test.prop", stream=io.StringIO()).propagate is False

    def test_string_level(self):
        stream = io.StringIO()
        log = get_logger("buildinify.test.level", level="warning", stream=stream)
        log.info("hidden")
        log.warning("shown")
        lines = stream.getvalue().strip().splitlines()
        assert [json.loads(line)["message"] for line in lines] == ["shown"]


class TestMetrics:
    def test_noop_satisfies_protocol(self):
        assert isinstance(NoopMetricsHook(), MetricsHook)

    def test_recording_hook_satisfies_protocol(self, metrics):
        assert isinstance(metrics, MetricsHook)

    def test_noop_accepts_all_calls(self):
        hook = NoopMetricsHook()
        hook.increment("a")
        hook.increment("a", 3, tags={"k": "v"})
        hook.timing("b", 1.5)
        hook.gauge("c", 2.0, tags=None)

    def test_resolve_metrics(self, metrics):
        assert resolve_metrics(metrics) is metrics
        assert isinstance(resolve_metrics(None), NoopMetricsHook)
        assert resolve_metrics(None) is resolve_metrics(None)
