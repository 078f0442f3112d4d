"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

import time

import pytest

from zillion.services.result import ServiceResult
from zillion.services.telemetry import (
    Span,
    _current_span,
    enable_telemetry,
    trace_span,
    traced,
)


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        assert Span(name="test").duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.002)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "duration_ms" in d
        assert "children" not in d
        assert "annotations" not in d

    def test_to_dict_with_children_and_annotations(self) -> None:
        root = Span(name="root")
        child = Span(name="child", parent=root)
        root.children.append(child)
        child.annotate("groups", 4)
        child.end()
        root.end()
        d = root.to_dict()
        assert d["children"][0]["name"] == "child"
        assert d["children"][0]["annotations"] == {"groups": 4}


class _Service:
    @traced
    def run(self, fail: bool = False) -> ServiceResult:
        with trace_span("step") as span:
            if span:
                span.annotate("k", "v")
            if fail:
                raise RuntimeError("boom")
        return ServiceResult(ok=True, op="run", meta={"existing": 1})


class TestDisabled:
    def test_trace_span_yields_none(self) -> None:
        with trace_span("x") as span:
            assert span is None

    def test_traced_leaves_meta_alone(self) -> None:
        result = _Service().run()
        assert result.meta == {"existing": 1}


class TestEnabled:
    def test_meta_merged(self) -> None:
        enable_telemetry()
        result = _Service().run()
        assert result.meta is not None
        assert result.meta["existing"] == 1
        tree = result.meta["telemetry"]
        assert tree["name"] == "_Service.run"
        assert tree["children"][0]["annotations"] == {"k": "v"}

    def test_trace_span_without_parent_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("orphan") as span:
            assert span is None

    def test_exception_propagates_and_span_resets(self) -> None:
        enable_telemetry()
        with pytest.raises(RuntimeError):
            _Service().run(fail=True)
        assert _current_span.get() is None
