"""Tests for the turn span lifecycle."""

from unittest.mock import MagicMock

import pytest
from opentelemetry import trace
from opentelemetry.trace import StatusCode

from tracing import models
from tracing.tracer import TurnTracer


class TestBeginTurn:
    def test_sets_grouping_and_prompt_at_start(self, turn_tracer, exporter):
        scope, span = turn_tracer.begin_turn("thread-1", "hello", {"itsm.category": "demo"})
        turn_tracer.end_turn(span)

        (finished,) = exporter.get_finished_spans()
        assert finished.name == "chat_turn"
        assert finished.attributes[models.TRACE_NAME] == "test-bot"
        assert finished.attributes[models.SESSION_ID] == "thread-1"
        assert finished.attributes[models.SPAN_KIND] == "chain"
        assert finished.attributes[models.PROMPT] == "hello"
        assert finished.attributes["itsm.category"] == "demo"

    def test_turns_are_top_level(self, turn_tracer, exporter):
        with turn_tracer.tracer.start_as_current_span("ambient"):
            _, span = turn_tracer.begin_turn("thread-1", "hi")
            turn_tracer.end_turn(span)

        turn = next(s for s in exporter.get_finished_spans() if s.name == "chat_turn")
        assert turn.parent is None

    def test_scope_parents_child_spans(self, turn_tracer, exporter):
        scope, span = turn_tracer.begin_turn("thread-1", "hi")
        turn_tracer.tracer.start_span("child", context=scope).end()
        turn_tracer.end_turn(span)

        spans = {s.name: s for s in exporter.get_finished_spans()}
        child, turn = spans["child"], spans["chat_turn"]
        assert child.parent.span_id == turn.context.span_id
        assert child.context.trace_id == turn.context.trace_id
        assert trace.get_current_span(scope) is span


class TestCompleteTurn:
    def test_sets_completion_and_usage(self, turn_tracer, exporter):
        _, span = turn_tracer.begin_turn("t", "q")
        turn_tracer.complete_turn(span, "answer", input_tokens=12, output_tokens=34,
                                  extra_attributes={"x.extra": "y"})
        turn_tracer.end_turn(span)

        attrs = exporter.get_finished_spans()[0].attributes
        assert attrs[models.COMPLETION] == "answer"
        assert attrs[models.INPUT_TOKENS] == 12
        assert attrs[models.OUTPUT_TOKENS] == 34
        assert attrs["x.extra"] == "y"

    def test_unknown_fields_are_skipped(self, turn_tracer, exporter):
        _, span = turn_tracer.begin_turn("t", "q")
        turn_tracer.complete_turn(span, None, input_tokens=3)
        turn_tracer.end_turn(span)

        attrs = exporter.get_finished_spans()[0].attributes
        assert models.COMPLETION not in attrs
        assert models.OUTPUT_TOKENS not in attrs
        assert attrs[models.INPUT_TOKENS] == 3


class TestTurnContextManager:
    def test_closes_span_on_success(self, turn_tracer, exporter):
        with turn_tracer.turn("t", "q") as (scope, span):
            assert span.is_recording()

        (finished,) = exporter.get_finished_spans()
        assert finished.status.status_code is StatusCode.UNSET

    def test_closes_span_on_error_and_reraises(self, turn_tracer, exporter):
        with pytest.raises(RuntimeError, match="boom"):
            with turn_tracer.turn("t", "q"):
                raise RuntimeError("boom")

        (finished,) = exporter.get_finished_spans()
        assert finished.status.status_code is StatusCode.ERROR
        assert finished.events[0].name == "exception"
        assert models.COMPLETION not in finished.attributes


class TestFlush:
    def test_flush_all_passes_timeout_in_millis(self):
        provider = MagicMock()
        provider.force_flush.return_value = True
        tracer = TurnTracer(provider, trace_name="t")

        assert tracer.flush_all(2.5) is True
        provider.force_flush.assert_called_once_with(timeout_millis=2500)

    def test_flush_all_reports_timeout(self):
        provider = MagicMock()
        provider.force_flush.return_value = False
        tracer = TurnTracer(provider, trace_name="t")

        assert tracer.flush_all(1.0) is False

    def test_shutdown_releases_provider(self):
        provider = MagicMock()
        TurnTracer(provider, trace_name="t").shutdown()
        provider.shutdown.assert_called_once_with()
