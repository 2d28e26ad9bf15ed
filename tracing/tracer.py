"""
TurnTracer: opens, decorates and closes one span per conversation turn.

Usage patterns:

1. Context manager (preferred, closes on success or error):
       with tracer.turn(thread_id, prompt) as (scope, span):
           response = model.chat(messages, scope=scope)
           tracer.complete_turn(span, response.text,
                                input_tokens=response.input_tokens,
                                output_tokens=response.output_tokens)

2. Manual begin/end (every begin_turn needs exactly one end_turn):
       scope, span = tracer.begin_turn(thread_id, prompt)
       ...
       tracer.end_turn(span)

The provider is passed in, never read from or installed into the global
OpenTelemetry state. ``scope`` is the value to hand to anything that opens
child spans.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.trace import Span, Status, StatusCode

from tracing import models

logger = logging.getLogger(__name__)


class TurnTracer:
    def __init__(
        self,
        provider: TracerProvider,
        *,
        trace_name: str,
        span_name: str = "chat_turn",
        instrumentation_name: str | None = None,
    ):
        self._provider = provider
        self._trace_name = trace_name
        self._span_name = span_name
        self._tracer = provider.get_tracer(instrumentation_name or trace_name)

    @property
    def tracer(self) -> trace.Tracer:
        """The underlying OpenTelemetry tracer, for child spans."""
        return self._tracer

    # ── turn lifecycle ─────────────────────────────────────────────
    def begin_turn(
        self,
        session_id: str,
        prompt: str,
        extra_attributes: dict | None = None,
    ) -> tuple[Context, Span]:
        """Open a top-level turn span with grouping + prompt attributes."""
        attributes = {
            models.TRACE_NAME: self._trace_name,
            models.SESSION_ID: session_id,
            models.SPAN_KIND: models.SpanKind.CHAIN.value,
            models.PROMPT: prompt,
        }
        if extra_attributes:
            attributes.update(extra_attributes)

        # Empty context: turns are siblings, grouped only by session_id
        span = self._tracer.start_span(
            self._span_name, context=Context(), attributes=attributes,
        )
        return trace.set_span_in_context(span), span

    def complete_turn(
        self,
        span: Span,
        response_text: str | None = None,
        *,
        input_tokens: int | None = None,
        output_tokens: int | None = None,
        extra_attributes: dict | None = None,
    ) -> None:
        """Set completion + usage attributes. Unknown fields are skipped."""
        attributes = {}
        if response_text is not None:
            attributes[models.COMPLETION] = response_text
        if input_tokens is not None:
            attributes[models.INPUT_TOKENS] = input_tokens
        if output_tokens is not None:
            attributes[models.OUTPUT_TOKENS] = output_tokens
        if extra_attributes:
            attributes.update(extra_attributes)
        if attributes:
            span.set_attributes(attributes)

    def end_turn(self, span: Span, error: BaseException | None = None) -> None:
        """Close the span. With ``error``, mark it failed first."""
        if error is not None:
            span.record_exception(error)
            span.set_status(Status(StatusCode.ERROR, str(error)))
        span.end()

    @contextmanager
    def turn(
        self,
        session_id: str,
        prompt: str,
        extra_attributes: dict | None = None,
    ) -> Iterator[tuple[Context, Span]]:
        """
        Context manager. Yields ``(scope, span)``.
        The span is ended exactly once; exceptions are recorded and re-raised.
        """
        scope, span = self.begin_turn(session_id, prompt, extra_attributes)
        try:
            yield scope, span
        except BaseException as exc:
            self.end_turn(span, error=exc)
            raise
        else:
            self.end_turn(span)

    # ── export ─────────────────────────────────────────────────────
    def flush_all(self, timeout: float) -> bool:
        """Export everything buffered, blocking up to ``timeout`` seconds."""
        done = self._provider.force_flush(timeout_millis=int(timeout * 1000))
        if not done:
            logger.warning("Trace flush did not complete within %.1fs", timeout)
        return done

    def shutdown(self) -> None:
        self._provider.shutdown()
