"""Common test fixtures."""

from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest
from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from core.errors import ModelProviderError
from core.models.base import ChatMessage, ModelAdapter, ModelResponse
from tracing.tracer import TurnTracer


@dataclass
class FakeModel(ModelAdapter):
    """Scripted model: pops one reply (or exception) per call."""

    replies: list = field(default_factory=list)
    calls: list[dict] = field(default_factory=list)
    tracer: trace.Tracer | None = None

    def chat(
        self,
        messages: list[ChatMessage],
        *,
        system: str | None = None,
        max_tokens: int = 1024,
        scope: Context | None = None,
    ) -> ModelResponse:
        self.calls.append({
            "messages": list(messages),
            "system": system,
            "max_tokens": max_tokens,
            "scope": scope,
        })
        if self.tracer is not None:
            self.tracer.start_span("fake.llm", context=scope).end()
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    @property
    def provider_name(self) -> str:
        return "fake"

    @property
    def model_name(self) -> str:
        return "fake-model"


def reply(*segments: str, input_tokens: int = 10, output_tokens: int = 5) -> ModelResponse:
    return ModelResponse(
        segments=list(segments), model="fake-model",
        input_tokens=input_tokens, output_tokens=output_tokens,
    )


def failure(message: str = "connection reset") -> ModelProviderError:
    return ModelProviderError("fake", message)


@pytest.fixture
def otel_env() -> Iterator[tuple[TracerProvider, InMemorySpanExporter]]:
    """Isolated OTel TracerProvider with in-memory exporter."""
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    yield provider, exporter
    provider.shutdown()


@pytest.fixture
def turn_tracer(otel_env) -> TurnTracer:
    provider, _ = otel_env
    return TurnTracer(provider, trace_name="test-bot", span_name="chat_turn")


@pytest.fixture
def exporter(otel_env) -> InMemorySpanExporter:
    return otel_env[1]
