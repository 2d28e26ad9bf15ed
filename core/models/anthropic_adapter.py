"""Anthropic Claude adapter with tracing."""
import logging

import anthropic
from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.trace import Status, StatusCode

from core.config import DEFAULT_MODEL
from core.errors import ModelProviderError
from core.models.base import ModelAdapter, ChatMessage, MessageRole, ModelResponse
from tracing import models as attrs

logger = logging.getLogger(__name__)


class AnthropicAdapter(ModelAdapter):
    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        *,
        tracer: trace.Tracer | None = None,
        client: anthropic.Anthropic | None = None,
    ):
        super().__init__(api_key=api_key)
        self._model = model
        self._tracer = tracer or trace.NoOpTracer()
        self._client = client or anthropic.Anthropic(api_key=api_key)

    @property
    def provider_name(self) -> str:
        return "anthropic"

    @property
    def model_name(self) -> str:
        return self._model

    def _mark_failed(self, span, error: BaseException) -> None:
        span.record_exception(error)
        span.set_status(Status(StatusCode.ERROR, str(error)))

    def _format_messages(self, messages: list[ChatMessage]) -> list[dict]:
        """Convert to Anthropic format."""
        converted = []
        for msg in messages:
            converted.append({
                "role": MessageRole(msg.role).value,
                "content": [{"type": "text", "text": msg.content}],
            })
        return converted

    def chat(
        self,
        messages: list[ChatMessage],
        *,
        system: str | None = None,
        max_tokens: int = 1024,
        scope: Context | None = None,
    ) -> ModelResponse:
        """Call Anthropic API. Every call is traced as an llm span under ``scope``."""
        span = self._tracer.start_span(
            "anthropic.messages",
            context=scope,
            attributes={
                attrs.SPAN_KIND: attrs.SpanKind.LLM.value,
                attrs.GEN_AI_SYSTEM: self.provider_name,
                attrs.REQUEST_MODEL: self._model,
                attrs.REQUEST_MAX_TOKENS: max_tokens,
            },
        )

        kwargs = {
            "model": self._model,
            "max_tokens": max_tokens,
            "messages": self._format_messages(messages),
        }
        if system:
            kwargs["system"] = [{"type": "text", "text": system}]

        try:
            response = self._client.messages.create(**kwargs)
            segments = [block.text for block in response.content if block.type == "text"]
            span.set_attributes({
                attrs.RESPONSE_MODEL: response.model,
                attrs.INPUT_TOKENS: response.usage.input_tokens,
                attrs.OUTPUT_TOKENS: response.usage.output_tokens,
            })
        except anthropic.APIError as e:
            self._mark_failed(span, e)
            raise ModelProviderError(self.provider_name, str(e)) from e
        except BaseException as e:
            self._mark_failed(span, e)
            raise
        finally:
            span.end()

        logger.debug(
            "anthropic:%s in=%d out=%d",
            self._model, response.usage.input_tokens, response.usage.output_tokens,
        )
        return ModelResponse(
            segments=segments,
            model=response.model,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
        )
