"""Base classes for all model adapters."""
from dataclasses import dataclass, field
from enum import Enum

from opentelemetry.context import Context


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass
class ChatMessage:
    role: MessageRole | str
    content: str


@dataclass
class ModelResponse:
    segments: list[str] = field(default_factory=list)
    model: str = ""
    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def text(self) -> str:
        """All text segments, newline-joined in the order received."""
        return "\n".join(self.segments)


class ModelAdapter:
    """Abstract base. All provider adapters must implement this."""

    def __init__(self, api_key: str | None = None):
        self.api_key = api_key

    def chat(
        self,
        messages: list[ChatMessage],
        *,
        system: str | None = None,
        max_tokens: int = 1024,
        scope: Context | None = None,
    ) -> ModelResponse:
        """
        Send the full transcript and return the reply.

        ``scope`` is the tracing context of the calling turn; any span the
        adapter opens must use it as parent.
        """
        raise NotImplementedError

    @property
    def provider_name(self) -> str:
        raise NotImplementedError

    @property
    def model_name(self) -> str:
        raise NotImplementedError
