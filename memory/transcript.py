"""Conversation transcript sent to the model on every turn."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from core.models.base import ChatMessage, MessageRole


@dataclass
class TranscriptEntry:
    """Single transcript entry."""
    role: MessageRole
    content: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Transcript:
    """Append-only conversation history. There is no server-side memory."""

    def __init__(self):
        self._entries: list[TranscriptEntry] = []

    def add(self, role: MessageRole, content: str) -> None:
        self._entries.append(TranscriptEntry(role=MessageRole(role), content=content))

    def to_messages(self) -> list[ChatMessage]:
        """Full history as chat messages, oldest first."""
        return [ChatMessage(role=e.role, content=e.content) for e in self._entries]

    @property
    def entries(self) -> tuple[TranscriptEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
