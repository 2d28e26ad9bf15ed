"""Conversation memory."""

from memory.transcript import Transcript, TranscriptEntry

__all__ = [
    "Transcript",
    "TranscriptEntry",
]
