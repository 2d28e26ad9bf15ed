"""Per-bot settings: span names, prompts and extra turn attributes."""
from dataclasses import dataclass, field
from typing import Callable

from itsm import ITSM_SYSTEM_PROMPT, ticket_draft_attributes


@dataclass(frozen=True)
class BotProfile:
    name: str               # default LangSmith project and service name
    span_name: str
    trace_name: str
    title: str
    assistant_label: str
    system_prompt: str | None = None
    start_attributes: dict[str, str] = field(default_factory=dict)
    # user message -> attributes set on the turn span after a successful reply
    enrich: Callable[[str], dict[str, str]] | None = None


CHAT_PROFILE = BotProfile(
    name="chat-bot",
    span_name="chat_turn",
    trace_name="chat-bot",
    title="Chat with Claude",
    assistant_label="Claude",
)

ITSM_PROFILE = BotProfile(
    name="itsm-bot",
    span_name="itsm_turn",
    trace_name="itsm-bot",
    title="itsm-bot",
    assistant_label="ITSM Assistant",
    system_prompt=ITSM_SYSTEM_PROMPT,
    start_attributes={"itsm.category": "access_request_demo"},
    enrich=ticket_draft_attributes,
)
