"""
Span attribute schema.

One turn span per conversation turn, all top-level:

  chat_turn  (session_id = <thread id>)
  └── anthropic.messages   ← opened by the model adapter under the turn scope
  chat_turn  (session_id = <thread id>)
  └── anthropic.messages
  ...

There is no thread object anywhere. LangSmith groups the turns of one session
into a thread by joining on ``langsmith.metadata.session_id``.
"""
from enum import Enum


class SpanKind(str, Enum):
    CHAIN = "chain"
    LLM = "llm"


# Identity / grouping
TRACE_NAME = "langsmith.trace.name"
SESSION_ID = "langsmith.metadata.session_id"
SPAN_KIND = "langsmith.span.kind"

# Input / output
PROMPT = "gen_ai.prompt"
COMPLETION = "gen_ai.completion"

# Usage
INPUT_TOKENS = "gen_ai.usage.input_tokens"
OUTPUT_TOKENS = "gen_ai.usage.output_tokens"

# Model call (child span)
GEN_AI_SYSTEM = "gen_ai.system"
REQUEST_MODEL = "gen_ai.request.model"
REQUEST_MAX_TOKENS = "gen_ai.request.max_tokens"
RESPONSE_MODEL = "gen_ai.response.model"
