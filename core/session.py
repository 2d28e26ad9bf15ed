"""
Chat session: the interactive turn loop.

Each turn:
1. Reads one line; ``quit`` ends the session, blank lines reprompt
2. Appends the user message to the transcript
3. Opens a turn span tagged with the session's thread id and the prompt
4. Sends the whole transcript to the model under the turn's tracing scope
5. Sets completion + usage on the span, appends the reply, closes the span

On quit the tracer is flushed (bounded by ``flush_timeout``) and shut down.
"""
import uuid
import logging
from dataclasses import dataclass
from typing import Callable

from rich.console import Console
from rich.prompt import Prompt
from rich.text import Text

from core.errors import ModelProviderError
from core.models.base import MessageRole, ModelAdapter
from core.profiles import BotProfile, CHAT_PROFILE
from memory.transcript import Transcript
from tracing.tracer import TurnTracer

logger = logging.getLogger(__name__)

QUIT_COMMAND = "quit"
DEFAULT_FLUSH_TIMEOUT = 10.0


def is_quit_command(line: str) -> bool:
    return line.strip().lower() == QUIT_COMMAND


@dataclass
class TurnResult:
    text: str
    input_tokens: int = 0
    output_tokens: int = 0


class ChatSession:
    """
    One process run of a bot.

    Usage:
        session = ChatSession(AnthropicAdapter(key, tracer=tracer.tracer), tracer)
        session.run()
    """

    def __init__(
        self,
        model: ModelAdapter,
        tracer: TurnTracer,
        profile: BotProfile = CHAT_PROFILE,
        *,
        thread_id: str | None = None,
        project_name: str | None = None,
        max_tokens: int = 1024,
        flush_timeout: float = DEFAULT_FLUSH_TIMEOUT,
        console: Console | None = None,
    ):
        self.model = model
        self.tracer = tracer
        self.profile = profile
        self.thread_id = thread_id or str(uuid.uuid4())
        self.project_name = project_name or profile.name
        self.max_tokens = max_tokens
        self.flush_timeout = flush_timeout
        self.console = console or Console()
        self.transcript = Transcript()
        self._closed = False

    def submit_turn(self, text: str) -> TurnResult | None:
        """
        Run one turn. Blank input is a no-op and returns None.
        Raises ModelProviderError after the turn span has been closed.
        """
        text = text.strip()
        if not text:
            return None

        self.transcript.add(MessageRole.USER, text)

        with self.tracer.turn(self.thread_id, text, self.profile.start_attributes) as (scope, span):
            response = self.model.chat(
                self.transcript.to_messages(),
                system=self.profile.system_prompt,
                max_tokens=self.max_tokens,
                scope=scope,
            )
            response_text = response.text
            extra = self.profile.enrich(text) if self.profile.enrich else None
            self.tracer.complete_turn(
                span,
                response_text,
                input_tokens=response.input_tokens,
                output_tokens=response.output_tokens,
                extra_attributes=extra,
            )
            self.transcript.add(MessageRole.ASSISTANT, response_text)

        return TurnResult(
            text=response_text,
            input_tokens=response.input_tokens,
            output_tokens=response.output_tokens,
        )

    def shutdown(self) -> bool:
        """Flush pending spans, then release the tracer. Never raises."""
        if self._closed:
            logger.warning("Session %s already shut down", self.thread_id)
            return False
        self._closed = True

        flushed = False
        try:
            flushed = self.tracer.flush_all(self.flush_timeout)
        except Exception as e:
            logger.error("Error flushing traces: %s", e)
        try:
            self.tracer.shutdown()
        except Exception as e:
            logger.error("Error shutting down tracer: %s", e)
        return flushed

    # ── interactive loop ───────────────────────────────────────────
    def _prompt(self) -> str:
        return Prompt.ask("[bold cyan]You[/]", console=self.console)

    def _print_banner(self) -> None:
        self.console.print(f"{self.profile.title} (tracing to LangSmith project: {self.project_name})")
        self.console.print(f"Thread ID: {self.thread_id}")
        self.console.print("Type 'quit' to exit.\n")

    def _quit(self) -> None:
        self.console.print("\nFlushing traces to LangSmith...")
        self.shutdown()
        self.console.print("Goodbye!")

    def run(self, read_line: Callable[[], str] | None = None) -> None:
        """Read-process-respond until quit (or end of input)."""
        read_line = read_line or self._prompt
        self._print_banner()

        while True:
            try:
                line = read_line()
            except (EOFError, KeyboardInterrupt):
                self._quit()
                return
            except OSError as e:
                logger.error("Error reading input: %s", e)
                continue

            if is_quit_command(line):
                self._quit()
                return
            if not line.strip():
                continue

            try:
                result = self.submit_turn(line)
            except ModelProviderError as e:
                logger.error("Error: %s", e)
                self.console.print(Text.assemble(("Error: ", "red"), str(e)))
                continue
            except KeyboardInterrupt:
                # turn span is already closed with error status
                self._quit()
                return

            self.console.print(Text.assemble(
                "\n", (f"{self.profile.assistant_label}: ", "bold green"), result.text, "\n",
            ))
