"""Bot CLI entry point."""
import logging
from dataclasses import replace

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from core.config import Settings, env_log_level, load_env_file
from core.errors import ConfigurationError
from core.models.anthropic_adapter import AnthropicAdapter
from core.profiles import BotProfile, CHAT_PROFILE, ITSM_PROFILE
from core.session import ChatSession, DEFAULT_FLUSH_TIMEOUT
from tracing.exporter import build_tracer_provider
from tracing.tracer import TurnTracer

app = typer.Typer(name="bot", help="Traced Claude chat bots")
console = Console()
logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _run_bot(
    profile: BotProfile,
    project: str | None,
    model: str | None,
    max_tokens: int,
    flush_timeout: float,
) -> None:
    env_file_found = load_env_file()
    setup_logging(env_log_level())
    if not env_file_found:
        logger.info("No .env file found, using environment variables")

    try:
        settings = Settings.from_env(project or profile.name, load_dotenv_file=False)
    except ConfigurationError as e:
        console.print(f"[bold red]Configuration error:[/] {e}")
        raise typer.Exit(code=1)

    if project:
        settings = replace(settings, project_name=project)
    if model:
        settings = replace(settings, model=model)

    provider = build_tracer_provider(settings, service_name=profile.name)
    tracer = TurnTracer(
        provider,
        trace_name=profile.trace_name,
        span_name=profile.span_name,
        instrumentation_name=profile.name,
    )
    adapter = AnthropicAdapter(
        settings.anthropic_api_key, settings.model, tracer=tracer.tracer,
    )
    session = ChatSession(
        adapter,
        tracer,
        profile,
        project_name=settings.project_name,
        max_tokens=max_tokens,
        flush_timeout=flush_timeout,
        console=console,
    )
    session.run()


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context):
    """Claude chat bots traced to LangSmith over OpenTelemetry."""
    if ctx.invoked_subcommand is None:
        console.print(Panel(
            "Commands:\n"
            "  [cyan]bot chat[/]   Plain multi-turn chat\n"
            "  [cyan]bot itsm[/]   ITSM access-request assistant\n",
            title="Traced bots",
            border_style="green"
        ))


@app.command()
def chat(
    project: str = typer.Option(None, help="LangSmith project (overrides LANGSMITH_PROJECT)"),
    model: str = typer.Option(None, help="Anthropic model (overrides ANTHROPIC_MODEL)"),
    max_tokens: int = typer.Option(1024, min=1, help="Max tokens per reply"),
    flush_timeout: float = typer.Option(DEFAULT_FLUSH_TIMEOUT, min=0.1, help="Seconds to wait for trace flush on quit"),
):
    """Start a chat session."""
    _run_bot(CHAT_PROFILE, project, model, max_tokens, flush_timeout)


@app.command()
def itsm(
    project: str = typer.Option(None, help="LangSmith project (overrides LANGSMITH_PROJECT)"),
    model: str = typer.Option(None, help="Anthropic model (overrides ANTHROPIC_MODEL)"),
    max_tokens: int = typer.Option(1024, min=1, help="Max tokens per reply"),
    flush_timeout: float = typer.Option(DEFAULT_FLUSH_TIMEOUT, min=0.1, help="Seconds to wait for trace flush on quit"),
):
    """Start an ITSM access-request session."""
    _run_bot(ITSM_PROFILE, project, model, max_tokens, flush_timeout)


if __name__ == "__main__":
    app()
