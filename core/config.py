"""
Runtime settings read from the process environment.

A local .env file is loaded first (python-dotenv) so the bots can be run
straight from a checkout. Values already present in the environment win.
"""
import os
import logging
from dataclasses import dataclass

from dotenv import load_dotenv

from core.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_LANGSMITH_ENDPOINT = "https://api.smith.langchain.com"
DEFAULT_MODEL = "claude-sonnet-4-20250514"


def load_env_file() -> bool:
    """Load .env into the process environment. Returns whether one was found."""
    return load_dotenv()


def env_log_level() -> str:
    return (os.environ.get("LOG_LEVEL") or "WARNING").upper()


@dataclass(frozen=True)
class Settings:
    langsmith_api_key: str
    anthropic_api_key: str
    project_name: str
    langsmith_endpoint: str = DEFAULT_LANGSMITH_ENDPOINT
    model: str = DEFAULT_MODEL
    log_level: str = "WARNING"

    @property
    def otlp_traces_endpoint(self) -> str:
        return self.langsmith_endpoint.rstrip("/") + "/otel/v1/traces"

    @classmethod
    def from_env(cls, default_project: str, *, load_dotenv_file: bool = True) -> "Settings":
        """
        Build settings for one bot.

        LANGSMITH_API_KEY and ANTHROPIC_API_KEY are required; LANGSMITH_PROJECT
        falls back to ``default_project``.
        """
        if load_dotenv_file and not load_env_file():
            logger.info("No .env file found, using environment variables")

        langsmith_key = os.environ.get("LANGSMITH_API_KEY", "").strip()
        if not langsmith_key:
            raise ConfigurationError("LANGSMITH_API_KEY is required")

        anthropic_key = os.environ.get("ANTHROPIC_API_KEY", "").strip()
        if not anthropic_key:
            raise ConfigurationError("ANTHROPIC_API_KEY is required")

        return cls(
            langsmith_api_key=langsmith_key,
            anthropic_api_key=anthropic_key,
            project_name=os.environ.get("LANGSMITH_PROJECT") or default_project,
            langsmith_endpoint=os.environ.get("LANGSMITH_ENDPOINT") or DEFAULT_LANGSMITH_ENDPOINT,
            model=os.environ.get("ANTHROPIC_MODEL") or DEFAULT_MODEL,
            log_level=env_log_level(),
        )
