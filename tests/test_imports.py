"""Each top-level package must import on its own, in a fresh interpreter."""

import subprocess
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent


@pytest.mark.parametrize(
    "statement",
    [
        "import memory",
        "from memory.transcript import Transcript",
        "import itsm",
        "from tracing.tracer import TurnTracer",
        "from tracing.exporter import build_tracer_provider",
        "from core.session import ChatSession",
        "from core.cli import app",
    ],
)
def test_imports_cleanly_first(statement):
    result = subprocess.run(
        [sys.executable, "-c", statement],
        cwd=ROOT,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
