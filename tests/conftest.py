"""Shared pytest fixtures: stand-in analyzer and pager executables."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from memtest.config import MemtestConfig

_ANALYZER_TEMPLATE = """#!{python}
import json
import sys

args = sys.argv[1:]
log_file = next(arg.split("=", 1)[1] for arg in args if arg.startswith("--log-file="))
with open(log_file, "w", encoding="utf-8") as handle:
    json.dump(args, handle)
with open({calls!r}, "a", encoding="utf-8") as calls:
    calls.write(json.dumps(["analyzer", *args]) + "\\n")
sys.exit({exit_code})
"""

_PAGER_TEMPLATE = """#!{python}
import json
import sys

with open({calls!r}, "a", encoding="utf-8") as calls:
    calls.write(json.dumps(["pager", *sys.argv[1:]]) + "\\n")
sys.exit({exit_code})
"""


class ToolCalls:
    """Reads back the invocations recorded by stub tools, in order."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def all(self) -> list[list[str]]:
        if not self.path.exists():
            return []
        return [json.loads(line) for line in self.path.read_text(encoding="utf-8").splitlines()]

    def steps(self) -> list[str]:
        return [call[0] for call in self.all()]

    def args_for(self, step: str) -> list[str]:
        matches = [call[1:] for call in self.all() if call[0] == step]
        assert len(matches) == 1, f"expected one {step} call, got {len(matches)}"
        return matches[0]


@pytest.fixture
def tool_calls(tmp_path: Path) -> ToolCalls:
    return ToolCalls(tmp_path / "calls.jsonl")


def _write_tool(path: Path, template: str, *, calls: Path, exit_code: int) -> Path:
    path.write_text(
        template.format(python=sys.executable, calls=str(calls), exit_code=exit_code),
        encoding="utf-8",
    )
    path.chmod(0o755)
    return path


@pytest.fixture
def make_analyzer(tmp_path: Path, tool_calls: ToolCalls) -> Callable[..., Path]:
    """Build a fake analyzer that dumps its argv as JSON into the ``--log-file`` target."""

    def _make(exit_code: int = 0, name: str = "fake-valgrind") -> Path:
        return _write_tool(tmp_path / name, _ANALYZER_TEMPLATE, calls=tool_calls.path, exit_code=exit_code)

    return _make


@pytest.fixture
def make_pager(tmp_path: Path, tool_calls: ToolCalls) -> Callable[..., Path]:
    """Build a fake pager that records its argv and exits with ``exit_code``."""

    def _make(exit_code: int = 0, name: str = "fake-less") -> Path:
        return _write_tool(tmp_path / name, _PAGER_TEMPLATE, calls=tool_calls.path, exit_code=exit_code)

    return _make


@pytest.fixture
def stub_config(tmp_path: Path, make_analyzer: Callable[..., Path], make_pager: Callable[..., Path]) -> MemtestConfig:
    """Config wired to succeeding stub tools and a report under ``tmp_path``."""
    return MemtestConfig(
        analyzer=(str(make_analyzer()),),
        pager=(str(make_pager()),),
        report_path=tmp_path / "reports" / "valgrind-out.txt",
    )
