"""Session orchestration package."""

from __future__ import annotations

from typing import Any

__all__ = ["run_session"]


def __getattr__(name: str) -> Any:
    """Lazily expose session APIs to avoid import cycles at package import time."""
    if name == "run_session":
        from .orchestrator import run_session

        return run_session
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
