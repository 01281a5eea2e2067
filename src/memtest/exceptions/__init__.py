"""Shared exception hierarchy for memtest."""

from __future__ import annotations

from .base import MemtestError
from .config import ConfigError
from .process import StepFailedError, ToolLaunchError, ToolNotFoundError, ToolPermissionError

__all__ = [
    "ConfigError",
    "MemtestError",
    "StepFailedError",
    "ToolLaunchError",
    "ToolNotFoundError",
    "ToolPermissionError",
]
