"""Exceptions for failed subprocess steps."""

from __future__ import annotations

from memtest.constants.analyzer import EXIT_COMMAND_NOT_FOUND, EXIT_NOT_EXECUTABLE
from memtest.exceptions.base import MemtestError


class StepFailedError(MemtestError):
    """Raised when a session step exits non-zero and later steps must not run.

    ``returncode`` is already shell-style: death by signal ``N`` is ``128 + N``.
    """

    def __init__(self, step: str, returncode: int, message: str | None = None) -> None:
        self.step = step
        self.returncode = returncode
        super().__init__(message or f"{step} exited with status {returncode}")


class ToolLaunchError(StepFailedError):
    """Raised when a step's executable could not be started at all."""

    def __init__(self, step: str, tool: str, returncode: int, reason: str) -> None:
        self.tool = tool
        super().__init__(step, returncode, f"{tool}: {reason}")


class ToolNotFoundError(ToolLaunchError):
    """Raised when the analyzer or pager executable cannot be found."""

    def __init__(self, step: str, tool: str) -> None:
        super().__init__(step, tool, EXIT_COMMAND_NOT_FOUND, "command not found")


class ToolPermissionError(ToolLaunchError):
    """Raised when the analyzer or pager exists but cannot be executed."""

    def __init__(self, step: str, tool: str) -> None:
        super().__init__(step, tool, EXIT_NOT_EXECUTABLE, "permission denied")
