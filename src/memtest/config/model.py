"""Config data model for memtest sessions."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from memtest.constants.config import DEFAULT_ANALYZER, DEFAULT_PAGER, DEFAULT_REPORT_PATH


@dataclass(frozen=True)
class MemtestConfig:
    """Resolved wrapper config.

    ``analyzer`` and ``pager`` are argv prefixes, so ``pager: "less -R"`` in
    ``memtest.yaml`` becomes ``("less", "-R")``.
    """

    analyzer: tuple[str, ...] = DEFAULT_ANALYZER
    pager: tuple[str, ...] = DEFAULT_PAGER
    report_path: Path = DEFAULT_REPORT_PATH
    unique_report: bool = False
    extra_analyzer_args: tuple[str, ...] = ()
    pause: bool = True
    view: bool = True
    cleanup: bool = False
