"""Argument vectors for the analyzer and pager steps."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from memtest.config import MemtestConfig
from memtest.constants.analyzer import FIXED_ANALYZER_FLAGS, LOG_FILE_FLAG_TEMPLATE


def build_analyzer_command(
    config: MemtestConfig,
    report_path: Path,
    target: Sequence[str],
) -> list[str]:
    """Return the analyzer argv: executable, fixed flags, log file, extras, then ``target``.

    ``target`` is appended untouched, even when empty.
    """
    return [
        *config.analyzer,
        *FIXED_ANALYZER_FLAGS,
        LOG_FILE_FLAG_TEMPLATE.format(path=report_path),
        *config.extra_analyzer_args,
        *target,
    ]


def build_pager_command(config: MemtestConfig, report_path: Path) -> list[str]:
    return [*config.pager, str(report_path)]
