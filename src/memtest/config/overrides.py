"""Apply command-line options on top of a loaded config."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from memtest.config.loader import split_command
from memtest.config.model import MemtestConfig


def apply_cli_overrides(
    config: MemtestConfig,
    *,
    analyzer: str | None = None,
    pager: str | None = None,
    report_path: Path | None = None,
    unique_report: bool = False,
    no_pause: bool = False,
    no_view: bool = False,
    cleanup: bool = False,
) -> MemtestConfig:
    """Return a config with CLI values taking precedence.

    Boolean switches only ever turn behaviour on (or the gate/pager off);
    leaving a switch unset keeps whatever the file said.
    """
    if analyzer is not None:
        config = replace(config, analyzer=split_command(analyzer, "--analyzer", config.analyzer))
    if pager is not None:
        config = replace(config, pager=split_command(pager, "--pager", config.pager))
    if report_path is not None:
        config = replace(config, report_path=report_path.expanduser(), unique_report=False)
    if unique_report:
        config = replace(config, unique_report=True)
    if no_pause:
        config = replace(config, pause=False)
    if no_view:
        config = replace(config, view=False)
    if cleanup:
        config = replace(config, cleanup=True)
    return config
