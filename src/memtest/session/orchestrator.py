"""End-to-end session orchestration for memtest.

A session runs the analyzer over the target command, announces the report,
waits at the pause gate, then hands the terminal to the pager. Every step
blocks until the previous one finished, and a failing analyzer stops the
session before anything else happens.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from memtest.config import MemtestConfig
from memtest.constants.analyzer import EXIT_OK, STEP_ANALYZER, STEP_PAGER
from memtest.constants.branding import CONFIRMATION_TEMPLATE
from memtest.exceptions import StepFailedError
from memtest.model import SessionResult
from memtest.session.command import build_analyzer_command, build_pager_command
from memtest.session.report import discard_report, resolve_report_path
from memtest.session.runner import run_step

logger = logging.getLogger(__name__)


def _echo(line: str) -> None:
    # Flushed so the line lands before the pager takes over the terminal.
    print(line, flush=True)


def wait_for_operator(read: Callable[[], str] = input) -> None:
    """Block until one line of input arrives. End of input also releases the gate."""
    try:
        read()
    except EOFError:
        logger.debug("End of input at pause gate, continuing")


def run_session(
    target: Sequence[str],
    config: MemtestConfig,
    *,
    read: Callable[[], str] = input,
    write: Callable[[str], None] = _echo,
) -> SessionResult:
    """Run the analyzer over ``target`` and present its report.

    Raises :class:`StepFailedError` carrying the analyzer's status when the
    analyzer exits non-zero; the confirmation, the pause gate and the pager
    are skipped in that case. A failing pager is not an error: its status
    becomes the result's ``exit_status``.
    """
    report_path = resolve_report_path(config)

    analyzer_status = run_step(STEP_ANALYZER, build_analyzer_command(config, report_path, target))
    if analyzer_status != EXIT_OK:
        raise StepFailedError(STEP_ANALYZER, analyzer_status)

    write(CONFIRMATION_TEMPLATE.format(path=report_path))

    if config.pause:
        wait_for_operator(read)

    pager_status: int | None = None
    if config.view:
        pager_status = run_step(STEP_PAGER, build_pager_command(config, report_path))

    report_removed = discard_report(report_path) if config.cleanup else False

    return SessionResult(
        report_path=report_path,
        analyzer_status=analyzer_status,
        pager_status=pager_status,
        report_removed=report_removed,
    )
