"""Run one session step as a foreground subprocess."""

from __future__ import annotations

import logging
import shlex
import signal
import subprocess
from collections.abc import Sequence

from memtest.constants.analyzer import EXIT_NOT_EXECUTABLE, EXIT_SIGNAL_BASE
from memtest.exceptions import ToolLaunchError, ToolNotFoundError, ToolPermissionError

logger = logging.getLogger(__name__)

INTERRUPTED_STATUS: int = EXIT_SIGNAL_BASE + signal.SIGINT


def shell_status(returncode: int) -> int:
    """Map a ``subprocess`` return code to the status a shell would report."""
    if returncode < 0:
        return EXIT_SIGNAL_BASE - returncode
    return returncode


def run_step(step: str, argv: Sequence[str]) -> int:
    """Run ``argv`` with inherited stdio, block until it exits, return its status.

    Output is neither captured nor suppressed; the child owns the terminal
    while it runs. SIGINT is ignored here while waiting, so the child decides
    what Ctrl-C means. A child killed by SIGINT raises ``KeyboardInterrupt``.
    """
    logger.debug("Running %s: %s", step, shlex.join(argv))
    try:
        process = subprocess.Popen(list(argv))
    except FileNotFoundError as exc:
        raise ToolNotFoundError(step, argv[0]) from exc
    except PermissionError as exc:
        raise ToolPermissionError(step, argv[0]) from exc
    except OSError as exc:
        raise ToolLaunchError(step, argv[0], EXIT_NOT_EXECUTABLE, exc.strerror or str(exc)) from exc

    # Installed after the spawn: an ignored disposition would survive exec.
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        returncode = process.wait()
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)

    status = shell_status(returncode)
    logger.debug("%s exited with status %d", step, status)
    if status == INTERRUPTED_STATUS:
        raise KeyboardInterrupt
    return status
