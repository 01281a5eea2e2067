"""Analyzer flag set and subprocess exit statuses."""

from __future__ import annotations

LEAK_CHECK_FLAG: str = "--leak-check=full"
SHOW_LEAK_KINDS_FLAG: str = "--show-leak-kinds=all"
TRACK_ORIGINS_FLAG: str = "--track-origins=yes"
VERBOSE_FLAG: str = "--verbose"
LOG_FILE_FLAG_TEMPLATE: str = "--log-file={path}"

# Order is part of the command-line contract.
FIXED_ANALYZER_FLAGS: tuple[str, ...] = (
    LEAK_CHECK_FLAG,
    SHOW_LEAK_KINDS_FLAG,
    TRACK_ORIGINS_FLAG,
    VERBOSE_FLAG,
)

STEP_ANALYZER: str = "analyzer"
STEP_PAGER: str = "pager"

EXIT_OK: int = 0
EXIT_CONFIG_ERROR: int = 2
EXIT_NOT_EXECUTABLE: int = 126
EXIT_COMMAND_NOT_FOUND: int = 127
EXIT_SIGNAL_BASE: int = 128
EXIT_INTERRUPTED: int = EXIT_SIGNAL_BASE + 2
