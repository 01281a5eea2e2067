"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "MEMTEST"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ MEMTEST",
    "     // leak and origin checks, one keypress from the report",
)
CLI_USAGE: str = "%(prog)s [options] [--] COMMAND [ARGS ...]"
CLI_DESCRIPTION: str = "\n".join(
    (
        *ASCII_LOGO_LINES,
        "",
        f"{BRAND_NAME} runs COMMAND under a memory analyzer, writes the verbose report",
        "to a file, waits for Enter, then opens the report in a pager.",
        "",
        "Options are only read before COMMAND; everything from COMMAND on is",
        "forwarded to the analyzer unchanged.",
    )
)
CONFIRMATION_TEMPLATE: str = "done. Opening report: {path}"
