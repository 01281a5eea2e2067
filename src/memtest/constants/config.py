"""Configuration defaults and filenames."""

from __future__ import annotations

import tempfile
from pathlib import Path

CONFIG_FILENAME: str = "memtest.yaml"

DEFAULT_ANALYZER: tuple[str, ...] = ("valgrind",)
DEFAULT_PAGER: tuple[str, ...] = ("less",)
DEFAULT_REPORT_FILENAME: str = "valgrind-out.txt"
DEFAULT_REPORT_PATH: Path = Path(tempfile.gettempdir()) / DEFAULT_REPORT_FILENAME

UNIQUE_REPORT_PREFIX: str = "memtest-"
UNIQUE_REPORT_SUFFIX: str = ".txt"

STRING_KEYS: tuple[str, ...] = ("analyzer", "pager", "report_path")
BOOL_KEYS: tuple[str, ...] = ("unique_report", "pause", "view", "cleanup")
LIST_OF_STRINGS_KEYS: tuple[str, ...] = ("extra_analyzer_args",)
COMMAND_KEYS: tuple[str, ...] = ("analyzer", "pager")
