"""Report file location and cleanup."""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from memtest.config import MemtestConfig
from memtest.constants.config import UNIQUE_REPORT_PREFIX, UNIQUE_REPORT_SUFFIX
from memtest.exceptions import ConfigError

logger = logging.getLogger(__name__)


def resolve_report_path(config: MemtestConfig) -> Path:
    """Return where this session's report goes.

    The configured path is shared between runs and is overwritten by each
    one. With ``unique_report`` a fresh empty temp file is created instead.
    """
    if config.unique_report:
        try:
            handle, name = tempfile.mkstemp(prefix=UNIQUE_REPORT_PREFIX, suffix=UNIQUE_REPORT_SUFFIX)
        except OSError as exc:
            raise ConfigError(f"Could not create a unique report file: {exc}") from exc
        os.close(handle)
        logger.debug("Allocated unique report %s", name)
        return Path(name)

    path = config.report_path
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigError(f"Report directory is not writable: {path.parent} ({exc})") from exc
    return path


def discard_report(path: Path) -> bool:
    """Delete the report; return False when it was already gone."""
    with suppress(FileNotFoundError):
        path.unlink()
        logger.debug("Removed report %s", path)
        return True
    return False
