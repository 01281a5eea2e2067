"""Session result entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from memtest.constants.analyzer import EXIT_OK


@dataclass(frozen=True)
class SessionResult:
    """Outcome of a session whose analyzer step succeeded."""

    report_path: Path
    analyzer_status: int
    pager_status: int | None = None
    report_removed: bool = False

    @property
    def exit_status(self) -> int:
        """Status the wrapper exits with: the pager's, or 0 when no pager ran."""
        if self.pager_status is None:
            return EXIT_OK
        return self.pager_status
