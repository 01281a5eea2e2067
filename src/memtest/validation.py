"""Preflight validation run before every session and by ``--check-config``."""

from __future__ import annotations

from pathlib import Path

from memtest.config import validate_config_file
from memtest.constants.validation import CFG007
from memtest.exceptions.validation import ValidationError, sort_errors


def preflight_validate(root: Path, config_path: Path | None = None) -> list[ValidationError]:
    """Check the config search root and the config file; empty list means valid."""
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        return [
            ValidationError(
                code=CFG007,
                path=str(resolved_root),
                field="",
                message=f"root directory does not exist: {resolved_root}",
            )
        ]

    errors = validate_config_file(root, config_path, config_explicit=config_path is not None)
    return sort_errors(errors)
