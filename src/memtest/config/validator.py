"""Config file validation for memtest."""

from __future__ import annotations

import difflib
import shlex
from pathlib import Path
from typing import Any

import yaml

from memtest.constants.config import (
    BOOL_KEYS,
    COMMAND_KEYS,
    CONFIG_FILENAME,
    LIST_OF_STRINGS_KEYS,
)
from memtest.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
)
from memtest.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a memtest.yaml file and return every problem found.

    Used by ``memtest --check-config`` and by the preflight that runs before
    each session. It never raises; problems come back as
    :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {getattr(exc, 'problem', None) or exc}",
                line=mark.line + 1 if mark is not None else None,
                column=mark.column + 1 if mark is not None else None,
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    for key in BOOL_KEYS:
        if key in raw and not isinstance(raw[key], bool):
            errors.append(_type_error(path_str, key, "expected a boolean"))

    for key in COMMAND_KEYS:
        if key in raw and raw[key] is not None:
            _validate_command(raw[key], key, path_str, errors)

    if "report_path" in raw and raw["report_path"] is not None:
        val = raw["report_path"]
        if not isinstance(val, str):
            errors.append(_type_error(path_str, "report_path", "expected a string path"))
        elif not val.strip():
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field="report_path",
                    message="`report_path` must not be empty",
                )
            )

    for key in LIST_OF_STRINGS_KEYS:
        if key in raw:
            val = raw[key]
            if val is not None and (not isinstance(val, (list, tuple)) or not all(isinstance(i, str) for i in val)):
                errors.append(_type_error(path_str, key, "expected a list of strings"))

    return errors


def _validate_command(value: Any, key: str, path_str: str, errors: list[ValidationError]) -> None:
    """Check that a command key holds a non-empty, shell-splittable string."""
    if not isinstance(value, str):
        errors.append(_type_error(path_str, key, "expected a command string"))
        return
    try:
        words = shlex.split(value)
    except ValueError as exc:
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field=key,
                message=f"`{key}` is not a valid command line",
                hint=str(exc),
            )
        )
        return
    if not words:
        errors.append(
            ValidationError(
                code=CFG006,
                path=path_str,
                field=key,
                message=f"`{key}` must name an executable",
            )
        )


def _type_error(path_str: str, key: str, hint: str) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=key,
        message=f"invalid type for `{key}`",
        hint=hint,
    )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
