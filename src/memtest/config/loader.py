"""Config loading and normalization for memtest sessions."""

from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import Any

import yaml

from memtest.config.model import MemtestConfig
from memtest.constants.config import BOOL_KEYS, CONFIG_FILENAME
from memtest.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> MemtestConfig:
    """Load wrapper config from ``memtest.yaml`` under ``root`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return MemtestConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    logger.debug("Loaded config from %s", path)
    defaults = MemtestConfig()

    flags: dict[str, bool] = {}
    for key in BOOL_KEYS:
        value = raw.get(key, getattr(defaults, key))
        if not isinstance(value, bool):
            raise ConfigError(f"{key} must be a boolean")
        flags[key] = value

    report_raw = raw.get("report_path")
    if report_raw is None:
        report_path = defaults.report_path
    elif isinstance(report_raw, str) and report_raw.strip():
        report_path = Path(report_raw).expanduser()
    else:
        raise ConfigError("report_path must be a non-empty string")

    return MemtestConfig(
        analyzer=split_command(raw.get("analyzer"), "analyzer", defaults.analyzer),
        pager=split_command(raw.get("pager"), "pager", defaults.pager),
        report_path=report_path,
        extra_analyzer_args=tuple(
            _ensure_string_list(raw.get("extra_analyzer_args", []), "extra_analyzer_args")
        ),
        **flags,
    )


def split_command(value: Any, key_name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Split a command string with shell quoting rules into an argv prefix."""
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string")
    try:
        words = shlex.split(value)
    except ValueError as exc:
        raise ConfigError(f"{key_name} is not a valid command line: {exc}") from exc
    if not words:
        raise ConfigError(f"{key_name} must not be empty")
    return tuple(words)


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
