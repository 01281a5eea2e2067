"""Configuration loading, validation, and CLI overrides for memtest sessions."""

from __future__ import annotations

from memtest.config.loader import load_config
from memtest.config.model import MemtestConfig
from memtest.config.overrides import apply_cli_overrides
from memtest.config.validator import validate_config_file

__all__ = [
    "MemtestConfig",
    "apply_cli_overrides",
    "load_config",
    "validate_config_file",
]
