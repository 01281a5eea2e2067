"""Configuration-related exceptions."""

from __future__ import annotations

from memtest.exceptions.base import MemtestError


class ConfigError(MemtestError, ValueError):
    """Raised when wrapper configuration is invalid."""
