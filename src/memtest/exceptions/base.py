"""Root of the memtest exception hierarchy."""

from __future__ import annotations


class MemtestError(Exception):
    """Base class for every error raised by memtest itself."""
