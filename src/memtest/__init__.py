"""memtest: run a command under a memory analyzer and page through the report."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
