"""Core data models for memtest."""

from .entities import SessionResult

__all__ = ["SessionResult"]
