"""Command-line interface for memtest."""
