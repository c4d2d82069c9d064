"""Reporting sinks for trial summaries."""

from .terminal_reporter import TerminalReporter, format_ms

__all__ = ["TerminalReporter", "format_ms"]
