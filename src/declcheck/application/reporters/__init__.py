"""Reporters for declared members of a type."""

from declcheck.application.reporters.console import ConsoleConfig, ConsoleReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
]
