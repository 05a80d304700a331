"""Console reporting for the library directory."""

from src.reporting.console import ConsoleReporter

__all__ = ["ConsoleReporter"]
