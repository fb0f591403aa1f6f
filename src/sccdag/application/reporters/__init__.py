"""Reporters for analysis results.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders rich tables.
"""

from sccdag.application.reporters._base import BaseReporter
from sccdag.application.reporters.console import ConsoleConfig, ConsoleReporter
from sccdag.application.reporters.json_reporter import JSONReporter
from sccdag.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
