"""Reporter protocol for output formatting.

Users extend sccdag by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from sccdag.domain.model.analysis import AnalysisReport


class ReporterProtocol(Protocol):
    """Contract for reporters.

    sccdag provides PlainTextReporter, JSONReporter and ConsoleReporter.
    Implementation decides output format and destination.
    """

    def report(self, result: AnalysisReport) -> None:
        """Report analysis results.

        Args:
            result: Complete analysis report
        """
        ...
