"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from sccdag.domain.model.paths import INF

if TYPE_CHECKING:
    from sccdag.domain.model.analysis import AnalysisReport
    from sccdag.domain.model.paths import Distance


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Example:
        class MyReporter(BaseReporter):
            def report(self, result: AnalysisReport) -> None:
                print(f"SCCs: {result.components.count}")
    """

    @abstractmethod
    def report(self, result: AnalysisReport) -> None:
        """Report analysis results.

        Args:
            result: Complete analysis report
        """


def format_groups(groups: tuple[tuple[int, ...], ...]) -> str:
    """Critical path as component groups: [3] → [1, 0] → [2]."""
    return " → ".join(str(list(members)) for members in groups)


def format_distance(distance: Distance | None) -> str:
    """Distance as text: "inf" for unreachable, "-" for not computed."""
    if distance is None:
        return "-"
    if distance == INF:
        return "inf"
    return str(int(distance))
