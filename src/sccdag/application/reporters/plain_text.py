"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from sccdag.application.algorithms.tarjan import format_components
from sccdag.application.reporters._base import BaseReporter, format_distance, format_groups

if TYPE_CHECKING:
    from sccdag.domain.model.analysis import AnalysisReport


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    def report(self, result: AnalysisReport) -> None:
        """Report analysis results as plain text.

        Args:
            result: Complete analysis report
        """
        self._report_header(result)
        self._report_components(result)
        self._report_paths(result)
        if result.shortest_paths is not None:
            self._report_distances(result)
        self._report_stats(result)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_header(self, result: AnalysisReport) -> None:
        self._write("=" * 70)
        self._write("Graph Analysis Results")
        self._write("=" * 70)
        self._write(f"  Graph: {result.graph!r}")
        self._write(f"  Acyclic: {'yes' if result.is_acyclic else 'no'}")
        self._write(f"  Topological sort: {result.config.topo_algorithm.value}")
        self._write(f"  Weight policy: {result.config.weight_policy.value}")

    def _report_components(self, result: AnalysisReport) -> None:
        self._write()
        self._write(format_components(result.components).rstrip("\n"))
        self._write(
            f"Condensation: {result.condensation.vertex_count} nodes, "
            f"{result.condensation.edge_count} edges"
        )
        self._write(f"Topological order (components): {list(result.order)}")

    def _report_paths(self, result: AnalysisReport) -> None:
        self._write()
        self._write(f"Critical path (components): {result.critical_path}")
        self._write(f"Critical path (vertices): {format_groups(result.critical_groups)}")

    def _report_distances(self, result: AnalysisReport) -> None:
        self._write()
        self._write(f"Shortest distances from vertex {result.source}:")
        for vertex in result.graph.vertices():
            self._write(f"  {vertex}: {format_distance(result.distance_to(vertex))}")

    def _report_stats(self, result: AnalysisReport) -> None:
        self._write()
        self._write("-" * 70)
        self._write("Metrics:")
        for stage in result.stats:
            counters = ", ".join(f"{k}={v}" for k, v in stage.counters.items())
            self._write(f"  {stage.name}: {stage.elapsed_ms:.3f}ms {counters}".rstrip())
        self._write("=" * 70)
