"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from sccdag.application.reporters._base import BaseReporter
from sccdag.domain.model.paths import INF

if TYPE_CHECKING:
    from sccdag.domain.model.analysis import AnalysisReport


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Unreachable distances are written as null (JSON has no infinity).
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: AnalysisReport) -> None:
        """Report analysis results as JSON.

        Args:
            result: Complete analysis report
        """
        json.dump(self.to_dict(result), self._output, indent=self._indent)
        self._output.write("\n")

    def to_dict(self, result: AnalysisReport) -> dict[str, object]:
        """Convert AnalysisReport to JSON-serializable dict."""
        data: dict[str, object] = {
            "graph": {
                "n": result.graph.vertex_count,
                "edges": result.graph.edge_count,
                "weight_model": result.graph.weight_model,
                "acyclic": result.is_acyclic,
            },
            "config": {
                "topo_algorithm": result.config.topo_algorithm.value,
                "weight_policy": result.config.weight_policy.value,
            },
            "scc": {
                "count": result.components.count,
                "components": [list(members) for members in result.components],
                "component_of": list(result.components.component_of),
            },
            "condensation": {
                "n": result.condensation.vertex_count,
                "edges": [
                    {"u": e.source, "v": e.target, "w": e.weight}
                    for e in result.condensation.edges()
                ],
                "order": list(result.order),
            },
            "critical_path": {
                "components": list(result.critical_path.path),
                "vertices": list(result.critical_vertices),
                "groups": [list(members) for members in result.critical_groups],
                "length": result.critical_path.length,
            },
            "stats": {
                stage.name: {"elapsed_ms": stage.elapsed_ms, "counters": dict(stage.counters)}
                for stage in result.stats
            },
        }
        if result.shortest_paths is not None:
            distances = (result.distance_to(v) for v in result.graph.vertices())
            data["shortest_paths"] = {
                "source": result.source,
                "distances": [None if d == INF else int(d) for d in distances],
            }
        return data
