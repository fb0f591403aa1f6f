"""Analyzer service: orchestrates the full decomposition pipeline.

graph → SCC → condensation → topological order → critical path
(→ shortest paths when a source is given), all over the condensation
so the pipeline works for cyclic inputs too.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sccdag.application.algorithms.condensation import CondensationGraph
from sccdag.application.algorithms.dag_paths import DAGPathEngine
from sccdag.application.algorithms.tarjan import TarjanSCC
from sccdag.application.algorithms.topological import TopologicalSort
from sccdag.domain.exceptions import CycleDetectedError, VertexOutOfRangeError
from sccdag.domain.model.analysis import AlgorithmStats, AnalysisReport
from sccdag.domain.model.configuration import AnalysisConfig
from sccdag.infrastructure.metrics import CounterMetrics

if TYPE_CHECKING:
    from sccdag.domain.model.graph import Graph
    from sccdag.domain.ports.metrics import MetricsProtocol

logger = logging.getLogger(__name__)


class GraphAnalyzer:
    """Runs every algorithm on a graph and collects the results.

    Each stage gets its own metrics sink from config.metrics_factory;
    snapshots end up in AnalysisReport.stats.

    Methods:
        analyze(): Full pipeline
    """

    def __init__(self, config: AnalysisConfig | None = None) -> None:
        """Initialize analyzer.

        Args:
            config: Analysis configuration. Uses defaults if None.
        """
        self._config = config or AnalysisConfig()

    @property
    def config(self) -> AnalysisConfig:
        return self._config

    def _new_metrics(self) -> MetricsProtocol:
        factory = self._config.metrics_factory or CounterMetrics
        return factory()

    def analyze(self, graph: Graph, source: int | None = None) -> AnalysisReport:
        """Decompose graph and compute path metrics on its condensation.

        Args:
            graph: Graph to analyze (any directed graph, cycles allowed).
            source: Optional source vertex for shortest paths. Distances
                are reported per component of the condensation.

        Returns:
            AnalysisReport with all artifacts and per-stage stats.

        Raises:
            VertexOutOfRangeError: source not in [0, n).
        """
        if source is not None and not 0 <= source < graph.vertex_count:
            raise VertexOutOfRangeError(source, graph.vertex_count)

        config = self._config
        stats: list[AlgorithmStats] = []
        logger.debug("analyzing %r with %s", graph, config)

        metrics = self._new_metrics()
        components = TarjanSCC(graph, metrics).find_sccs()
        stats.append(_snapshot("scc", metrics))
        logger.debug("found %d component(s)", components.count)

        metrics = self._new_metrics()
        condensation = CondensationGraph(graph, components, config.weight_policy, metrics)
        stats.append(_snapshot("condensation", metrics))
        logger.debug("built %r", condensation)

        metrics = self._new_metrics()
        order = TopologicalSort(condensation.graph, metrics).sort(config.topo_algorithm)
        stats.append(_snapshot("topo", metrics))
        if not order and condensation.graph.vertex_count:
            # Condensation is acyclic by construction
            raise CycleDetectedError()

        metrics = self._new_metrics()
        engine = DAGPathEngine(condensation.graph, metrics, config.topo_algorithm)
        critical = engine.critical_path()
        stats.append(_snapshot("critical_path", metrics))

        critical_vertices = tuple(
            vertex for component in critical.path for vertex in condensation.members(component)
        )

        shortest = None
        if source is not None:
            metrics = self._new_metrics()
            engine = DAGPathEngine(condensation.graph, metrics, config.topo_algorithm)
            shortest = engine.shortest_paths(condensation.component_id(source))
            stats.append(_snapshot("shortest_paths", metrics))

        logger.info(
            "analysis done: %d vertices, %d SCC(s), critical length %d",
            graph.vertex_count,
            components.count,
            critical.length,
        )
        return AnalysisReport(
            graph=graph,
            config=config,
            components=components,
            condensation=condensation.graph,
            order=order,
            critical_path=critical,
            critical_vertices=critical_vertices,
            source=source,
            shortest_paths=shortest,
            stats=tuple(stats),
        )


def _snapshot(name: str, metrics: MetricsProtocol) -> AlgorithmStats:
    return AlgorithmStats(name=name, elapsed_ms=metrics.elapsed_ms, counters=metrics.counters())
