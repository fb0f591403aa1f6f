"""Shortest and longest (critical) paths in DAGs.

Edges are relaxed in topological order, O(V + E).
Inputs with cycles are rejected; run SCC + condensation first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sccdag.application.algorithms.topological import topological_order
from sccdag.domain.exceptions import VertexOutOfRangeError
from sccdag.domain.model.enums import TopoAlgorithm
from sccdag.domain.model.paths import INF, PathResult, ShortestPaths
from sccdag.domain.ports.metrics import RELAXATIONS
from sccdag.infrastructure.metrics import NullMetrics

if TYPE_CHECKING:
    from sccdag.domain.model.graph import Graph
    from sccdag.domain.model.paths import Distance
    from sccdag.domain.ports.metrics import MetricsProtocol

_NO_PARENT = -1


class DAGPathEngine:
    """Path metrics over an acyclic graph.

    The topological order is computed with a private no-op sink,
    so only this engine's relaxations are counted.

    Metrics:
        relaxations: edge examined from a vertex with finite distance
    """

    def __init__(
        self,
        graph: Graph,
        metrics: MetricsProtocol | None = None,
        algorithm: TopoAlgorithm = TopoAlgorithm.DFS,
    ) -> None:
        self._graph = graph
        self._metrics = metrics if metrics is not None else NullMetrics()
        self._algorithm = algorithm

    def shortest_paths(self, source: int) -> ShortestPaths:
        """Single-source shortest distances.

        Args:
            source: Start vertex.

        Returns:
            ShortestPaths; unreachable vertices keep INF.

        Raises:
            VertexOutOfRangeError: source not in [0, n).
            CycleDetectedError: graph has a cycle.
        """
        graph = self._graph
        if not 0 <= source < graph.vertex_count:
            raise VertexOutOfRangeError(source, graph.vertex_count)

        metrics = self._metrics
        metrics.start_timer()
        try:
            order = topological_order(graph, self._algorithm)
            dist: list[Distance] = [INF] * graph.vertex_count
            parent = [_NO_PARENT] * graph.vertex_count
            dist[source] = 0

            for u in order:
                if dist[u] == INF:
                    continue
                for edge in graph.neighbors(u):
                    metrics.increment(RELAXATIONS)
                    candidate = dist[u] + edge.weight
                    if candidate < dist[edge.target]:
                        dist[edge.target] = candidate
                        parent[edge.target] = u

            return ShortestPaths(source=source, distances=tuple(dist), parents=tuple(parent))
        finally:
            metrics.stop_timer()

    def longest_paths(self) -> tuple[Distance, ...]:
        """Longest distance to every vertex from any zero in-degree vertex.

        Raises:
            CycleDetectedError: graph has a cycle.
        """
        dist, _ = self._longest()
        return tuple(dist)

    def critical_path(self) -> PathResult:
        """Maximum-weight path starting at a zero in-degree vertex.

        The end vertex is the lowest-index vertex with maximum distance.
        With no edges this is vertex 0 alone, length 0.

        Returns:
            PathResult; PathResult.empty() for an empty graph.

        Raises:
            CycleDetectedError: graph has a cycle.
        """
        if self._graph.vertex_count == 0:
            return PathResult.empty()

        dist, parent = self._longest()

        best: Distance = -INF
        end = _NO_PARENT
        for v, d in enumerate(dist):
            if d != -INF and d > best:
                best = d
                end = v
        if end == _NO_PARENT:
            return PathResult.empty()

        path: list[int] = []
        current = end
        while current != _NO_PARENT:
            path.append(current)
            current = parent[current]
        path.reverse()
        return PathResult(path=tuple(path), length=int(best))

    def _longest(self) -> tuple[list[Distance], list[int]]:
        graph = self._graph
        metrics = self._metrics
        metrics.start_timer()
        try:
            order = topological_order(graph, self._algorithm)
            in_degree = graph.in_degrees()
            dist: list[Distance] = [0 if deg == 0 else -INF for deg in in_degree]
            parent = [_NO_PARENT] * graph.vertex_count

            for u in order:
                if dist[u] == -INF:
                    continue
                for edge in graph.neighbors(u):
                    metrics.increment(RELAXATIONS)
                    candidate = dist[u] + edge.weight
                    if candidate > dist[edge.target]:
                        dist[edge.target] = candidate
                        parent[edge.target] = u

            return dist, parent
        finally:
            metrics.stop_timer()
