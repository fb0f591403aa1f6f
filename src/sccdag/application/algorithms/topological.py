"""Topological sorting: depth-first and Kahn's algorithm.

Both run in O(V + E) without native recursion. Depth-first raises
CycleDetectedError on a back edge; Kahn's returns an empty order.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING

from sccdag.domain.exceptions import CycleDetectedError
from sccdag.domain.model.enums import TopoAlgorithm
from sccdag.domain.ports.metrics import DFS_VISITS, EDGES_EXPLORED, POP_OPS, PUSH_OPS
from sccdag.infrastructure.metrics import NullMetrics

if TYPE_CHECKING:
    from sccdag.domain.model.graph import Graph
    from sccdag.domain.ports.metrics import MetricsProtocol


class _Mark(IntEnum):
    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


@dataclass(slots=True)
class _Frame:
    """Traversal frame: vertex and cursor into its adjacency list."""

    vertex: int
    cursor: int = 0


class TopologicalSort:
    """Topological ordering of a graph.

    Scratch state is allocated per call; one instance may be reused
    and may run concurrently with others on the same graph.

    Metrics:
        dfs_visits: vertex discovered by the depth-first variant
        edges_explored: edge scanned
        push_ops / pop_ops: auxiliary stack or frontier operations
    """

    def __init__(self, graph: Graph, metrics: MetricsProtocol | None = None) -> None:
        self._graph = graph
        self._metrics = metrics if metrics is not None else NullMetrics()

    def sort(self, algorithm: TopoAlgorithm = TopoAlgorithm.DFS) -> tuple[int, ...]:
        """Run the selected algorithm.

        Raises:
            CycleDetectedError: DFS variant only, graph has a cycle.
            TypeError: algorithm is not a TopoAlgorithm.
        """
        match algorithm:
            case TopoAlgorithm.DFS:
                return self.sort_dfs()
            case TopoAlgorithm.KAHN:
                return self.sort_kahn()
            case _:
                raise TypeError(
                    f"algorithm must be TopoAlgorithm, got {type(algorithm).__name__}"
                )

    def sort_dfs(self) -> tuple[int, ...]:
        """Depth-first topological sort.

        Vertices are pushed to an auxiliary stack in post-order;
        popping the stack yields the order. Roots are taken in
        vertex-index order.

        Returns:
            Topological order (empty for an empty graph).

        Raises:
            CycleDetectedError: an edge targets an in-progress vertex.
                The error carries the vertices of that cycle.
        """
        graph = self._graph
        metrics = self._metrics
        metrics.start_timer()
        try:
            marks = [_Mark.UNVISITED] * graph.vertex_count
            finished: list[int] = []

            for root in graph.vertices():
                if marks[root] is not _Mark.UNVISITED:
                    continue
                marks[root] = _Mark.IN_PROGRESS
                metrics.increment(DFS_VISITS)
                frames = [_Frame(root)]

                while frames:
                    frame = frames[-1]
                    edges = graph.neighbors(frame.vertex)
                    if frame.cursor < len(edges):
                        target = edges[frame.cursor].target
                        frame.cursor += 1
                        metrics.increment(EDGES_EXPLORED)
                        if marks[target] is _Mark.UNVISITED:
                            marks[target] = _Mark.IN_PROGRESS
                            metrics.increment(DFS_VISITS)
                            frames.append(_Frame(target))
                        elif marks[target] is _Mark.IN_PROGRESS:
                            raise CycleDetectedError(_cycle_from(frames, target))
                    else:
                        frames.pop()
                        marks[frame.vertex] = _Mark.DONE
                        finished.append(frame.vertex)
                        metrics.increment(PUSH_OPS)

            metrics.increment(POP_OPS, len(finished))
            return tuple(reversed(finished))
        finally:
            metrics.stop_timer()

    def sort_kahn(self) -> tuple[int, ...]:
        """Kahn's topological sort.

        Frontier is FIFO, seeded with zero in-degree vertices in index order.

        Returns:
            Topological order, or () if the graph has a cycle.
            Callers tell "cycle" from "empty graph" by vertex_count.
        """
        graph = self._graph
        metrics = self._metrics
        metrics.start_timer()
        try:
            in_degree = graph.in_degrees()
            frontier: deque[int] = deque()
            for v in graph.vertices():
                if in_degree[v] == 0:
                    frontier.append(v)
                    metrics.increment(PUSH_OPS)

            order: list[int] = []
            while frontier:
                u = frontier.popleft()
                metrics.increment(POP_OPS)
                order.append(u)
                for edge in graph.neighbors(u):
                    metrics.increment(EDGES_EXPLORED)
                    in_degree[edge.target] -= 1
                    if in_degree[edge.target] == 0:
                        frontier.append(edge.target)
                        metrics.increment(PUSH_OPS)

            if len(order) != graph.vertex_count:
                return ()
            return tuple(order)
        finally:
            metrics.stop_timer()

    def is_acyclic(self) -> bool:
        """True if the graph has no cycle (self-loops count as cycles)."""
        return len(self.sort_kahn()) == self._graph.vertex_count


def _cycle_from(frames: list[_Frame], target: int) -> tuple[int, ...]:
    """Vertices on the DFS path from target to the current frame."""
    path = [frame.vertex for frame in frames]
    return tuple(path[path.index(target) :])


def topological_order(
    graph: Graph,
    algorithm: TopoAlgorithm = TopoAlgorithm.DFS,
) -> tuple[int, ...]:
    """Topological order of graph, raising on cycles for both algorithms.

    Raises:
        CycleDetectedError: graph has a cycle.
    """
    order = TopologicalSort(graph).sort(algorithm)
    if not order and graph.vertex_count:
        raise CycleDetectedError()
    return order
