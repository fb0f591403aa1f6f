"""Tarjan's algorithm for strongly connected components.

Iterative: an explicit stack of traversal frames replaces recursion,
so chains of any length are handled. Time O(V + E), space O(V).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sccdag.domain.model.components import Components
from sccdag.domain.ports.metrics import DFS_VISITS, EDGES_EXPLORED, POP_OPS, PUSH_OPS
from sccdag.infrastructure.metrics import NullMetrics

if TYPE_CHECKING:
    from sccdag.domain.model.graph import Graph
    from sccdag.domain.ports.metrics import MetricsProtocol

_UNVISITED = -1


@dataclass(slots=True)
class _Frame:
    """Traversal frame: vertex and cursor into its adjacency list."""

    vertex: int
    cursor: int = 0


class TarjanSCC:
    """Strongly connected components of a directed graph.

    Vertex lifecycle: unvisited → on-stack → popped into a component.
    Per vertex: discovery index and low-link (smallest discovery index
    reachable from the vertex's subtree through one edge to a vertex
    still on the stack). A vertex with low == disc is a component root.

    Scratch state is allocated per find_sccs() call.

    Metrics:
        dfs_visits: vertex discovered
        edges_explored: edge scanned
        push_ops / pop_ops: component stack operations
    """

    def __init__(self, graph: Graph, metrics: MetricsProtocol | None = None) -> None:
        self._graph = graph
        self._metrics = metrics if metrics is not None else NullMetrics()

    def find_sccs(self) -> Components:
        """Partition vertices into strongly connected components.

        Returns:
            Components in root-completion order, which is a reverse
            topological order of the condensation. Vertices inside each
            component are in stack-pop order.
        """
        graph = self._graph
        metrics = self._metrics
        metrics.start_timer()
        try:
            n = graph.vertex_count
            disc = [_UNVISITED] * n
            low = [0] * n
            on_stack = [False] * n
            stack: list[int] = []
            components: list[tuple[int, ...]] = []
            counter = 0

            for root in graph.vertices():
                if disc[root] != _UNVISITED:
                    continue

                disc[root] = low[root] = counter
                counter += 1
                stack.append(root)
                on_stack[root] = True
                metrics.increment(DFS_VISITS)
                metrics.increment(PUSH_OPS)
                frames = [_Frame(root)]

                while frames:
                    frame = frames[-1]
                    u = frame.vertex
                    edges = graph.neighbors(u)

                    if frame.cursor < len(edges):
                        v = edges[frame.cursor].target
                        frame.cursor += 1
                        metrics.increment(EDGES_EXPLORED)
                        if disc[v] == _UNVISITED:
                            disc[v] = low[v] = counter
                            counter += 1
                            stack.append(v)
                            on_stack[v] = True
                            metrics.increment(DFS_VISITS)
                            metrics.increment(PUSH_OPS)
                            frames.append(_Frame(v))
                        elif on_stack[v]:
                            low[u] = min(low[u], disc[v])
                        # visited and off-stack: already in a finished component
                        continue

                    frames.pop()
                    if low[u] == disc[u]:
                        members: list[int] = []
                        while True:
                            w = stack.pop()
                            on_stack[w] = False
                            metrics.increment(POP_OPS)
                            members.append(w)
                            if w == u:
                                break
                        components.append(tuple(members))
                    if frames:
                        parent = frames[-1].vertex
                        low[parent] = min(low[parent], low[u])

            component_of = [0] * n
            for cid, members in enumerate(components):
                for v in members:
                    component_of[v] = cid

            return Components(components=tuple(components), component_of=tuple(component_of))
        finally:
            metrics.stop_timer()


def format_components(components: Components) -> str:
    """Human-readable listing of components.

    Example:
        Found 2 SCC(s):
          Component 0 (size 2): [3, 2]
          Component 1 (size 2): [1, 0]
    """
    lines = [f"Found {components.count} SCC(s):"]
    for cid, members in enumerate(components):
        lines.append(f"  Component {cid} (size {len(members)}): {list(members)}")
    return "\n".join(lines) + "\n"
