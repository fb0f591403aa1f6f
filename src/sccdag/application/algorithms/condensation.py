"""Condensation: contract every SCC to a single vertex.

The result is always a DAG. A cycle across components would mean
those components belong to one SCC.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sccdag.domain.model.enums import WeightPolicy
from sccdag.domain.model.graph import Graph
from sccdag.domain.ports.metrics import EDGES_EXPLORED
from sccdag.infrastructure.metrics import NullMetrics

if TYPE_CHECKING:
    from sccdag.domain.model.components import Components
    from sccdag.domain.ports.metrics import MetricsProtocol


class CondensationGraph:
    """DAG over component ids built from a graph and its SCC partition.

    Condensation vertex i is components[i]. One edge per ordered pair
    (c1, c2), c1 != c2, with at least one crossing original edge.
    Edges inside a component are dropped. Parallel crossing edges
    collapse into one whose weight is chosen by policy; edges appear
    in order of their first crossing edge.

    Attributes:
        graph: The condensation DAG.
        components: The partition it was built from.
        policy: Weight policy for collapsed edges.
    """

    def __init__(
        self,
        original: Graph,
        components: Components,
        policy: WeightPolicy = WeightPolicy.FIRST,
        metrics: MetricsProtocol | None = None,
    ) -> None:
        if len(components.component_of) != original.vertex_count:
            raise ValueError(
                f"components cover {len(components.component_of)} vertices, "
                f"graph has {original.vertex_count}"
            )
        metrics = metrics if metrics is not None else NullMetrics()
        metrics.start_timer()
        try:
            component_of = components.component_of
            weights: dict[tuple[int, int], int] = {}

            for u in original.vertices():
                cu = component_of[u]
                for edge in original.neighbors(u):
                    metrics.increment(EDGES_EXPLORED)
                    cv = component_of[edge.target]
                    if cu == cv:
                        continue
                    key = (cu, cv)
                    if key in weights:
                        weights[key] = policy.combine(weights[key], edge.weight)
                    else:
                        weights[key] = edge.weight

            self.graph = Graph(components.count, original.weight_model)
            for (cu, cv), weight in weights.items():
                self.graph.add_edge(cu, cv, weight)
        finally:
            metrics.stop_timer()

        self.components = components
        self.policy = policy

    def component_id(self, vertex: int) -> int:
        """Condensation vertex containing original vertex."""
        return self.components.component_of[vertex]

    def members(self, component: int) -> tuple[int, ...]:
        """Original vertices contracted into component."""
        return self.components[component]

    @property
    def component_count(self) -> int:
        return self.components.count

    def __repr__(self) -> str:
        return f"Condensation(nodes={self.graph.vertex_count}, edges={self.graph.edge_count})"
