"""Analysis report: composition of all pipeline artifacts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from sccdag.domain.model.components import Components
    from sccdag.domain.model.configuration import AnalysisConfig
    from sccdag.domain.model.graph import Graph
    from sccdag.domain.model.paths import Distance, PathResult, ShortestPaths


@dataclass(frozen=True, slots=True)
class AlgorithmStats:
    """Metrics snapshot of one pipeline stage.

    Attributes:
        name: Stage name ("scc", "condensation", "topo", ...).
        elapsed_ms: Wall time of the stage in milliseconds.
        counters: Counter name → value.
    """

    name: str
    elapsed_ms: float
    counters: Mapping[str, int]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if self.elapsed_ms < 0:
            raise ValueError(f"elapsed_ms must be >= 0, got {self.elapsed_ms}")


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """Result of GraphAnalyzer.analyze().

    Attributes:
        graph: Analyzed input graph.
        config: Configuration used.
        components: SCC partition of the input graph.
        condensation: DAG over component ids.
        order: Topological order of the condensation (component ids).
        critical_path: Longest path in the condensation (component ids).
        critical_vertices: Members of the components on critical_path,
            flattened in path order.
        source: Source vertex of shortest_paths, None if not requested.
        shortest_paths: Distances from the source's component over the
            condensation, None if no source.
        stats: Per-stage metrics snapshots in pipeline order.
    """

    graph: Graph
    config: AnalysisConfig
    components: Components
    condensation: Graph
    order: tuple[int, ...]
    critical_path: PathResult
    critical_vertices: tuple[int, ...]
    source: int | None
    shortest_paths: ShortestPaths | None
    stats: tuple[AlgorithmStats, ...]

    @property
    def is_acyclic(self) -> bool:
        """True if the input graph has no cycle (every SCC is a single vertex
        without a self-loop)."""
        return self.components.is_trivial() and not any(
            edge.source == edge.target for edge in self.graph.edges()
        )

    @property
    def critical_groups(self) -> tuple[tuple[int, ...], ...]:
        """Members of each component on critical_path, one group per step."""
        return tuple(self.components[cid] for cid in self.critical_path.path)

    def distance_to(self, vertex: int) -> Distance | None:
        """Shortest distance from source's component to vertex's component.

        Returns:
            None if no source was given; INF if unreachable.
        """
        if self.shortest_paths is None:
            return None
        return self.shortest_paths.distance(self.components.component_of[vertex])

    def stats_for(self, name: str) -> AlgorithmStats | None:
        """Stats of stage name, None if the stage did not run."""
        for stage in self.stats:
            if stage.name == name:
                return stage
        return None
