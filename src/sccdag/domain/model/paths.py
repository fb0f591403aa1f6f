"""Path results of the DAG path engine.

INF marks "unreachable" in distance vectors. It is a sentinel,
callers compare against it instead of using it as a number.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Final, TypeAlias

INF: Final = math.inf

Distance: TypeAlias = int | float


@dataclass(frozen=True, slots=True)
class PathResult:
    """Vertex path and the sum of its edge weights.

    Empty path with length 0 means "no path found", which is
    distinct from a single-vertex path of length 0.

    Attributes:
        path: Vertices in traversal order.
        length: Sum of edge weights along consecutive pairs.
    """

    path: tuple[int, ...]
    length: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.path and self.length != 0:
            raise ValueError(f"empty path must have length 0, got {self.length}")

    @property
    def found(self) -> bool:
        """True if a path exists (possibly a single vertex)."""
        return bool(self.path)

    @property
    def start(self) -> int | None:
        return self.path[0] if self.path else None

    @property
    def end(self) -> int | None:
        return self.path[-1] if self.path else None

    @classmethod
    def empty(cls) -> PathResult:
        """Create the "no path found" result."""
        return cls(path=(), length=0)

    def __str__(self) -> str:
        return f"Path: {list(self.path)}, Length: {self.length}"


@dataclass(frozen=True, slots=True)
class ShortestPaths:
    """Single-source shortest distances over a DAG.

    Attributes:
        source: Source vertex.
        distances: Vertex → distance; INF for unreachable vertices.
        parents: Vertex → predecessor on a shortest path; -1 for the
            source and for unreachable vertices.
    """

    source: int
    distances: tuple[Distance, ...]
    parents: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.distances) != len(self.parents):
            raise ValueError(
                f"distances ({len(self.distances)}) and parents ({len(self.parents)}) differ in size"
            )
        if not 0 <= self.source < len(self.distances):
            raise ValueError(f"source {self.source} out of range")
        if self.distances[self.source] != 0:
            raise ValueError(f"source distance must be 0, got {self.distances[self.source]}")

    def is_reachable(self, vertex: int) -> bool:
        """True if vertex has a finite distance from source."""
        return self.distances[vertex] != INF

    def distance(self, vertex: int) -> Distance:
        """Distance to vertex, INF if unreachable."""
        return self.distances[vertex]

    def path_to(self, vertex: int) -> PathResult:
        """Reconstruct a shortest path source → vertex.

        Returns:
            PathResult.empty() if vertex is unreachable.
        """
        if not self.is_reachable(vertex):
            return PathResult.empty()
        path: list[int] = []
        current = vertex
        while current != -1:
            path.append(current)
            current = self.parents[current]
        path.reverse()
        return PathResult(path=tuple(path), length=int(self.distances[vertex]))

    def reachable(self) -> tuple[int, ...]:
        """All vertices reachable from source, in index order."""
        return tuple(v for v, d in enumerate(self.distances) if d != INF)
