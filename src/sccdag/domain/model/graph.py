"""Directed weighted graph over the dense vertex range [0, n).

Edges are stored twice: forward adjacency indexed by source,
reverse adjacency indexed by destination.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sccdag.domain.exceptions import InvalidVertexCountError, VertexOutOfRangeError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence


@dataclass(frozen=True, slots=True)
class Edge:
    """Directed edge source → target with integer weight.

    In reverse adjacency the edge is mirrored: source is the
    destination vertex and target is the predecessor.
    """

    source: int
    target: int
    weight: int = 1


class Graph:
    """Directed graph with forward and reverse adjacency lists.

    Invariants (FAIL-FIRST):
        - every edge endpoint lies in [0, n)
        - adjacency lists preserve insertion order

    Append-only while being built, read-only afterwards.
    Algorithms never add edges, so a built Graph can be shared
    between threads running independent algorithms.

    Attributes:
        weight_model: Free-form weight semantics label ("edge" by default).
    """

    __slots__ = ("_adj", "_n", "_rev", "weight_model")

    def __init__(self, n: int, weight_model: str = "edge") -> None:
        if n < 0:
            raise InvalidVertexCountError(n)
        self._n = n
        self._adj: list[list[Edge]] = [[] for _ in range(n)]
        self._rev: list[list[Edge]] = [[] for _ in range(n)]
        self.weight_model = weight_model

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self._n:
            raise VertexOutOfRangeError(vertex, self._n)

    def add_edge(self, u: int, v: int, weight: int = 1) -> None:
        """Append edge u → v and its mirror v → u in reverse adjacency.

        Raises:
            VertexOutOfRangeError: u or v not in [0, n). Nothing is stored.
        """
        self._check(u)
        self._check(v)
        self._adj[u].append(Edge(u, v, weight))
        self._rev[v].append(Edge(v, u, weight))

    def neighbors(self, u: int) -> Sequence[Edge]:
        """Outgoing edges of u in insertion order. O(1)."""
        self._check(u)
        return self._adj[u]

    def reverse_neighbors(self, u: int) -> Sequence[Edge]:
        """Incoming edges of u, mirrored (target is the predecessor). O(1)."""
        self._check(u)
        return self._rev[u]

    @property
    def vertex_count(self) -> int:
        """Number of vertices. O(1)."""
        return self._n

    @property
    def edge_count(self) -> int:
        """Number of edges. O(n)."""
        return sum(len(edges) for edges in self._adj)

    def vertices(self) -> range:
        """All vertices in index order."""
        return range(self._n)

    def edges(self) -> Iterator[Edge]:
        """All edges, by source vertex then insertion order."""
        for edges in self._adj:
            yield from edges

    def has_edge(self, u: int, v: int) -> bool:
        """Check if at least one edge u → v exists. O(out-degree)."""
        return any(edge.target == v for edge in self.neighbors(u))

    def in_degrees(self) -> list[int]:
        """In-degree of every vertex (parallel edges counted)."""
        return [len(edges) for edges in self._rev]

    @classmethod
    def from_edges(
        cls,
        n: int,
        edges: Iterable[tuple[int, int, int] | tuple[int, int]],
        weight_model: str = "edge",
    ) -> Graph:
        """Build graph from (u, v, weight) or (u, v) tuples.

        Two-element tuples get weight 1.

        Raises:
            InvalidVertexCountError: n < 0
            VertexOutOfRangeError: any endpoint outside [0, n)
        """
        graph = cls(n, weight_model)
        for edge in edges:
            graph.add_edge(*edge)
        return graph

    def __repr__(self) -> str:
        return f"Graph(n={self._n}, edges={self.edge_count})"
