"""Domain exceptions: all public errors of sccdag.

All exceptions visible to users are defined in domain.
Application/Infrastructure raise these, never their own public exceptions.
Each error also inherits the builtin that matches its meaning.
"""

from __future__ import annotations


class SccDagError(Exception):
    """Base for all sccdag error exceptions.

    Allows: except SccDagError to catch all library errors.
    """


class InvalidVertexCountError(SccDagError, ValueError):
    """Vertex count must be >= 0.

    Attributes:
        vertex_count: Invalid count value.
    """

    def __init__(self, vertex_count: int) -> None:
        """Initialize with invalid count."""
        self.vertex_count = vertex_count
        super().__init__(f"vertex count must be >= 0, got {vertex_count}")


class VertexOutOfRangeError(SccDagError, IndexError):
    """Vertex index outside [0, n).

    Raised at edge-insertion time, never clamped.

    Attributes:
        vertex: Offending vertex index.
        vertex_count: Number of vertices in the graph.
    """

    def __init__(self, vertex: int, vertex_count: int) -> None:
        """Initialize with vertex and graph size."""
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(f"vertex {vertex} out of range [0, {vertex_count})")


class CycleDetectedError(SccDagError, ValueError):
    """Operation requires an acyclic graph but a cycle exists.

    Attributes:
        cycle: Vertices on a detected cycle in traversal order.
            Empty when the algorithm only knows that some cycle exists.
    """

    def __init__(self, cycle: tuple[int, ...] = ()) -> None:
        """Initialize with cycle vertices (may be empty)."""
        self.cycle = cycle
        if cycle:
            path = " → ".join(str(v) for v in (*cycle, cycle[0]))
            super().__init__(f"graph contains a cycle: {path}")
        else:
            super().__init__("graph contains a cycle")


class GraphFormatError(SccDagError, ValueError):
    """Serialized graph description is malformed.

    Attributes:
        reason: What is wrong with the document.
    """

    def __init__(self, reason: str) -> None:
        """Initialize with reason."""
        if not reason:
            raise ValueError("reason must not be empty")
        self.reason = reason
        super().__init__(f"invalid graph description: {reason}")
