"""Ports: contracts implemented outside the domain."""

from sccdag.domain.ports.metrics import (
    DFS_VISITS,
    EDGES_EXPLORED,
    POP_OPS,
    PUSH_OPS,
    RELAXATIONS,
    MetricsProtocol,
)
from sccdag.domain.ports.reporter import ReporterProtocol

__all__ = [
    "DFS_VISITS",
    "EDGES_EXPLORED",
    "POP_OPS",
    "PUSH_OPS",
    "RELAXATIONS",
    "MetricsProtocol",
    "ReporterProtocol",
]
