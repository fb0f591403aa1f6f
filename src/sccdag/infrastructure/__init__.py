"""Infrastructure adapters: metrics sinks and graph loading."""

from sccdag.infrastructure.loader import GraphData, load_graph, parse_graph
from sccdag.infrastructure.metrics import CounterMetrics, NullMetrics

__all__ = [
    "CounterMetrics",
    "GraphData",
    "NullMetrics",
    "load_graph",
    "parse_graph",
]
