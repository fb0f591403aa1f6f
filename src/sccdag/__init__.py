"""sccdag - strongly connected components, condensation, topological order and DAG paths."""

__version__ = "0.1.0"

from sccdag.application import (
    CondensationGraph,
    DAGPathEngine,
    GraphAnalyzer,
    TarjanSCC,
    TopologicalSort,
    topological_order,
)
from sccdag.domain import (
    INF,
    AnalysisConfig,
    AnalysisReport,
    Components,
    CycleDetectedError,
    Edge,
    Graph,
    GraphFormatError,
    InvalidVertexCountError,
    PathResult,
    SccDagError,
    ShortestPaths,
    TopoAlgorithm,
    VertexOutOfRangeError,
    WeightPolicy,
)
from sccdag.infrastructure import CounterMetrics, GraphData, NullMetrics, load_graph, parse_graph

__all__ = [
    "INF",
    "AnalysisConfig",
    "AnalysisReport",
    "Components",
    "CondensationGraph",
    "CounterMetrics",
    "CycleDetectedError",
    "DAGPathEngine",
    "Edge",
    "Graph",
    "GraphAnalyzer",
    "GraphData",
    "GraphFormatError",
    "InvalidVertexCountError",
    "NullMetrics",
    "PathResult",
    "SccDagError",
    "ShortestPaths",
    "TarjanSCC",
    "TopoAlgorithm",
    "TopologicalSort",
    "VertexOutOfRangeError",
    "WeightPolicy",
    "__version__",
    "load_graph",
    "parse_graph",
    "topological_order",
]
