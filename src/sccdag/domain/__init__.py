"""sccdag domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, math, collections.abc
"""

from sccdag.domain.exceptions import (
    CycleDetectedError,
    GraphFormatError,
    InvalidVertexCountError,
    SccDagError,
    VertexOutOfRangeError,
)
from sccdag.domain.model import (
    INF,
    AlgorithmStats,
    AnalysisConfig,
    AnalysisReport,
    Components,
    Edge,
    Graph,
    PathResult,
    ShortestPaths,
    TopoAlgorithm,
    WeightPolicy,
)
from sccdag.domain.ports import MetricsProtocol, ReporterProtocol

__all__ = [
    # Exceptions
    "SccDagError",
    "InvalidVertexCountError",
    "VertexOutOfRangeError",
    "CycleDetectedError",
    "GraphFormatError",
    # Model
    "Edge",
    "Graph",
    "Components",
    "PathResult",
    "ShortestPaths",
    "INF",
    "TopoAlgorithm",
    "WeightPolicy",
    "AnalysisConfig",
    "AnalysisReport",
    "AlgorithmStats",
    # Ports
    "MetricsProtocol",
    "ReporterProtocol",
]
