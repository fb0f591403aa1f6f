"""Domain model: graph, components, paths, configuration, reports."""

from sccdag.domain.model.analysis import AlgorithmStats, AnalysisReport
from sccdag.domain.model.components import Components
from sccdag.domain.model.configuration import AnalysisConfig
from sccdag.domain.model.enums import TopoAlgorithm, WeightPolicy
from sccdag.domain.model.graph import Edge, Graph
from sccdag.domain.model.paths import INF, PathResult, ShortestPaths

__all__ = [
    # Enums
    "TopoAlgorithm",
    "WeightPolicy",
    # Value objects
    "Edge",
    "PathResult",
    "ShortestPaths",
    "Components",
    "AlgorithmStats",
    "INF",
    # Entities
    "Graph",
    # Configuration and results
    "AnalysisConfig",
    "AnalysisReport",
]
