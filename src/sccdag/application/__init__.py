"""sccdag application layer.

Algorithms, orchestration service and reporters.
"""

from sccdag.application.algorithms import (
    CondensationGraph,
    DAGPathEngine,
    TarjanSCC,
    TopologicalSort,
    format_components,
    topological_order,
)
from sccdag.application.reporters import (
    BaseReporter,
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from sccdag.application.services import GraphAnalyzer

__all__ = [
    # Algorithms
    "TarjanSCC",
    "CondensationGraph",
    "TopologicalSort",
    "DAGPathEngine",
    "format_components",
    "topological_order",
    # Services
    "GraphAnalyzer",
    # Reporters
    "BaseReporter",
    "PlainTextReporter",
    "JSONReporter",
    "ConsoleConfig",
    "ConsoleReporter",
]
