"""Graph algorithms: SCC, condensation, topological sort, DAG paths."""

from sccdag.application.algorithms.condensation import CondensationGraph
from sccdag.application.algorithms.dag_paths import DAGPathEngine
from sccdag.application.algorithms.tarjan import TarjanSCC, format_components
from sccdag.application.algorithms.topological import TopologicalSort, topological_order

__all__ = [
    "CondensationGraph",
    "DAGPathEngine",
    "TarjanSCC",
    "TopologicalSort",
    "format_components",
    "topological_order",
]
