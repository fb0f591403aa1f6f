"""Analysis configuration.

Configuration is passed explicitly. No environment variables, no files.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sccdag.domain.model.enums import TopoAlgorithm, WeightPolicy

if TYPE_CHECKING:
    from sccdag.domain.ports.metrics import MetricsProtocol


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    """Configuration for GraphAnalyzer.

    Immutable configuration object with FAIL-FIRST validation.
    All fields have defaults; user can override any of them.

    Attributes:
        topo_algorithm: Algorithm used for every topological order.
        weight_policy: Weight kept for collapsed condensation edges.
        metrics_factory: Creates one metrics sink per algorithm stage.
            None = CounterMetrics.
    """

    topo_algorithm: TopoAlgorithm = TopoAlgorithm.DFS
    weight_policy: WeightPolicy = WeightPolicy.FIRST
    metrics_factory: Callable[[], MetricsProtocol] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.topo_algorithm, TopoAlgorithm):
            raise TypeError(
                f"topo_algorithm must be TopoAlgorithm, got {type(self.topo_algorithm).__name__}"
            )
        if not isinstance(self.weight_policy, WeightPolicy):
            raise TypeError(
                f"weight_policy must be WeightPolicy, got {type(self.weight_policy).__name__}"
            )
        if self.metrics_factory is not None and not callable(self.metrics_factory):
            raise TypeError("metrics_factory must be callable")
