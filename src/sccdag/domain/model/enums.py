"""Domain enumerations."""

from enum import Enum


class TopoAlgorithm(Enum):
    """Topological sort algorithm."""

    DFS = "dfs"  # post-order depth-first, raises on cycle
    KAHN = "kahn"  # in-degree frontier, empty order on cycle


class WeightPolicy(Enum):
    """Weight kept when parallel crossing edges collapse into one condensation edge."""

    FIRST = "first"  # first crossing edge in vertex/adjacency order
    MIN = "min"
    MAX = "max"
    SUM = "sum"

    def combine(self, current: int, weight: int) -> int:
        """Fold another crossing edge weight into the retained one."""
        match self:
            case WeightPolicy.FIRST:
                return current
            case WeightPolicy.MIN:
                return min(current, weight)
            case WeightPolicy.MAX:
                return max(current, weight)
            case WeightPolicy.SUM:
                return current + weight
