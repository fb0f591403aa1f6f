"""Metrics protocol: side-channel for timers and counters.

Algorithms receive a sink explicitly (never a hidden singleton).
Metrics are observational only and never affect control flow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

DFS_VISITS: Final = "dfs_visits"
EDGES_EXPLORED: Final = "edges_explored"
PUSH_OPS: Final = "push_ops"
POP_OPS: Final = "pop_ops"
RELAXATIONS: Final = "relaxations"


class MetricsProtocol(Protocol):
    """Contract for metrics sinks.

    sccdag provides CounterMetrics and NullMetrics.
    Users can implement their own (e.g. forwarding to Prometheus).
    """

    def start_timer(self) -> None:
        """Record start of an algorithm run."""
        ...

    def stop_timer(self) -> None:
        """Record end of an algorithm run."""
        ...

    def increment(self, name: str, amount: int = 1) -> None:
        """Add amount to counter name (created at 0 on first use)."""
        ...

    def get(self, name: str) -> int:
        """Current counter value, 0 if never incremented."""
        ...

    def reset(self) -> None:
        """Clear all counters and the timer."""
        ...

    @property
    def elapsed_ns(self) -> int:
        """Elapsed time between start_timer and stop_timer in nanoseconds."""
        ...

    @property
    def elapsed_ms(self) -> float:
        """Elapsed time in milliseconds."""
        ...

    def counters(self) -> Mapping[str, int]:
        """Snapshot of all counters."""
        ...

    def summary(self) -> str:
        """One-line human-readable summary."""
        ...
