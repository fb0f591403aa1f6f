"""Metrics adapters: counting sink and no-op sink."""

from __future__ import annotations

import time
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class CounterMetrics:
    """In-memory counters and a perf_counter based timer.

    One instance per algorithm run is the expected usage.
    Not thread-safe: do not share a sink between concurrent runs.
    """

    def __init__(self) -> None:
        self._counters: dict[str, int] = {}
        self._start: int | None = None
        self._elapsed = 0

    def start_timer(self) -> None:
        self._start = time.perf_counter_ns()

    def stop_timer(self) -> None:
        if self._start is None:
            raise RuntimeError("stop_timer() called before start_timer()")
        self._elapsed = time.perf_counter_ns() - self._start
        self._start = None

    def increment(self, name: str, amount: int = 1) -> None:
        self._counters[name] = self._counters.get(name, 0) + amount

    def get(self, name: str) -> int:
        return self._counters.get(name, 0)

    def reset(self) -> None:
        self._counters.clear()
        self._start = None
        self._elapsed = 0

    @property
    def elapsed_ns(self) -> int:
        return self._elapsed

    @property
    def elapsed_ms(self) -> float:
        return self._elapsed / 1_000_000

    def counters(self) -> Mapping[str, int]:
        """Read-only snapshot, sorted by counter name."""
        return MappingProxyType(dict(sorted(self._counters.items())))

    def summary(self) -> str:
        parts = [f"time={self.elapsed_ms:.3f}ms"]
        parts.extend(f"{name}={value}" for name, value in sorted(self._counters.items()))
        return ", ".join(parts)


class NullMetrics:
    """Sink that records nothing. Default when no metrics are injected."""

    def start_timer(self) -> None:
        pass

    def stop_timer(self) -> None:
        pass

    def increment(self, name: str, amount: int = 1) -> None:
        pass

    def get(self, name: str) -> int:
        return 0

    def reset(self) -> None:
        pass

    @property
    def elapsed_ns(self) -> int:
        return 0

    @property
    def elapsed_ms(self) -> float:
        return 0.0

    def counters(self) -> Mapping[str, int]:
        return MappingProxyType({})

    def summary(self) -> str:
        return "metrics disabled"
