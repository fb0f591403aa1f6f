"""Tests for metrics adapters."""

import pytest

from sccdag.domain.ports.metrics import MetricsProtocol
from sccdag.infrastructure.metrics import CounterMetrics, NullMetrics


class TestCounterMetrics:
    """Tests for CounterMetrics."""

    def test_usable_as_protocol(self) -> None:
        metrics: MetricsProtocol = CounterMetrics()
        metrics.increment("dfs_visits")
        assert metrics.get("dfs_visits") == 1

    def test_increment_and_get(self) -> None:
        metrics = CounterMetrics()
        metrics.increment("push_ops")
        metrics.increment("push_ops", 4)
        assert metrics.get("push_ops") == 5

    def test_unknown_counter_is_zero(self) -> None:
        assert CounterMetrics().get("pop_ops") == 0

    def test_counters_sorted_and_read_only(self) -> None:
        metrics = CounterMetrics()
        metrics.increment("pop_ops")
        metrics.increment("edges_explored", 2)
        counters = metrics.counters()
        assert list(counters) == ["edges_explored", "pop_ops"]
        with pytest.raises(TypeError):
            counters["pop_ops"] = 9  # type: ignore[index]

    def test_timer_measures_elapsed(self) -> None:
        metrics = CounterMetrics()
        metrics.start_timer()
        metrics.stop_timer()
        assert metrics.elapsed_ns >= 0
        assert metrics.elapsed_ms == metrics.elapsed_ns / 1_000_000

    def test_stop_without_start_raises(self) -> None:
        with pytest.raises(RuntimeError, match="before start_timer"):
            CounterMetrics().stop_timer()

    def test_reset_clears_everything(self) -> None:
        metrics = CounterMetrics()
        metrics.increment("relaxations", 3)
        metrics.start_timer()
        metrics.stop_timer()
        metrics.reset()
        assert metrics.get("relaxations") == 0
        assert metrics.elapsed_ns == 0
        assert dict(metrics.counters()) == {}

    def test_summary(self) -> None:
        metrics = CounterMetrics()
        metrics.increment("relaxations", 2)
        metrics.increment("dfs_visits")
        summary = metrics.summary()
        assert summary.startswith("time=")
        assert summary.endswith("dfs_visits=1, relaxations=2")


class TestNullMetrics:
    """Tests for NullMetrics."""

    def test_usable_as_protocol(self) -> None:
        metrics: MetricsProtocol = NullMetrics()
        assert metrics.get("dfs_visits") == 0

    def test_records_nothing(self) -> None:
        metrics = NullMetrics()
        metrics.start_timer()
        metrics.increment("push_ops", 10)
        metrics.stop_timer()
        assert metrics.get("push_ops") == 0
        assert metrics.elapsed_ns == 0
        assert metrics.elapsed_ms == 0.0
        assert dict(metrics.counters()) == {}
        assert metrics.summary() == "metrics disabled"

    def test_stop_without_start_is_allowed(self) -> None:
        NullMetrics().stop_timer()
