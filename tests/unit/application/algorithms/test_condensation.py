"""Tests for application/algorithms/condensation.py."""

import pytest

from sccdag.application.algorithms.condensation import CondensationGraph
from sccdag.application.algorithms.tarjan import TarjanSCC
from sccdag.application.algorithms.topological import TopologicalSort
from sccdag.domain.model.enums import WeightPolicy
from sccdag.domain.model.graph import Edge, Graph
from sccdag.infrastructure.metrics import CounterMetrics
from tests.factories import make_chain, make_cycle, make_graph


def condense(graph: Graph, policy: WeightPolicy = WeightPolicy.FIRST) -> CondensationGraph:
    return CondensationGraph(graph, TarjanSCC(graph).find_sccs(), policy)


def two_paths_into_sink() -> Graph:
    # {0, 1} is one SCC; two crossing edges into 2 with weights 5 then 3
    return make_graph(3, (0, 1, 1), (1, 0, 1), (1, 2, 3), (0, 2, 5))


class TestCondensationGraph:
    """Tests for condensation structure."""

    def test_empty_graph(self) -> None:
        c = condense(Graph(0))
        assert c.graph.vertex_count == 0
        assert c.component_count == 0

    def test_acyclic_graph_keeps_edges(self) -> None:
        c = condense(make_chain(3))
        # components ((2,), (1,), (0,)): chain maps to 2 → 1 → 0
        assert list(c.graph.edges()) == [Edge(1, 0, 1), Edge(2, 1, 1)]

    def test_cycle_collapses_to_single_vertex(self) -> None:
        c = condense(make_cycle(3))
        assert c.graph.vertex_count == 1
        assert c.graph.edge_count == 0

    def test_self_loop_dropped(self) -> None:
        c = condense(make_graph(1, (0, 0)))
        assert c.graph.edge_count == 0

    def test_component_mapping(self) -> None:
        c = condense(two_paths_into_sink())
        assert c.component_id(0) == c.component_id(1) == 1
        assert c.component_id(2) == 0
        assert set(c.members(1)) == {0, 1}

    def test_parallel_crossing_edges_collapse(self) -> None:
        c = condense(two_paths_into_sink())
        assert c.graph.edge_count == 1
        assert c.graph.has_edge(1, 0)

    def test_disjoint_two_cycles(self) -> None:
        c = condense(make_graph(4, (0, 1), (1, 0), (2, 3), (3, 2), (1, 2)))
        assert c.graph.vertex_count == 2
        assert c.graph.edge_count == 1

    def test_weight_model_carried_over(self) -> None:
        g = Graph(2, "node")
        g.add_edge(0, 1)
        assert condense(g).graph.weight_model == "node"

    def test_result_is_acyclic(self) -> None:
        g = make_graph(
            6, (0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 3), (4, 5), (0, 5)
        )
        c = condense(g)
        assert TopologicalSort(c.graph).is_acyclic()

    def test_repr(self) -> None:
        assert repr(condense(two_paths_into_sink())) == "Condensation(nodes=2, edges=1)"

    def test_mismatched_components_raise(self) -> None:
        components = TarjanSCC(Graph(2)).find_sccs()
        with pytest.raises(ValueError, match="components cover 2 vertices, graph has 3"):
            CondensationGraph(Graph(3), components)

    def test_metrics_count_all_original_edges(self) -> None:
        g = two_paths_into_sink()
        metrics = CounterMetrics()
        CondensationGraph(g, TarjanSCC(g).find_sccs(), metrics=metrics)
        assert metrics.get("edges_explored") == 4


class TestWeightPolicy:
    """Tests for weight of collapsed edges."""

    @pytest.mark.parametrize(
        ("policy", "weight"),
        [
            (WeightPolicy.FIRST, 5),
            (WeightPolicy.MIN, 3),
            (WeightPolicy.MAX, 5),
            (WeightPolicy.SUM, 8),
        ],
    )
    def test_policy(self, policy: WeightPolicy, weight: int) -> None:
        c = condense(two_paths_into_sink(), policy)
        assert list(c.graph.edges()) == [Edge(1, 0, weight)]

    def test_default_is_first(self) -> None:
        g = two_paths_into_sink()
        c = CondensationGraph(g, TarjanSCC(g).find_sccs())
        assert c.policy is WeightPolicy.FIRST
