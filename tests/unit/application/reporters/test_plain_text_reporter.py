"""Tests for PlainTextReporter."""

from io import StringIO

from sccdag.application.reporters.plain_text import PlainTextReporter
from sccdag.application.services.analyzer import GraphAnalyzer
from tests.factories import make_graph


def render(source: int | None = None) -> str:
    g = make_graph(4, (0, 1, 1), (1, 0, 1), (1, 2, 4), (3, 0, 1))
    output = StringIO()
    PlainTextReporter(output).report(GraphAnalyzer().analyze(g, source))
    return output.getvalue()


class TestPlainTextReporter:
    """Tests for plain text output."""

    def test_header(self) -> None:
        text = render()
        assert "Graph Analysis Results" in text
        assert "Graph(n=4, edges=4)" in text
        assert "Acyclic: no" in text
        assert "Topological sort: dfs" in text
        assert "Weight policy: first" in text

    def test_components_listed(self) -> None:
        text = render()
        assert "Found 3 SCC(s):" in text
        assert "Component 1 (size 2): [1, 0]" in text
        assert "Condensation: 3 nodes, 2 edges" in text

    def test_critical_path(self) -> None:
        text = render()
        assert "Critical path (vertices): [3] → [1, 0] → [2]" in text

    def test_distances_only_with_source(self) -> None:
        assert "Shortest distances" not in render()
        text = render(source=1)
        assert "Shortest distances from vertex 1:" in text
        assert "  2: 4" in text
        assert "  3: inf" in text

    def test_metrics_section(self) -> None:
        text = render()
        assert "Metrics:" in text
        assert "scc:" in text
        assert "dfs_visits=4" in text
