"""Tests for the JSON graph loader."""

import json
from pathlib import Path

import pytest

from sccdag.domain.exceptions import (
    GraphFormatError,
    InvalidVertexCountError,
    VertexOutOfRangeError,
)
from sccdag.domain.model.graph import Edge
from sccdag.infrastructure.loader import GraphData, load_graph, parse_graph

DOCUMENT = {
    "directed": True,
    "n": 4,
    "edges": [
        {"u": 0, "v": 1, "w": 3},
        {"u": 1, "v": 2},
        {"u": 2, "v": 0, "w": -2},
    ],
    "source": 0,
    "weight_model": "edge",
}


def write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "graph.json"
    path.write_text(content, encoding="utf-8")
    return path


class TestParseGraph:
    """Tests for parse_graph()."""

    def test_builds_graph(self) -> None:
        data = parse_graph(DOCUMENT)
        assert data.graph.vertex_count == 4
        assert list(data.graph.edges()) == [Edge(0, 1, 3), Edge(1, 2, 1), Edge(2, 0, -2)]
        assert data.source == 0
        assert data.weight_model == "edge"

    def test_optional_fields(self) -> None:
        data = parse_graph({"n": 2, "edges": []})
        assert data.source is None
        assert data.weight_model == "edge"
        assert data.graph.edge_count == 0

    def test_custom_weight_model(self) -> None:
        data = parse_graph({"n": 1, "edges": [], "weight_model": "node"})
        assert data.weight_model == "node"

    @pytest.mark.parametrize(
        ("document", "message"),
        [
            ([], "document must be an object"),
            ({"directed": False, "n": 1, "edges": []}, "only directed graphs"),
            ({"edges": []}, "missing 'n'"),
            ({"n": 1}, "missing 'edges'"),
            ({"n": "3", "edges": []}, "'n' must be an integer, got str"),
            ({"n": True, "edges": []}, "'n' must be an integer, got bool"),
            ({"n": 1, "edges": [], "weight_model": 1}, "'weight_model' must be a string"),
            ({"n": 1, "edges": {}}, "'edges' must be a list, got dict"),
            ({"n": 2, "edges": [[0, 1]]}, r"edges\[0\] must be an object"),
            ({"n": 2, "edges": [{"u": 0}]}, r"edges\[0\] requires 'u' and 'v'"),
            ({"n": 2, "edges": [{"u": 0, "v": 1, "w": 1.5}]}, r"edges\[0\].w must be an integer"),
            ({"n": 2, "edges": [], "source": "0"}, "'source' must be an integer"),
        ],
    )
    def test_invalid_document(self, document: object, message: str) -> None:
        with pytest.raises(GraphFormatError, match=message):
            parse_graph(document)  # type: ignore[arg-type]

    def test_negative_n(self) -> None:
        with pytest.raises(InvalidVertexCountError):
            parse_graph({"n": -1, "edges": []})

    def test_edge_out_of_range(self) -> None:
        with pytest.raises(VertexOutOfRangeError):
            parse_graph({"n": 2, "edges": [{"u": 0, "v": 2}]})

    def test_source_out_of_range(self) -> None:
        with pytest.raises(VertexOutOfRangeError):
            parse_graph({"n": 2, "edges": [], "source": 2})


class TestGraphData:
    """Tests for GraphData."""

    def test_source_validated(self) -> None:
        with pytest.raises(VertexOutOfRangeError):
            GraphData(graph=parse_graph({"n": 1, "edges": []}).graph, source=-1)


class TestLoadGraph:
    """Tests for load_graph()."""

    def test_load_file(self, tmp_path: Path) -> None:
        data = load_graph(write(tmp_path, json.dumps(DOCUMENT)))
        assert data.graph.edge_count == 3
        assert data.source == 0

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        path = write(tmp_path, json.dumps(DOCUMENT))
        assert load_graph(str(path)).graph.vertex_count == 4

    def test_invalid_json(self, tmp_path: Path) -> None:
        with pytest.raises(GraphFormatError, match="at line 1"):
            load_graph(write(tmp_path, "{not json"))

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_graph(tmp_path / "missing.json")

    def test_not_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "graph.json"
        path.write_bytes(b"\xff\xfe{}")
        with pytest.raises(GraphFormatError, match="not UTF-8 text"):
            load_graph(path)

    def test_directory(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_graph(tmp_path)
