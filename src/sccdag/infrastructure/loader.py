"""Graph loading from the JSON task format.

Expected document:
    {
      "directed": true,
      "n": 8,
      "edges": [{"u": 0, "v": 1, "w": 3}, ...],
      "source": 0,
      "weight_model": "edge"
    }

"directed", "source", "weight_model" and per-edge "w" are optional
(defaults: true, none, "edge", 1).
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from sccdag.domain.exceptions import GraphFormatError, VertexOutOfRangeError
from sccdag.domain.model.graph import Graph

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GraphData:
    """Loaded graph with its optional designated source vertex.

    Attributes:
        graph: Constructed graph.
        source: Designated source vertex, None if absent.
    """

    graph: Graph
    source: int | None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.source is not None and not 0 <= self.source < self.graph.vertex_count:
            raise VertexOutOfRangeError(self.source, self.graph.vertex_count)

    @property
    def weight_model(self) -> str:
        return self.graph.weight_model


def _require_int(value: object, what: str) -> int:
    # bool is an int subclass but never a valid index or weight
    if isinstance(value, bool) or not isinstance(value, int):
        raise GraphFormatError(f"{what} must be an integer, got {type(value).__name__}")
    return value


def parse_graph(data: Mapping[str, object]) -> GraphData:
    """Build GraphData from a decoded JSON document.

    Raises:
        GraphFormatError: document structure is invalid.
        InvalidVertexCountError: "n" is negative.
        VertexOutOfRangeError: an edge endpoint or the source is outside [0, n).
    """
    if not isinstance(data, dict):
        raise GraphFormatError(f"document must be an object, got {type(data).__name__}")
    if data.get("directed", True) is not True:
        raise GraphFormatError("only directed graphs are supported")
    if "n" not in data:
        raise GraphFormatError("missing 'n'")
    if "edges" not in data:
        raise GraphFormatError("missing 'edges'")

    n = _require_int(data["n"], "'n'")
    weight_model = data.get("weight_model", "edge")
    if not isinstance(weight_model, str):
        raise GraphFormatError("'weight_model' must be a string")

    raw_edges = data["edges"]
    if not isinstance(raw_edges, list):
        raise GraphFormatError(f"'edges' must be a list, got {type(raw_edges).__name__}")

    graph = Graph(n, weight_model)
    for i, raw in enumerate(raw_edges):
        if not isinstance(raw, dict):
            raise GraphFormatError(f"edges[{i}] must be an object")
        if "u" not in raw or "v" not in raw:
            raise GraphFormatError(f"edges[{i}] requires 'u' and 'v'")
        graph.add_edge(
            _require_int(raw["u"], f"edges[{i}].u"),
            _require_int(raw["v"], f"edges[{i}].v"),
            _require_int(raw.get("w", 1), f"edges[{i}].w"),
        )

    raw_source = data.get("source")
    source = None if raw_source is None else _require_int(raw_source, "'source'")

    logger.debug("parsed graph: %r, source=%s", graph, source)
    return GraphData(graph=graph, source=source)


def load_graph(path: str | Path) -> GraphData:
    """Load GraphData from a JSON file.

    Raises:
        OSError: path cannot be read.
        GraphFormatError: file is not valid JSON or has invalid structure.
    """
    path = Path(path)
    logger.info("loading graph from %s", path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise GraphFormatError(f"{path}: {e.msg} at line {e.lineno}") from e
    except UnicodeDecodeError as e:
        raise GraphFormatError(f"{path}: not UTF-8 text ({e.reason} at byte {e.start})") from e
    return parse_graph(data)
