"""Command line entry point.

Usage:
    sccdag analyze graph.json [--topo dfs|kahn] [--weight-policy first|min|max|sum]
                              [--source N] [--format text|json|rich]
    sccdag scc graph.json
    sccdag topo graph.json [--topo dfs|kahn]

Exit codes: 0 success, 1 sccdag or I/O error, 2 usage error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from sccdag.application.algorithms.tarjan import TarjanSCC, format_components
from sccdag.application.algorithms.topological import topological_order
from sccdag.application.reporters.console import ConsoleReporter
from sccdag.application.reporters.json_reporter import JSONReporter
from sccdag.application.reporters.plain_text import PlainTextReporter
from sccdag.application.services.analyzer import GraphAnalyzer
from sccdag.domain.exceptions import SccDagError
from sccdag.domain.model.configuration import AnalysisConfig
from sccdag.domain.model.enums import TopoAlgorithm, WeightPolicy
from sccdag.infrastructure.loader import load_graph

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

    from sccdag.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sccdag",
        description="SCC decomposition, topological order and DAG paths of directed graphs",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    topo_choices = [a.value for a in TopoAlgorithm]

    analyze = commands.add_parser("analyze", help="Run the full pipeline")
    analyze.add_argument("file", type=Path, help="Graph JSON file")
    analyze.add_argument("--topo", choices=topo_choices, default=TopoAlgorithm.DFS.value)
    analyze.add_argument(
        "--weight-policy",
        choices=[p.value for p in WeightPolicy],
        default=WeightPolicy.FIRST.value,
        help="Weight kept for collapsed condensation edges",
    )
    analyze.add_argument(
        "--source",
        type=int,
        default=None,
        help="Source vertex for shortest paths (default: 'source' from the file)",
    )
    analyze.add_argument("--format", choices=["text", "json", "rich"], default="text")

    scc = commands.add_parser("scc", help="List strongly connected components")
    scc.add_argument("file", type=Path, help="Graph JSON file")

    topo = commands.add_parser("topo", help="Print a topological order")
    topo.add_argument("file", type=Path, help="Graph JSON file")
    topo.add_argument("--topo", choices=topo_choices, default=TopoAlgorithm.DFS.value)

    return parser


def _reporter(fmt: str, output: TextIO) -> ReporterProtocol:
    match fmt:
        case "json":
            return JSONReporter(output)
        case "rich":
            return ConsoleReporter(output=output)
        case _:
            return PlainTextReporter(output)


def _run(args: argparse.Namespace, output: TextIO) -> None:
    data = load_graph(args.file)

    match args.command:
        case "analyze":
            config = AnalysisConfig(
                topo_algorithm=TopoAlgorithm(args.topo),
                weight_policy=WeightPolicy(args.weight_policy),
            )
            source = args.source if args.source is not None else data.source
            report = GraphAnalyzer(config).analyze(data.graph, source)
            _reporter(args.format, output).report(report)
        case "scc":
            output.write(format_components(TarjanSCC(data.graph).find_sccs()))
        case "topo":
            order = topological_order(data.graph, TopoAlgorithm(args.topo))
            print(" ".join(map(str, order)), file=output)


def main(argv: Sequence[str] | None = None, output: TextIO | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments without program name (default: sys.argv[1:]).
        output: Stream for results (default: sys.stdout).

    Returns:
        Process exit code.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        _run(args, output if output is not None else sys.stdout)
    except (SccDagError, OSError) as e:
        logger.debug("command failed", exc_info=True)
        print(f"sccdag: error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
