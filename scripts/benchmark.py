#!/usr/bin/env python3
"""Benchmark script for sccdag performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import random
import time
from collections.abc import Callable
from pathlib import Path

from sccdag import DAGPathEngine, Graph, TarjanSCC, TopologicalSort


def random_dag(n: int, m: int, seed: int = 0) -> Graph:
    """Random DAG: edges only go from lower to higher index."""
    rng = random.Random(seed)
    graph = Graph(n)
    for _ in range(m):
        u, v = sorted(rng.sample(range(n), 2))
        graph.add_edge(u, v, rng.randint(1, 10))
    return graph


def chain(n: int) -> Graph:
    """Single path 0 → 1 → ... → n-1 (deepest possible DFS)."""
    return Graph.from_edges(n, ((i, i + 1, 1) for i in range(n - 1)))


def timed(func: Callable[[], object]) -> float:
    start = time.perf_counter()
    func()
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run sccdag benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument("--vertices", type=int, default=100_000)
    args = parser.parse_args()

    dag = random_dag(args.vertices, args.vertices * 4)
    deep = chain(args.vertices)

    cases: list[tuple[str, Callable[[], object]]] = [
        ("Tarjan SCC (random DAG)", TarjanSCC(dag).find_sccs),
        ("Tarjan SCC (chain)", TarjanSCC(deep).find_sccs),
        ("Topological sort DFS", TopologicalSort(dag).sort_dfs),
        ("Topological sort Kahn", TopologicalSort(dag).sort_kahn),
        ("Critical path", DAGPathEngine(dag).critical_path),
    ]
    results = [{"name": name, "unit": "seconds", "value": timed(func)} for name, func in cases]

    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
