"""Console reporter: AnalysisReport → rich formatted output."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sccdag.application.reporters._base import BaseReporter, format_distance, format_groups

if TYPE_CHECKING:
    from sccdag.domain.model.analysis import AnalysisReport


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        max_components: Max components listed. None = unlimited.
        show_stats: Show per-stage metrics table.
        width: Console width in characters.
    """

    max_components: int | None = None
    show_stats: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_components is not None and self.max_components < 0:
            raise ValueError(f"max_components must be >= 0, got {self.max_components}")
        if self.width < 1:
            raise ValueError(f"width must be >= 1, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: colors and tables via rich.

    render() returns a string; report() writes it to the output stream.
    """

    def __init__(self, config: ConsoleConfig | None = None, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
            output: Output stream for report() (default: sys.stdout)
        """
        self._config = config or ConsoleConfig()
        self._output = output if output is not None else sys.stdout

    def report(self, result: AnalysisReport) -> None:
        self._output.write(self.render(result))

    def render(self, result: AnalysisReport) -> str:
        """Format analysis report as rich formatted string."""
        buffer = StringIO()
        console = Console(file=buffer, force_terminal=True, width=self._config.width)

        self._render_header(console, result)
        self._render_components(console, result)
        self._render_paths(console, result)
        if result.shortest_paths is not None:
            self._render_distances(console, result)
        if self._config.show_stats:
            self._render_stats(console, result)

        return buffer.getvalue()

    def _render_header(self, console: Console, result: AnalysisReport) -> None:
        console.print()
        console.rule("[bold]GRAPH ANALYSIS[/bold]")
        console.print()
        status = "[green]acyclic[/green]" if result.is_acyclic else "[yellow]cyclic[/yellow]"
        console.print(
            f"[bold]Vertices:[/bold] {result.graph.vertex_count}  "
            f"[bold]Edges:[/bold] {result.graph.edge_count}  {status}"
        )
        console.print(
            f"[bold]SCCs:[/bold] {result.components.count}  "
            f"[bold]Condensation edges:[/bold] {result.condensation.edge_count}"
        )
        console.print()

    def _render_components(self, console: Console, result: AnalysisReport) -> None:
        table = Table(title="Strongly connected components")
        table.add_column("Component", justify="right")
        table.add_column("Size", justify="right")
        table.add_column("Vertices")

        limit = self._config.max_components
        shown = result.components.components
        if limit is not None:
            shown = shown[:limit]
        for cid, members in enumerate(shown):
            table.add_row(str(cid), str(len(members)), ", ".join(map(str, members)))

        console.print(table)
        hidden = result.components.count - len(shown)
        if hidden > 0:
            console.print(f"[dim]... {hidden} more component(s)[/dim]")
        console.print()

    def _render_paths(self, console: Console, result: AnalysisReport) -> None:
        console.print("[bold]CRITICAL PATH[/bold]")
        critical = result.critical_path
        if not critical.found:
            console.print("  [dim](empty graph)[/dim]")
        else:
            chain = escape(format_groups(result.critical_groups))
            console.print(f"  length [cyan]{critical.length}[/cyan]: {chain}")
        console.print()

    def _render_distances(self, console: Console, result: AnalysisReport) -> None:
        console.print(f"[bold]SHORTEST DISTANCES FROM {result.source}[/bold]")
        table = Table()
        table.add_column("Vertex", justify="right")
        table.add_column("Distance", justify="right")
        for vertex in result.graph.vertices():
            table.add_row(str(vertex), format_distance(result.distance_to(vertex)))
        console.print(table)
        console.print()

    def _render_stats(self, console: Console, result: AnalysisReport) -> None:
        table = Table(title="Metrics")
        table.add_column("Stage")
        table.add_column("Time (ms)", justify="right")
        table.add_column("Counters")
        for stage in result.stats:
            counters = ", ".join(f"{k}={v}" for k, v in stage.counters.items())
            table.add_row(stage.name, f"{stage.elapsed_ms:.3f}", counters)
        console.print(table)
