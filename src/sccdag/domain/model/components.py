"""Strongly connected components: partition of the vertex set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class Components:
    """Result of an SCC run.

    Invariants (FAIL-FIRST):
        - every component is non-empty
        - component_of[v] == i for every v in components[i]
        - components partition [0, len(component_of))

    Attributes:
        components: Components in root-completion order (reverse topological
            order of the condensation). Vertices inside a component are in
            stack-pop order.
        component_of: Vertex → index into components.
    """

    components: tuple[tuple[int, ...], ...]
    component_of: tuple[int, ...]

    def __post_init__(self) -> None:
        """Validate partition. FAIL-FIRST."""
        seen = 0
        for cid, members in enumerate(self.components):
            if not members:
                raise ValueError(f"component {cid} is empty")
            for v in members:
                if not 0 <= v < len(self.component_of):
                    raise ValueError(f"vertex {v} of component {cid} out of range")
                if self.component_of[v] != cid:
                    raise ValueError(
                        f"vertex {v} listed in component {cid} but mapped to {self.component_of[v]}"
                    )
            seen += len(members)
        if seen != len(self.component_of):
            raise ValueError(
                f"components cover {seen} vertices, expected {len(self.component_of)}"
            )

    @property
    def count(self) -> int:
        """Number of components."""
        return len(self.components)

    @property
    def sizes(self) -> tuple[int, ...]:
        """Size of each component, in component order."""
        return tuple(len(members) for members in self.components)

    @property
    def largest(self) -> tuple[int, ...]:
        """Largest component (first one on ties). Empty for an empty graph."""
        return max(self.components, key=len, default=())

    def is_trivial(self) -> bool:
        """True if every component is a single vertex."""
        return all(len(members) == 1 for members in self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return iter(self.components)

    def __getitem__(self, index: int) -> tuple[int, ...]:
        return self.components[index]
