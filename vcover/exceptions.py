"""Exception types raised by vcover."""

from __future__ import annotations

from typing import Any, Iterable


class VertexCoverError(Exception):
    """Base class for every error raised by this package."""


class InvalidGraphKind(VertexCoverError, ValueError):
    """The input graph is not undirected."""


class MissingWeight(VertexCoverError, LookupError):
    """
    One or more vertices of the graph have no weight entry.

    The offending vertices are available as :attr:`vertices`.
    """

    def __init__(self, vertices: Iterable[Any]) -> None:
        self.vertices = list(vertices)
        shown = ", ".join(repr(v) for v in self.vertices[:5])
        if len(self.vertices) > 5:
            shown += f", ... ({len(self.vertices) - 5} more)"
        super().__init__(f"No weight given for vertices: {shown}")
