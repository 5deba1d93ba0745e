"""
Graph-side helpers for the cover algorithms.

The algorithms read networkx graphs but never mutate them.  Instead each
computation builds a :class:`WorkingGraph`, a private copy that can be
shrunk vertex by vertex.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Any, Hashable, Mapping, Optional

import networkx as nx

from vcover.exceptions import InvalidGraphKind, MissingWeight

logger = logging.getLogger(__name__)


def require_undirected(graph: nx.Graph) -> nx.Graph:
    """Return *graph* unchanged, or raise :class:`InvalidGraphKind` if it is directed."""
    if graph.is_directed():
        raise InvalidGraphKind(
            f"Graph must be undirected, got {type(graph).__name__}"
        )
    return graph


# ---------------------------------------------------------------------------
# Vertex weight maps
# ---------------------------------------------------------------------------

def uniform_weights(graph: nx.Graph) -> dict[Hashable, float]:
    """Weight every vertex of *graph* with 1.0."""
    return dict.fromkeys(graph.nodes(), 1.0)


def weights_from_attribute(graph: nx.Graph, attribute: str) -> dict[Hashable, float]:
    """
    Read vertex weights from the node attribute *attribute*.

    Raises
    ------
    MissingWeight
        If any node lacks the attribute.
    """
    weights = nx.get_node_attributes(graph, attribute)
    missing = [v for v in graph.nodes() if v not in weights]
    if missing:
        raise MissingWeight(missing)
    return {v: float(w) for v, w in weights.items()}


def check_weights(graph: nx.Graph, vertex_weights: Optional[Mapping[Hashable, float]]) -> None:
    """
    Verify that *vertex_weights* has an entry for every vertex of *graph*.

    Raises
    ------
    TypeError
        If *vertex_weights* is ``None``.
    MissingWeight
        If any vertex has no entry.
    """
    if vertex_weights is None:
        raise TypeError("vertex_weights must not be None")
    missing = [v for v in graph.nodes() if v not in vertex_weights]
    if missing:
        raise MissingWeight(missing)


# ---------------------------------------------------------------------------
# Working copy
# ---------------------------------------------------------------------------

class WorkingGraph:
    """
    Disposable, shrinkable view of an undirected graph's edges.

    Edges are kept in a FIFO work-list in the order the source graph
    yields them; parallel edges and self-loops are kept as they are.
    Removing a vertex drops all of its incident edges: they are discarded
    lazily once they reach the head of the work-list, so every edge is
    looked at no more than once.
    """

    def __init__(self, graph: nx.Graph) -> None:
        self._edges: deque[tuple[Any, Any]] = deque(graph.edges())
        self._removed: set[Any] = set()
        logger.debug("Working graph built with %d edges", len(self._edges))

    def has_edges(self) -> bool:
        """Return True while at least one edge with no removed endpoint remains."""
        self._discard_dead_edges()
        return bool(self._edges)

    def next_edge(self) -> tuple[Any, Any]:
        """
        Return some remaining edge ``(p, q)`` without consuming it.

        Raises
        ------
        LookupError
            If no edge remains.
        """
        self._discard_dead_edges()
        if not self._edges:
            raise LookupError("Working graph has no edges left")
        return self._edges[0]

    def remove_vertex(self, vertex: Any) -> None:
        """Remove *vertex* and, with it, every edge incident to it."""
        self._removed.add(vertex)

    def _discard_dead_edges(self) -> None:
        edges = self._edges
        removed = self._removed
        while edges and (edges[0][0] in removed or edges[0][1] in removed):
            edges.popleft()
