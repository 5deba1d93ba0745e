"""
Bar-Yehuda & Even 2-approximation for minimum weighted vertex cover.

References:
R. Bar-Yehuda and S. Even. A linear time approximation algorithm for the
    weighted vertex cover problem. Journal of Algorithms 2:198-203, 1981.

Runs in O(|V| + |E|) and accepts pseudo-graphs (parallel edges and
self-loops).  The returned cover weighs at most twice an optimal one.
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Mapping, Optional

import networkx as nx

from vcover.algorithms.base import VertexCoverAlgorithm
from vcover.config import CoverOptions, VertexCover
from vcover.graph import (
    WorkingGraph,
    check_weights,
    require_undirected,
    uniform_weights,
    weights_from_attribute,
)

logger = logging.getLogger(__name__)


def two_approx_vertex_cover(
    graph: nx.Graph,
    vertex_weights: Mapping[Hashable, float],
) -> VertexCover:
    """
    Compute a vertex cover of *graph* weighing at most twice the optimum.

    Repeatedly takes any remaining edge ``(p, q)``, puts the endpoint with
    the smaller remaining weight into the cover (``p`` on ties), charges
    that remaining weight against the other endpoint and deletes the
    chosen vertex together with its edges.

    Parameters
    ----------
    graph : nx.Graph
        Undirected graph; ``nx.MultiGraph`` and self-loops are fine.
        It is not modified.
    vertex_weights : Mapping
        Non-negative weight for every vertex of *graph*.

    Returns
    -------
    VertexCover
        Cover vertices in selection order and the sum of their weights.

    Raises
    ------
    InvalidGraphKind
        If *graph* is directed.
    MissingWeight
        If a vertex of *graph* has no weight.
    """
    require_undirected(graph)
    check_weights(graph, vertex_weights)

    cover: dict[Any, None] = {}
    weight = 0.0
    work = WorkingGraph(graph)
    remaining = {v: vertex_weights[v] for v in graph.nodes()}

    while work.has_edges():
        p, q = work.next_edge()

        if remaining[p] <= remaining[q]:
            chosen = p
            remaining[q] -= remaining[p]
        else:
            chosen = q
            remaining[p] -= remaining[q]

        logger.debug("Edge (%r, %r): adding %r to the cover", p, q, chosen)
        if chosen not in cover:
            cover[chosen] = None
            weight += vertex_weights[chosen]
        work.remove_vertex(chosen)

    result = VertexCover(vertices=tuple(cover), weight=weight)
    logger.info(
        "Vertex cover computed: %d of %d vertices, weight %.6g",
        len(result.vertices), graph.number_of_nodes(), result.weight,
    )
    return result


class BarYehudaEvenTwoApproxVC(VertexCoverAlgorithm):
    """
    Bar-Yehuda & Even 2-approximation bound to one graph.

    Parameters
    ----------
    graph : nx.Graph
        Undirected input graph.
    vertex_weights : Mapping | None
        Weight per vertex.  When omitted, every vertex weighs 1.0, or, if
        ``options.weight_attribute`` is set, weights are read from that
        node attribute.
    options : CoverOptions | None
        Construction options.

    Usage
    -----
    >>> algo = BarYehudaEvenTwoApproxVC(nx.path_graph(4))
    >>> cover = algo.get_vertex_cover()
    """

    name = "bar_yehuda_even"

    def __init__(
        self,
        graph: nx.Graph,
        vertex_weights: Optional[Mapping[Hashable, float]] = None,
        options: Optional[CoverOptions] = None,
    ) -> None:
        self.options = options or CoverOptions()
        self.graph = require_undirected(graph)

        if vertex_weights is not None:
            self.vertex_weights = dict(vertex_weights)
            mode = "explicit"
        elif self.options.weight_attribute is not None:
            self.vertex_weights = weights_from_attribute(graph, self.options.weight_attribute)
            mode = f"attribute {self.options.weight_attribute!r}"
        else:
            self.vertex_weights = uniform_weights(graph)
            mode = "uniform"

        if self.options.validate_on_init:
            check_weights(graph, self.vertex_weights)

        logger.debug(
            "Built %s on %d vertices / %d edges (%s weights)",
            self.__class__.__name__, graph.number_of_nodes(),
            graph.number_of_edges(), mode,
        )

    def get_vertex_cover(self) -> VertexCover:
        return two_approx_vertex_cover(self.graph, self.vertex_weights)


def min_weighted_vertex_cover(graph: nx.Graph, weight: Optional[str] = None) -> VertexCover:
    """
    Shortcut mirroring ``networkx.algorithms.approximation.min_weighted_vertex_cover``.

    *weight* names the node attribute holding vertex weights; when it is
    ``None`` every vertex weighs 1.0.  Unlike networkx, which weighs a node
    lacking the attribute as 1, a missing attribute raises
    :class:`~vcover.exceptions.MissingWeight`.
    """
    options = CoverOptions(weight_attribute=weight)
    return BarYehudaEvenTwoApproxVC(graph, options=options).get_vertex_cover()
