"""Abstract base class for vertex cover algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod

from vcover.config import VertexCover


class VertexCoverAlgorithm(ABC):
    """
    Base class that every vertex cover algorithm implements.

    An algorithm is bound to its input graph (and weights) at construction;
    :meth:`get_vertex_cover` then computes a cover from that state.

    Example
    -------
    >>> class EveryVertex(VertexCoverAlgorithm):
    ...     name = "every_vertex"
    ...     def __init__(self, graph):
    ...         self.graph = graph
    ...     def get_vertex_cover(self):
    ...         nodes = tuple(self.graph.nodes())
    ...         return VertexCover(vertices=nodes, weight=float(len(nodes)))
    """

    name: str = "unnamed"

    @abstractmethod
    def get_vertex_cover(self) -> VertexCover:
        """
        Compute a vertex cover of the bound graph.

        Returns
        -------
        VertexCover
            The cover vertices and their total weight.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
