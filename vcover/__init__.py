"""Approximate minimum weighted vertex covers for networkx graphs."""

from vcover.algorithms import (
    BarYehudaEvenTwoApproxVC,
    VertexCoverAlgorithm,
    min_weighted_vertex_cover,
    two_approx_vertex_cover,
)
from vcover.config import CoverOptions, VertexCover
from vcover.exceptions import InvalidGraphKind, MissingWeight, VertexCoverError

__version__ = "0.1.0"

__all__ = [
    "BarYehudaEvenTwoApproxVC",
    "CoverOptions",
    "InvalidGraphKind",
    "MissingWeight",
    "VertexCover",
    "VertexCoverAlgorithm",
    "VertexCoverError",
    "min_weighted_vertex_cover",
    "two_approx_vertex_cover",
]
