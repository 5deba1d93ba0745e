"""Vertex cover algorithms."""

from vcover.algorithms.base import VertexCoverAlgorithm
from vcover.algorithms.bar_yehuda_even import (
    BarYehudaEvenTwoApproxVC,
    min_weighted_vertex_cover,
    two_approx_vertex_cover,
)

__all__ = [
    "VertexCoverAlgorithm",
    "BarYehudaEvenTwoApproxVC",
    "min_weighted_vertex_cover",
    "two_approx_vertex_cover",
]
