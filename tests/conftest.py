"""Shared test fixtures: cover verification and brute-force optima."""

import itertools

import networkx as nx
import pytest


def _is_vertex_cover(graph: nx.Graph, vertices) -> bool:
    chosen = set(vertices)
    return all(u in chosen or v in chosen for u, v in graph.edges())


def _brute_force_optimum(graph: nx.Graph, weights: dict) -> float:
    nodes = list(graph.nodes())
    best = float(sum(weights[v] for v in nodes))
    for k in range(len(nodes) + 1):
        for subset in itertools.combinations(nodes, k):
            if _is_vertex_cover(graph, subset):
                best = min(best, float(sum(weights[v] for v in subset)))
    return best


@pytest.fixture()
def is_vertex_cover():
    """Check that every edge has at least one endpoint in the given vertices."""
    return _is_vertex_cover


@pytest.fixture()
def brute_force_optimum():
    """Weight of a minimum weighted vertex cover, by exhaustive search."""
    return _brute_force_optimum


@pytest.fixture()
def triangle():
    return nx.cycle_graph(3)


@pytest.fixture()
def path4():
    return nx.path_graph(4)
