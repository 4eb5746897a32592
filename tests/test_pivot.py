"""Tests for cliquetools.clique.pivot."""
import random

import networkx as nx
import pytest

from cliquetools.clique.outgraph import BoundedOutGraph
from cliquetools.clique.partition import PartitionArray
from cliquetools.clique.pivot import find_pivot, pivot_neighbor_counts
from cliquetools.cores.degeneracy import core_decomposition
from cliquetools.graph.indexed import IndexedGraph


def _setup(G, seed):
    g = IndexedGraph.from_nx(G)
    cd = core_decomposition(g)
    part = PartitionArray(cd.order)
    out = BoundedOutGraph(g, part.position)
    # scramble positions; the out graph is fixed at construction
    rng = random.Random(seed)
    n = len(part)
    for _ in range(3 * n):
        part.move_to_position(rng.randrange(n), rng.randrange(n))
    return out, part


def test_pivot_adjacent_to_all_of_p():
    # star: center 0, leaves 1..4; window X = [], P = all
    g = IndexedGraph.from_edges([(0, i) for i in range(1, 5)])
    part = PartitionArray([1, 2, 3, 4, 0])
    out = BoundedOutGraph(g, part.position)
    assert find_pivot(out, part, 0, 0, 5) == 0


def test_pivot_from_x_returns_early():
    # triangle 0-1-2 plus node 3 adjacent to 1 and 2; X = {3}, P = {1, 2}
    g = IndexedGraph.from_edges([(0, 1), (1, 2), (0, 2), (3, 1), (3, 2)])
    part = PartitionArray([0, 3, 1, 2])
    out = BoundedOutGraph(g, part.position)
    assert find_pivot(out, part, 1, 2, 4) == 3


def test_pivot_tie_earliest_position():
    # path 0-1-2-3: window P = all; nodes 1 and 2 both have two P-neighbors
    g = IndexedGraph.from_edges([(0, 1), (1, 2), (2, 3)])
    part = PartitionArray([0, 2, 1, 3])
    out = BoundedOutGraph(g, [0, 2, 1, 3])
    assert find_pivot(out, part, 0, 0, 4) == 2


@pytest.mark.parametrize("seed", range(8))
def test_pivot_maximizes_p_neighbors(seed):
    G = nx.gnp_random_graph(40, 0.2, seed=seed)
    out, part = _setup(G, seed)
    rng = random.Random(seed)
    for _ in range(20):
        xbound = rng.randrange(0, 20)
        xpbound = rng.randrange(xbound, 30)
        pbound = rng.randrange(xpbound + 1, 41)
        pivot = find_pivot(out, part, xbound, xpbound, pbound)
        ref = pivot_neighbor_counts(out, part, xbound, xpbound, pbound)
        assert xbound <= part.position[pivot] < pbound
        assert ref[part.position[pivot] - xbound] == max(ref)


@pytest.mark.parametrize("seed", range(4))
def test_pivot_matches_reference_when_x_empty(seed):
    G = nx.gnp_random_graph(30, 0.25, seed=100 + seed)
    out, part = _setup(G, seed)
    pivot = find_pivot(out, part, 5, 5, 30)
    ref = pivot_neighbor_counts(out, part, 5, 5, 30)
    assert part.position[pivot] - 5 == ref.index(max(ref))


def test_pivot_leaves_partition_untouched():
    out, part = _setup(nx.karate_club_graph(), 0)
    before = list(part.nodes)
    find_pivot(out, part, 3, 10, 30)
    assert part.nodes == before
