"""Tests for cliquetools.cores module."""
import networkx as nx
import pytest

from cliquetools.cores.degeneracy import (
    core_decomposition,
    core_numbers,
    degeneracy,
    validate_ordering,
)
from cliquetools.graph.indexed import IndexedGraph


def _later_neighbors(G, order):
    pos = {u: i for i, u in enumerate(order)}
    return {u: sum(1 for v in G.neighbors(u) if pos[v] > pos[u]) for u in G.nodes()}


def test_empty_graph():
    cd = core_decomposition(IndexedGraph.from_edges([]))
    assert cd.order == ()
    assert cd.core == ()
    assert cd.degeneracy() == 0


def test_isolated_nodes():
    cd = core_decomposition(IndexedGraph.from_edges([], n=3))
    assert sorted(cd.order) == [0, 1, 2]
    assert cd.core == (0, 0, 0)


def test_complete_graph():
    assert degeneracy(nx.complete_graph(6)) == 5


def test_tree_degeneracy_one():
    assert degeneracy(nx.balanced_tree(2, 4)) == 1


def test_cycle_with_pendant():
    G = nx.cycle_graph(5)
    G.add_edge(0, 5)
    core = core_numbers(G)
    assert core[5] == 1
    assert all(core[u] == 2 for u in range(5))


@pytest.mark.parametrize("seed", range(5))
def test_core_numbers_match_networkx(seed):
    G = nx.gnp_random_graph(60, 0.1, seed=seed)
    core = core_numbers(G)
    ref = nx.core_number(G)
    assert all(core[u] == ref[u] for u in G.nodes())


@pytest.mark.parametrize("seed", range(5))
def test_order_is_degeneracy_ordering(seed):
    G = nx.barabasi_albert_graph(80, 3, seed=seed)
    cd = core_decomposition(G)
    assert sorted(cd.order) == list(G.nodes())
    # non-decreasing core numbers along the order
    cores_along = [cd.core[u] for u in cd.order]
    assert cores_along == sorted(cores_along)
    # later neighbors bounded by core number
    later = _later_neighbors(G, cd.order)
    assert all(later[u] <= cd.core[u] for u in G.nodes())


def test_position_inverts_order():
    cd = core_decomposition(nx.karate_club_graph())
    pos = cd.position()
    assert all(cd.order[pos[u]] == u for u in range(len(cd.order)))


def test_validate_ordering_ok():
    assert validate_ordering([2, 0, 1], 3) == (2, 0, 1)


def test_validate_ordering_wrong_length():
    with pytest.raises(ValueError):
        validate_ordering([0, 1], 3)


def test_validate_ordering_duplicate():
    with pytest.raises(ValueError):
        validate_ordering([0, 0, 1], 3)


def test_validate_ordering_out_of_range():
    with pytest.raises(ValueError):
        validate_ordering([0, 1, 3], 3)
