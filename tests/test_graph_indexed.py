"""Tests for cliquetools.graph module."""
import networkx as nx
import pytest

from cliquetools.graph.indexed import IndexedGraph, as_indexed_graph


def test_from_edges_basic():
    g = IndexedGraph.from_edges([(0, 1), (1, 2)])
    assert g.number_of_nodes() == 3
    assert g.upper_node_id_bound() == 3
    assert g.number_of_edges() == 2
    assert g.has_edge(0, 1) and g.has_edge(1, 0)
    assert not g.has_edge(0, 2)
    assert g.neighbors(1) == (0, 2)
    assert g.degree(1) == 2


def test_from_edges_isolated_nodes():
    g = IndexedGraph.from_edges([(0, 1)], n=4)
    assert g.number_of_nodes() == 4
    assert g.degree(3) == 0


def test_from_edges_collapses_repeats():
    g = IndexedGraph.from_edges([(0, 1), (1, 0), (0, 1)])
    assert g.number_of_edges() == 1


def test_from_edges_empty():
    g = IndexedGraph.from_edges([])
    assert g.number_of_nodes() == 0
    assert g.number_of_edges() == 0


def test_from_edges_self_loop_rejected():
    with pytest.raises(ValueError):
        IndexedGraph.from_edges([(0, 0)])


def test_from_adjlist_asymmetric_rejected():
    with pytest.raises(ValueError):
        IndexedGraph.from_adjlist([[1], []])


def test_from_adjlist_out_of_range_rejected():
    with pytest.raises(ValueError):
        IndexedGraph.from_adjlist([[2], [0]])


def test_from_adjlist_duplicate_neighbor_rejected():
    with pytest.raises(ValueError):
        IndexedGraph.from_adjlist([[1, 1], [0]])


def test_from_nx_labels():
    G = nx.Graph([("a", "b"), ("b", "c")])
    g = IndexedGraph.from_nx(G)
    assert g.labels == ("a", "b", "c")
    assert g.has_edge(0, 1)
    assert not g.has_edge(0, 2)
    assert g.label(2) == "c"


def test_from_nx_directed_rejected():
    with pytest.raises(ValueError):
        IndexedGraph.from_nx(nx.DiGraph([(0, 1)]))


def test_from_nx_multigraph_rejected():
    with pytest.raises(ValueError):
        IndexedGraph.from_nx(nx.MultiGraph([(0, 1)]))


def test_from_nx_self_loop_rejected():
    G = nx.Graph()
    G.add_edge(3, 3)
    with pytest.raises(ValueError):
        IndexedGraph.from_nx(G)


def test_to_nx_roundtrip_edges():
    G = nx.petersen_graph()
    H = IndexedGraph.from_nx(G).to_nx()
    assert set(map(frozenset, H.edges())) == set(map(frozenset, G.edges()))
    assert set(H.nodes()) == set(G.nodes())


def test_as_indexed_graph():
    g = IndexedGraph.from_edges([(0, 1)])
    assert as_indexed_graph(g) is g
    assert as_indexed_graph(nx.path_graph(3)).number_of_edges() == 2
    with pytest.raises(TypeError):
        as_indexed_graph([[1], [0]])
