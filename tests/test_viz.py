"""Tests for cliquetools.viz (non-interactive backend)."""
import matplotlib

matplotlib.use("Agg")

import networkx as nx

from cliquetools.graph.indexed import IndexedGraph
from cliquetools.viz.draw import clique_edges, draw_cliques


def test_clique_edges():
    assert clique_edges([[0, 1, 2], [3]]) == [[(0, 1), (0, 2), (1, 2)], []]


def test_draw_cliques_saves_png(tmp_path):
    G = nx.Graph([(0, 1), (1, 2), (0, 2), (2, 3)])
    out = tmp_path / "cliques.png"
    shown = draw_cliques(G, save_path=str(out))
    assert out.exists()
    assert {frozenset(c) for c in shown} == {frozenset({0, 1, 2}), frozenset({2, 3})}


def test_draw_cliques_min_size(tmp_path):
    g = IndexedGraph.from_edges([(0, 1), (1, 2), (0, 2)], n=4)
    shown = draw_cliques(g, min_size=2, save_path=str(tmp_path / "g.png"))
    assert {frozenset(c) for c in shown} == {frozenset({0, 1, 2})}
