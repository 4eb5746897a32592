from __future__ import annotations

from typing import Iterable, Iterator

import networkx as nx

from cliquetools.graph.indexed import IndexedGraph


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def g6_to_nx(g6: str) -> nx.Graph:
    """
    Parse a graph6 string into a simple undirected NetworkX Graph on 0..n-1.
    """
    G = nx.from_graph6_bytes(strip_graph6_header(g6).encode("ascii"))
    if isinstance(G, (nx.MultiGraph, nx.MultiDiGraph)):
        G = nx.Graph(G)
    return G


def g6_to_graph(g6: str) -> IndexedGraph:
    """
    Parse a graph6 string into an IndexedGraph with sorted neighbor lists.
    """
    G = g6_to_nx(g6)
    n = G.number_of_nodes()
    return IndexedGraph.from_adjlist([sorted(G.neighbors(u)) for u in range(n)])


def read_graph6_lines(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield graph6 strings from text lines, skipping blanks and '>' lines
    (geng/shortg status output). A leading '>>graph6<<' header is removed.
    """
    for line in lines:
        s = line.strip()
        if s.startswith(">>graph6<<"):
            s = strip_graph6_header(s)
        if not s or s.startswith(">"):
            continue
        yield s


def read_edgelist_file(path: str) -> IndexedGraph:
    """
    Read whitespace-separated integer pairs 'u v' ('#' starts a comment).

    Node labels are the integers from the file; self-loops raise ValueError.
    """
    G = nx.read_edgelist(path, comments="#", nodetype=int, create_using=nx.Graph)
    if nx.number_of_selfloops(G):
        raise ValueError(f"{path}: edge list contains self-loops.")
    return IndexedGraph.from_nx(G)
