"""Core decomposition and degeneracy ordering (bucket algorithm)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from cliquetools.graph.indexed import GraphLike, as_indexed_graph


@dataclass(frozen=True)
class CoreDecomposition:
    """
    order: nodes in removal order; core numbers along it are non-decreasing
    core:  core[u] = core number of node u
    """

    order: Tuple[int, ...]
    core: Tuple[int, ...]

    def degeneracy(self) -> int:
        return max(self.core, default=0)

    def position(self) -> List[int]:
        """Inverse of order: position[u] = rank of u in order."""
        pos = [0] * len(self.order)
        for i, u in enumerate(self.order):
            pos[u] = i
        return pos


def core_decomposition(G: GraphLike) -> CoreDecomposition:
    """
    Batagelj-Zaversnik O(n + m) core decomposition.

    Nodes are kept in an array sorted by current degree, with bin_start[d]
    the first slot holding degree d. Processing slots left to right removes a
    minimum-degree node each step; decrementing a neighbor's degree swaps it
    to the front of its bin and shifts that bin's start by one.
    """
    graph = as_indexed_graph(G)
    n = graph.number_of_nodes()
    if n == 0:
        return CoreDecomposition(order=(), core=())

    deg = [graph.degree(u) for u in range(n)]
    max_deg = max(deg)

    bin_start = [0] * (max_deg + 1)
    for d in deg:
        bin_start[d] += 1
    start = 0
    for d in range(max_deg + 1):
        num = bin_start[d]
        bin_start[d] = start
        start += num

    vert = [0] * n
    pos = [0] * n
    fill = list(bin_start)
    for u in range(n):
        pos[u] = fill[deg[u]]
        vert[pos[u]] = u
        fill[deg[u]] += 1

    for i in range(n):
        v = vert[i]
        for u in graph.neighbors(v):
            if deg[u] > deg[v]:
                du = deg[u]
                pu = pos[u]
                pw = bin_start[du]
                w = vert[pw]
                if u != w:
                    vert[pu], vert[pw] = w, u
                    pos[u], pos[w] = pw, pu
                bin_start[du] += 1
                deg[u] -= 1

    return CoreDecomposition(order=tuple(vert), core=tuple(deg))


def core_numbers(G: GraphLike) -> Tuple[int, ...]:
    return core_decomposition(G).core


def degeneracy(G: GraphLike) -> int:
    """Largest core number (0 for graphs without edges)."""
    return core_decomposition(G).degeneracy()


def validate_ordering(order: Sequence[int], n: int) -> Tuple[int, ...]:
    """Return order as a tuple, or raise ValueError unless it permutes 0..n-1."""
    out = tuple(order)
    if len(out) != n:
        raise ValueError(f"Ordering has {len(out)} entries, expected {n}.")
    seen = [False] * n
    for u in out:
        if not (0 <= u < n):
            raise ValueError(f"Ordering entry {u} out of range 0..{n - 1}.")
        if seen[u]:
            raise ValueError(f"Ordering lists node {u} twice.")
        seen[u] = True
    return out
