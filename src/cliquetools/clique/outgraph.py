from __future__ import annotations

from typing import List, Sequence, Tuple

from cliquetools.graph.indexed import IndexedGraph


class BoundedOutGraph:
    """
    Orientation of an undirected graph along a node ordering.

    Each edge {u, v} becomes the arc u -> v when position[u] < position[v].
    Along a degeneracy ordering the out-degree of every node is at most its
    core number. Read-only after construction.
    """

    __slots__ = ("_out", "_outsets")

    def __init__(self, graph: IndexedGraph, position: Sequence[int]) -> None:
        out: List[Tuple[int, ...]] = []
        for u in graph.nodes():
            pu = position[u]
            out.append(tuple(v for v in graph.neighbors(u) if position[v] > pu))
        self._out = tuple(out)
        self._outsets = tuple(frozenset(o) for o in out)

    def __len__(self) -> int:
        return len(self._out)

    def out_neighbors(self, u: int) -> Tuple[int, ...]:
        return self._out[u]

    def out_degree(self, u: int) -> int:
        return len(self._out[u])

    def has_out_neighbor(self, u: int, v: int) -> bool:
        """True iff the arc u -> v exists."""
        return v in self._outsets[u]

    def number_of_arcs(self) -> int:
        return sum(len(o) for o in self._out)
