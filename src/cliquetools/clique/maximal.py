from __future__ import annotations

from typing import Callable, Hashable, List, Optional, Sequence

from cliquetools.cores.degeneracy import core_decomposition, validate_ordering
from cliquetools.graph.indexed import GraphLike, IndexedGraph, as_indexed_graph

from .outgraph import BoundedOutGraph
from .partition import PartitionArray
from .tomita import TomitaEnumerator


Clique = List[Hashable]


class MaximalCliques:
    """
    Enumerate all maximal cliques of a simple undirected graph.

    Nodes are visited along a degeneracy ordering. Each maximal clique is
    found exactly once, from the earliest of its nodes in that ordering, by a
    pivoting Bron-Kerbosch search restricted to the later neighbors.

    Parameters
    ----------
    G : IndexedGraph or networkx.Graph
    maximum_only : bool
        Report only cliques of maximum size (all of them, if several).
    callback : callable, optional
        Called with each maximal clique (a list of labels) as soon as it is
        found. Cliques are then not stored and get_cliques() is unavailable.
    ordering : sequence of int, optional
        Node order to use instead of the degeneracy ordering, as a
        permutation of node indices. Any permutation gives the same cliques.
    """

    def __init__(
        self,
        G: GraphLike,
        *,
        maximum_only: bool = False,
        callback: Optional[Callable[[Clique], None]] = None,
        ordering: Optional[Sequence[int]] = None,
    ) -> None:
        if maximum_only and callback is not None:
            raise ValueError("maximum_only and callback cannot be combined.")
        self.graph: IndexedGraph = as_indexed_graph(G)
        self.maximum_only = maximum_only
        self.callback = callback
        self.ordering = (
            None if ordering is None else validate_ordering(ordering, self.graph.number_of_nodes())
        )
        self._result: List[List[int]] = []
        self._best = 0
        self._has_run = False

    # ------------------------------------------------------------------

    def run(self) -> "MaximalCliques":
        self._has_run = False
        self._result = []
        self._best = 0

        graph = self.graph
        if self.ordering is None:
            order = core_decomposition(graph).order
        else:
            order = self.ordering

        part = PartitionArray(order)
        out = BoundedOutGraph(graph, part.position)
        enumerator = TomitaEnumerator(
            out,
            part,
            self._emit,
            bound=self._bound if self.maximum_only else None,
        )

        # positions < xpbound - 1 hold the nodes already processed (X for u)
        xpbound = 1
        for u in order:
            assert part.position[u] >= xpbound - 1
            part.move_to_position(u, xpbound - 1)

            xcount = 0
            pcount = 0
            for v in graph.neighbors(u):
                if part.position[v] < xpbound:
                    part.move_to_position(v, xpbound - xcount - 1)
                    xcount += 1
                else:
                    part.move_to_position(v, xpbound + pcount)
                    pcount += 1

            enumerator.run([u], xpbound - xcount, xpbound, xpbound + pcount)
            xpbound += 1

        self._has_run = True
        return self

    def _emit(self, r: List[int]) -> None:
        if self.callback is not None:
            labels = self.graph.labels
            self.callback([labels[v] for v in r])
            return
        if self.maximum_only:
            if len(r) < self._best:
                return
            if len(r) > self._best:
                self._best = len(r)
                self._result = []
        self._result.append(list(r))

    def _bound(self) -> int:
        return self._best

    # ------------------------------------------------------------------

    def has_finished(self) -> bool:
        return self._has_run

    def get_cliques(self) -> List[Clique]:
        """
        Cliques found by the last run, as lists of node labels.

        Raises RuntimeError if run() has not completed or a callback was used.
        """
        if not self._has_run:
            raise RuntimeError("Call run() before get_cliques().")
        if self.callback is not None:
            raise RuntimeError("Cliques were passed to the callback and not stored.")
        labels = self.graph.labels
        return [[labels[v] for v in c] for c in self._result]


def maximal_cliques(G: GraphLike) -> List[Clique]:
    """All maximal cliques of G."""
    return MaximalCliques(G).run().get_cliques()


def maximum_cliques(G: GraphLike) -> List[Clique]:
    """All cliques of maximum size in G (empty for the empty graph)."""
    return MaximalCliques(G, maximum_only=True).run().get_cliques()


def clique_number(G: GraphLike) -> int:
    """Size of a largest clique (0 for the empty graph)."""
    found = maximum_cliques(G)
    return len(found[0]) if found else 0
