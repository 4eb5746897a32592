from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterable, List, Optional, Sequence, Tuple, Union

import networkx as nx


@dataclass(frozen=True)
class IndexedGraph:
    """
    Simple undirected graph on compact node indices 0..n-1.

    adj:    adj[u] = neighbors of u, in a fixed order
    labels: labels[u] = caller-facing label of node u
    """

    adj: Tuple[Tuple[int, ...], ...]
    labels: Tuple[Hashable, ...]
    _adjsets: Tuple[frozenset, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.labels) != len(self.adj):
            raise ValueError(
                f"labels has length {len(self.labels)}, expected {len(self.adj)}."
            )
        n = len(self.adj)
        sets = []
        for u, neigh in enumerate(self.adj):
            s = frozenset(neigh)
            if len(s) != len(neigh):
                raise ValueError(f"Duplicate neighbor in adjacency of node {u}.")
            if u in s:
                raise ValueError(f"Self-loop at node {u}.")
            for v in neigh:
                if not (0 <= v < n):
                    raise ValueError(f"Neighbor {v} of node {u} out of range 0..{n - 1}.")
            sets.append(s)
        for u, neigh in enumerate(self.adj):
            for v in neigh:
                if u not in sets[v]:
                    raise ValueError(f"Adjacency is not symmetric: {u}->{v} without {v}->{u}.")
        object.__setattr__(self, "_adjsets", tuple(sets))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_adjlist(
        cls,
        adj: Sequence[Sequence[int]],
        labels: Optional[Sequence[Hashable]] = None,
    ) -> "IndexedGraph":
        """Build from a 0..n-1 adjacency list (both directions listed)."""
        if labels is None:
            labels = range(len(adj))
        return cls(adj=tuple(tuple(neigh) for neigh in adj), labels=tuple(labels))

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[int, int]],
        n: Optional[int] = None,
    ) -> "IndexedGraph":
        """
        Build from undirected edges on vertices {0..n-1}.

        If n is None it is inferred as 1 + the largest endpoint.
        Repeated edges (in either orientation) are collapsed.
        """
        eds = list(edges)
        if n is None:
            n = 1 + max((max(u, v) for u, v in eds), default=-1)
        adj: List[List[int]] = [[] for _ in range(n)]
        seen = set()
        for u, v in eds:
            if u == v:
                raise ValueError(f"Self-loop at node {u}.")
            if not (0 <= u < n and 0 <= v < n):
                raise ValueError(f"Edge ({u}, {v}) has an endpoint outside 0..{n - 1}.")
            key = (u, v) if u < v else (v, u)
            if key in seen:
                continue
            seen.add(key)
            adj[u].append(v)
            adj[v].append(u)
        return cls.from_adjlist(adj)

    @classmethod
    def from_nx(cls, G: nx.Graph) -> "IndexedGraph":
        """
        Build from a NetworkX graph. Node labels may be any hashables;
        neighbor order follows G's adjacency order.
        """
        if G.is_directed():
            raise ValueError("Graph must be undirected.")
        if G.is_multigraph():
            raise ValueError("Graph must be simple (got a multigraph).")
        labels = list(G.nodes())
        index = {v: i for i, v in enumerate(labels)}
        adj = [[index[w] for w in G.neighbors(v)] for v in labels]
        return cls.from_adjlist(adj, labels=labels)

    def to_nx(self) -> nx.Graph:
        G = nx.Graph()
        G.add_nodes_from(self.labels)
        G.add_edges_from(
            (self.labels[u], self.labels[v])
            for u, neigh in enumerate(self.adj)
            for v in neigh
            if u < v
        )
        return G

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def number_of_nodes(self) -> int:
        return len(self.adj)

    def upper_node_id_bound(self) -> int:
        """Exclusive bound on node indices (equal to the node count)."""
        return len(self.adj)

    def number_of_edges(self) -> int:
        return sum(len(neigh) for neigh in self.adj) // 2

    def has_edge(self, u: int, v: int) -> bool:
        return v in self._adjsets[u]

    def neighbors(self, u: int) -> Tuple[int, ...]:
        return self.adj[u]

    def degree(self, u: int) -> int:
        return len(self.adj[u])

    def label(self, u: int) -> Hashable:
        return self.labels[u]

    def nodes(self) -> range:
        return range(len(self.adj))


GraphLike = Union[IndexedGraph, nx.Graph]


def as_indexed_graph(G: GraphLike) -> IndexedGraph:
    """Accept an IndexedGraph or a NetworkX graph."""
    if isinstance(G, IndexedGraph):
        return G
    if isinstance(G, nx.Graph):
        return IndexedGraph.from_nx(G)
    raise TypeError(f"Expected IndexedGraph or networkx.Graph, got {type(G).__name__}.")
