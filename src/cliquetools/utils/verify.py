from __future__ import annotations

from itertools import combinations
from typing import FrozenSet, Hashable, Iterable, List, Set

from cliquetools.graph.indexed import GraphLike, as_indexed_graph


BRUTEFORCE_MAX_NODES = 20


def _indices(graph, nodes: Iterable[Hashable]) -> List[int]:
    index = {lab: i for i, lab in enumerate(graph.labels)}
    try:
        return [index[v] for v in nodes]
    except KeyError as e:
        raise ValueError(f"Unknown node {e.args[0]!r}.") from None


def is_clique(G: GraphLike, nodes: Iterable[Hashable]) -> bool:
    """True iff the nodes are pairwise adjacent (the empty set counts)."""
    graph = as_indexed_graph(G)
    idx = _indices(graph, nodes)
    if len(set(idx)) != len(idx):
        return False
    return all(graph.has_edge(u, v) for u, v in combinations(idx, 2))


def is_maximal_clique(G: GraphLike, nodes: Iterable[Hashable]) -> bool:
    """True iff nodes form a clique that no other node extends."""
    graph = as_indexed_graph(G)
    idx = _indices(graph, nodes)
    if not is_clique(graph, nodes=[graph.labels[i] for i in idx]):
        return False
    members = set(idx)
    if not members:
        return graph.number_of_nodes() == 0
    # any extension must be a common neighbor of all members
    first = idx[0]
    for w in graph.neighbors(first):
        if w not in members and all(graph.has_edge(w, v) for v in idx):
            return False
    return True


def clique_set(cliques: Iterable[Iterable[Hashable]]) -> Set[FrozenSet[Hashable]]:
    """Cliques as a set of frozensets; ValueError if any repeats."""
    out: Set[FrozenSet[Hashable]] = set()
    for c in cliques:
        key = frozenset(c)
        if key in out:
            raise ValueError(f"Duplicate clique {sorted(key, key=repr)}.")
        out.add(key)
    return out


def maximal_cliques_bruteforce(G: GraphLike) -> Set[FrozenSet[Hashable]]:
    """
    Maximal cliques by testing every vertex subset.

    Only practical for small graphs (n <= 20).
    Raises ValueError for larger graphs.
    """
    graph = as_indexed_graph(G)
    n = graph.number_of_nodes()
    if n > BRUTEFORCE_MAX_NODES:
        raise ValueError(
            f"Brute force limited to n <= {BRUTEFORCE_MAX_NODES} (got n={n})."
        )

    nbr_mask = [0] * n
    for u in range(n):
        for v in graph.neighbors(u):
            nbr_mask[u] |= 1 << v

    # clique[mask] for all masks, built from mask without its lowest bit
    clique = [False] * (1 << n)
    clique[0] = True
    for mask in range(1, 1 << n):
        low = mask & -mask
        u = low.bit_length() - 1
        rest = mask ^ low
        clique[mask] = clique[rest] and (rest & ~nbr_mask[u]) == 0

    result: Set[FrozenSet[Hashable]] = set()
    full = (1 << n) - 1
    for mask in range(1, 1 << n):
        if not clique[mask]:
            continue
        common = full
        m = mask
        while m:
            low = m & -m
            common &= nbr_mask[low.bit_length() - 1]
            m ^= low
        if common & ~mask == 0:
            result.add(frozenset(graph.labels[i] for i in range(n) if mask >> i & 1))
    return result


def check_maximal_cliques(G: GraphLike, cliques: Iterable[Iterable[Hashable]]) -> List[str]:
    """
    List violations of validity, maximality and uniqueness.

    An empty list means every entry is a distinct maximal clique. Whether
    all maximal cliques are present is not checked here.
    """
    graph = as_indexed_graph(G)
    problems: List[str] = []
    seen: Set[FrozenSet[Hashable]] = set()
    for c in cliques:
        nodes = list(c)
        key = frozenset(nodes)
        if key in seen:
            problems.append(f"duplicate: {nodes}")
            continue
        seen.add(key)
        if not is_clique(graph, nodes):
            problems.append(f"not a clique: {nodes}")
        elif not is_maximal_clique(graph, nodes):
            problems.append(f"not maximal: {nodes}")
    return problems
