from __future__ import annotations

from typing import List

from .outgraph import BoundedOutGraph
from .partition import PartitionArray


def find_pivot(
    out: BoundedOutGraph,
    part: PartitionArray,
    xbound: int,
    xpbound: int,
    pbound: int,
) -> int:
    """
    Pick the node of X u P with the most neighbors in P.

    Arcs are only stored in ordering direction, so counts are collected in
    two passes over the window:
      X pass: out-neighbors in P of each X node. A node adjacent to all of P
              is returned at once.
      P pass: each arc p -> v with v in X u P adds one to v (the incoming
              side), and one more to p when v is in P.
    Ties go to the earliest window position.
    """
    nodes = part.nodes
    position = part.position
    psize = pbound - xpbound
    counts: List[int] = [0] * (pbound - xbound)

    for i in range(xpbound - xbound):
        u = nodes[xbound + i]
        c = 0
        for v in out.out_neighbors(u):
            if xpbound <= position[v] < pbound:
                c += 1
        counts[i] = c
        if c == psize:
            return u

    for i in range(xpbound - xbound, pbound - xbound):
        u = nodes[xbound + i]
        for v in out.out_neighbors(u):
            pos = position[v]
            if xbound <= pos < pbound:
                counts[pos - xbound] += 1
                if pos >= xpbound:
                    counts[i] += 1

    best = 0
    for i in range(1, len(counts)):
        if counts[i] > counts[best]:
            best = i
    return nodes[xbound + best]


def pivot_neighbor_counts(
    out: BoundedOutGraph,
    part: PartitionArray,
    xbound: int,
    xpbound: int,
    pbound: int,
) -> List[int]:
    """
    Number of P-neighbors of every node in the window, by direct arc tests.

    Reference for find_pivot; quadratic in the window size.
    """
    nodes = part.nodes
    result = []
    for i in range(xbound, pbound):
        u = nodes[i]
        c = 0
        for j in range(xpbound, pbound):
            v = nodes[j]
            if v != u and (out.has_out_neighbor(u, v) or out.has_out_neighbor(v, u)):
                c += 1
        result.append(c)
    return result
