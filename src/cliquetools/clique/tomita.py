"""Tomita-style Bron-Kerbosch search over a swap-partitioned node array."""
from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from .outgraph import BoundedOutGraph
from .partition import PartitionArray
from .pivot import find_pivot


class _Frame:
    """One level of the search: window bounds plus candidate bookkeeping."""

    __slots__ = ("xbound", "xpbound", "pbound", "to_check", "next", "current", "moved")

    def __init__(self, xbound: int, xpbound: int, pbound: int, to_check: List[int]) -> None:
        self.xbound = xbound
        self.xpbound = xpbound
        self.pbound = pbound
        self.to_check = to_check
        self.next = 0
        self.current: Optional[int] = None
        self.moved: List[int] = []


class TomitaEnumerator:
    """
    Enumerates maximal cliques below a seeded clique R.

    The work stack replaces recursion, so the search depth is bounded by
    memory rather than the interpreter's recursion limit. Every frame leaves
    the X/P split of its window as it found it.

    emit receives R (the live stack; copy it to keep it). bound, when given,
    returns the smallest clique size still worth reporting; windows that
    cannot reach it are skipped.
    """

    def __init__(
        self,
        out: BoundedOutGraph,
        part: PartitionArray,
        emit: Callable[[List[int]], None],
        bound: Optional[Callable[[], int]] = None,
    ) -> None:
        self.out = out
        self.part = part
        self.emit = emit
        self.bound = bound

    def run(self, r: List[int], xbound: int, xpbound: int, pbound: int) -> None:
        part = self.part
        stack: List[_Frame] = []
        frame = self._enter(r, xbound, xpbound, pbound)
        if frame is not None:
            stack.append(frame)

        while stack:
            frame = stack[-1]

            if frame.current is not None:
                # back from the branch on `current`: it moves from P to X
                p = frame.current
                frame.current = None
                r.pop()
                part.move_to_position(p, frame.xpbound)
                frame.xpbound += 1
                frame.moved.append(p)

            if frame.next < len(frame.to_check):
                p = frame.to_check[frame.next]
                frame.next += 1
                xcount, pcount = self._gather_neighbors(p, frame.xbound, frame.xpbound, frame.pbound)
                assert frame.xpbound + pcount <= frame.pbound
                assert frame.xpbound - xcount >= frame.xbound
                r.append(p)
                frame.current = p
                child = self._enter(r, frame.xpbound - xcount, frame.xpbound, frame.xpbound + pcount)
                if child is not None:
                    stack.append(child)
                continue

            for v in frame.moved:
                part.move_to_position(v, frame.xpbound - 1)
                frame.xpbound -= 1
            stack.pop()

    def _enter(self, r: List[int], xbound: int, xpbound: int, pbound: int) -> Optional[_Frame]:
        """Apply the leaf rules; return a frame if the window needs branching."""
        if xbound == pbound:
            self.emit(r)
            return None
        if xpbound == pbound:
            return None
        if self.bound is not None and len(r) + (pbound - xpbound) < self.bound():
            return None

        assert 0 <= xbound <= xpbound <= pbound <= len(self.part)

        u = find_pivot(self.out, self.part, xbound, xpbound, pbound)
        return _Frame(xbound, xpbound, pbound, self._non_neighbors(u, xpbound, pbound))

    def _non_neighbors(self, u: int, xpbound: int, pbound: int) -> List[int]:
        """
        Nodes of P not adjacent to u, in window order.

        Collected up front because branching permutes the array.
        """
        out = self.out
        nodes = self.part.nodes
        position = self.part.position

        marked = [False] * (pbound - xpbound)
        for v in out.out_neighbors(u):
            pos = position[v]
            if xpbound <= pos < pbound:
                marked[pos - xpbound] = True

        to_check = []
        for i in range(xpbound, pbound):
            if not marked[i - xpbound]:
                p = nodes[i]
                if not out.has_out_neighbor(p, u):
                    to_check.append(p)
        return to_check

    def _gather_neighbors(self, p: int, xbound: int, xpbound: int, pbound: int) -> Tuple[int, int]:
        """
        Swap the neighbors of p in X to just below xpbound and those in P to
        just above it. Returns (xcount, pcount).
        """
        out = self.out
        part = self.part
        nodes = part.nodes
        position = part.position
        xcount = 0
        pcount = 0

        # arcs p -> v
        for v in out.out_neighbors(p):
            pos = position[v]
            if xbound <= pos < xpbound:
                part.move_to_position(v, xpbound - xcount - 1)
                xcount += 1
            elif xpbound <= pos < pbound:
                part.move_to_position(v, xpbound + pcount)
                pcount += 1

        # arcs x -> p from the rest of X
        i = xbound
        while i < xpbound - xcount:
            x = nodes[i]
            if out.has_out_neighbor(x, p):
                part.move_to_position(x, xpbound - xcount - 1)
                xcount += 1
            else:
                # after a swap, slot i holds a new candidate
                i += 1

        # arcs v -> p from the rest of P
        for i in range(xpbound + pcount, pbound):
            v = nodes[i]
            if out.has_out_neighbor(v, p):
                part.move_to_position(v, xpbound + pcount)
                pcount += 1

        return xcount, pcount
