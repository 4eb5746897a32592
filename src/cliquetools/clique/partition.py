from __future__ import annotations

from typing import List, Sequence


class PartitionArray:
    """
    One array of nodes plus its inverse, carved into windows by offsets.

    For a level with bounds (xbound, xpbound, pbound):
      nodes[xbound:xpbound]  is X
      nodes[xpbound:pbound]  is P
    Everything outside [xbound, pbound) belongs to other levels.

    Invariant: nodes[position[v]] == v for every node v.
    """

    __slots__ = ("nodes", "position")

    def __init__(self, order: Sequence[int]) -> None:
        self.nodes: List[int] = list(order)
        self.position: List[int] = [0] * len(self.nodes)
        for i, u in enumerate(self.nodes):
            self.position[u] = i

    def __len__(self) -> int:
        return len(self.nodes)

    def move_to_position(self, u: int, pos: int) -> None:
        """Swap u with whatever node sits at pos."""
        w = self.nodes[pos]
        pu = self.position[u]
        self.nodes[pu] = w
        self.nodes[pos] = u
        self.position[w] = pu
        self.position[u] = pos

    def window(self, lo: int, hi: int) -> List[int]:
        return self.nodes[lo:hi]

    def check(self) -> None:
        assert len(self.position) == len(self.nodes)
        for i, u in enumerate(self.nodes):
            assert self.position[u] == i, f"position[{u}]={self.position[u]}, expected {i}"
