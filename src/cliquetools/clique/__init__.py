from .outgraph import BoundedOutGraph
from .partition import PartitionArray
from .pivot import find_pivot, pivot_neighbor_counts
from .tomita import TomitaEnumerator
from .maximal import (
    MaximalCliques,
    maximal_cliques,
    maximum_cliques,
    clique_number,
)

__all__ = [
    "BoundedOutGraph",
    "PartitionArray",
    "find_pivot",
    "pivot_neighbor_counts",
    "TomitaEnumerator",
    "MaximalCliques",
    "maximal_cliques",
    "maximum_cliques",
    "clique_number",
]
