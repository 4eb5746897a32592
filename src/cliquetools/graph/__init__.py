from .indexed import GraphLike, IndexedGraph, as_indexed_graph

__all__ = [
    "GraphLike",
    "IndexedGraph",
    "as_indexed_graph",
]
