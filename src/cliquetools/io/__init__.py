from .graph6 import (
    strip_graph6_header,
    g6_to_nx,
    g6_to_graph,
    read_graph6_lines,
    read_edgelist_file,
)

__all__ = [
    "strip_graph6_header",
    "g6_to_nx",
    "g6_to_graph",
    "read_graph6_lines",
    "read_edgelist_file",
]
