from .layouts import base_layout
from .draw import clique_edges, draw_cliques

__all__ = [
    "base_layout",
    "clique_edges",
    "draw_cliques",
]
