from __future__ import annotations

from typing import Hashable, List, Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.colors import to_hex
import networkx as nx

from cliquetools.clique.maximal import maximal_cliques
from cliquetools.graph.indexed import GraphLike, IndexedGraph
from .layouts import base_layout


def clique_edges(cliques: Sequence[Sequence[Hashable]]) -> List[List[tuple]]:
    """Edges of each clique, as (u, v) pairs."""
    out = []
    for c in cliques:
        c = list(c)
        out.append([(c[i], c[j]) for i in range(len(c)) for j in range(i + 1, len(c))])
    return out


def draw_cliques(
    G: GraphLike,
    cliques: Optional[Sequence[Sequence[Hashable]]] = None,
    *,
    min_size: int = 2,
    seed: int = 7,
    node_size: int = 160,
    edge_width: float = 2.0,
    cmap: str = "tab10",
    save_path: str | None = None,
):
    """
    Draw G with the edges of every clique of size >= min_size coloured.

    cliques defaults to all maximal cliques of G. Edges shared by several
    cliques take the colour of the last one drawn. If save_path is set,
    writes a PNG and closes the figure; otherwise shows it.

    Returns the cliques that were highlighted.
    """
    H = G.to_nx() if isinstance(G, IndexedGraph) else G
    if cliques is None:
        cliques = maximal_cliques(H)
    shown = [list(c) for c in cliques if len(c) >= min_size]

    pos = base_layout(H, seed=seed)
    fig, ax = plt.subplots(figsize=(8, 8))
    ax.set_title(f"|V|={H.number_of_nodes()}  |E|={H.number_of_edges()}  cliques={len(shown)}")
    ax.set_axis_off()

    nx.draw_networkx_nodes(H, pos=pos, ax=ax, node_size=node_size, node_color="lightgray")
    nx.draw_networkx_labels(H, pos=pos, ax=ax, font_size=8)
    nx.draw_networkx_edges(H, pos=pos, ax=ax, width=0.8, edge_color="lightgray")

    colors = plt.get_cmap(cmap)
    for i, edges in enumerate(clique_edges(shown)):
        nx.draw_networkx_edges(
            H,
            pos=pos,
            edgelist=edges,
            ax=ax,
            width=edge_width,
            edge_color=to_hex(colors(i % colors.N)),
        )

    plt.tight_layout()
    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return shown
