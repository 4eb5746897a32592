"""
cliquetools: maximal clique enumeration on sparse graphs (degeneracy-ordered,
pivoting Bron-Kerbosch), with core decomposition, graph6 input, batch
statistics and drawing helpers.
"""

from .graph.indexed import IndexedGraph, as_indexed_graph
from .cores.degeneracy import (
    CoreDecomposition,
    core_decomposition,
    core_numbers,
    degeneracy,
    validate_ordering,
)
from .clique.maximal import (
    MaximalCliques,
    maximal_cliques,
    maximum_cliques,
    clique_number,
)
from .io.graph6 import g6_to_nx, g6_to_graph, read_graph6_lines, read_edgelist_file
from .search.stream import CliqueStats, clique_stats_g6

# Verification helpers
from .utils.verify import (
    is_clique,
    is_maximal_clique,
    clique_set,
    maximal_cliques_bruteforce,
    check_maximal_cliques,
)

__all__ = [
    # Graph
    "IndexedGraph",
    "as_indexed_graph",
    # Cores
    "CoreDecomposition",
    "core_decomposition",
    "core_numbers",
    "degeneracy",
    "validate_ordering",
    # Cliques
    "MaximalCliques",
    "maximal_cliques",
    "maximum_cliques",
    "clique_number",
    # IO
    "g6_to_nx",
    "g6_to_graph",
    "read_graph6_lines",
    "read_edgelist_file",
    # Batch
    "CliqueStats",
    "clique_stats_g6",
    # Verification
    "is_clique",
    "is_maximal_clique",
    "clique_set",
    "maximal_cliques_bruteforce",
    "check_maximal_cliques",
]
