from .verify import (
    is_clique,
    is_maximal_clique,
    clique_set,
    maximal_cliques_bruteforce,
    check_maximal_cliques,
)

__all__ = [
    "is_clique",
    "is_maximal_clique",
    "clique_set",
    "maximal_cliques_bruteforce",
    "check_maximal_cliques",
]
