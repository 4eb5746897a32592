from .stream import CliqueStats, clique_stats_g6

__all__ = [
    "CliqueStats",
    "clique_stats_g6",
]
