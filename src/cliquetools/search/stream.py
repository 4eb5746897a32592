from __future__ import annotations

import sys
from dataclasses import dataclass
from multiprocessing import Pool, cpu_count
from typing import Iterable, Iterator, List, Tuple

from cliquetools.clique.maximal import MaximalCliques
from cliquetools.cores.degeneracy import degeneracy
from cliquetools.io.graph6 import g6_to_graph


@dataclass(frozen=True)
class CliqueStats:
    """
    Per-graph summary of a clique enumeration.

    num_cliques: number of maximal cliques, or of maximum cliques when the
                 stream was run with maximum_only=True
    """

    g6: str
    n: int
    m: int
    degeneracy: int
    num_cliques: int
    clique_number: int


def _worker(job: Tuple[str, bool]) -> CliqueStats:
    g6, maximum_only = job
    graph = g6_to_graph(g6)
    cliques = MaximalCliques(graph, maximum_only=maximum_only).run().get_cliques()
    return CliqueStats(
        g6=g6,
        n=graph.number_of_nodes(),
        m=graph.number_of_edges(),
        degeneracy=degeneracy(graph),
        num_cliques=len(cliques),
        clique_number=max((len(c) for c in cliques), default=0),
    )


def _chunked(it: Iterable[str], size: int) -> Iterable[List[str]]:
    buf: List[str] = []
    for x in it:
        buf.append(x)
        if len(buf) >= size:
            yield buf
            buf = []
    if buf:
        yield buf


def clique_stats_g6(
    lines: Iterable[str],
    *,
    processes: int = max(1, cpu_count() - 1),
    batch_size: int = 200,
    maximum_only: bool = False,
) -> Iterator[CliqueStats]:
    """
    Stream CliqueStats for graph6 strings, in input order.

    processes=1 runs in the calling process. Progress goes to stderr,
    one line per batch.
    """
    if processes < 1:
        raise ValueError("processes must be >= 1.")
    if batch_size < 1:
        raise ValueError("batch_size must be >= 1.")

    done = 0
    if processes == 1:
        for b, batch in enumerate(_chunked(lines, batch_size)):
            for g6 in batch:
                yield _worker((g6, maximum_only))
            done += len(batch)
            print(f"[batch={b}] {done} graphs done", file=sys.stderr)
        return

    with Pool(processes=processes) as pool:
        for b, batch in enumerate(_chunked(lines, batch_size)):
            jobs = [(g6, maximum_only) for g6 in batch]
            for stats in pool.imap(_worker, jobs, chunksize=1):
                yield stats
            done += len(batch)
            print(f"[batch={b}] {done} graphs done", file=sys.stderr)
