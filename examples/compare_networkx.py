"""
Time MaximalCliques against networkx.find_cliques on random graphs and
check that both report the same clique sets.
"""
import argparse
import time

import networkx as nx

from cliquetools import MaximalCliques, clique_set, degeneracy


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("--n", type=int, default=2000)
    ap.add_argument("--m", type=int, default=5,
                    help="edges per new node (Barabasi-Albert)")
    ap.add_argument("--p", type=float, default=None,
                    help="use G(n, p) instead of Barabasi-Albert")
    ap.add_argument("--seed", type=int, default=1)
    args = ap.parse_args()

    if args.p is not None:
        G = nx.gnp_random_graph(args.n, args.p, seed=args.seed)
    else:
        G = nx.barabasi_albert_graph(args.n, args.m, seed=args.seed)
    print(f"n={G.number_of_nodes()} m={G.number_of_edges()} degeneracy={degeneracy(G)}")

    t0 = time.perf_counter()
    ours = MaximalCliques(G).run().get_cliques()
    t1 = time.perf_counter()
    ref = list(nx.find_cliques(G))
    t2 = time.perf_counter()

    print(f"cliquetools: {len(ours)} cliques in {t1 - t0:.3f}s")
    print(f"networkx:    {len(ref)} cliques in {t2 - t1:.3f}s")
    print("same sets:", clique_set(ours) == clique_set(ref))
