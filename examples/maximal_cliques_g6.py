"""
Print the maximal cliques of each graph in a graph6 file (or stdin).

    geng -q 6 | python examples/maximal_cliques_g6.py
    python examples/maximal_cliques_g6.py graphs.g6 --maximum-only
    python examples/maximal_cliques_g6.py --edgelist net.txt --draw net.png
"""
import argparse
import sys

from cliquetools import (
    MaximalCliques,
    check_maximal_cliques,
    g6_to_graph,
    read_edgelist_file,
    read_graph6_lines,
)


def report(label, graph, maximum_only, check):
    cliques = MaximalCliques(graph, maximum_only=maximum_only).run().get_cliques()
    print(f"{label}: n={graph.number_of_nodes()} m={graph.number_of_edges()} "
          f"cliques={len(cliques)}")
    for c in sorted(cliques, key=lambda c: (-len(c), sorted(c))):
        print("  ", " ".join(str(v) for v in sorted(c)))
    if check:
        problems = check_maximal_cliques(graph, cliques)
        for p in problems:
            print("  !!", p)
    return cliques


if __name__ == "__main__":
    ap = argparse.ArgumentParser(description=__doc__,
                                 formatter_class=argparse.RawDescriptionHelpFormatter)
    ap.add_argument("path", nargs="?", default=None,
                    help="graph6 file, one graph per line (default: stdin)")
    ap.add_argument("--edgelist", type=str, default=None,
                    help="read a single graph from an integer edge-list file instead")
    ap.add_argument("--maximum-only", action="store_true",
                    help="only report cliques of maximum size")
    ap.add_argument("--check", action="store_true",
                    help="verify validity and maximality of each reported clique")
    ap.add_argument("--draw", type=str, default=None,
                    help="save a drawing of the (last) graph to this PNG path")
    args = ap.parse_args()

    graph = None
    cliques = None
    if args.edgelist:
        graph = read_edgelist_file(args.edgelist)
        cliques = report(args.edgelist, graph, args.maximum_only, args.check)
    else:
        fh = open(args.path) if args.path else sys.stdin
        with fh:
            for g6 in read_graph6_lines(fh):
                graph = g6_to_graph(g6)
                cliques = report(g6, graph, args.maximum_only, args.check)

    if args.draw and graph is not None:
        from cliquetools.viz import draw_cliques
        draw_cliques(graph, cliques, save_path=args.draw)
