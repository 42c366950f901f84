# main.py
# Colors a graph read as "a; b -> c; d -- e;" statements (file or stdin) and
# prints it back in dot syntax with one color attribute per node.
import argparse, sys, time
from graph.loader import parse_statements
from graph.random_graphs import random_undirected
from graph.verify import verify_coloring, print_check_summary
from coloring.select import COLORER_CHOICES, get_colorer
from visualisierung.dot import color_metadata, to_dot


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Exact graph coloring")
    ap.add_argument("input", nargs="?", default="-", help="statement file, '-' for stdin")
    ap.add_argument("--algo", default="progressive", choices=COLORER_CHOICES)
    ap.add_argument("--max-colors", type=int, default=None)
    ap.add_argument("--random", type=int, default=None, metavar="N",
                    help="color a random N-node graph instead of reading input")
    ap.add_argument("--arity", type=float, default=2.0)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--viz-out", default=None, help="directory for a PNG rendering")
    ap.add_argument("--verbose", action="store_true")
    return ap


def read_graph(args):
    if args.random is not None:
        return random_undirected(args.random, args.arity, connected=True, rng=args.seed)
    if args.input == "-":
        text = sys.stdin.read()
    else:
        with open(args.input, "r", encoding="utf-8") as f:
            text = f.read()
    return parse_statements(text).to_undirected()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    G = read_graph(args)
    colorer = get_colorer(args.algo)

    t0 = time.perf_counter()
    res = colorer.search(G, args.max_colors, verbose=args.verbose)
    dt = time.perf_counter() - t0
    if args.verbose:
        print(f"[Main] algo={args.algo} | |V|={len(G)} | |E|={len(G.undirected_edges())} "
              f"| K={res.max_colors} | found={res.found} | expanded={res.expansions} | time={dt:.4f}s")

    if res.coloring is None:
        print("Coloring failed")
        return 1

    if args.verbose:
        rep = verify_coloring(G, res.coloring, allowed_colors=range(res.max_colors))
        print_check_summary(rep, prefix="[Check] ")
    print(to_dot(G, color_metadata(res.coloring)), end="")
    if args.viz_out:
        from visualisierung.draw import visualize_coloring
        path = visualize_coloring(G, res.coloring, name=f"{args.algo}", out_dir=args.viz_out)
        print(f"[Main] wrote {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
