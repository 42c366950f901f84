# runner.py
# Benchmark runner for the exact colorers.
#
# Instances:
#   - bundled samples: small / medium / big (20 nodes)
#   - seeded random undirected graphs (size x arity x seed grid)
#   - optional DIMACS .col files
#
# Output: one CSV row per (instance, colorer) run, rewritten atomically after
# every run so a killed sweep still leaves a readable file.
from __future__ import annotations

import argparse
import csv
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from coloring.select import COLORER_CHOICES, get_colorer
from graph.adt import UndirectedGraph
from graph.clique import greedy_max_clique
from graph.loader import load_dimacs_col
from graph.random_graphs import random_undirected
from graph.samples import BIG_GRAPH, medium_graph, small_graph
from graph.verify import verify_coloring

FIELDNAMES = [
    "instance", "n", "m", "density", "algo", "max_colors", "found", "colors",
    "LB", "feasible", "expansions", "frontier_peak", "runtime_sec",
]


@dataclass(frozen=True)
class Instance:
    name: str
    family: str
    graph: UndirectedGraph


# --------------------------
# Utilities
# --------------------------

def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def atomic_write_csv(path: Path, fieldnames: List[str], rows: List[Dict[str, Any]]) -> None:
    """Write to .tmp, fsync, then os.replace over the target."""
    tmp = path.with_suffix(path.suffix + ".tmp")
    ensure_dir(path.parent)

    with tmp.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
        w.writeheader()
        for r in rows:
            w.writerow({k: r.get(k, "") for k in fieldnames})
        f.flush()
        os.fsync(f.fileno())

    os.replace(tmp, path)


def graph_basic_stats(G: UndirectedGraph) -> Dict[str, Any]:
    n = len(G)
    m = len(G.edges) // 2
    dens = (2.0 * m / (n * (n - 1))) if n >= 2 else 0.0
    return {"n": n, "m": m, "density": round(dens, 4)}


# --------------------------
# Instances
# --------------------------

def sample_instances(names: Sequence[str]) -> List[Instance]:
    table = {
        "small": small_graph,
        "medium": medium_graph,
        "big": lambda: BIG_GRAPH,
    }
    return [Instance(name=nm, family="sample", graph=table[nm]()) for nm in names]


def random_instances(ns: Sequence[int], arities: Sequence[float], seeds: Sequence[int]) -> List[Instance]:
    out: List[Instance] = []
    for n in ns:
        for a in arities:
            for sd in seeds:
                name = f"RG_n{n}_a{a:g}_gseed{sd}"
                G = random_undirected(n, a, connected=True, rng=sd)
                out.append(Instance(name=name, family="random", graph=G))
    return out


# --------------------------
# Runs
# --------------------------

def run_one(inst: Instance, algo: str, max_colors: Optional[int], verbose: bool = False) -> Dict[str, Any]:
    G = inst.graph
    t0 = time.perf_counter()
    res = get_colorer(algo).search(G, max_colors, verbose=verbose)
    dt = time.perf_counter() - t0

    feasible = ""
    if res.found:
        feasible = verify_coloring(G, res.coloring, allowed_colors=range(res.max_colors))["feasible"]
    row = {
        "instance": inst.name,
        "algo": algo,
        "max_colors": res.max_colors,
        "found": res.found,
        "colors": res.num_colors if res.found else "",
        "LB": len(greedy_max_clique(G)),
        "feasible": feasible,
        "expansions": res.expansions,
        "frontier_peak": res.frontier_peak,
        "runtime_sec": round(dt, 6),
    }
    row.update(graph_basic_stats(G))
    return row


def run_all(
    instances: Sequence[Instance],
    algos: Sequence[str],
    out_csv: Path,
    max_colors: Optional[int] = None,
    verbose: bool = False,
) -> List[Dict[str, Any]]:
    rows: List[Dict[str, Any]] = []
    for inst in instances:
        for algo in algos:
            row = run_one(inst, algo, max_colors, verbose=verbose)
            rows.append(row)
            atomic_write_csv(out_csv, FIELDNAMES, rows)
            print(f"[Runner] {inst.name:24s} {algo:12s} found={row['found']} colors={row['colors']} "
                  f"LB={row['LB']} expanded={row['expansions']} t={row['runtime_sec']:.4f}s")
    return rows


def main(argv=None) -> None:
    ap = argparse.ArgumentParser(description="Benchmark the exact colorers")
    ap.add_argument("--algos", nargs="+", default=["progressive", "bnb"], choices=COLORER_CHOICES)
    ap.add_argument("--samples", nargs="*", default=["small"], choices=["small", "medium", "big"])
    ap.add_argument("--ns", nargs="*", type=int, default=[8, 10])
    ap.add_argument("--arities", nargs="*", type=float, default=[1.5, 2.5])
    ap.add_argument("--seeds", nargs="*", type=int, default=[0, 1, 2])
    ap.add_argument("--dimacs", nargs="*", default=[])
    ap.add_argument("--max-colors", type=int, default=None)
    ap.add_argument("--out", default="results/colorers.csv")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    instances = sample_instances(args.samples)
    instances += random_instances(args.ns, args.arities, args.seeds)
    for p in args.dimacs:
        instances.append(Instance(name=Path(p).stem, family="dimacs", graph=load_dimacs_col(p)))

    run_all(instances, args.algos, Path(args.out), args.max_colors, verbose=args.verbose)
    print(f"[Runner] wrote {len(instances) * len(args.algos)} rows to {args.out}")


if __name__ == "__main__":
    main()
