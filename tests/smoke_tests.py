# tests/smoke_tests.py
import os, sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import networkx as nx
from coloring.branch_and_bound import BranchAndBoundColorer
from coloring.breadth_first import BreadthFirstColorer
from coloring.progressive import ProgressiveColorer
from graph.clique import greedy_max_clique
from graph.loader import from_networkx
from graph.verify import verify_coloring


def as_graph(G):
    return from_networkx(nx.convert_node_labels_to_integers(G))


def run_and_check(G, expect_chi=None, name="Graph"):
    G = as_graph(G)
    col = ProgressiveColorer().color(G)
    assert col is not None, f"{name}: progressive found no coloring"
    used = len(set(col.values()))
    lb = len(greedy_max_clique(G))
    assert used >= lb, f"{name}: colors < clique ({used} < {lb})"

    if expect_chi is not None:
        assert used == expect_chi, f"{name}: expect χ={expect_chi}, got {used}"

    rep = verify_coloring(G, col, allowed_colors=range(used))
    assert rep["feasible"], f"{name}: verify_coloring says infeasible"

    # the single-budget searches agree at χ and χ-1
    for colorer in (BreadthFirstColorer(), BranchAndBoundColorer()):
        at = colorer.color(G, used)
        assert at is not None, f"{name}: {colorer.name} failed at K={used}"
        assert verify_coloring(G, at, allowed_colors=range(used))["feasible"], f"{name}: {colorer.name} infeasible"
        if used > 1:
            assert colorer.color(G, used - 1) is None, f"{name}: {colorer.name} beat χ"
    print(f"[PASS] {name:20s}  colors={used}  LB={lb}")
    return used


def test_known_chromatic_numbers():
    run_and_check(nx.complete_graph(3), expect_chi=3, name="K3")
    run_and_check(nx.complete_graph(4), expect_chi=4, name="K4")
    run_and_check(nx.cycle_graph(4),    expect_chi=2, name="C4 (even cycle)")
    run_and_check(nx.cycle_graph(5),    expect_chi=3, name="C5 (odd cycle)")
    run_and_check(nx.complete_bipartite_graph(3, 4), expect_chi=2, name="K3,4")
    run_and_check(nx.grid_2d_graph(4, 4), expect_chi=2, name="Grid 4x4")
    run_and_check(nx.petersen_graph(),   expect_chi=3, name="Petersen")
    run_and_check(nx.wheel_graph(6),     expect_chi=4, name="W6 (odd rim)")


def test_random_graphs():
    for i, p in enumerate([0.15, 0.25, 0.35], start=1):
        G = nx.erdos_renyi_graph(9, p, seed=i)
        run_and_check(G, expect_chi=None, name=f"ER(9,{p})")


if __name__ == "__main__":
    test_known_chromatic_numbers()
    test_random_graphs()
    print("All smoke tests passed.")
