from typing import Dict, Any, List, Tuple, Optional, Iterable

from graph.adt import canonical_order


def verify_coloring(
    G,
    coloring: Optional[Dict[Any, int]],
    allowed_colors: Optional[Iterable[int]] = None,
    sample_conflicts: int = 10,
) -> Dict[str, Any]:

    report: Dict[str, Any] = {}
    coloring = coloring or {}

    V = G.nodes
    nodes_colored = set(coloring.keys())

    # completeness check
    report["missing_nodes"] = canonical_order(V - nodes_colored)
    report["extra_nodes"] = canonical_order(nodes_colored - V)

    bad_nodes = [
        v for v, c in coloring.items()
        if c is None or isinstance(c, bool) or not isinstance(c, int) or c < 0
    ]
    report["bad_nodes"] = canonical_order(bad_nodes)

    used_colors = sorted({c for c in coloring.values() if isinstance(c, int)})
    report["used_colors"] = used_colors
    report["num_used_colors"] = len(used_colors)

    # color bound check
    out_of_range_nodes: List[Any] = []
    if allowed_colors is not None:
        allowed_set = set(allowed_colors)
        out_of_range_nodes = [v for v, c in coloring.items() if c not in allowed_set]
    report["out_of_range_nodes"] = canonical_order(out_of_range_nodes)

    # conflicts check (each undirected edge is seen from both ends, count it once)
    conflicts: List[Tuple[Any, Any, Any, Any]] = []
    edges = G.undirected_edges() if not G.directed else canonical_order(G.edges)
    for u, v in edges:
        cu = coloring.get(u, None)
        cv = coloring.get(v, None)
        if cu is None or cv is None or cu == cv:
            conflicts.append((u, v, cu, cv))
    report["num_conflicts"] = len(conflicts)
    report["conflicts_sample"] = conflicts[:sample_conflicts]
    # feasible check
    feasible = (
        len(report["missing_nodes"]) == 0 and
        len(report["extra_nodes"]) == 0 and
        len(bad_nodes) == 0 and
        len(out_of_range_nodes) == 0 and
        len(conflicts) == 0
    )
    report["feasible"] = feasible
    return report


def print_check_summary(report: Dict[str, Any], prefix: str = "[Check] ") -> None:

    feasible = report.get("feasible", False)
    num_conflicts = report.get("num_conflicts", -1)
    num_used = report.get("num_used_colors", -1)
    print(f"{prefix}feasible={feasible}|used_colors={num_used}|conflicts={num_conflicts}")
    if not feasible:
        miss = report.get("missing_nodes", [])
        extra = report.get("extra_nodes", [])
        oor  = report.get("out_of_range_nodes", [])
        bad  = report.get("bad_nodes", [])
        sample = report.get("conflicts_sample", [])
        if miss:
            print(f"{prefix}missing_nodes(sample) ={miss[:10]}")
        if extra:
            print(f"{prefix}extra_nodes(sample) ={extra[:10]}")
        if oor:
            print(f"{prefix}out_of_range_nodes(sample) ={oor[:10]}")
        if bad:
            print(f"{prefix}bad_nodes(sample) ={bad[:10]}")
        if num_conflicts > 0:
            print(f"{prefix}conflicts_sample ={sample}")
