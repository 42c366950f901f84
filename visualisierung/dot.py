# visualisierung/dot.py
from typing import Any, Callable, Dict, Optional

from graph.adt import canonical_order

DOT_COLORS = ["blue", "red", "green", "black", "magenta", "cyan", "yellow", "purple", "orange"]


def color_metadata(coloring: Dict[Any, int]) -> Callable[[Any], str]:
    """node -> dot attribute string for its color (palette repeats past 9 colors)."""
    def fn(node: Any) -> str:
        return f"[ color={DOT_COLORS[coloring[node] % len(DOT_COLORS)]} ]"
    return fn


def to_dot(G, metadata_fn: Optional[Callable[[Any], str]] = None) -> str:
    """
    Text for the graphviz "dot" tool. metadata_fn(node) is emitted after each
    node, e.g. color_metadata(coloring).
    Undirected graphs list each edge once with "--".
    """
    if G.directed:
        header, arrow, edges = "digraph {\n", "->", canonical_order(G.edges)
    else:
        header, arrow, edges = "graph {\n", "--", G.undirected_edges()
    lines = [header]
    for n in canonical_order(G.nodes):
        meta = metadata_fn(n) if metadata_fn is not None else ""
        lines.append(f"\t{n} {meta};\n" if meta else f"\t{n};\n")
    for u, v in edges:
        lines.append(f"\t{u} {arrow} {v};\n")
    lines.append("}\n")
    return "".join(lines)
