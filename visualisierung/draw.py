# visualisierung/draw.py
from __future__ import annotations
import os, re
from typing import Any, Dict, Tuple, Set, List, Optional
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx

from graph.adt import canonical_order

PALETTE = [
    "#E63946", "#457B9D", "#2A9D8F", "#F4A261", "#8E44AD", "#F1C40F",
    "#7F8C8D", "#1ABC9C", "#D35400", "#27AE60", "#C2185B", "#5D6D7E",
]

# Layout-Cache pro Graph (strukturelle Gleichheit, daher stabil über Aufrufe)
_POS_CACHE: Dict[Any, Dict] = {}


def _sanitize_name(name: str) -> str:
    """Dateinamen bereinigen: Kleinbuchstaben, [a-z0-9-_], Mehrfach-Bindestriche zusammenfassen."""
    s = name.strip().lower()
    s = re.sub(r"[^a-z0-9\-_]+", "-", s)
    s = re.sub(r"-+", "-", s).strip("-")
    return s or "graph"


def color_for_index(idx: int) -> str:
    """Farbwert aus Palette anhand des Farbindizes zurückgeben (zyklisch)."""
    return PALETTE[idx % len(PALETTE)]


def _get_layout(G, nxG: nx.Graph, seed: int = 42) -> Dict:
    """Spring-Layout je Graph cachen, damit aufeinanderfolgende Bilder konsistent sind."""
    key = (G, seed)
    if key not in _POS_CACHE:
        _POS_CACHE[key] = nx.spring_layout(nxG, seed=seed)
    return _POS_CACHE[key]


def visualize_coloring(
    G,
    coloring: Optional[Dict[Any, int]],
    name: str = "coloring",
    out_dir: str = "visualisierung/picture",
    layout_seed: int = 42,
    show_labels: bool = True,
    figure_size: Tuple[float, float] = (8.0, 6.0),
    dpi: int = 160,
) -> str:
    """
    Zeichnet den Graphen als PNG und gibt den Dateipfad zurück:
      - Knoten in der Palettenfarbe ihres Farbindex, ungefärbte Knoten hellgrau
      - Kanten zwischen gleichfarbigen Nachbarn → schwarz, deren Endknoten schwarz gefüllt
    """
    os.makedirs(out_dir, exist_ok=True)
    coloring = coloring or {}
    nxG = G.to_networkx()
    pos = _get_layout(G, nxG, seed=layout_seed)

    edges = G.undirected_edges() if not G.directed else canonical_order(G.edges)
    conflict_edges: List[Tuple[Any, Any]] = [
        (u, v) for (u, v) in edges
        if u in coloring and v in coloring and coloring[u] == coloring[v]
    ]
    conflict_nodes: Set[Any] = {n for e in conflict_edges for n in e}
    plain_edges = [e for e in edges if e not in conflict_edges]

    plt.figure(figsize=figure_size, dpi=dpi)
    if plain_edges:
        nx.draw_networkx_edges(nxG, pos, edgelist=plain_edges, width=0.8, alpha=0.4, edge_color="#999999")
    if conflict_edges:
        nx.draw_networkx_edges(nxG, pos, edgelist=conflict_edges, width=1.6, alpha=0.95, edge_color="black")

    nodes_sorted = canonical_order(G.nodes)
    fills = []
    for v in nodes_sorted:
        if v in conflict_nodes:
            fills.append("black")
        elif v in coloring:
            fills.append(color_for_index(coloring[v]))
        else:
            fills.append("#DDDDDD")
    if nodes_sorted:
        nx.draw_networkx_nodes(
            nxG, pos,
            nodelist=nodes_sorted,
            node_color=fills,
            edgecolors="#555555",
            linewidths=0.8,
            node_size=300,
        )
    if show_labels:
        nx.draw_networkx_labels(nxG, pos, labels={v: str(v) for v in nodes_sorted}, font_size=7)

    used = len(set(coloring.values()))
    plt.title(f"{name} | colors={used} | conflicts={len(conflict_edges)} "
              f"(colored {len(coloring)}/{len(G)})")
    plt.axis("off")
    plt.tight_layout()

    fpath = os.path.join(out_dir, f"{_sanitize_name(name)}_colors-{used:02d}.png")
    plt.savefig(fpath, bbox_inches="tight")
    plt.close()
    return fpath
