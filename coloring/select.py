# coloring/select.py
from typing import Any, Dict, Optional

from coloring.base import GraphColorer
from coloring.branch_and_bound import BranchAndBoundColorer
from coloring.breadth_first import BreadthFirstColorer
from coloring.progressive import ProgressiveColorer
from graph.adt import UndirectedGraph

COLORER_CHOICES = ("bfs", "progressive", "bnb")

_COLORERS = {
    "bfs": BreadthFirstColorer,
    "progressive": ProgressiveColorer,
    "bnb": BranchAndBoundColorer,
}


def get_colorer(name: str) -> GraphColorer:
    try:
        return _COLORERS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown colorer {name!r}. Choose one of: {', '.join(COLORER_CHOICES)}"
        ) from None


def color_graph(
    graph: UndirectedGraph,
    algo: str = "progressive",
    max_colors: Optional[int] = None,
    node_order=None,
    **kwargs: Any,
) -> Optional[Dict[Any, int]]:
    return get_colorer(algo).color(graph, max_colors, node_order, **kwargs)
