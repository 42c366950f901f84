# coloring/progressive.py
from typing import Any, Sequence

from coloring.base import GraphColorer, SearchResult
from coloring.breadth_first import BreadthFirstColorer
from graph.adt import UndirectedGraph


class ProgressiveColorer(GraphColorer):
    """
    Breadth-first search with color budgets 1, 2, ..., max_colors; the first
    budget that succeeds wins, so the result uses the fewest colors possible
    within max_colors. Worse worst case (failed budgets are searched in full)
    but far better typical case, since low-color searches are much cheaper.
    """

    name = "progressive"

    def __init__(self) -> None:
        self._inner = BreadthFirstColorer()

    def _search(
        self,
        graph: UndirectedGraph,
        max_colors: int,
        node_order: Sequence[Any],
        verbose: bool,
        progress_every: int,
    ) -> SearchResult:
        expansions = 0
        peak = 0
        for budget in range(1, max_colors + 1):
            res = self._inner._search(graph, budget, node_order, verbose, progress_every)
            expansions += res.expansions
            peak = max(peak, res.frontier_peak)
            if verbose:
                print(f"[Progressive] budget={budget}/{max_colors} | found={res.found} "
                      f"| expanded={res.expansions} | total={expansions}")
            if res.found:
                return SearchResult(res.coloring, expansions, peak, max_colors)
        return SearchResult(None, expansions, peak, max_colors)
