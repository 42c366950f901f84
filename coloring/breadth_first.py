# coloring/breadth_first.py
from collections import deque
from typing import Any, Deque, Sequence

from coloring.base import GraphColorer, SearchResult
from coloring.hypothesis import Hypothesis, extend_hypothesis
from graph.adt import UndirectedGraph


class BreadthFirstColorer(GraphColorer):
    """
    Exhaustive breadth-first exploration of partial colorings: the first
    complete hypothesis generated wins. Exponential in the worst case even
    for a fixed max_colors.
    """

    name = "bfs"

    def _search(
        self,
        graph: UndirectedGraph,
        max_colors: int,
        node_order: Sequence[Any],
        verbose: bool,
        progress_every: int,
    ) -> SearchResult:
        queue: Deque[Hypothesis] = deque([Hypothesis.initial(graph, node_order)])
        expansions = 0
        peak = 1

        while queue:
            hypo = queue.popleft()
            expansions += 1
            for child in extend_hypothesis(hypo, max_colors):
                if child.complete:
                    if verbose:
                        print(f"[BFS] K={max_colors} | found | expanded={expansions} | peak={peak}")
                    return SearchResult(child.colors, expansions, peak, max_colors)
                queue.append(child)
            peak = max(peak, len(queue))
            if verbose and expansions % progress_every == 0:
                print(f"[BFS] K={max_colors} | expanded={expansions} | queue={len(queue)} "
                      f"| depth={len(node_order) - len(hypo.remaining_nodes)}")

        if verbose:
            print(f"[BFS] K={max_colors} | exhausted | expanded={expansions} | peak={peak}")
        return SearchResult(None, expansions, peak, max_colors)
