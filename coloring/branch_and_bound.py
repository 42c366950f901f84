# coloring/branch_and_bound.py
"""
Branch-and-bound over partial colorings.

Every hypothesis is bounded below (colors already used) and above (colors
used plus one fresh color per undecided node). Pending hypotheses whose
lower bound exceeds the best upper bound seen so far cannot beat a coloring
that is already known to exist and are discarded.
"""
import heapq
from typing import Any, List, Sequence, Tuple

from coloring.base import GraphColorer, SearchResult
from coloring.hypothesis import Hypothesis, extend_hypothesis
from graph.adt import UndirectedGraph


def hypothesis_priority(h: Hypothesis) -> Tuple[int, int]:
    """
    Narrow bound width first (likely to terminate soon); ties are common, so
    prefer the better upper bound to pull the global bound down faster.
    """
    return (h.bound_width, h.colors_upper_bound)


class BranchAndBoundColorer(GraphColorer):
    """
    Best-first search ordered by hypothesis_priority, with insertion order as
    the final tie-break so runs are reproducible.

    The extension cap is always the caller's max_colors: tightening the
    global upper bound only speeds the search up. The result is the first
    complete coloring met in priority order, not necessarily a minimum one;
    use ProgressiveColorer for the chromatic number.
    """

    name = "bnb"

    def _search(
        self,
        graph: UndirectedGraph,
        max_colors: int,
        node_order: Sequence[Any],
        verbose: bool,
        progress_every: int,
    ) -> SearchResult:
        base = Hypothesis.initial(graph, node_order)
        heap: List[Tuple[int, int, int, Hypothesis]] = []
        seq = 0

        def push(h: Hypothesis) -> None:
            nonlocal seq
            width, upper = hypothesis_priority(h)
            heapq.heappush(heap, (width, upper, seq, h))
            seq += 1

        global_upper = len(graph)
        pruned_at = global_upper
        expansions = 0
        pruned = 0
        peak = 1
        push(base)

        while True:
            # drop everything that cannot beat the best achievable bound
            if global_upper < pruned_at:
                kept = [e for e in heap if e[3].colors_lower_bound <= global_upper]
                pruned += len(heap) - len(kept)
                heap = kept
                heapq.heapify(heap)
                pruned_at = global_upper

            if not heap:
                if verbose:
                    print(f"[BnB] K={max_colors} | exhausted | expanded={expansions} "
                          f"| pruned={pruned} | peak={peak}")
                return SearchResult(None, expansions, peak, max_colors)

            hypo = heapq.heappop(heap)[3]
            expansions += 1
            children = extend_hypothesis(hypo, max_colors)
            for child in children:
                if child.complete:
                    if verbose:
                        print(f"[BnB] K={max_colors} | found colors={child.num_colors} "
                              f"| expanded={expansions} | pruned={pruned} | peak={peak}")
                    return SearchResult(child.colors, expansions, peak, max_colors)
            for child in children:
                if child.colors_lower_bound <= global_upper:
                    push(child)
                else:
                    pruned += 1
            peak = max(peak, len(heap))

            # pending uppers that were already counted cannot lower the bound again
            for child in children:
                global_upper = min(global_upper, child.colors_upper_bound)

            if verbose and expansions % progress_every == 0:
                print(f"[BnB] K={max_colors} | expanded={expansions} | pending={len(heap)} "
                      f"| UB={global_upper} | pruned={pruned}")
