# coloring/base.py
"""
Common contract for the exact colorers.

    color(graph, max_colors=None, node_order=None) -> coloring or None

  graph      -- the UndirectedGraph to color
  max_colors -- the most colors to try; bounds the search space. Defaults to
                the number of nodes, which always suffices.
  node_order -- the order in which nodes are decided. Defaults to the
                canonical (sorted) order of the node set.

Returns a dict node -> color in 0..max_colors-1 covering every node, or None
when no coloring exists within max_colors. None is an answer, not an error.

The node order never changes whether a coloring is found, only how long it
takes. Coloring and similar constraint problems are known to vary wildly in
cost with the order in which variables are considered (Zabih, 1990): with a
low-bandwidth ordering the exponent can drop from the number of colors to
the ordering bandwidth.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

from graph.adt import UndirectedGraph, canonical_order


class NodeOrderError(ValueError):
    """A supplied node order is not a permutation of the graph's nodes."""


@dataclass(frozen=True)
class SearchResult:
    coloring: Optional[Dict[Any, int]]
    expansions: int        # hypotheses popped and extended
    frontier_peak: int     # largest pending queue/set seen
    max_colors: int

    @property
    def found(self) -> bool:
        return self.coloring is not None

    @property
    def num_colors(self) -> int:
        return len(set(self.coloring.values())) if self.coloring else 0


class GraphColorer:
    """Subclasses implement _search(); validation and defaults live here."""

    name = "base"

    def color(
        self,
        graph: UndirectedGraph,
        max_colors: Optional[int] = None,
        node_order: Optional[Sequence[Any]] = None,
        *,
        verbose: bool = False,
        progress_every: int = 10000,
    ) -> Optional[Dict[Any, int]]:
        return self.search(
            graph, max_colors, node_order,
            verbose=verbose, progress_every=progress_every,
        ).coloring

    def search(
        self,
        graph: UndirectedGraph,
        max_colors: Optional[int] = None,
        node_order: Optional[Sequence[Any]] = None,
        *,
        verbose: bool = False,
        progress_every: int = 10000,
    ) -> SearchResult:
        if not isinstance(graph, UndirectedGraph):
            raise TypeError(
                f"{self.name}: can only color an UndirectedGraph, got {type(graph).__name__}"
            )
        if max_colors is None:
            max_colors = len(graph)
        if max_colors < 0:
            raise ValueError(f"{self.name}: max_colors must be >= 0, got {max_colors}")
        order = check_node_order(graph, node_order)

        if not order:
            # nothing to decide: the empty coloring is valid under any bound
            return SearchResult({}, 0, 0, max_colors)
        return self._search(graph, max_colors, order, verbose, progress_every)

    def _search(
        self,
        graph: UndirectedGraph,
        max_colors: int,
        node_order: Sequence[Any],
        verbose: bool,
        progress_every: int,
    ) -> SearchResult:
        raise NotImplementedError


def check_node_order(graph: UndirectedGraph, node_order: Optional[Sequence[Any]]) -> list:
    """Return the order to search in; a supplied order must hold every node exactly once."""
    if node_order is None:
        return canonical_order(graph.nodes)
    order = list(node_order)
    dups = [n for n, k in Counter(order).items() if k > 1]
    if dups:
        raise NodeOrderError(f"node order repeats nodes: {canonical_order(dups)[:10]}")
    missing = graph.nodes - set(order)
    if missing:
        raise NodeOrderError(f"node order omits nodes: {canonical_order(missing)[:10]}")
    extra = set(order) - graph.nodes
    if extra:
        raise NodeOrderError(f"node order names unknown nodes: {canonical_order(extra)[:10]}")
    return order
