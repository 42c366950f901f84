# coloring/hypothesis.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from graph.adt import UndirectedGraph


@dataclass(frozen=True, eq=False)
class Hypothesis:
    """
    A partial coloring: the nodes already decided with their colors, the
    nodes still to decide (consumed front to back) and how many colors the
    decided part uses (1 + highest color index, 0 if none).
    """
    colors: Dict[Any, int]
    remaining_nodes: Tuple[Any, ...]
    graph: UndirectedGraph
    num_colors: int

    @classmethod
    def initial(cls, graph: UndirectedGraph, node_order: Sequence[Any]) -> "Hypothesis":
        return cls({}, tuple(node_order), graph, 0)

    @property
    def complete(self) -> bool:
        return not self.remaining_nodes

    @property
    def next_node(self):
        return self.remaining_nodes[0]

    @property
    def colors_lower_bound(self) -> int:
        # cannot need fewer colors than already used (a clique bound would be tighter)
        return self.num_colors

    @property
    def colors_upper_bound(self) -> int:
        # every remaining node on a brand-new color always works
        return self.num_colors + len(self.remaining_nodes)

    @property
    def bound_width(self) -> int:
        return self.colors_upper_bound - self.colors_lower_bound

    def color_next(self, color: int) -> "Hypothesis":
        colors = dict(self.colors)
        colors[self.remaining_nodes[0]] = color
        return Hypothesis(
            colors,
            self.remaining_nodes[1:],
            self.graph,
            max(self.num_colors, color + 1),
        )


def extend_hypothesis(h: Hypothesis, max_colors: int) -> List[Hypothesis]:
    """
    All locally consistent one-node extensions of h:
      - every existing color 0..num_colors-1 not used by an already colored neighbor
      - one brand-new color (index num_colors) while num_colors < max_colors
    Order is deterministic: reused colors ascending, then the new color.
    A complete hypothesis has no extensions.
    """
    if h.complete:
        return []
    nxt = h.next_node
    adjacent_colors = {
        h.colors[m] for m in h.graph.neighbors_of(nxt) if m in h.colors
    }
    out = [h.color_next(c) for c in range(h.num_colors) if c not in adjacent_colors]
    if h.num_colors < max_colors:
        out.append(h.color_next(h.num_colors))
    return out
