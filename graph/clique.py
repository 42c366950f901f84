from typing import Any, List

from graph.adt import canonical_order


def greedy_max_clique(G) -> List[Any]:
    """
    Simple greedy heuristic for a maximal clique (not guaranteed to be maximum).
    Its size is a lower bound on the number of colors any coloring needs.
    """
    # order nodes by degree (desc), canonical order among equals
    nodes = sorted(canonical_order(G.nodes), key=lambda v: len(G.neighbors_of(v)), reverse=True)
    clique: List[Any] = []
    for v in nodes:
        nbrs = G.neighbors_of(v)
        if all(u in nbrs for u in clique):
            clique.append(v)
    return clique
