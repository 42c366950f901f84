# graph/random_graphs.py
# Random graphs for tests and demonstrations.
import random
from typing import Optional, Set, Tuple, Union

from graph.adt import DirectedGraph, UndirectedGraph

RngLike = Union[random.Random, int, None]


def _as_rng(rng: RngLike) -> random.Random:
    if isinstance(rng, random.Random):
        return rng
    return random.Random(rng)


def random_directed(
    size: int,
    average_arity: float = 2.0,
    connected: bool = False,
    rng: RngLike = None,
) -> DirectedGraph:
    """
    Random directed graph on nodes 0..size-1.
      - average_arity: ratio of edges to nodes (edge count = round(size * average_arity),
        capped by the number of possible pairs)
      - connected: first link every node n > 0 to a random lower node, so the
        underlying undirected graph is connected; may exceed the arity target
      - rng: a random.Random or a seed, for reproducible fixtures
    Edges always run from the lower to the higher label.
    """
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    prng = _as_rng(rng)
    edges: Set[Tuple[int, int]] = set()
    if connected:
        for n in range(1, size):
            edges.add((prng.randrange(n), n))

    candidates = [(m, n) for n in range(size) for m in range(n) if (m, n) not in edges]
    prng.shuffle(candidates)
    edge_count = int(round(size * average_arity))
    need = max(0, edge_count - len(edges))
    edges.update(candidates[:need])
    return DirectedGraph(range(size), edges)


def random_undirected(
    size: int,
    average_arity: float = 2.0,
    connected: bool = False,
    rng: RngLike = None,
) -> UndirectedGraph:
    """Same parameters as random_directed; every edge is made symmetric."""
    return random_directed(size, average_arity, connected, rng).to_undirected()
