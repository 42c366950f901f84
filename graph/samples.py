# graph/samples.py
from graph.adt import UndirectedGraph

# A 20-node undirected graph that is out of reach for plain breadth-first coloring.
BIG_GRAPH = UndirectedGraph(
    range(20),
    [
        (0, 3), (4, 2), (13, 19), (17, 2), (3, 12), (11, 16), (7, 2), (2, 11),
        (7, 1), (16, 3), (7, 8), (4, 10), (12, 5), (6, 5), (8, 18), (7, 18),
        (13, 12), (19, 10), (11, 9), (17, 15), (6, 11), (8, 6), (8, 10), (15, 2),
        (14, 10), (12, 15), (9, 6), (1, 15), (7, 12), (13, 2), (3, 14), (3, 8),
        (16, 2), (1, 6), (16, 0), (10, 12), (0, 14), (11, 12), (15, 14), (18, 12),
    ],
)


def medium_graph() -> UndirectedGraph:
    """14-node induced subgraph of BIG_GRAPH; 3-colorable, slow for breadth-first search."""
    return BIG_GRAPH.subgraph_with(range(6, 20))


def small_graph() -> UndirectedGraph:
    """10-node induced subgraph of BIG_GRAPH; 3-colors easily."""
    return BIG_GRAPH.subgraph_with(range(10, 20))
