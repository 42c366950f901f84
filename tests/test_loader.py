import random

import networkx as nx
import pytest

from graph.adt import DirectedGraph, UndirectedGraph
from graph.loader import (
    from_networkx, load_demo_graph, load_dimacs_col, load_edgelist_txt, parse_statements,
)
from graph.random_graphs import random_directed, random_undirected


def test_parse_statements():
    g = parse_statements("a; b -> c; d -- e;\nf")
    assert isinstance(g, DirectedGraph)
    assert g.nodes == {"a", "b", "c", "d", "e", "f"}
    assert g.edges == {("b", "c"), ("d", "e"), ("e", "d")}


def test_parse_statements_rejects_garbage():
    with pytest.raises(ValueError):
        parse_statements("a -> ;")
    with pytest.raises(ValueError):
        parse_statements("a => b")


def test_parse_statements_reads_dot_wrappers_and_attributes():
    text = "graph {\n\t1 [ color=blue ];\n\t2 [ color=red ];\n\t1 -- 2;\n}\n"
    g = parse_statements(text).to_undirected()
    assert g == UndirectedGraph({"1", "2"}, {("1", "2")})


def test_from_networkx():
    g = from_networkx(nx.path_graph(3))
    assert g == UndirectedGraph({0, 1, 2}, {(0, 1), (1, 2)})
    d = from_networkx(nx.DiGraph([(0, 1)]))
    assert d == DirectedGraph({0, 1}, {(0, 1)})
    looped = nx.Graph([(0, 0), (0, 1)])
    assert from_networkx(looped).edges == {(0, 1), (1, 0)}


def test_demo_graph_is_reproducible():
    assert load_demo_graph(3) == load_demo_graph(3)
    assert len(load_demo_graph(0, n=7)) == 7


def test_load_dimacs_col(tmp_path):
    p = tmp_path / "tiny.col"
    p.write_text("c tiny instance\np edge 4 3\ne 1 2\ne 2 3\ne 3 3\n")
    g = load_dimacs_col(p)
    assert g.nodes == {0, 1, 2, 3}
    assert g.undirected_edges() == [(0, 1), (1, 2)]


def test_load_edgelist_txt(tmp_path):
    p = tmp_path / "edges.txt"
    p.write_text("# comment\n1 2\n2 3\n5\n4 4\n")
    g = load_edgelist_txt(p)
    assert g.nodes == {1, 2, 3, 4, 5}
    assert g.undirected_edges() == [(1, 2), (2, 3)]
    p.write_text("1 x\n")
    with pytest.raises(ValueError):
        load_edgelist_txt(p)


def test_random_directed_edges_run_low_to_high():
    g = random_directed(12, 2.0, rng=5)
    assert g.nodes == set(range(12))
    assert len(g.edges) == 24
    assert all(u < v for u, v in g.edges)


def test_random_undirected_size_and_symmetry():
    g = random_undirected(10, 2.0, rng=random.Random(1))
    assert len(g.undirected_edges()) == 20
    for u, v in g.edges:
        assert (v, u) in g.edges


def test_random_connected_graphs_are_connected():
    for seed in range(10):
        g = random_undirected(15, 0.5, connected=True, rng=seed)
        assert nx.is_connected(g.to_networkx()), f"seed {seed}"
        assert len(g.undirected_edges()) == 14


def test_random_graphs_are_reproducible():
    assert random_undirected(20, 3, rng=11) == random_undirected(20, 3, rng=11)
    # more edges requested than pairs exist: complete graph
    assert len(random_undirected(5, 10, rng=0).undirected_edges()) == 10


def test_random_graph_requires_positive_size():
    with pytest.raises(ValueError):
        random_undirected(0)
