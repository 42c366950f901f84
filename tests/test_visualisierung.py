import os

from graph.adt import DirectedGraph, UndirectedGraph
from graph.clique import greedy_max_clique
from graph.loader import parse_statements
from graph.random_graphs import random_undirected
from graph.verify import print_check_summary, verify_coloring
from visualisierung.dot import color_metadata, to_dot
from visualisierung.draw import visualize_coloring

EDGE = UndirectedGraph({1, 2}, {(1, 2)})


def test_to_dot_undirected_lists_each_edge_once():
    assert to_dot(EDGE) == "graph {\n\t1;\n\t2;\n\t1 -- 2;\n}\n"


def test_to_dot_directed():
    assert to_dot(DirectedGraph({1, 2}, {(2, 1)})) == "digraph {\n\t1;\n\t2;\n\t2 -> 1;\n}\n"


def test_to_dot_with_coloring_metadata():
    text = to_dot(EDGE, color_metadata({1: 0, 2: 1}))
    assert "\t1 [ color=blue ];\n" in text
    assert "\t2 [ color=red ];\n" in text
    assert color_metadata({"x": 9})("x") == "[ color=blue ]"


def test_dot_text_reads_back():
    g = random_undirected(12, 2, rng=4)
    back = parse_statements(to_dot(g)).to_undirected()
    assert back == g.rename(str)


def test_verify_coloring_reports():
    tri = UndirectedGraph("abc", [("a", "b"), ("b", "c"), ("a", "c")])
    ok = verify_coloring(tri, {"a": 0, "b": 1, "c": 2}, allowed_colors=range(3))
    assert ok["feasible"] and ok["num_used_colors"] == 3 and ok["num_conflicts"] == 0

    clash = verify_coloring(tri, {"a": 0, "b": 0, "c": 1})
    assert not clash["feasible"]
    assert clash["num_conflicts"] == 1
    assert clash["conflicts_sample"] == [("a", "b", 0, 0)]

    partial = verify_coloring(tri, {"a": 0, "b": 1, "z": 2}, allowed_colors=range(2))
    assert partial["missing_nodes"] == ["c"]
    assert partial["extra_nodes"] == ["z"]
    assert partial["out_of_range_nodes"] == ["z"]
    assert not partial["feasible"]

    assert not verify_coloring(tri, None)["feasible"]
    assert verify_coloring(UndirectedGraph(), {})["feasible"]


def test_print_check_summary(capsys):
    tri = UndirectedGraph("abc", [("a", "b"), ("b", "c"), ("a", "c")])
    print_check_summary(verify_coloring(tri, {"a": 0, "b": 0}))
    out = capsys.readouterr().out
    assert out.startswith("[Check] feasible=False|used_colors=1|conflicts=")
    assert "missing_nodes(sample) =['c']" in out


def test_greedy_max_clique():
    k4_plus = UndirectedGraph(range(5), [(a, b) for a in range(4) for b in range(a + 1, 4)] + [(3, 4)])
    clique = greedy_max_clique(k4_plus)
    assert sorted(clique) == [0, 1, 2, 3]
    assert greedy_max_clique(UndirectedGraph()) == []


def test_visualize_coloring_writes_png(tmp_path):
    path = visualize_coloring(EDGE, {1: 0, 2: 1}, name="Edge Demo", out_dir=str(tmp_path))
    assert os.path.exists(path)
    assert os.path.basename(path) == "edge-demo_colors-02.png"
