from coloring.branch_and_bound import hypothesis_priority
from coloring.hypothesis import Hypothesis, extend_hypothesis
from graph.adt import UndirectedGraph

PATH = UndirectedGraph("abc", [("a", "b"), ("b", "c")])


def test_initial_hypothesis_bounds():
    h = Hypothesis.initial(PATH, ["a", "b", "c"])
    assert not h.complete
    assert h.num_colors == 0
    assert h.colors_lower_bound == 0
    assert h.colors_upper_bound == 3
    assert h.bound_width == 3
    assert h.next_node == "a"


def test_first_node_only_opens_a_new_color():
    h = Hypothesis.initial(PATH, ["a", "b", "c"])
    (child,) = extend_hypothesis(h, 3)
    assert child.colors == {"a": 0}
    assert child.num_colors == 1
    assert child.remaining_nodes == ("b", "c")
    assert h.colors == {}  # parent untouched


def test_extension_skips_colors_of_decided_neighbors():
    h = Hypothesis.initial(PATH, ["a", "b", "c"]).color_next(0)
    (child,) = extend_hypothesis(h, 3)
    assert child.colors == {"a": 0, "b": 1}
    assert child.num_colors == 2

    kids = extend_hypothesis(child, 3)
    assert [k.colors["c"] for k in kids] == [0, 2]
    assert [k.num_colors for k in kids] == [2, 3]
    assert all(k.complete for k in kids)


def test_new_color_only_below_max_colors():
    h = Hypothesis.initial(PATH, ["a", "b", "c"]).color_next(0).color_next(1)
    assert [k.colors["c"] for k in extend_hypothesis(h, 2)] == [0]
    assert extend_hypothesis(Hypothesis.initial(PATH, ["a", "b", "c"]), 0) == []


def test_dead_end_has_no_extensions():
    tri = UndirectedGraph("xyz", [("x", "y"), ("y", "z"), ("x", "z")])
    h = Hypothesis.initial(tri, ["x", "y", "z"]).color_next(0).color_next(1)
    assert extend_hypothesis(h, 2) == []


def test_complete_hypothesis_is_terminal():
    h = Hypothesis.initial(PATH, ["a", "b", "c"]).color_next(0).color_next(1).color_next(0)
    assert h.complete
    assert h.colors_lower_bound == h.colors_upper_bound == 2
    assert extend_hypothesis(h, 3) == []


def test_undecided_neighbors_do_not_constrain():
    # b is adjacent to both but still undecided when c is colored
    h = Hypothesis.initial(PATH, ["a", "c", "b"]).color_next(0)
    kids = extend_hypothesis(h, 3)
    assert [k.colors["c"] for k in kids] == [0, 1]


def test_priority_prefers_narrow_then_low_upper_bound():
    base = Hypothesis.initial(PATH, ["a", "b", "c"])
    one = base.color_next(0)
    two_same = one.color_next(1).color_next(0)
    assert hypothesis_priority(base) == (3, 3)
    assert hypothesis_priority(one) == (2, 3)
    assert hypothesis_priority(two_same) == (0, 2)
    assert sorted([base, two_same, one], key=hypothesis_priority) == [two_same, one, base]
