# src/e2e/test_shortest_path.py

from collections import Counter

import pytest

from wordgraph.graph import build_graph
from wordgraph.search import is_reachable, shortest_path


def test_direct_frequent_edge_beats_two_hops():
    g = build_graph({("a", "b"): 1, ("b", "c"): 1, ("a", "c"): 2})
    res = shortest_path(g, "a", "c")
    assert res is not None
    assert res.cost == pytest.approx(50.0)
    assert res.path == ("a", "c")
    assert res.hops == 1


def test_equal_cost_paths_pick_lexicographically_first_expansion():
    g = build_graph({("a", "b"): 1, ("b", "d"): 1, ("a", "c"): 1, ("c", "d"): 1})
    res = shortest_path(g, "a", "d")
    assert res.path == ("a", "b", "d")
    assert res.cost == pytest.approx(200.0)


def test_tie_break_does_not_depend_on_insertion_order():
    pairs = [("c", "d"), ("a", "c"), ("b", "d"), ("a", "b")]
    g1 = build_graph({p: 1 for p in pairs})
    g2 = build_graph({p: 1 for p in reversed(pairs)})
    assert shortest_path(g1, "a", "d") == shortest_path(g2, "a", "d")


def test_same_word_returns_zero_cost_without_search():
    g = build_graph({("a", "b"): 1})
    for w in ("a", "b"):
        res = shortest_path(g, w, w)
        assert res.cost == 0.0 and res.path == (w,)


def test_word_absent_from_every_bigram_is_not_found():
    g = build_graph({("a", "b"): 1, ("b", "c"): 1})
    assert shortest_path(g, "a", "z") is None
    assert shortest_path(g, "z", "a") is None


def test_unreachable_nodes_return_none():
    g = build_graph({("a", "b"): 1, ("c", "d"): 1})
    assert shortest_path(g, "a", "d") is None
    # edges are directed
    assert shortest_path(g, "b", "a") is None


def test_not_found_iff_unreachable():
    g = build_graph({("a", "b"): 1, ("b", "c"): 3, ("c", "a"): 2, ("d", "a"): 1})
    for src in g.nodes():
        for dst in g.nodes():
            found = shortest_path(g, src, dst) is not None
            assert found == (src == dst or is_reachable(g, src, dst))


def test_improved_distance_replaces_predecessor():
    # b is first reached directly at 100, then through c at 25 + 25
    g = build_graph({("a", "b"): 1, ("a", "c"): 4, ("c", "b"): 4, ("b", "t"): 1})
    res = shortest_path(g, "a", "t")
    assert res.path == ("a", "c", "b", "t")
    assert res.cost == pytest.approx(150.0)


def test_float_jitter_does_not_replace_first_predecessor():
    # a->b->c->d costs 3 * (100/3), which may not be exactly 100.0
    g = build_graph({("a", "b"): 3, ("b", "c"): 3, ("c", "d"): 3, ("a", "d"): 1})
    res = shortest_path(g, "a", "d")
    assert res.path == ("a", "d")
    assert res.cost == pytest.approx(100.0)


def test_repeated_queries_are_identical():
    g = build_graph({("the", "spice"): 3, ("spice", "must"): 2, ("must", "flow"): 2,
                     ("the", "must"): 1, ("spice", "flow"): 1})
    first = shortest_path(g, "the", "flow")
    for _ in range(5):
        again = shortest_path(g, "the", "flow")
        assert again == first
        assert repr(again.cost) == repr(first.cost)


def test_equal_distance_ties_use_the_word_not_push_order():
    # y is pushed (from s) before x (from p), both end up at distance 100
    g = build_graph({("s", "p"): 2, ("s", "y"): 1, ("p", "x"): 2,
                     ("x", "t"): 1, ("y", "t"): 1})
    res = shortest_path(g, "s", "t")
    assert res.path == ("s", "p", "x", "t")
    assert res.cost == pytest.approx(200.0)


class _CountingGraph:
    def __init__(self, graph):
        self._graph = graph
        self.expanded = Counter()

    def __contains__(self, word):
        return word in self._graph

    def edges(self, word):
        self.expanded[word] += 1
        return self._graph.edges(word)


def test_stale_heap_entries_are_not_expanded():
    # b is queued at 100, improved to 50 via c; the old entry pops before t
    g = _CountingGraph(build_graph({("a", "b"): 1, ("a", "c"): 4, ("c", "b"): 4, ("b", "t"): 1}))
    res = shortest_path(g, "a", "t")
    assert res.path == ("a", "c", "b", "t")
    assert all(n == 1 for n in g.expanded.values())
    assert g.expanded["b"] == 1
