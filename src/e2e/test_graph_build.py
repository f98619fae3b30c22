# src/e2e/test_graph_build.py

import pytest

from wordgraph.bigrams import build_bigrams
from wordgraph.graph import WordGraph, build_graph


def test_every_endpoint_is_a_node_including_sinks():
    g = build_graph({("a", "b"): 1, ("b", "c"): 2})
    assert set(g.nodes()) == {"a", "b", "c"}
    assert g.edges("c") == ()
    assert g.out_degree("c") == 0
    assert "c" in g


def test_weight_is_derived_from_count():
    g = build_graph({("a", "b"): 1, ("a", "c"): 2, ("a", "d"): 3, ("a", "e"): 7})
    for e in g.edges("a"):
        assert e.weight * e.count == pytest.approx(100.0, abs=1e-9)
    by_to = {e.to: e for e in g.edges("a")}
    assert by_to["b"].weight == 100.0
    assert by_to["c"].weight == 50.0
    # higher count -> lower cost
    assert by_to["e"].weight < by_to["d"].weight < by_to["b"].weight


def test_adjacency_sorted_by_destination():
    g = build_graph({("s", "zebra"): 1, ("s", "apple"): 1, ("s", "mango"): 5})
    assert [e.to for e in g.edges("s")] == ["apple", "mango", "zebra"]


def test_nodes_are_sorted_and_counted():
    g = build_graph(build_bigrams([["c", "a", "b"], ["b", "d"]]))
    assert g.nodes() == ["a", "b", "c", "d"]
    assert len(g) == 4
    assert g.edge_count == 3
    assert list(g) == ["a", "b", "c", "d"]


def test_unknown_word_has_no_edges():
    g = build_graph({("a", "b"): 1})
    assert g.edges("zzz") == ()
    assert "zzz" not in g


def test_empty_counts_give_empty_graph():
    g = build_graph({})
    assert len(g) == 0 and g.nodes() == [] and g.edge_count == 0


def test_graph_is_read_only():
    g = WordGraph.from_bigram_counts({("a", "b"): 1})
    with pytest.raises(TypeError):
        g._adj["x"] = ()  # mapping proxy rejects writes
    with pytest.raises(AttributeError):
        g.edges("a")[0].count = 5


def test_non_positive_counts_rejected():
    with pytest.raises(ValueError):
        build_graph({("a", "b"): 0})
