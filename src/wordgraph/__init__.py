"""
Word Graph Engine

Builds a directed, weighted graph over the distinct words of a text corpus
from ordered bigram counts and answers deterministic graph queries on it.

- Corpus loading and tokenization (lowercase a-z tokens, one sentence per line)
- Ordered bigram counting and frequency tiers
- Immutable word graph with weight = 100 / count
- Shortest path (Dijkstra, lexicographic tie-break) and exact-hop queries
- Greedy next-word generator, CSV reports, self-check

Example Usage:
    from wordgraph import Engine

    eng = Engine()
    eng.build(["Resources/book.txt"])
    res = eng.shortest_path("paul", "arrakis")
    if res is not None:
        print(res.cost, res.path)
    print(eng.nodes_at_hops("paul", 2))
"""

# src/wordgraph/__init__.py
from .bigrams import build_bigrams
from .engine import Engine
from .graph import WordGraph, build_graph
from .models import Edge, PathResult
from .search import InvalidHopCount, nodes_at_hops, shortest_path

__version__ = "1.0.0"
__all__ = [
    "Engine",
    "WordGraph",
    "Edge",
    "PathResult",
    "InvalidHopCount",
    "build_bigrams",
    "build_graph",
    "shortest_path",
    "nodes_at_hops",
]
