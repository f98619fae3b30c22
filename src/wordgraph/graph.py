"""
Directed weighted word graph built from bigram counts.

weight(u -> v) = WEIGHT_SCALE / count(u, v), so frequent pairs are cheap to
traverse. Adjacency lists are sorted by destination word; the shortest path
solver relies on that order for deterministic tie-breaking.
"""

from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Tuple

from .models import Edge

_NO_EDGES: Tuple[Edge, ...] = ()


class WordGraph:
    """
    Immutable adjacency mapping word -> tuple of Edge.

    Every word that appears as either end of a bigram is a node, including
    words with no outgoing edges. Instances are built once via
    build_graph() / WordGraph.from_bigram_counts() and never mutated, so
    they can be shared by concurrent readers.
    """

    __slots__ = ("_adj", "_edge_count")

    def __init__(self, adjacency: Mapping[str, Tuple[Edge, ...]]) -> None:
        self._adj: Mapping[str, Tuple[Edge, ...]] = MappingProxyType(dict(adjacency))
        self._edge_count = sum(len(edges) for edges in self._adj.values())

    @classmethod
    def from_bigram_counts(cls, counts: Mapping[Tuple[str, str], int]) -> "WordGraph":
        return build_graph(counts)

    # ---- introspection ----
    def __contains__(self, word: object) -> bool:
        return word in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[str]:
        return iter(self.nodes())

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def nodes(self) -> List[str]:
        """All nodes, sorted ascending."""
        return sorted(self._adj)

    def edges(self, word: str) -> Tuple[Edge, ...]:
        """Outgoing edges of word sorted by destination; empty for unknown words."""
        return self._adj.get(word, _NO_EDGES)

    def out_degree(self, word: str) -> int:
        return len(self.edges(word))

    def __repr__(self) -> str:
        return f"WordGraph(nodes={len(self)}, edges={self.edge_count})"


def build_graph(counts: Mapping[Tuple[str, str], int]) -> WordGraph:
    """
    Build adjacency from a bigram count map keyed by (from, to).
    Time: O(E log E) due to sorting adjacency by destination.
    """
    adj: Dict[str, List[Edge]] = {}
    for (src, dst), c in counts.items():
        if c < 1:
            raise ValueError(f"bigram ({src!r}, {dst!r}) has non-positive count {c}")
        adj.setdefault(src, []).append(Edge(dst, int(c)))
        # destination is a node even if it never starts a bigram
        adj.setdefault(dst, [])

    return WordGraph({w: tuple(sorted(edges, key=lambda e: e.to)) for w, edges in adj.items()})
