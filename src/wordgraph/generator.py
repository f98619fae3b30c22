from __future__ import annotations
from typing import List, Optional

from .graph import WordGraph
from .models import Edge, GeneratedSentence


def best_next(graph: WordGraph, word: str) -> Optional[Edge]:
    """Outgoing edge with the highest count; ties go to the alphabetically first word."""
    edges = graph.edges(word)
    if not edges:
        return None
    # edges are sorted by destination, so min() keeps the first of equal counts
    return min(edges, key=lambda e: -e.count)


def generate_sentence(graph: WordGraph, start: str, length: int) -> GeneratedSentence:
    """
    Greedy deterministic sentence: start from `start` and repeatedly follow
    best_next() until `length` words are produced or a word has no successor.
    """
    length = max(1, int(length))
    words: List[str] = [start]
    cur = start
    while len(words) < length:
        nxt = best_next(graph, cur)
        if nxt is None:
            return GeneratedSentence(words=tuple(words), complete=False)
        words.append(nxt.to)
        cur = nxt.to
    return GeneratedSentence(words=tuple(words), complete=True)
