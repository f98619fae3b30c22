# src/wordgraph/models.py
"""
Data models for the word graph engine.

This module defines small, focused data containers:

- Sentence: one tokenized corpus line with stable identity.
- Corpus: the in-memory list of sentences plus the sorted vocabulary.
- Edge: one outgoing adjacency entry of the word graph.
- PathResult: the answer to a shortest path query.
- Tier: one frequency tier of a ranked count table.
- GeneratedSentence: the output of the greedy text generator.

These classes do not contain business logic; they only structure the data so
that loading, graph building and querying remain simple and predictable.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from bisect import bisect_left
from typing import Any, List, Tuple

from .config import WEIGHT_SCALE


@dataclass(frozen=True, slots=True)
class Sentence:
    """
    Represents one logical sentence (one non-empty line of a source file).

    Attributes
    ----------
    id : int
        A stable, incrementing identifier. Never reused.
    path : str
        File path of the source file, relative to the provided source.
    line_no : int
        1-based line number within the source file.
    tokens : Tuple[str, ...]
        Lowercase a-z tokens produced by normalize.clean_to_tokens().
        Never empty: lines without tokens are not kept.
    """
    id: int
    path: str
    line_no: int
    tokens: Tuple[str, ...]


@dataclass(slots=True)
class Corpus:
    """
    The in-memory corpus.

    Attributes
    ----------
    sentences : List[Sentence]
        All sentences in load order. This is the ground truth for counting.
    vocab : List[str]
        Distinct words, sorted ascending for deterministic iteration.
    """
    sentences: List[Sentence]
    vocab: List[str] = field(default_factory=list)

    def token_lists(self) -> List[Tuple[str, ...]]:
        return [s.tokens for s in self.sentences]

    def contains(self, word: str) -> bool:
        i = bisect_left(self.vocab, word)
        return i < len(self.vocab) and self.vocab[i] == word


@dataclass(frozen=True, slots=True)
class Edge:
    """
    Outgoing edge of a word node.

    Only the count is stored; the weight is always recomputed from it,
    so the two can never disagree.
    """
    to: str
    count: int

    @property
    def weight(self) -> float:
        return WEIGHT_SCALE / self.count


@dataclass(frozen=True, slots=True)
class PathResult:
    """Total cost plus the words from source to destination inclusive."""
    cost: float
    path: Tuple[str, ...]

    @property
    def hops(self) -> int:
        return len(self.path) - 1

    def to_dict(self) -> dict:
        return {"cost": self.cost, "hops": self.hops, "path": list(self.path)}


@dataclass(frozen=True, slots=True)
class Tier:
    """
    One rank of a frequency table: all items sharing the same count.
    rank is 1-based (1 = most frequent). An out-of-range rank is represented
    by an empty tier with count 0.
    """
    rank: int
    count: int
    items: Tuple[Any, ...] = ()

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class GeneratedSentence:
    words: Tuple[str, ...]
    complete: bool

    def __len__(self) -> int:
        return len(self.words)
