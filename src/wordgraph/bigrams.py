"""
Ordered bigram counting.

Direction matters: ("paul", "atreides") and ("atreides", "paul") are
different keys. Pairs are only formed inside a sentence, never across a
sentence boundary.
"""

from __future__ import annotations
from collections import defaultdict
from typing import Dict, Iterable, Iterator, Sequence, Tuple

from .frequency import RankTiers

Bigram = Tuple[str, str]


def build_bigrams(sentences: Iterable[Sequence[str]]) -> Dict[Bigram, int]:
    """
    Count every (token[i], token[i+1]) pair within each sentence.
    Sentences shorter than two tokens contribute nothing; empty input
    yields an empty mapping. Every count in the result is >= 1.
    """
    counts: Dict[Bigram, int] = defaultdict(int)
    for sent in sentences:
        if len(sent) < 2:
            continue
        for i in range(len(sent) - 1):
            counts[(sent[i], sent[i + 1])] += 1
    return dict(counts)


def iter_triples(counts: Dict[Bigram, int]) -> Iterator[Tuple[str, str, int]]:
    """(from, to, count) triples sorted by (from, to)."""
    for (a, b), c in sorted(counts.items()):
        yield a, b, c


def rank_tiers(counts: Dict[Bigram, int]) -> RankTiers:
    """Frequency tiers over bigrams; pairs inside a tier are ordered (from asc, to asc)."""
    return RankTiers(counts)


def format_pair(pair: Bigram) -> str:
    return f"{pair[0]} {pair[1]}"
