"""
Word frequency counting and rank tiers.

A rank tier groups every item sharing the same occurrence count. Tier 1
holds the most frequent items; items inside a tier are sorted ascending so
printed output is deterministic.
"""

from __future__ import annotations
from collections import Counter, defaultdict
from typing import Any, Dict, Hashable, Iterable, List, Sequence, Tuple

from .models import Tier


def count_words(sentences: Iterable[Sequence[str]]) -> Dict[str, int]:
    """Count every token occurrence across all sentences."""
    counts: Counter[str] = Counter()
    for sent in sentences:
        counts.update(sent)
    return dict(counts)


class RankTiers:
    """
    Frequency tiers over a count table.

    Example:
        >>> tiers = RankTiers({"a": 3, "b": 3, "c": 1})
        >>> tiers.tier(1)
        Tier(rank=1, count=3, items=('a', 'b'))
        >>> tiers.tier(5).count
        0
    """

    def __init__(self, counts: Dict[Hashable, int]) -> None:
        bucket: Dict[int, List[Any]] = defaultdict(list)
        for item, c in counts.items():
            bucket[c].append(item)
        self._freqs_desc: List[int] = sorted(bucket, reverse=True)
        self._bucket: Dict[int, Tuple[Any, ...]] = {
            c: tuple(sorted(items)) for c, items in bucket.items()
        }

    def __len__(self) -> int:
        return len(self._freqs_desc)

    def tier(self, k: int) -> Tier:
        """Return the k-th tier (1-based); an empty Tier when k is out of range."""
        if k < 1 or k > len(self._freqs_desc):
            return Tier(rank=k, count=0)
        f = self._freqs_desc[k - 1]
        return Tier(rank=k, count=f, items=self._bucket[f])

    def top(self, k: int) -> List[Tier]:
        """Tiers 1..k (out-of-range ranks included as empty tiers)."""
        return [self.tier(r) for r in range(1, max(1, k) + 1)]


def sorted_by_frequency(counts: Dict[str, int]) -> List[Tuple[str, int]]:
    """(word, count) pairs by count descending, then word ascending."""
    return sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
