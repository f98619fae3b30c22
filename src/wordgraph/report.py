"""
CSV reports and the plain-text lines shared by the CLI, web UI and GUI.

CSV files have no header. Writes go to a temporary file first and are
moved into place with os.replace() so a failed run never leaves a
half-written report behind.
"""

from __future__ import annotations
import csv
import os
from typing import Dict, Iterable, List, Optional, Sequence

from .bigrams import Bigram, format_pair, iter_triples
from .frequency import sorted_by_frequency
from .models import GeneratedSentence, PathResult, Tier


def _write_rows(path: str, rows: Iterable[Sequence[object]]) -> str:
    path = os.fspath(path)
    tmp = f"{path}.tmp"
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(tmp, "w", encoding="utf-8", newline="") as f:
        w = csv.writer(f, lineterminator="\n")
        w.writerows(rows)
    os.replace(tmp, path)
    return path


def write_bigram_csv(counts: Dict[Bigram, int], path: str) -> str:
    """from,to,count per line, sorted by (from, to)."""
    return _write_rows(path, iter_triples(counts))


def write_word_frequency_csv(counts: Dict[str, int], path: str) -> str:
    """word,count per line, sorted by word."""
    return _write_rows(path, sorted(counts.items()))


def write_sorted_words_csv(counts: Dict[str, int], path: str) -> str:
    """word,count per line, most frequent first, ties alphabetical."""
    return _write_rows(path, sorted_by_frequency(counts))


def read_bigram_csv(path: str) -> Dict[Bigram, int]:
    """Inverse of write_bigram_csv()."""
    out: Dict[Bigram, int] = {}
    with open(path, "r", encoding="utf-8", newline="") as f:
        for row in csv.reader(f):
            if not row:
                continue
            a, b, c = row
            out[(a, b)] = int(c)
    return out


# ---------- text lines ----------

def _fmt_list(items: Iterable[str]) -> str:
    return "[" + ", ".join(items) + "]"


def word_tier_lines(t: Tier) -> List[str]:
    return [
        f"Word Rank {t.rank}: {len(t)} word(s) with {t.count} occurrence(s).",
        "Words include: " + _fmt_list(t.items),
    ]


def bigram_tier_lines(t: Tier) -> List[str]:
    return [
        f"Bigram Rank {t.rank}: {len(t)} pair(s) with {t.count} occurrence(s).",
        "Pairs include: " + _fmt_list(format_pair(p) for p in t.items),
    ]


def path_lines(src: str, dst: str, result: Optional[PathResult]) -> List[str]:
    if result is None:
        return [f"Shortest Path between '{src}' and '{dst}' does not exist."]
    return [
        f"Shortest Path between '{src}' and '{dst}' has total cost "
        f"{result.cost:.6f}, with {result.hops} hops.",
        "Path: " + _fmt_list(result.path),
    ]


def hop_lines(src: str, hops: int, words: Sequence[str]) -> List[str]:
    return [
        f"Total number of nodes with {hops} hop(s) from '{src}': {len(words)}",
        "Words: " + _fmt_list(words),
    ]


def sentence_lines(s: GeneratedSentence) -> List[str]:
    kind = "Complete" if s.complete else "Incomplete"
    return [f"{kind} sentence with {len(s)} words is: " + _fmt_list(s.words)]
