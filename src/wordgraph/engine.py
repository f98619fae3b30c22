# wordgraph/engine.py
from __future__ import annotations

import os
import logging
import time
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from . import config as CFG
from .bigrams import Bigram, build_bigrams, rank_tiers
from .check import CheckResult, Expectations, run_checks
from .frequency import RankTiers, count_words
from .generator import generate_sentence
from .graph import WordGraph, build_graph
from .loader import load_corpus
from .models import Corpus, Edge, GeneratedSentence, PathResult
from .report import write_bigram_csv, write_sorted_words_csv, write_word_frequency_csv
from .search import nodes_at_hops, shortest_path

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - corpus loading (loader.load_corpus),
      - bigram counting (bigrams.build_bigrams),
      - graph construction (graph.build_graph),
      - read-only queries (search.shortest_path / search.nodes_at_hops).

    Public API (used by CLI/Flask/GUI):
      * build(sources):           load -> count -> build graph
      * build_from_sentences(...): same, from already tokenized sentences
      * shortest_path(a, b), nodes_at_hops(a, h), neighbors(w), generate(w, n)
      * word_tiers(), bigram_tiers(), write_reports(out_dir), self_check()
      * shutdown():               drop all loaded state

    The graph is rebuilt from scratch on every build(); it is never updated
    in place.
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.corpus: Optional[Corpus] = None
        self.bigrams: Optional[Dict[Bigram, int]] = None
        self.graph: Optional[WordGraph] = None
        self._word_counts: Optional[Dict[str, int]] = None

    # /* ~~~ Load a corpus from files/folders and build the graph ~~~ */
    def build(self, sources: Iterable[str] | str, *, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)

        if isinstance(sources, (str, os.PathLike)):
            sources = [sources]
        sources = list(sources)
        if not sources:
            raise ValueError("build(): at least one input file or folder is required")

        t0 = time.perf_counter()
        log.info("Loading corpus from %s", [os.fspath(s) for s in sources])
        corpus = load_corpus(sources, verbose=verbose or CFG.VERBOSE)
        log.info("Load corpus finished in %.0f ms", (time.perf_counter() - t0) * 1000)
        self._attach(corpus, corpus.token_lists())

    # /* ~~~ Build from sentences that were tokenized elsewhere ~~~ */
    def build_from_sentences(self, sentences: Iterable[Sequence[str]]) -> None:
        self._attach(None, [tuple(s) for s in sentences])

    def _attach(self, corpus: Optional[Corpus], sentences: List[Tuple[str, ...]]) -> None:
        t0 = time.perf_counter()
        counts = build_bigrams(sentences)
        log.info("Build bigrams finished: pairs=%d", len(counts))
        graph = build_graph(counts)
        log.info("Build graph finished in %.0f ms: %r", (time.perf_counter() - t0) * 1000, graph)

        # commit engine state only once everything succeeded
        self.corpus = corpus
        self.bigrams = counts
        self.graph = graph
        self._word_counts = count_words(sentences)

    @property
    def ready(self) -> bool:
        return self.graph is not None

    def _require_graph(self) -> WordGraph:
        if self.graph is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return self.graph

    # ------------- queries -------------

    def has_word(self, word: str) -> bool:
        if self.corpus is not None:
            return self.corpus.contains(word)
        return word in self._require_graph()

    # /* ~~~ Weighted shortest path; None means unknown word or unreachable ~~~ */
    def shortest_path(self, src: str, dst: str) -> Optional[PathResult]:
        graph = self._require_graph()
        res = shortest_path(graph, src, dst)
        if res is None:
            if src not in graph or dst not in graph:
                log.info("shortest_path(%r, %r): unknown node", src, dst)
            else:
                log.info("shortest_path(%r, %r): unreachable", src, dst)
        return res

    def nodes_at_hops(self, src: str, hops: int) -> List[str]:
        return nodes_at_hops(self._require_graph(), src, hops)

    def neighbors(self, word: str) -> Tuple[Edge, ...]:
        return self._require_graph().edges(word)

    def generate(self, start: str, length: int = CFG.DEFAULT_GEN_LEN) -> GeneratedSentence:
        return generate_sentence(self._require_graph(), start, length)

    # ------------- frequency tiers / reports -------------

    def word_counts(self) -> Dict[str, int]:
        self._require_graph()
        return dict(self._word_counts or {})

    def word_tiers(self) -> RankTiers:
        return RankTiers(self.word_counts())

    def bigram_tiers(self) -> RankTiers:
        self._require_graph()
        return rank_tiers(self.bigrams or {})

    def write_reports(self, out_dir: str | os.PathLike, *, tasks: Sequence[str] = ("wf", "co")) -> List[str]:
        """Write the CSV reports for the given tasks into out_dir; returns written paths."""
        self._require_graph()
        out = Path(out_dir)
        written: List[str] = []
        if "wf" in tasks:
            counts = self.word_counts()
            written.append(write_word_frequency_csv(counts, str(out / CFG.WORD_FREQUENCY_CSV)))
            written.append(write_sorted_words_csv(counts, str(out / CFG.SORTED_WORDS_CSV)))
        if "co" in tasks:
            written.append(write_bigram_csv(self.bigrams or {}, str(out / CFG.BIGRAM_FREQUENCY_CSV)))
        for p in written:
            log.info("Wrote %s", p)
        return written

    def self_check(self, expectations: Optional[Expectations] = None) -> List[CheckResult]:
        graph = self._require_graph()
        return run_checks(self.corpus, self.bigrams or {}, graph, expectations)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.corpus = None
        self.bigrams = None
        self.graph = None
        self._word_counts = None
        log.info("Engine shutdown complete")
