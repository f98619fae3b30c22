"""
Quick self-check of a built engine.

Structural checks always run against the loaded data:
  * every bigram endpoint is a graph node
  * weight * count == WEIGHT_SCALE for every edge
  * adjacency lists are sorted by destination
  * shortest_path(x, x) and nodes_at_hops(x, 0) are the identity for a sample node

Expectations are optional, corpus-specific facts supplied by the caller
(e.g. "paul" is a word, "paul atreides" is a bigram, the path
paul -> arrakis takes 4 hops at cost 400.0).
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .config import WEIGHT_SCALE
from .graph import WordGraph
from .models import Corpus
from .search import nodes_at_hops, shortest_path

_WEIGHT_TOL = 1e-9


@dataclass(frozen=True, slots=True)
class CheckResult:
    label: str
    ok: bool

    def line(self) -> str:
        return f"[OK]   {self.label}" if self.ok else f"[WARN] {self.label} - not satisfied"


@dataclass(frozen=True)
class Expectations:
    words: Sequence[str] = ()
    bigrams: Sequence[Tuple[str, str]] = ()
    # (src, dst, hops, cost); cost None means only the hop count is checked
    paths: Sequence[Tuple[str, str, int, Optional[float]]] = ()


def structural_checks(counts: Dict[Tuple[str, str], int], graph: WordGraph) -> List[CheckResult]:
    out: List[CheckResult] = []

    missing = [w for pair in counts for w in pair if w not in graph]
    out.append(CheckResult("every bigram endpoint is a graph node", not missing))

    bad_weight = False
    unsorted = False
    for w in graph.nodes():
        edges = graph.edges(w)
        if any(abs(e.weight * e.count - WEIGHT_SCALE) > _WEIGHT_TOL for e in edges):
            bad_weight = True
        if any(edges[i].to > edges[i + 1].to for i in range(len(edges) - 1)):
            unsorted = True
    out.append(CheckResult(f"weight x count == {WEIGHT_SCALE:g} for every edge", not bad_weight))
    out.append(CheckResult("adjacency lists sorted by destination", not unsorted))

    nodes = graph.nodes()
    if nodes:
        x = nodes[0]
        self_path = shortest_path(graph, x, x)
        out.append(CheckResult(
            f"shortest path {x}->{x} is [{x}] with cost 0.0",
            self_path is not None and self_path.path == (x,) and self_path.cost == 0.0,
        ))
        out.append(CheckResult(f"nodes at 0 hops from '{x}' is [{x}]", nodes_at_hops(graph, x, 0) == [x]))
    return out


def expectation_checks(corpus: Optional[Corpus],
                       counts: Dict[Tuple[str, str], int],
                       graph: WordGraph,
                       exp: Expectations) -> List[CheckResult]:
    out: List[CheckResult] = []
    for w in exp.words:
        present = corpus.contains(w) if corpus is not None else w in graph
        out.append(CheckResult(f"word '{w}' exists", present))
    for a, b in exp.bigrams:
        out.append(CheckResult(f"bigram '{a} {b}' exists", (a, b) in counts))
    for src, dst, hops, cost in exp.paths:
        pr = shortest_path(graph, src, dst)
        ok = pr is not None and pr.hops == hops
        if ok and cost is not None:
            ok = math.isclose(pr.cost, cost, abs_tol=_WEIGHT_TOL)
        label = f"shortest path {src}->{dst} is {hops} hops"
        if cost is not None:
            label += f" with cost {cost:.1f}"
        out.append(CheckResult(label, ok))
    return out


def run_checks(corpus: Optional[Corpus],
               counts: Dict[Tuple[str, str], int],
               graph: WordGraph,
               exp: Optional[Expectations] = None) -> List[CheckResult]:
    results = structural_checks(counts, graph)
    if exp is not None:
        results.extend(expectation_checks(corpus, counts, graph, exp))
    return results
