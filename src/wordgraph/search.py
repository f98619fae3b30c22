"""
Read-only queries over a WordGraph.

- shortest_path(): Dijkstra with a (distance, word) priority key, so equal
  distances are expanded in lexicographic word order.
- nodes_at_hops(): breadth-first layering, returns words whose shortest
  hop distance is exactly the requested value.

Neither function keeps state between calls; the graph is passed in
explicitly and never modified.
"""

from __future__ import annotations
import heapq
import math
from collections import deque
from typing import Dict, List, Optional, Tuple

from .config import EPSILON
from .graph import WordGraph
from .models import PathResult


class InvalidHopCount(ValueError):
    """Raised when a hop query is given a negative or non-integer hop count."""


def shortest_path(graph: WordGraph, src: str, dst: str) -> Optional[PathResult]:
    """
    Weighted shortest path from src to dst.

    Returns None when either word is not a node or dst is unreachable.
    src == dst short-circuits to cost 0.0 and path (src,) without searching.

    Ties: the heap key is (distance, word), so among equal distances the
    lexicographically smaller word is expanded first. A predecessor is only
    replaced by a strictly shorter (beyond EPSILON) candidate, so the first
    relaxation that reached the minimum keeps it.
    Time: O((V+E) log V)
    """
    if src == dst:
        return PathResult(cost=0.0, path=(src,))
    if src not in graph or dst not in graph:
        return None

    dist: Dict[str, float] = {src: 0.0}
    prev: Dict[str, str] = {}
    heap: List[Tuple[float, str]] = [(0.0, src)]

    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u] + EPSILON:
            continue  # stale
        if u == dst:
            break
        for e in graph.edges(u):
            nd = d + e.weight
            best = dist.get(e.to, math.inf)
            if nd + EPSILON < best:
                dist[e.to] = nd
                prev[e.to] = u
                heapq.heappush(heap, (nd, e.to))

    if math.isinf(dist.get(dst, math.inf)):
        return None

    path = [dst]
    at = dst
    while at in prev:
        at = prev[at]
        path.append(at)
    path.reverse()
    return PathResult(cost=dist[dst], path=tuple(path))


def _check_hops(hops: object) -> int:
    if isinstance(hops, bool) or not isinstance(hops, int):
        raise InvalidHopCount(f"hop count must be an integer, got {hops!r}")
    if hops < 0:
        raise InvalidHopCount(f"hop count must be >= 0, got {hops}")
    return hops


def hop_distances(graph: WordGraph, src: str, limit: Optional[int] = None) -> Dict[str, int]:
    """
    BFS hop distance of every node reachable from src.
    Nodes at distance == limit are not expanded further.
    """
    if src not in graph:
        return {}
    d: Dict[str, int] = {src: 0}
    q = deque([src])
    while q:
        u = q.popleft()
        du = d[u]
        if limit is not None and du == limit:
            continue
        for e in graph.edges(u):
            if e.to not in d:
                d[e.to] = du + 1
                q.append(e.to)
    return d


def nodes_at_hops(graph: WordGraph, src: str, hops: int) -> List[str]:
    """
    Words whose shortest hop distance from src is exactly hops, sorted.
    Unknown src -> []. hops == 0 -> [src].
    Time: O(V+E)
    """
    hops = _check_hops(hops)
    d = hop_distances(graph, src, limit=hops)
    return sorted(w for w, h in d.items() if h == hops)


def is_reachable(graph: WordGraph, src: str, dst: str) -> bool:
    """Plain directed reachability, independent of weights."""
    return dst in hop_distances(graph, src)
