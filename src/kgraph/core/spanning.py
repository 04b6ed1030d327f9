"""DFS-based spanning trees and fundamental cycles.

All functions start the search from one vertex slot.  On a disconnected
graph ``spanning`` only reaches the component of that vertex; callers that
need a spanning tree of the whole graph must check connectivity.
"""
from __future__ import annotations

import logging
from typing import List, Set

from kgraph.core.dfs import dfs_backedges
from kgraph.core.graph import Graph

logger = logging.getLogger(__name__)


def spanning(graph: Graph, start: int = 0) -> Set[int]:
    """Turn *graph* into a DFS spanning tree in place.

    Every back edge is pseudo-deleted; returns the set of removed half-edges
    (the cotree).
    """
    removed: Set[int] = set()

    def cut(cure: int, _path: List[int]) -> None:
        removed.add(cure)
        graph.edelete(cure)

    dfs_backedges(graph, cut, start)
    logger.debug("spanning: removed %d back edges from %r", len(removed), graph)
    return removed


def reachable(graph: Graph, start: int = 0) -> int:
    """Number of vertices in the component of slot *start*."""
    seen = [False] * graph.nvert()
    seen[start] = True
    stack = [start]
    while stack:
        v = stack.pop()
        for e in graph.adjacent_edges(v):
            w = graph.tail(e) - 1
            if not seen[w]:
                seen[w] = True
                stack.append(w)
    return sum(seen)


def nonmod_spanning(graph: Graph, start: int = 0) -> List[int]:
    """Canonical halves of the V-1 edges of a DFS spanning tree.

    *graph* is left untouched.  Raises ValueError if the graph is not
    connected.
    """
    if reachable(graph, start) != graph.nvert():
        raise ValueError("graph is not connected, no spanning tree exists")

    intree = [True] * graph.nrecords()

    def drop(cure: int, _path: List[int]) -> None:
        intree[cure] = False
        intree[cure ^ 1] = False

    dfs_backedges(graph, drop, start)

    res = [
        e
        for e in range(graph.edges_start(), graph.nrecords(), 2)
        if intree[e] and graph.is_present(e)
    ]
    if len(res) != graph.nvert() - 1:
        raise RuntimeError(f"expected {graph.nvert() - 1} tree edges, found {len(res)}")
    return res


def is_connected(graph: Graph, expected: int) -> bool:
    """True iff the present edges touch exactly *expected* vertices."""
    marks = [False] * graph.nvert()

    def touch(e: int) -> None:
        marks[graph.head(e) - 1] = True
        marks[graph.tail(e) - 1] = True

    graph.for_each_edge(touch)
    return sum(marks) == expected


def _edge_to(graph: Graph, v: int, w: int) -> int:
    """First half-edge from slot *v* to slot *w*."""
    for e in graph.adjacent_edges(v):
        if graph.tail(e) - 1 == w:
            return e
    raise RuntimeError(f"no edge between slots {v} and {w} on the DFS path")


def detect_loop(graph: Graph, start: int = 0) -> Set[int]:
    """Half-edges of the first cycle reachable from slot *start*.

    Meant for a spanning tree plus one extra edge, where the result is the
    fundamental cycle of that edge.  Empty set if no cycle is found.
    """
    edges: Set[int] = set()

    def close(cure: int, path: List[int]) -> bool:
        edges.add(cure)

        # actual loop starts at the back edge target
        loop = path[path.index(graph.tail(cure) - 1):]
        for here, there in zip(loop, loop[1:]):
            edges.add(_edge_to(graph, here, there))

        # last path vertex to the head of the back edge
        edges.add(_edge_to(graph, loop[-1], graph.head(cure) - 1))
        return False

    dfs_backedges(graph, close, start)
    return edges


def disjoint(a: Set[int], b: Set[int]) -> Set[int]:
    """C = A - B"""
    return a - b
