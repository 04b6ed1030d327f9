"""All spanning trees by tree-edge/cotree-edge exchange (Mayeda-Seshu).

Starting from a DFS spanning tree T0 with tree edges NUM[1..V-1] and
cotree edges NUM[V..M], every spanning tree T is reached from T0 by
removing the edges of T0 - T in increasing NUM order and, at each step,
adding a cotree edge that reconnects the two halves.  Among the cotree
edges of T - T0 the smallest admissible one is taken at every step; the
recursion enforces this by excluding, below a sibling branch, every cotree
edge that already served as a replacement for the same tree edge.  Each
tree is therefore emitted exactly once.

The graph itself is the backtracking state: every exchange is a pair of
O(1) pseudo-delete/undelete operations that is undone before returning.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from kgraph.core.graph import Graph, even_one
from kgraph.core.spanning import detect_loop, is_connected, reachable, spanning

logger = logging.getLogger(__name__)

# emit(tree) -> False to stop the enumeration
EmitHook = Callable[[Graph], Optional[bool]]


class AllSpanningMS:
    """Enumerator of all spanning trees of a connected graph.

    The graph is borrowed for the lifetime of the object.  Between calls to
    the emit hook it holds the current spanning tree; outside of
    :meth:`enumerate` it is in its original state.
    """

    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        n = graph.nvert()
        if reachable(graph) != n:
            raise ValueError(f"graph is not connected: {graph!r}")

        # record indices are shared with the copy; graph stays intact
        scratch = graph.copy()
        cotree = spanning(scratch)
        tree: List[int] = []
        scratch.for_each_edge(tree.append)
        # the DFS skips every edge back to the parent, so a parallel pair
        # survives in the tree
        if len(tree) != n - 1:
            raise ValueError(
                f"graph has parallel edges: DFS tree kept {len(tree)} edges for {n} vertices"
            )

        # NUM[0] means nothing
        self.num: List[int] = [-1] + tree + sorted(cotree)
        self.used: List[bool] = [False] * graph.nrecords()
        self._excluded: List[bool] = [False] * graph.nrecords()
        logger.debug(
            "Mayeda-Seshu: %d tree edges, %d cotree edges", len(tree), len(cotree)
        )

    @property
    def tree_edges(self) -> List[int]:
        return self.num[1:self.graph.nvert()]

    @property
    def cotree_edges(self) -> List[int]:
        return self.num[self.graph.nvert():]

    def enumerate(self, emit: EmitHook) -> bool:
        """Call ``emit(graph)`` once per spanning tree.

        Returns False iff *emit* stopped the enumeration.  The graph is
        restored on return, also when *emit* raises.
        """
        g = self.graph
        n = g.nvert()
        # exchanges interleave, so undelete alone loses adjacency order
        links = g.save_links()
        for e in self.num[1:n]:
            self.used[even_one(e)] = True
        for e in self.num[n:]:
            g.edelete(e)
        try:
            done = self._recurse(emit, 1)
        finally:
            for e in reversed(self.num[n:]):
                g.eundelete(e)
            g.restore_links(links)
            for e in self.num[1:]:
                self.used[even_one(e)] = False
        if not done:
            logger.debug("Mayeda-Seshu: stopped by emit hook")
        return done

    __call__ = enumerate

    def _recurse(self, emit: EmitHook, lo: int) -> bool:
        g = self.graph
        n = g.nvert()
        used = self.used
        excluded = self._excluded

        if emit(g) is False:
            return False

        for eidx in range(lo, n):
            ei = even_one(self.num[eidx])
            g.edelete(ei)
            used[ei] = False
            served: List[int] = []
            try:
                for ejdx in range(n, len(self.num)):
                    ej = even_one(self.num[ejdx])
                    if used[ej] or excluded[ej]:
                        continue

                    g.eundelete(ej)
                    used[ej] = True
                    try:
                        if not detect_loop(g, g.head(ej) - 1) and is_connected(g, n):
                            if not self._recurse(emit, eidx + 1):
                                return False
                            excluded[ej] = True
                            served.append(ej)
                    finally:
                        g.edelete(ej)
                        used[ej] = False
            finally:
                for ej in served:
                    excluded[ej] = False
                g.eundelete(ei)
                used[ei] = True

        return True


def all_spanning_trees(graph: Graph) -> List[List[Tuple[int, int]]]:
    """Every spanning tree of *graph* as a list of (head, tail) pairs."""
    trees: List[List[Tuple[int, int]]] = []
    AllSpanningMS(graph).enumerate(lambda t: trees.append(t.edges()))
    return trees


def count_spanning_trees_ms(graph: Graph) -> int:
    """Number of spanning trees, by enumeration."""
    count = 0

    def tick(_tree: Graph) -> None:
        nonlocal count
        count += 1

    AllSpanningMS(graph).enumerate(tick)
    return count
