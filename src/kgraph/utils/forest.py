from __future__ import annotations

from typing import Iterable, Tuple


def is_forest_edges(n: int, edges: Iterable[Tuple[int, int]]) -> bool:
    """Check that an edge list on vertices 1..n has no cycle (union-find)."""
    parent = list(range(n + 1))
    rank = [0] * (n + 1)

    def find(x: int) -> int:
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def union(a: int, b: int) -> bool:
        ra, rb = find(a), find(b)
        if ra == rb:
            return False
        if rank[ra] < rank[rb]:
            parent[ra] = rb
        elif rank[ra] > rank[rb]:
            parent[rb] = ra
        else:
            parent[rb] = ra
            rank[ra] += 1
        return True

    for u, v in edges:
        if not union(u, v):
            return False
    return True


def is_spanning_tree_edges(n: int, edges: Iterable[Tuple[int, int]]) -> bool:
    """Exactly n - 1 edges and acyclic, hence a spanning tree of 1..n.

    Semantics for degenerate cases:
      - n == 1 and no edges -> True
      - wrong edge count    -> False
    """
    eds = list(edges)
    if len(eds) != n - 1:
        return False
    return is_forest_edges(n, eds)
