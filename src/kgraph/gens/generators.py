"""Graph generators with print coordinates.

Each generator returns ``(graph, rep)`` where ``rep[i]`` is the (x, y)
position of vertex i + 1, used by the DOT dump and the drawing helpers, e.g.

    dot -Kfdp -n -Tpng knuth.dot > knuth.png
"""
from __future__ import annotations

from itertools import combinations
from typing import Iterable, List, Tuple

from kgraph.core.graph import Graph

# print representation: coordinates for each vertex
Rep = List[Tuple[int, int]]


def rombic_graph(n: int) -> Tuple[Graph, Rep]:
    """Rhombic graph of order n on 2n + 4 vertices.

    1-2, 1-3, then a 1-by-n ladder 2-3, 2-4, 3-5, 4-5, ..., then the two
    closing edges to the last vertex.  Orders 0, 1 look like <|>, <||>.
    Knuth uses order 0 as the example for Algorithm 7.2.1.6S.
    """
    if n < 0:
        raise ValueError(f"order must be >= 0, got {n}")
    nv = n * 2 + 4
    g = Graph(nv)
    r: Rep = [(0, 0)] * nv

    g.add_edge(1, 2)
    r[0] = (0, 1)
    g.add_edge(1, 3)
    r[1] = (1, 0)
    g.add_edge(2, 3)
    r[2] = (1, 2)
    higher = 2
    lower = 3

    for _ in range(n):
        r[lower] = (higher // 2 + 1, 0)
        r[lower + 1] = (higher // 2 + 1, 2)
        g.add_edge(higher, higher + 2)
        g.add_edge(lower, lower + 2)
        higher += 2
        lower += 2
        g.add_edge(higher, lower)

    r[lower] = (higher // 2 + 1, 1)
    g.add_edge(higher, lower + 1)
    g.add_edge(lower, lower + 1)
    return g, r


def mn_lattice(n: int, m: int) -> Tuple[Graph, Rep]:
    """n columns by m rows grid graph (2x3, 4x3, ...).

    Vertex x*m + y + 1 sits at (x, y).  The first column is the chain
    1-2, 2-3, ...; every further column adds its own chain plus the
    horizontals to the previous column.
    """
    if n < 1:
        raise ValueError(f"lattice needs n >= 1 columns, got {n}")
    if m < 2:
        raise ValueError(f"lattice needs m >= 2 rows, got {m}")
    g = Graph(m * n)

    # first layer like: 1-2, 2-3
    for yval in range(1, m):
        g.add_edge(yval, yval + 1)

    # other layers like: 4-5, 1-4, 5-6, 2-5, 3-6
    for xval in range(1, n):
        for yval in range(1, m):
            g.add_edge(yval + xval * m, yval + xval * m + 1)
            g.add_edge(yval + (xval - 1) * m, yval + xval * m)
        g.add_edge(xval * m, (xval + 1) * m)

    r: Rep = [(xval, yval) for xval in range(n) for yval in range(m)]
    return g, r


def complete_graph(n: int) -> Graph:
    """K_n with edges added in lexicographic order."""
    g = Graph(n)
    for a, b in combinations(range(1, n + 1), 2):
        g.add_edge(a, b)
    return g


def graph_from_edges(n: int, edges: Iterable[Tuple[int, int]]) -> Graph:
    """Graph on vertices 1..n with the given edges, in order."""
    g = Graph(n)
    for a, b in edges:
        g.add_edge(a, b)
    return g
