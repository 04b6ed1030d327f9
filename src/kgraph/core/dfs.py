from __future__ import annotations

from typing import Callable, Iterator, List, Optional

from kgraph.core.graph import Graph

# hook(edge, path) -> False to stop the search
BackEdgeHook = Callable[[int, List[int]], Optional[bool]]


def dfs_backedges(graph: Graph, hook: BackEdgeHook, start: int = 0) -> bool:
    """Depth-first search from vertex slot *start* reporting back edges.

    *path* is the explicit DFS stack of vertex slots.  For every half-edge
    leaving the stack top that leads to a vertex already on the stack (other
    than the tree parent), ``hook(edge, path[:-1])`` is called: the active
    path from *start* up to, but excluding, the current vertex.  The hook
    may pseudo-delete the reported edge.

    Each vertex keeps its own adjacency cursor, so a back edge is reported
    once, from its deeper end.  Returns False iff the hook stopped the search.
    """
    n = graph.nvert()
    if not 0 <= start < n:
        raise IndexError(f"start slot {start} out of range 0..{n - 1}")

    marks = [False] * n
    marks[start] = True
    path: List[int] = [start]
    cursors: List[Iterator[int]] = [graph.adjacent_edges(start)]

    while path:
        parent = path[-2] if len(path) > 1 else None

        for cure in cursors[-1]:
            targv = graph.tail(cure) - 1

            # tree parent is always marked
            if targv == parent:
                continue

            # otherwise a marked vertex means back edge if it is on the path
            if marks[targv]:
                if targv in path:
                    if hook(cure, path[:-1]) is False:
                        return False
                continue

            marks[targv] = True
            path.append(targv)
            cursors.append(graph.adjacent_edges(targv))
            break
        else:
            # no unmarked successor left: step back
            path.pop()
            cursors.pop()

    return True
