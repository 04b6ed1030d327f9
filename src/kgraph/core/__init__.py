from .graph import EdgeRecord, Graph, even_one
from .dfs import dfs_backedges
from .spanning import (
    detect_loop,
    disjoint,
    is_connected,
    nonmod_spanning,
    reachable,
    spanning,
)

__all__ = [
    "EdgeRecord",
    "Graph",
    "even_one",
    "dfs_backedges",
    "detect_loop",
    "disjoint",
    "is_connected",
    "nonmod_spanning",
    "reachable",
    "spanning",
]
