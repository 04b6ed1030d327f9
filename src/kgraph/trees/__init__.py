from .mayeda_seshu import AllSpanningMS, all_spanning_trees, count_spanning_trees_ms

__all__ = [
    "AllSpanningMS",
    "all_spanning_trees",
    "count_spanning_trees_ms",
]
