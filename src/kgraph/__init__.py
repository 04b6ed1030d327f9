"""
kgraph: Knuth-style graph records with reversible edge deletion, DFS
spanning trees, and enumeration of all spanning trees (Mayeda-Seshu).
"""

from .core.graph import Graph, even_one
from .core.dfs import dfs_backedges
from .core.spanning import (
    spanning,
    nonmod_spanning,
    is_connected,
    detect_loop,
    disjoint,
)
from .trees.mayeda_seshu import (
    AllSpanningMS,
    all_spanning_trees,
    count_spanning_trees_ms,
)
from .gens.generators import rombic_graph, mn_lattice, complete_graph, graph_from_edges

# Sinks and interchange
from .io.dump import dump_edges, dump_flat, dump_as_dot, dump_records
from .io.nxconv import to_nx, from_nx, g6_to_graph, graph_to_g6

# Shared utilities
from .utils.kirchhoff import laplacian, cofactor_determinant, kirchhoff_count
from .utils.forest import is_forest_edges, is_spanning_tree_edges

__all__ = [
    # Core
    "Graph",
    "even_one",
    "dfs_backedges",
    "spanning",
    "nonmod_spanning",
    "is_connected",
    "detect_loop",
    "disjoint",
    # Enumeration
    "AllSpanningMS",
    "all_spanning_trees",
    "count_spanning_trees_ms",
    # Generators
    "rombic_graph",
    "mn_lattice",
    "complete_graph",
    "graph_from_edges",
    # IO
    "dump_edges",
    "dump_flat",
    "dump_as_dot",
    "dump_records",
    "to_nx",
    "from_nx",
    "g6_to_graph",
    "graph_to_g6",
    # Utils
    "laplacian",
    "cofactor_determinant",
    "kirchhoff_count",
    "is_forest_edges",
    "is_spanning_tree_edges",
]
