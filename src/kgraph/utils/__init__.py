from .kirchhoff import laplacian, determinant_fraction, cofactor_determinant, kirchhoff_count
from .forest import is_forest_edges, is_spanning_tree_edges

__all__ = [
    "laplacian",
    "determinant_fraction",
    "cofactor_determinant",
    "kirchhoff_count",
    "is_forest_edges",
    "is_spanning_tree_edges",
]
