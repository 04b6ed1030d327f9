from .generators import Rep, rombic_graph, mn_lattice, complete_graph, graph_from_edges

__all__ = [
    "Rep",
    "rombic_graph",
    "mn_lattice",
    "complete_graph",
    "graph_from_edges",
]
