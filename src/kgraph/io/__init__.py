from .dump import dump_edges, dump_flat, dump_as_dot, dump_records
from .nxconv import strip_graph6_header, to_nx, from_nx, g6_to_graph, graph_to_g6

__all__ = [
    "dump_edges",
    "dump_flat",
    "dump_as_dot",
    "dump_records",
    "strip_graph6_header",
    "to_nx",
    "from_nx",
    "g6_to_graph",
    "graph_to_g6",
]
