from __future__ import annotations

from typing import Optional, Sequence, TextIO, Tuple

from kgraph.core.graph import Graph


def _edge_text(graph: Graph, e: int) -> str:
    return f"v{graph.head(e)} -- v{graph.tail(e)}"


def dump_edges(out: TextIO, graph: Graph) -> None:
    """One edge per line."""

    def line(e: int) -> None:
        out.write(_edge_text(graph, e) + "\n")

    graph.for_each_edge(line)


def dump_flat(out: TextIO, graph: Graph) -> None:
    """All edges on one line."""

    def item(e: int) -> None:
        out.write(_edge_text(graph, e) + " ")

    graph.for_each_edge(item)
    out.write("\n")


def dump_as_dot(
    out: TextIO,
    graph: Graph,
    rep: Optional[Sequence[Tuple[int, int]]] = None,
) -> None:
    """Write *graph* as a DOT ``strict graph``.

    Vertices covered by *rep* get a pinned position ``pos="x,y!"`` (for
    ``neato -n`` / ``fdp``).
    """
    pos = rep or ()
    out.write("strict graph {\n")

    def vertex(idx: int) -> None:
        out.write(f"v{idx + 1}")
        if idx < len(pos):
            x, y = pos[idx]
            out.write(f'[pos="{x},{y}!"]')
        out.write(";\n")

    def edge(e: int) -> None:
        out.write(_edge_text(graph, e) + ";\n")

    graph.for_each_vertex(vertex)
    graph.for_each_edge(edge)
    out.write("}\n")


def dump_records(out: TextIO, graph: Graph) -> None:
    """Raw record table: index, vidx, next and prev rows."""
    rows = [graph.record(i) for i in range(graph.nrecords())]
    out.write(f"Graph of: {graph.nvert()} vertices and {graph.nedges()} edges\n")
    out.write("\t".join(str(i) for i in range(len(rows))) + "\n")
    for col in range(3):
        out.write("\t".join(str(r[col]) for r in rows) + "\n")
