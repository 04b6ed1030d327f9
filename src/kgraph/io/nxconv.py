from __future__ import annotations

import networkx as nx

from kgraph.core.graph import Graph


def strip_graph6_header(g6: str) -> str:
    """
    Remove optional '>>graph6<<' header and whitespace.
    """
    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    return s


def to_nx(graph: Graph) -> nx.Graph:
    """
    Present edges of *graph* as a NetworkX Graph on nodes 1..V.
    """
    G = nx.Graph()
    G.add_nodes_from(range(1, graph.nvert() + 1))
    G.add_edges_from(graph.edges())
    return G


def from_nx(G: nx.Graph) -> Graph:
    """
    Build a Graph from a simple undirected NetworkX graph.

    Nodes are relabeled 1..n in sorted order; edges are added in
    G.edges() order.  Self-loops are rejected.
    """
    if G.number_of_nodes() == 0:
        raise ValueError("cannot build a Graph with no vertices")
    if isinstance(G, (nx.MultiGraph, nx.MultiDiGraph)):
        G = nx.Graph(G)
    if G.is_directed():
        G = G.to_undirected()
    label = {v: i for i, v in enumerate(sorted(G.nodes()), start=1)}
    g = Graph(len(label))
    for u, v in G.edges():
        g.add_edge(label[u], label[v])
    return g


def g6_to_graph(g6: str) -> Graph:
    """
    Parse a graph6 string; graph6 vertex i becomes vertex i + 1.
    """
    s = strip_graph6_header(g6)
    return from_nx(nx.from_graph6_bytes(s.encode("ascii")))


def graph_to_g6(graph: Graph) -> str:
    """
    graph6 string (no header) of the present edges.
    """
    G = nx.relabel_nodes(to_nx(graph), lambda v: v - 1)
    return nx.to_graph6_bytes(G, header=False).decode("ascii").strip()
