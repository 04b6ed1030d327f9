from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import networkx as nx
import matplotlib.pyplot as plt

from kgraph.core.graph import Graph
from kgraph.io.nxconv import to_nx
from kgraph.trees.mayeda_seshu import AllSpanningMS


def base_layout(G: nx.Graph, rep: Optional[Sequence[Tuple[int, int]]] = None, seed: int = 7):
    """
    Positions for nodes 1..V:
      - the generator coordinates when rep covers every vertex
      - planar_layout if planar
      - otherwise spring_layout
    """
    if rep is not None and len(rep) >= G.number_of_nodes():
        return {v: rep[v - 1] for v in G.nodes()}
    is_planar, _ = nx.check_planarity(G)
    if is_planar:
        return nx.planar_layout(G)
    return nx.spring_layout(G, seed=seed, iterations=300)


def draw_spanning_trees(
    graph: Graph,
    rep: Optional[Sequence[Tuple[int, int]]] = None,
    *,
    max_trees: int = 16,
    ncols: int = 4,
    seed: int = 7,
    node_size: int = 140,
    edge_width: float = 1.2,
    save_path: str | None = None,
) -> int:
    """
    Draw the first max_trees spanning trees of graph in a grid, each over
    the faint full graph, with a common layout.

    If save_path is set, saves a PNG there; otherwise shows the figure.
    Returns the number of trees drawn.
    """
    G = to_nx(graph)
    pos = base_layout(G, rep, seed=seed)

    trees = []

    def keep(tree: Graph) -> bool:
        trees.append(tree.edges())
        return len(trees) < max_trees

    AllSpanningMS(graph).enumerate(keep)

    ncols = max(1, min(ncols, len(trees)))
    nrows = math.ceil(len(trees) / ncols)
    fig, axes = plt.subplots(nrows, ncols, figsize=(3 * ncols, 3 * nrows), squeeze=False)

    for ax in axes.flat:
        ax.set_axis_off()

    for i, edges in enumerate(trees):
        ax = axes.flat[i]
        ax.set_title(f"#{i}", fontsize=9)
        nx.draw_networkx_edges(G, pos=pos, ax=ax, width=edge_width * 0.5, alpha=0.2)
        nx.draw_networkx(
            G.edge_subgraph(edges),
            pos=pos,
            ax=ax,
            with_labels=False,
            node_size=node_size,
            width=edge_width,
        )
        nx.draw_networkx_nodes(G, pos=pos, ax=ax, node_size=node_size)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return len(trees)
