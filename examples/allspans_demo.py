#!/usr/bin/env python3
"""
All spanning trees of the rhombic graph of order 0 and of small lattices,
by Mayeda-Seshu exchange.  Small cases are printed and dumped to DOT files,
larger ones only counted and checked against Kirchhoff's theorem.

Render with:
  dot -Kfdp -n -Tpng knuth_allspans_ms.dot > knuth.png

Usage: python3 allspans_demo.py
"""

import sys

from kgraph.core.graph import Graph
from kgraph.gens.generators import rombic_graph, mn_lattice
from kgraph.io.dump import dump_flat, dump_as_dot
from kgraph.trees.mayeda_seshu import AllSpanningMS
from kgraph.utils.kirchhoff import kirchhoff_count


def dump_all(name, g, rep, dotfile, shift):
    count = 0

    def show(tree: Graph) -> None:
        nonlocal count
        print(f"{name} spanning #{count}: ", end="")
        dump_flat(sys.stdout, tree)
        dump_as_dot(ofs, tree, [(x, y + shift * count) for x, y in rep])
        count += 1

    with open(dotfile, "w") as ofs:
        AllSpanningMS(g).enumerate(show)
    return count


def count_only(g):
    count = 0

    def tick(_tree):
        nonlocal count
        count += 1

    AllSpanningMS(g).enumerate(tick)
    return count


def main():
    print("--- Test for all spanning trees by Mayeda-Seshu ---")

    g, rep = rombic_graph(0)
    n = dump_all("kgraph", g, rep, "knuth_allspans_ms.dot", 2)
    print(f"rombic order 0: {n} trees (Kirchhoff {kirchhoff_count(g)})")

    g23, rep23 = mn_lattice(2, 3)
    n = dump_all("2-3 lattice", g23, rep23, "lat23_allspans_ms.dot", 3)
    print(f"2x3 lattice: {n} trees (Kirchhoff {kirchhoff_count(g23)})")

    for cols, rows in [(3, 3), (4, 3)]:
        g, _ = mn_lattice(cols, rows)
        n = count_only(g)
        print(f"Number of {cols}x{rows} lattice spanning trees is {n} (Kirchhoff {kirchhoff_count(g)})")


if __name__ == "__main__":
    main()
