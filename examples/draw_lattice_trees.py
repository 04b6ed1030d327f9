#!/usr/bin/env python3
"""
Draw the first spanning trees of an n x m lattice on the lattice grid.

Usage: python3 draw_lattice_trees.py n m [max_trees] [out.png]
"""

import argparse

from kgraph.gens.generators import mn_lattice
from kgraph.viz.draw import draw_spanning_trees


def main():
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("n", type=int)
    ap.add_argument("m", type=int)
    ap.add_argument("max_trees", type=int, nargs="?", default=16)
    ap.add_argument("out", nargs="?", default=None)
    args = ap.parse_args()

    g, rep = mn_lattice(args.n, args.m)
    drawn = draw_spanning_trees(g, rep, max_trees=args.max_trees, save_path=args.out)
    print(f"Drew {drawn} spanning trees of the {args.n}x{args.m} lattice")


if __name__ == "__main__":
    main()
