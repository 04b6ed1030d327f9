"""All spanning trees of an n x m lattice.

Usage: kgraph-allspan n m [-s | -n] [-o FILE] [-v]

Prints every spanning tree as one flat line and writes them all, shifted
upwards one after another, to a DOT file (lat_allspans.dot by default).
"""
from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import List, Optional

from kgraph.core.graph import Graph
from kgraph.gens.generators import mn_lattice
from kgraph.io.dump import dump_as_dot, dump_flat
from kgraph.trees.mayeda_seshu import AllSpanningMS
from kgraph.utils.kirchhoff import kirchhoff_count

DEFAULT_OUTPUT = "lat_allspans.dot"
USAGE_ERROR = -1


@dataclass(frozen=True)
class AllspanConfig:
    n: int
    m: int
    only_stat: bool = False
    no_stat: bool = False
    output: str = DEFAULT_OUTPUT
    verbose: bool = False


class UsageError(Exception):
    pass


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> _Parser:
    ap = _Parser(
        prog="kgraph-allspan",
        description="Enumerate all spanning trees of the n x m lattice (Mayeda-Seshu).",
        epilog="Note: m and n shall be >= 2",
    )
    ap.add_argument("n", type=int, help="horizontal size")
    ap.add_argument("m", type=int, help="vertical size")
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument("-s", dest="only_stat", action="store_true", help="print only statistics")
    mode.add_argument("-n", dest="no_stat", action="store_true", help="do not print statistics")
    ap.add_argument("-o", "--output", default=DEFAULT_OUTPUT, help="DOT file for all trees")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    return ap


def parse_config(argv: Optional[List[str]] = None) -> AllspanConfig:
    args = build_parser().parse_args(argv)
    if args.n < 2 or args.m < 2:
        raise UsageError(f"n and m shall be >= 2, got n={args.n} m={args.m}")
    return AllspanConfig(
        n=args.n,
        m=args.m,
        only_stat=args.only_stat,
        no_stat=args.no_stat,
        output=args.output,
        verbose=args.verbose,
    )


def run(cfg: AllspanConfig) -> int:
    """Enumerate, print, dump.  Returns the number of spanning trees."""
    g, rep = mn_lattice(cfg.n, cfg.m)
    expected = kirchhoff_count(g)
    count = 0
    t0 = time.perf_counter()

    def show(tree: Graph, ofs=None) -> None:
        nonlocal count
        if not cfg.only_stat:
            print(f"{cfg.n}-{cfg.m} lattice spanning #{count}: ", end="")
            dump_flat(sys.stdout, tree)
            # each tree goes above the previous one
            shifted = [(x, y + (cfg.m + 1) * count) for x, y in rep]
            dump_as_dot(ofs, tree, shifted)
        count += 1

    if cfg.only_stat:
        AllSpanningMS(g).enumerate(show)
    else:
        with open(cfg.output, "w") as ofs:
            AllSpanningMS(g).enumerate(lambda tree: show(tree, ofs))

    elapsed = time.perf_counter() - t0
    if not cfg.no_stat:
        print(f"Number of {cfg.n}x{cfg.m} lattice spanning trees is {count}")
        print(f"Kirchhoff count: {expected} ({'ok' if expected == count else 'MISMATCH'})")
        print(f"Elapsed: {elapsed:.3f}s")
        if not cfg.only_stat:
            print(f"Look at file: {cfg.output}")
    return count


def main(argv: Optional[List[str]] = None) -> int:
    try:
        cfg = parse_config(argv)
    except UsageError as exc:
        parser = build_parser()
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        print(parser.epilog, file=sys.stderr)
        return USAGE_ERROR

    if cfg.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    run(cfg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
