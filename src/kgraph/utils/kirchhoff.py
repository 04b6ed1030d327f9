"""Exact spanning-tree counts by Kirchhoff's matrix-tree theorem."""
from __future__ import annotations

from fractions import Fraction
from typing import Iterable, List, Tuple

from kgraph.core.graph import Graph


def laplacian(n: int, edges: Iterable[Tuple[int, int]]) -> List[List[int]]:
    """Laplacian D - A of a graph on vertices 1..n (parallel edges add up)."""
    L = [[0] * n for _ in range(n)]
    for u, v in edges:
        L[u - 1][u - 1] += 1
        L[v - 1][v - 1] += 1
        L[u - 1][v - 1] -= 1
        L[v - 1][u - 1] -= 1
    return L


def determinant_fraction(M: List[List[int | Fraction]]) -> Fraction:
    """Determinant over the rationals by Gaussian elimination."""
    n = len(M)
    Mf = [[Fraction(x) for x in row] for row in M]
    det = Fraction(1)

    for col in range(n):
        # Find pivot
        piv = None
        for r in range(col, n):
            if Mf[r][col] != 0:
                piv = r
                break
        if piv is None:
            return Fraction(0)

        # Swap pivot row into position
        if piv != col:
            Mf[col], Mf[piv] = Mf[piv], Mf[col]
            det = -det

        pivot = Mf[col][col]
        det *= pivot

        # Eliminate below
        for r in range(col + 1, n):
            if Mf[r][col] != 0:
                factor = Mf[r][col] / pivot
                for c in range(col, n):
                    Mf[r][c] -= factor * Mf[col][c]

    return det


def cofactor_determinant(L: List[List[int]]) -> int:
    """Determinant of L with its first row and column removed."""
    if len(L) <= 1:
        return 1
    minor = [row[1:] for row in L[1:]]
    det = determinant_fraction(minor)
    if det.denominator != 1:
        raise ArithmeticError(f"minor determinant {det} is not an integer")
    return int(det)


def kirchhoff_count(graph: Graph) -> int:
    """Number of spanning trees of the present edges of *graph*."""
    return cofactor_determinant(laplacian(graph.nvert(), graph.edges()))
