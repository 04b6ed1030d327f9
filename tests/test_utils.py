"""Tests for kgraph.utils module."""
from fractions import Fraction

import pytest

from kgraph.gens.generators import complete_graph, graph_from_edges, mn_lattice, rombic_graph
from kgraph.utils.forest import is_forest_edges, is_spanning_tree_edges
from kgraph.utils.kirchhoff import (
    cofactor_determinant,
    determinant_fraction,
    kirchhoff_count,
    laplacian,
)


# --- forest ---

def test_is_forest_empty():
    assert is_forest_edges(3, []) is True


def test_is_forest_path():
    assert is_forest_edges(4, [(1, 2), (2, 3), (3, 4)]) is True


def test_is_forest_triangle():
    assert is_forest_edges(3, [(1, 2), (2, 3), (1, 3)]) is False


def test_is_spanning_tree_single_vertex():
    assert is_spanning_tree_edges(1, []) is True


def test_is_spanning_tree_wrong_size():
    assert is_spanning_tree_edges(4, [(1, 2), (2, 3)]) is False


def test_is_spanning_tree_star():
    assert is_spanning_tree_edges(4, [(1, 2), (1, 3), (1, 4)]) is True


def test_is_spanning_tree_cycle_plus_isolated():
    # right edge count but a cycle leaves vertex 4 out
    assert is_spanning_tree_edges(4, [(1, 2), (2, 3), (3, 1)]) is False


# --- linalg ---

def test_determinant_identity():
    assert determinant_fraction([[1, 0], [0, 1]]) == 1


def test_determinant_needs_row_swap():
    assert determinant_fraction([[0, 1], [1, 0]]) == -1


def test_determinant_singular():
    assert determinant_fraction([[1, 2, 3], [2, 4, 6], [0, 1, 1]]) == 0


def test_determinant_fractions():
    M = [[Fraction(1, 2), 1], [1, 4]]
    assert determinant_fraction(M) == 1


# --- Kirchhoff ---

def test_laplacian_path():
    L = laplacian(3, [(1, 2), (2, 3)])
    assert L == [[1, -1, 0], [-1, 2, -1], [0, -1, 1]]


def test_cofactor_trivial():
    assert cofactor_determinant([[0]]) == 1


def test_cofactor_non_integer_minor():
    with pytest.raises(ArithmeticError):
        cofactor_determinant([[0, 0], [0, Fraction(1, 2)]])


def test_kirchhoff_complete_graphs():
    # Cayley: n^(n-2)
    for n in range(2, 7):
        assert kirchhoff_count(complete_graph(n)) == n ** (n - 2)


def test_kirchhoff_lattices():
    assert kirchhoff_count(rombic_graph(0)[0]) == 8
    assert kirchhoff_count(mn_lattice(2, 3)[0]) == 15
    assert kirchhoff_count(mn_lattice(3, 3)[0]) == 192
    assert kirchhoff_count(mn_lattice(4, 3)[0]) == 2415


def test_kirchhoff_disconnected_is_zero():
    g = graph_from_edges(4, [(1, 2), (3, 4)])
    assert kirchhoff_count(g) == 0


def test_kirchhoff_ignores_deleted_edges():
    g = complete_graph(4)
    g.edelete(g.edges_start())
    assert kirchhoff_count(g) == 8
