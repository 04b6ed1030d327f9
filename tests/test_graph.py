"""Tests for kgraph.core.graph."""
import pytest

from kgraph.core.graph import Graph, even_one
from kgraph.gens.generators import rombic_graph, mn_lattice, complete_graph


def _lists(g):
    return [list(g.adjacent_edges(v)) for v in g.vertices()]


def _degrees(g):
    return [g.deg(v) for v in range(1, g.nvert() + 1)]


# --- construction ---

def test_new_graph_even():
    g = Graph(4)
    assert g.nvert() == 4
    assert g.nrecords() == 4
    assert g.edges_start() == 4
    assert g.nedges() == 0
    assert _degrees(g) == [0, 0, 0, 0]
    for v in g.vertices():
        assert g.record(v) == (0, v, v)


def test_new_graph_odd_is_padded():
    g = Graph(3)
    assert g.nrecords() == 4
    assert g.edges_start() == 4
    assert g.record(3) == (0, 3, 3)


def test_new_graph_needs_a_vertex():
    with pytest.raises(ValueError):
        Graph(0)


def test_add_edge_returns_pair():
    g = Graph(3)
    assert g.add_edge(1, 2) == (4, 5)
    assert g.add_edge(2, 3) == (6, 7)
    assert g.nrecords() % 2 == 0
    assert g.nedges() == 2


def test_add_edge_updates_degrees_and_lists():
    g = Graph(4)
    out, back = g.add_edge(1, 3)
    assert g.deg(1) == 1 and g.deg(3) == 1 and g.deg(2) == 0
    assert out in g.adjacent_edges(0)
    assert back in g.adjacent_edges(2)
    assert g.head(out) == 1 and g.tail(out) == 3
    assert g.head(back) == 3 and g.tail(back) == 1


def test_add_edge_rejects_bad_vertices():
    g = Graph(3)
    with pytest.raises(ValueError):
        g.add_edge(0, 1)
    with pytest.raises(ValueError):
        g.add_edge(1, 4)
    with pytest.raises(ValueError):
        g.add_edge(2, 2)


def test_head_tail_duality():
    g, _ = mn_lattice(3, 3)
    for e in range(g.edges_start(), g.nrecords()):
        assert g.head(e) == g.tail(e ^ 1)
        assert g.head(e) != g.tail(e)


def test_even_one():
    assert even_one(6) == 6
    assert even_one(7) == 6


def test_degree_matches_list_length():
    g, _ = rombic_graph(2)
    lists = _lists(g)
    assert [len(lst) for lst in lists] == _degrees(g)


# --- traversals ---

def test_for_each_edge_visits_each_edge_once():
    g = complete_graph(5)
    seen = []
    assert g.for_each_edge(seen.append) is True
    assert len(seen) == 10
    pairs = {frozenset((g.head(e), g.tail(e))) for e in seen}
    assert len(pairs) == 10
    assert all(g.head(e) > g.tail(e) for e in seen)


def test_for_each_edge_stops_on_false():
    g = complete_graph(4)
    seen = []

    def take_two(e):
        seen.append(e)
        return len(seen) < 2

    assert g.for_each_edge(take_two) is False
    assert len(seen) == 2


def test_for_each_vertex_and_adjacent():
    g, _ = rombic_graph(0)
    slots = []
    assert g.for_each_vertex(slots.append) is True
    assert slots == [0, 1, 2, 3]
    tails = []
    g.for_each_adjacent_edge(1, lambda e: tails.append(g.tail(e)))
    assert sorted(tails) == [1, 3, 4]


def test_edges_list():
    g = Graph(3)
    g.add_edge(1, 2)
    g.add_edge(3, 2)
    assert sorted(g.edges()) == [(2, 1), (3, 2)]


# --- delete / undelete ---

def test_edelete_eundelete_restores_exactly():
    g, _ = rombic_graph(1)
    before = _lists(g)
    degs = _degrees(g)
    e = g.edges_start() + 2 * 3 + 1  # odd half of the fourth edge
    a, b = g.head(e), g.tail(e)
    g.edelete(e)
    assert g.deg(a) == degs[a - 1] - 1
    assert g.deg(b) == degs[b - 1] - 1
    assert not g.is_present(e)
    assert e not in _lists(g)[a - 1]
    g.eundelete(e)
    assert g.is_present(e)
    assert _lists(g) == before
    assert _degrees(g) == degs


def test_record_payload_survives_delete():
    g = Graph(2)
    out, back = g.add_edge(1, 2)
    rec = g.record(out)
    g.edelete(out)
    assert g.record(out) == rec
    assert g.head(out) == 1 and g.tail(out) == 2
    assert list(g.adjacent_edges(0)) == []
    g.eundelete(back)
    assert list(g.adjacent_edges(0)) == [out]
    assert list(g.adjacent_edges(1)) == [back]


def test_balanced_sequence_is_identity():
    g, _ = mn_lattice(3, 3)
    before = _lists(g)
    edges = list(range(g.edges_start(), g.nrecords(), 2))
    order = edges[::3] + edges[1::3]
    for e in order:
        g.edelete(e)
    for e in reversed(order):
        g.eundelete(e)
    assert _lists(g) == before


def test_unbalanced_order_keeps_sets():
    g, _ = mn_lattice(2, 3)
    snapshot = g.copy()
    edges = list(range(g.edges_start(), g.nrecords(), 2))
    for e in edges:
        g.edelete(e)
    assert g.npresent() == 0
    for e in edges:
        g.eundelete(e)
    assert g == snapshot
    assert [len(lst) for lst in _lists(g)] == _degrees(g)


def test_restore_links_after_unbalanced_order():
    g = complete_graph(4)
    before = [g.record(i) for i in range(g.nrecords())]
    links = g.save_links()
    edges = list(range(g.edges_start(), g.nrecords(), 2))
    for e in edges:
        g.edelete(e)
    for e in edges:
        g.eundelete(e)
    g.restore_links(links)
    assert [g.record(i) for i in range(g.nrecords())] == before


def test_restore_links_rejects_other_graph():
    g = complete_graph(4)
    links = g.save_links()
    g.add_edge(1, 2)
    with pytest.raises(ValueError):
        g.restore_links(links)


def test_delete_twice_is_an_error():
    g = Graph(2)
    out, _ = g.add_edge(1, 2)
    g.edelete(out)
    with pytest.raises(RuntimeError):
        g.edelete(out)


def test_undelete_present_is_an_error():
    g = Graph(2)
    out, _ = g.add_edge(1, 2)
    with pytest.raises(RuntimeError):
        g.eundelete(out)


def test_edge_index_out_of_range():
    g = Graph(2)
    g.add_edge(1, 2)
    with pytest.raises(IndexError):
        g.edelete(1)
    with pytest.raises(IndexError):
        g.head(4)


# --- equality ---

def test_equals_ignores_insertion_order():
    a = Graph(3)
    a.add_edge(1, 2)
    a.add_edge(2, 3)
    b = Graph(3)
    b.add_edge(3, 2)
    b.add_edge(2, 1)
    assert a == b
    assert a.equals(b)


def test_equals_detects_difference():
    a = Graph(3)
    a.add_edge(1, 2)
    b = Graph(3)
    b.add_edge(1, 3)
    assert a != b
    assert Graph(3) != Graph(4)


def test_copy_is_independent():
    g = complete_graph(4)
    h = g.copy()
    assert g == h
    h.edelete(h.edges_start())
    assert g != h
    assert g.npresent() == 6
