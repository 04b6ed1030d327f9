"""Undirected graph stored as a flat pool of edge records.

The layout follows Knuth's TAOCP Vol. 4A.  The pool holds records
``{vidx, next, prev}``:

  - records 0..V-1 are vertex slots: ``vidx == 0`` and ``next``/``prev`` are
    the head and tail of a circular doubly linked list of the half-edges
    leaving that vertex;
  - if V is odd one padding record follows, so edges start at an even index;
  - every undirected edge is a pair of records (e, e ^ 1) with e even.
    ``vidx`` of a half-edge is its head vertex (1-based, so 0 stays free for
    the vertex slots) and the tail is the ``vidx`` of its twin.

Deleting an edge unlinks both halves from their lists but leaves the records
untouched, so the same indices can be linked back in O(1).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple


@dataclass(slots=True)
class EdgeRecord:
    vidx: int
    next: int
    prev: int


def even_one(e: int) -> int:
    """Canonical (even) half of the edge pair containing record *e*."""
    return e & ~1


class Graph:
    """Mutable undirected graph on vertices 1..V with reversible edge removal."""

    def __init__(self, nvert: int) -> None:
        if nvert < 1:
            raise ValueError(f"graph needs at least one vertex, got nvert={nvert}")
        self._n = nvert
        self._records: List[EdgeRecord] = [EdgeRecord(0, idx, idx) for idx in range(nvert)]
        self._degrees: List[int] = [0] * nvert
        # align edge records to an even index
        if nvert % 2 == 1:
            self._records.append(EdgeRecord(0, nvert, nvert))
        self._start = len(self._records)
        # one flag per edge pair: is it currently linked
        self._linked: List[bool] = []

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------

    def add_edge(self, start: int, fin: int) -> Tuple[int, int]:
        """Add the undirected edge start--fin (1-based vertices).

        Returns the record pair (start -> fin, fin -> start).
        """
        self._check_vertex(start)
        self._check_vertex(fin)
        if start == fin:
            raise ValueError(f"self-loop at vertex {start} is not allowed")
        outedge = len(self._records)
        inedge = outedge + 1
        self._records.append(EdgeRecord(start, 0, 0))
        self._records.append(EdgeRecord(fin, 0, 0))
        self._linked.append(False)
        self._link(outedge)
        return outedge, inedge

    def copy(self) -> "Graph":
        """Independent copy with identical records, degrees and linkage."""
        other = Graph.__new__(Graph)
        other._n = self._n
        other._records = [EdgeRecord(r.vidx, r.next, r.prev) for r in self._records]
        other._degrees = list(self._degrees)
        other._start = self._start
        other._linked = list(self._linked)
        return other

    # ------------------------------------------------------------------
    # simple getters
    # ------------------------------------------------------------------

    def nvert(self) -> int:
        return self._n

    def nrecords(self) -> int:
        return len(self._records)

    def nedges(self) -> int:
        """Number of edges ever added (pseudo-deleted ones included)."""
        return (len(self._records) - self._start) // 2

    def npresent(self) -> int:
        """Number of edges currently linked."""
        return sum(self._degrees) // 2

    def edges_start(self) -> int:
        return self._start

    def deg(self, v: int) -> int:
        self._check_vertex(v)
        return self._degrees[v - 1]

    def head(self, e: int) -> int:
        return self._records[self._check_edge(e)].vidx

    def tail(self, e: int) -> int:
        return self._records[self._check_edge(e) ^ 1].vidx

    def record(self, idx: int) -> Tuple[int, int, int]:
        """Raw (vidx, next, prev) of a pool record."""
        r = self._records[idx]
        return r.vidx, r.next, r.prev

    def is_present(self, e: int) -> bool:
        return self._linked[(self._check_edge(e) - self._start) // 2]

    # ------------------------------------------------------------------
    # traversals
    # ------------------------------------------------------------------

    def vertices(self) -> Iterator[int]:
        """Vertex slots 0..V-1."""
        return iter(range(self._n))

    def adjacent_edges(self, v: int) -> Iterator[int]:
        """Half-edges leaving vertex slot *v* (0-based), in list order.

        The consumer may pseudo-delete the edge it was just given; the
        removed record keeps its ``next`` so the walk goes on.
        """
        if not 0 <= v < self._n:
            raise IndexError(f"vertex slot {v} out of range 0..{self._n - 1}")
        edge = self._records[v].next
        while edge >= self._n:
            yield edge
            edge = self._records[edge].next

    def edges(self) -> List[Tuple[int, int]]:
        """Present edges as (head, tail) pairs, one per undirected edge."""
        res: List[Tuple[int, int]] = []
        self.for_each_edge(lambda e: res.append((self.head(e), self.tail(e))))
        return res

    def for_each_vertex(self, f: Callable[[int], Optional[bool]]) -> bool:
        """Call f(slot) for every vertex; f returns False to stop.

        Result is True iff every vertex was processed.
        """
        for idx in self.vertices():
            if f(idx) is False:
                return False
        return True

    def for_each_adjacent_edge(self, v: int, f: Callable[[int], Optional[bool]]) -> bool:
        for edge in self.adjacent_edges(v):
            if f(edge) is False:
                return False
        return True

    def for_each_edge(self, f: Callable[[int], Optional[bool]]) -> bool:
        """Call f once per present undirected edge, on its half with head > tail.

        This cannot be a plain loop over the edge records because some of
        them are pseudo-deleted.
        """
        for v in self.vertices():
            for edge in self.adjacent_edges(v):
                if self._records[edge].vidx > self._records[edge ^ 1].vidx:
                    if f(edge) is False:
                        return False
        return True

    # ------------------------------------------------------------------
    # delete and undelete
    # ------------------------------------------------------------------

    def edelete(self, e: int) -> None:
        """Pseudo-delete the edge containing record *e*; records stay unchanged."""
        edge = even_one(self._check_edge(e))
        pair = (edge - self._start) // 2
        if not self._linked[pair]:
            raise RuntimeError(f"edge {edge} is already deleted")
        self._degrees[self._records[edge].vidx - 1] -= 1
        self._degrees[self._records[edge ^ 1].vidx - 1] -= 1
        self._unlink(edge)
        self._unlink(edge ^ 1)
        self._linked[pair] = False

    def eundelete(self, e: int) -> None:
        """Link a pseudo-deleted edge back in."""
        edge = even_one(self._check_edge(e))
        if self._linked[(edge - self._start) // 2]:
            raise RuntimeError(f"edge {edge} is not deleted")
        self._relink(edge)

    def save_links(self) -> List[Tuple[int, int]]:
        """Snapshot of every record's (next, prev), for :meth:`restore_links`."""
        return [(r.next, r.prev) for r in self._records]

    def restore_links(self, links: List[Tuple[int, int]]) -> None:
        """Write back a :meth:`save_links` snapshot.

        Undelete restores adjacency sets but not list order once deletions
        interleave; this puts the exact order back.  The set of present edges
        must be the one the snapshot was taken with.
        """
        if len(links) != len(self._records):
            raise ValueError(
                f"snapshot has {len(links)} records, graph has {len(self._records)}"
            )
        for rec, (nxt, prev) in zip(self._records, links):
            rec.next = nxt
            rec.prev = prev

    # ------------------------------------------------------------------
    # relations
    # ------------------------------------------------------------------

    def equals(self, rhs: "Graph") -> bool:
        """Same degrees and, per vertex, the same set of neighbours.

        Cheaper than isomorphism and stricter (labels matter).  Not quite
        right for multigraphs.
        """
        if self._n != rhs._n:
            return False
        for v in self.vertices():
            if self._degrees[v] != rhs._degrees[v]:
                return False
            mine = {self._records[e ^ 1].vidx for e in self.adjacent_edges(v)}
            theirs = {rhs._records[e ^ 1].vidx for e in rhs.adjacent_edges(v)}
            if mine != theirs:
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.equals(other)

    def __repr__(self) -> str:
        return f"Graph(nvert={self._n}, edges={self.npresent()}/{self.nedges()})"

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _check_vertex(self, v: int) -> None:
        if not 1 <= v <= self._n:
            raise ValueError(f"vertex {v} out of range 1..{self._n}")

    def _check_edge(self, e: int) -> int:
        if not self._start <= e < len(self._records):
            raise IndexError(f"edge record {e} out of range {self._start}..{len(self._records) - 1}")
        return e

    def _is_linked_record(self, idx: int) -> bool:
        if idx < self._n:
            return True
        if idx < self._start:
            return False
        return self._linked[(idx - self._start) // 2]

    def _unlink(self, edge: int) -> None:
        rec = self._records[edge]
        self._records[rec.prev].next = rec.next
        self._records[rec.next].prev = rec.prev

    def _splice(self, edge: int, prev: int, nxt: int) -> None:
        rec = self._records[edge]
        rec.prev = prev
        rec.next = nxt
        self._records[prev].next = edge
        self._records[nxt].prev = edge

    def _link(self, edge: int) -> None:
        # put both halves at the end of their lists
        for half in (edge, edge ^ 1):
            owner = self._records[half].vidx - 1
            self._splice(half, self._records[owner].prev, owner)
            self._degrees[owner] += 1
        self._linked[(edge - self._start) // 2] = True

    def _relink(self, edge: int) -> None:
        # Each half goes back between its old neighbours when they are
        # still adjacent (so strictly LIFO delete/undelete sequences restore
        # list order exactly), otherwise at the end of its list.
        for half in (edge, edge ^ 1):
            rec = self._records[half]
            owner = rec.vidx - 1
            prev, nxt = rec.prev, rec.next
            if not (
                self._is_linked_record(prev)
                and self._is_linked_record(nxt)
                and self._records[prev].next == nxt
            ):
                prev, nxt = self._records[owner].prev, owner
            self._splice(half, prev, nxt)
            self._degrees[owner] += 1
        self._linked[(edge - self._start) // 2] = True
