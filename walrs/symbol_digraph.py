"""Directed graph whose vertices are named by strings."""

from __future__ import annotations

from typing import Iterable, Sequence, TextIO

from walrs.digraph import Digraph


class DisymGraph:
    """A directed graph of string symbols backed by an integer ``Digraph``."""

    def __init__(self) -> None:
        self._vertices: list[str] = []
        self._positions: dict[str, int] = {}
        self._graph = Digraph(0)

    def __repr__(self) -> str:
        return f"DisymGraph(vertices={self._vertices!r}, graph={self._graph!r})"

    def vert_count(self) -> int:
        """Return the number of vertices."""
        return self._graph.vert_count()

    def edge_count(self) -> int:
        """Return the number of edges."""
        return self._graph.edge_count()

    def outdegree(self, n: int) -> int:
        """Return the number of edges leaving vertex index ``n``."""
        return self._graph.outdegree(n)

    def indegree(self, n: int) -> int:
        """Return the number of edges entering vertex index ``n``."""
        return self._graph.indegree(n)

    def adj(self, symbol_name: str) -> list[str] | None:
        """Return the symbols adjacent to ``symbol_name``, or ``None`` if it is unknown."""
        indices = self.adj_indices(symbol_name)
        if indices is None:
            return None
        return [self._vertices[i] for i in indices]

    def adj_indices(self, symbol_name: str) -> tuple[int, ...] | None:
        """Return the indices adjacent to ``symbol_name``, or ``None`` if it is unknown."""
        i = self.index(symbol_name)
        if i is None:
            return None
        try:
            return self._graph.adj(i)
        except IndexError:
            return None

    def graph(self) -> Digraph:
        """Return the underlying index graph."""
        return self._graph

    def contains(self, symbol_name: str) -> bool:
        """Return whether ``symbol_name`` is a vertex of the graph."""
        return self.has_vertex(symbol_name)

    def __contains__(self, symbol_name: object) -> bool:
        return isinstance(symbol_name, str) and self.has_vertex(symbol_name)

    def index(self, symbol_name: str) -> int | None:
        """Return the index of ``symbol_name``, or ``None`` if it is unknown."""
        return self._positions.get(symbol_name)

    def indices(self, vs: Sequence[str]) -> list[int] | None:
        """Return indices of the known symbols in ``vs``.

        Returns ``None`` when ``vs`` is empty or the graph has no vertices.
        """
        if not vs or self.vert_count() == 0:
            return None
        return [i for i in map(self.index, vs) if i is not None]

    def name(self, symbol_idx: int) -> str | None:
        """Return the symbol at ``symbol_idx``, or ``None`` if out of range."""
        if 0 <= symbol_idx < len(self._vertices):
            return self._vertices[symbol_idx]
        return None

    def names(self, indices: Sequence[int]) -> list[str] | None:
        """Return symbols for the valid indices in ``indices``.

        Returns ``None`` when ``indices`` is empty or the graph has no vertices.
        """
        if not indices or self.vert_count() == 0:
            return None
        return [n for n in map(self.name, indices) if n is not None]

    def add_vertex(self, v: str) -> int:
        """Add symbol ``v`` if it is new and return its index."""
        existing = self.index(v)
        if existing is not None:
            return existing
        i = len(self._vertices)
        self._vertices.append(v)
        self._positions[v] = i
        self._graph.add_vertex(i)
        return i

    def has_vertex(self, value: str) -> bool:
        """Return whether ``value`` is a vertex of the graph."""
        return value in self._positions

    def validate_vertex(self, v: str) -> "DisymGraph":
        """Check a known symbol's index against the index graph; return ``self``."""
        i = self.index(v)
        if i is not None:
            self._graph.validate_vertex(i)
        return self

    def add_edge(self, vertex: str, weights: Iterable[str]) -> "DisymGraph":
        """Add edges from ``vertex`` to each symbol in ``weights``, adding vertices as needed."""
        v1 = self.add_vertex(vertex)
        for w in weights:
            v2 = self.add_vertex(w)
            self._graph.add_edge(v1, v2)
        return self

    def reverse(self) -> "DisymGraph":
        """Return a copy of this graph with every edge reversed."""
        out = DisymGraph()
        out._vertices = list(self._vertices)
        out._positions = dict(self._positions)
        out._graph = self._graph.reverse()
        return out

    def digest_lines(self, lines: Iterable[str]) -> "DisymGraph":
        """Add edges from lines of the form ``symbol adjacent1 adjacent2 ...``.

        Blank lines are skipped.
        """
        for line in lines:
            tokens = line.split()
            if not tokens:
                continue
            self.add_edge(tokens[0], tokens[1:])
        return self

    @classmethod
    def from_reader(cls, reader: TextIO) -> "DisymGraph":
        """Build a symbol graph from text holding one adjacency line per vertex."""
        graph = cls()
        graph.digest_lines(reader)
        return graph