"""Directed graph over integer vertices stored as adjacency lists."""

from __future__ import annotations

import bisect
from typing import Iterable, TextIO

from walrs.utils import extract_vert_and_edge_counts


def invalid_vertex_msg(v: int, max_v: int) -> str:
    """Return the error message used for out-of-range vertices."""
    return f"Vertex {v} is out of index range 0-{max_v}"


class Digraph:
    """A directed graph whose vertices are the integers ``0..vert_count``."""

    def __init__(self, vert_count: int = 0) -> None:
        self._adj_lists: list[list[int]] = [[] for _ in range(vert_count)]
        self._in_degree: list[int] = [0] * vert_count
        self._edge_count = 0

    def __repr__(self) -> str:
        return (
            f"Digraph(vert_count={self.vert_count()}, "
            f"edge_count={self.edge_count()}, adj={self._adj_lists!r})"
        )

    def vert_count(self) -> int:
        """Return the number of vertices."""
        return len(self._adj_lists)

    def edge_count(self) -> int:
        """Return the number of edges."""
        return self._edge_count

    def adj(self, v: int) -> tuple[int, ...]:
        """Return the sorted vertices adjacent to ``v``."""
        self.validate_vertex(v)
        return tuple(self._adj_lists[v])

    def outdegree(self, v: int) -> int:
        """Return the number of edges leaving ``v``."""
        self.validate_vertex(v)
        return len(self._adj_lists[v])

    def indegree(self, v: int) -> int:
        """Return the number of edges entering ``v``."""
        self.validate_vertex(v)
        return self._in_degree[v]

    def add_vertex(self, v: int) -> int:
        """Grow the graph, if needed, so that ``v`` is a valid vertex; return ``v``."""
        if v < 0:
            raise IndexError(invalid_vertex_msg(v, max(self.vert_count() - 1, 0)))
        missing = v + 1 - len(self._adj_lists)
        if missing > 0:
            self._adj_lists.extend([] for _ in range(missing))
            self._in_degree.extend([0] * missing)
        return v

    def add_edge(self, v: int, w: int) -> "Digraph":
        """Add an edge from ``v`` to ``w``; both must already be vertices."""
        self.validate_vertex(v)
        self.validate_vertex(w)
        bisect.insort(self._adj_lists[v], w)
        self._edge_count += 1
        self._in_degree[w] += 1
        return self

    def validate_vertex(self, v: int) -> "Digraph":
        """Raise ``IndexError`` unless ``v`` is a vertex of this graph."""
        length = len(self._adj_lists)
        if not 0 <= v < length:
            raise IndexError(invalid_vertex_msg(v, length - 1 if length > 0 else 0))
        return self

    def reverse(self) -> "Digraph":
        """Return a copy of this graph with every edge reversed."""
        out = Digraph(self.vert_count())
        for v, adjacent in enumerate(self._adj_lists):
            for w in adjacent:
                out.add_edge(w, v)
        return out

    def digest_lines(self, lines: Iterable[str]) -> "Digraph":
        """Add one edge per line, each line holding ``from to`` vertex numbers.

        Blank lines are skipped; all vertices must already be in the graph.
        """
        for line in lines:
            tokens = line.split()
            if not tokens:
                continue
            if len(tokens) < 2:
                raise ValueError(f"Edge line needs two vertices: {line.strip()!r}")
            try:
                v, w = int(tokens[0]), int(tokens[1])
            except ValueError as exc:
                raise ValueError(f"Invalid edge line: {line.strip()!r}") from exc
            self.add_edge(v, w)
        return self

    @classmethod
    def from_reader(cls, reader: TextIO) -> "Digraph":
        """Build a graph from text: vertex count, edge count, then edge lines."""
        vert_count, _ = extract_vert_and_edge_counts(reader)
        graph = cls(vert_count)
        graph.digest_lines(reader)
        return graph