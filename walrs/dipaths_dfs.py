"""Depth-first search that also records paths from a source vertex."""

from __future__ import annotations

from walrs.dfs import _tree_edges, vertex_marked
from walrs.digraph import Digraph


class DigraphDipathsDFS:
    """Reachability and paths from a source vertex, found by depth-first search."""

    def __init__(self, graph: Digraph, source_vertex: int) -> None:
        vert_count = graph.vert_count()
        self._marked = [False] * vert_count
        self._edge_to: list[int | None] = [None] * vert_count
        self._source_vertex = source_vertex
        graph.validate_vertex(source_vertex)
        self._count = 1
        for v, w in _tree_edges(graph, source_vertex, self._marked):
            self._edge_to[w] = v
            self._count += 1

    def __repr__(self) -> str:
        return (
            f"DigraphDipathsDFS(source_vertex={self._source_vertex}, "
            f"count={self._count})"
        )

    def marked(self, i: int) -> bool:
        """Return whether a path from the source vertex to ``i`` exists."""
        return vertex_marked(self._marked, i)

    def has_path_to(self, i: int) -> bool:
        """Return whether a path from the source vertex to ``i`` exists."""
        return self.marked(i)

    def path_to(self, v: int) -> list[int] | None:
        """Return the path from ``v`` back to the source vertex, or ``None`` if unreachable.

        The list starts at ``v`` and ends at the source vertex; raises
        ``IndexError`` if ``v`` is out of range.
        """
        if not self.has_path_to(v):
            return None
        source = self._source_vertex
        path: list[int] = []
        x = v
        while x != source:
            path.append(x)
            parent = self._edge_to[x]
            x = source if parent is None else parent
        path.append(source)
        return path

    def count(self) -> int:
        """Return the number of vertices reachable from the source vertex."""
        return self._count