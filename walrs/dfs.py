"""Depth-first reachability search over a ``Digraph``."""

from __future__ import annotations

from typing import Iterator, Sequence

from walrs.digraph import Digraph


def vertex_marked(marked: Sequence[bool], i: int) -> bool:
    """Return ``marked[i]``, raising ``IndexError`` if ``i`` is out of range."""
    if not 0 <= i < len(marked):
        raise IndexError(f"{i} is out of range")
    return marked[i]


def _tree_edges(graph: Digraph, source: int, marked: list[bool]) -> Iterator[tuple[int, int]]:
    """Mark every vertex reachable from ``source`` and yield each tree edge ``(v, w)``.

    Vertices are visited in the same order as a recursive depth-first search
    that follows adjacency lists in ascending order.
    """
    graph.validate_vertex(source)
    marked[source] = True
    stack = [(source, iter(graph.adj(source)))]
    while stack:
        v, neighbours = stack[-1]
        for w in neighbours:
            if not marked[w]:
                marked[w] = True
                yield v, w
                stack.append((w, iter(graph.adj(w))))
                break
        else:
            stack.pop()


class DigraphDFS:
    """Record of the vertices reachable from a source vertex.

    Construction takes time proportional to ``V + E``; queries are constant time.
    """

    def __init__(self, graph: Digraph, source_vertex: int) -> None:
        self._marked = [False] * graph.vert_count()
        graph.validate_vertex(source_vertex)
        self._count = 1 + sum(1 for _ in _tree_edges(graph, source_vertex, self._marked))

    def __repr__(self) -> str:
        return f"DigraphDFS(count={self._count}, marked={self._marked!r})"

    def marked(self, i: int) -> bool:
        """Return whether a path from the source vertex to ``i`` exists."""
        return vertex_marked(self._marked, i)

    def count(self) -> int:
        """Return the number of vertices reachable from the source vertex."""
        return self._count