"""Small numeric and parsing helpers shared by the graph modules."""

from __future__ import annotations

from typing import TextIO


def triangular_num(n: int) -> int:
    """Return the nth triangular number, ``n * (n + 1) / 2``."""
    return n * (n + 1) // 2


def _read_count(reader: TextIO, label: str) -> int:
    line = reader.readline()
    if not line:
        raise ValueError(f'Unable to read "{label}" line from buffer')
    text = line.strip()
    try:
        value = int(text)
    except ValueError as exc:
        raise ValueError(f'Invalid "{label}" value: {text!r}') from exc
    if value < 0:
        raise ValueError(f'Invalid "{label}" value: {text!r}')
    return value


def extract_vert_and_edge_counts(reader: TextIO) -> tuple[int, int]:
    """Read the vertex count and edge count from the first two lines of ``reader``.

    The reader is left positioned at the first edge line.
    """
    vertices_count = _read_count(reader, "vertex count")
    edges_count = _read_count(reader, "edge count")
    return vertices_count, edges_count