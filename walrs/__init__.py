"""Directed graphs, depth-first search and role/resource/privilege access control lists."""

__version__ = "0.1.0"

__all__ = [
    "utils",
    "digraph",
    "symbol_digraph",
    "dfs",
    "dipaths_dfs",
    "rules",
    "acl",
    "acl_data",
]