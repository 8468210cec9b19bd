import io

import pytest

from walrs.digraph import Digraph
from walrs.symbol_digraph import DisymGraph

WORDS = "all your base are belong to us".split()
VOWELS = "a e i o u".split()


def _chain(words):
    dsg = DisymGraph()
    for left, right in zip(words, words[1:]):
        dsg.add_edge(left, [right])
    return dsg


def test_new():
    dsg = DisymGraph()
    dsg.add_edge("User", ["Guest"])
    dsg.add_edge("Admin", ["User"])
    assert dsg.vert_count() == 3
    assert dsg.edge_count() == 2
    assert dsg.adj("Admin") == ["User"]
    assert dsg.adj("User") == ["Guest"]


def test_vert_count():
    dsg = _chain(WORDS)
    assert dsg.vert_count() == len(WORDS)


def test_edge_count():
    dsg = _chain(WORDS)
    assert dsg.edge_count() == len(WORDS) - 1


def test_indegree():
    dsg = DisymGraph()
    for i, v in enumerate(VOWELS):
        dsg.add_edge(v, VOWELS[i + 1:])
        assert dsg.indegree(i) == i


def test_outdegree():
    dsg = DisymGraph()
    limit = len(VOWELS) - 1
    for i, v in enumerate(VOWELS):
        dsg.add_edge(v, VOWELS[i + 1:])
        assert dsg.outdegree(i) == limit - i


def test_degree_out_of_range_raises():
    dsg = DisymGraph()
    with pytest.raises(IndexError, match="Vertex 5 is out of index range 0-0"):
        dsg.indegree(5)


def test_adj_indices():
    dsg = DisymGraph()
    assert dsg.adj_indices("non-existing-symbol") is None
    for i, v in enumerate(VOWELS):
        weights = VOWELS[i + 1:]
        dsg.add_edge(v, weights)
        adj_indices = dsg.adj_indices(v)
        assert adj_indices is not None
        assert len(adj_indices) == len(weights)
        assert all(dsg.name(x) in weights for x in adj_indices)


def test_adj_unknown_symbol():
    dsg = _chain(WORDS)
    assert dsg.adj("missing") is None
    assert dsg.adj("all") == ["your"]


def test_contains():
    dsg = DisymGraph()
    assert dsg.contains("hello") is False
    dsg.add_vertex("abc")
    dsg.add_vertex("efg")
    assert dsg.contains("abc") is True
    assert dsg.contains("efg") is True
    assert "abc" in dsg
    assert "hello" not in dsg


def test_index():
    dsg = DisymGraph()
    assert dsg.index("abc") is None
    dsg.add_vertex("abc")
    dsg.add_vertex("efg")
    assert dsg.index("abc") == 0
    assert dsg.index("efg") == 1


def test_indices():
    dsg = DisymGraph()
    assert dsg.indices(WORDS) is None
    dsg.add_vertex("abc")
    dsg.add_vertex("efg")
    assert dsg.indices(["abc", "efg"]) == [0, 1]
    assert dsg.indices(["efg", "missing"]) == [1]
    assert dsg.indices([]) is None


def test_name():
    dsg = DisymGraph()
    assert dsg.name(0) is None
    dsg.add_vertex("abc")
    dsg.add_vertex("efg")
    assert dsg.name(0) == "abc"
    assert dsg.name(1) == "efg"
    assert dsg.name(2) is None
    assert dsg.name(-1) is None


def test_names():
    dsg = DisymGraph()
    indices = list(range(len(WORDS)))
    assert dsg.names(indices) is None
    dsg.add_vertex("abc")
    dsg.add_vertex("efg")
    assert dsg.names(indices) == ["abc", "efg"]
    assert dsg.names([]) is None


def test_add_vertex():
    dsg = DisymGraph()
    for s in WORDS:
        dsg.add_vertex(s)
    assert dsg.vert_count() == len(WORDS)
    assert dsg.add_vertex(WORDS[0]) == 0
    assert dsg.vert_count() == len(WORDS)


def test_has_vertex():
    dsg = DisymGraph()
    assert dsg.has_vertex("abc") is False
    dsg.add_vertex("abc")
    dsg.add_vertex("efg")
    assert dsg.has_vertex("abc") is True
    assert dsg.has_vertex("efg") is True
    assert dsg.has_vertex("non-existent") is False


def test_validate_vertex_returns_self():
    dsg = _chain(WORDS)
    assert dsg.validate_vertex("all") is dsg
    assert dsg.validate_vertex("missing") is dsg


def test_add_edge():
    dsg = _chain(WORDS)
    symbol_limit = len(WORDS) - 1
    assert dsg.edge_count() == len(WORDS) - 1

    limit = len(VOWELS) - 1
    for i, v in enumerate(VOWELS):
        index = i + symbol_limit + 1
        dsg.add_edge(v, VOWELS[i + 1:])
        assert dsg.indegree(index) == i
        assert dsg.outdegree(index) == limit - i

    assert dsg.edge_count() == len(WORDS) - 1 + len(VOWELS) * 2
    assert dsg.vert_count() == len(WORDS) + len(VOWELS)


def test_reverse():
    dsg = DisymGraph()
    symbol_limit = len(WORDS) - 1
    for i, s in enumerate(WORDS):
        dsg.add_edge(s, WORDS[i + 1:])
        assert dsg.indegree(i) == i
        assert dsg.outdegree(i) == symbol_limit - i

    reversed_graph = dsg.reverse()
    assert reversed_graph.vert_count() == dsg.vert_count()
    assert reversed_graph.edge_count() == dsg.edge_count()

    for i in range(len(WORDS)):
        name = reversed_graph.name(i)
        assert reversed_graph.adj(name) == WORDS[:i]
        assert reversed_graph.outdegree(i) == dsg.indegree(i)
        assert reversed_graph.indegree(i) == dsg.outdegree(i)

    # The original graph is left untouched.
    assert dsg.adj("all") == WORDS[1:]


def test_graph_returns_index_graph():
    dsg = _chain(["a", "b", "c"])
    graph = dsg.graph()
    assert isinstance(graph, Digraph)
    assert graph.adj(0) == (1,)
    assert graph.adj(1) == (2,)


def test_digest_lines():
    dsg = DisymGraph()
    dsg.digest_lines(["x y z", "", "y z"])
    assert dsg.vert_count() == 3
    assert dsg.edge_count() == 3
    assert dsg.adj("x") == ["y", "z"]
    assert dsg.adj("y") == ["z"]
    assert dsg.adj("z") == []


def test_from_reader():
    text = "JFK MCO\nORD DEN\nORD HOU\nDFW PHX\nJFK ATL\n"
    dsg = DisymGraph.from_reader(io.StringIO(text))
    assert dsg.vert_count() == 8
    assert dsg.edge_count() == 5
    assert dsg.adj("ORD") == ["DEN", "HOU"]
    assert dsg.adj("JFK") == ["MCO", "ATL"]
    assert dsg.index("JFK") == 0