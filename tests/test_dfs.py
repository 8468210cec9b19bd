import pytest

from walrs.dfs import DigraphDFS, vertex_marked
from walrs.digraph import Digraph
from walrs.symbol_digraph import DisymGraph
from walrs.utils import triangular_num


def _vowel_graphs():
    vowels = list(reversed("a e i o u".split()))
    chain = DisymGraph()
    complete = DisymGraph()
    limit = len(vowels) - 1
    for i, v in enumerate(vowels):
        chain.add_edge(v, [vowels[i + 1]] if i < limit else [])
        complete.add_edge(v, vowels[i + 1:] if i < limit else [])
    return vowels, chain, complete


def test_dfs_with_symbol_dag():
    vowels, chain, complete = _vowel_graphs()
    v_len = len(vowels)

    assert chain.vert_count() == v_len
    assert chain.edge_count() == v_len - 1
    assert complete.vert_count() == v_len
    assert complete.edge_count() == triangular_num(v_len - 1)

    for i in range(v_len):
        dfs = DigraphDFS(chain.graph(), i)
        dfs_2 = DigraphDFS(complete.graph(), i)
        for j in range(i + 1, v_len):
            assert dfs.marked(j) is True
            assert dfs_2.marked(j) is True
        for j in range(i):
            assert dfs.marked(j) is False
            assert dfs_2.marked(j) is False
        assert dfs.count() == v_len - i
        assert dfs_2.count() == v_len - i
        with pytest.raises(IndexError):
            dfs.marked(99)
        with pytest.raises(IndexError):
            dfs_2.marked(99)


def test_source_is_marked():
    g = Digraph(3)
    dfs = DigraphDFS(g, 1)
    assert dfs.marked(1) is True
    assert dfs.marked(0) is False
    assert dfs.count() == 1


def test_invalid_source_vertex():
    g = Digraph(3)
    with pytest.raises(IndexError, match="Vertex 5 is out of index range 0-2"):
        DigraphDFS(g, 5)


def test_cycle_is_handled():
    g = Digraph(4)
    g.add_edge(0, 1).add_edge(1, 2).add_edge(2, 0)
    dfs = DigraphDFS(g, 1)
    assert [dfs.marked(i) for i in range(4)] == [True, True, True, False]
    assert dfs.count() == 3


def test_long_chain_does_not_overflow():
    n = 5000
    g = Digraph(n)
    for i in range(n - 1):
        g.add_edge(i, i + 1)
    dfs = DigraphDFS(g, 0)
    assert dfs.count() == n
    assert dfs.marked(n - 1) is True


def test_vertex_marked():
    marked = [True, False]
    assert vertex_marked(marked, 0) is True
    assert vertex_marked(marked, 1) is False
    with pytest.raises(IndexError, match="2 is out of range"):
        vertex_marked(marked, 2)