"""
Unit tests for JarnikSpanningTreeEngine.
"""

import logging

import numpy as np
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import minimum_spanning_tree

from city_graphs import build_weighted_city_graph
from edges import total_weight
from mst_engine import JarnikSpanningTreeEngine, mst
from weighted_graph import WeightedGraph


def _textbook() -> WeightedGraph[str, int]:
    g: WeightedGraph[str, int] = WeightedGraph(["A", "B", "C", "D", "E"])
    for u, v, w in [(0, 1, 2), (0, 3, 6), (1, 2, 3), (1, 3, 8), (1, 4, 5), (2, 4, 7), (3, 4, 9)]:
        g.add_edge_by_indices(u, v, w)
    return g


def _upper_triangle(g: WeightedGraph) -> np.ndarray:
    matrix = np.zeros((g.vertex_count, g.vertex_count))
    for u in range(g.vertex_count):
        for edge in g.edges_for_index(u):
            a, b = sorted((edge.u, edge.v))
            matrix[a, b] = edge.weight
    return matrix


def test_mst_small_graph():
    tree = mst(_textbook())

    assert tree is not None
    assert len(tree) == 4
    assert total_weight(tree) == 16
    assert sorted(tuple(sorted((e.u, e.v))) for e in tree) == [(0, 1), (0, 3), (1, 2), (1, 4)]


def test_mst_weight_is_independent_of_start():
    g = _textbook()

    weights = {total_weight(mst(g, start)) for start in range(g.vertex_count)}

    assert weights == {16}


def test_city_mst():
    g = build_weighted_city_graph()

    engine = JarnikSpanningTreeEngine()
    tree = engine.mst(g)

    assert tree is not None
    assert len(tree) == g.vertex_count - 1
    assert total_weight(tree) == 5372
    reached = {0} | {e.v for e in tree}
    assert reached == set(range(g.vertex_count))
    assert engine.last_heap_pops == engine.last_heap_pushes
    assert engine.last_stale_skipped == engine.last_heap_pops - len(tree)


def test_city_mst_matches_scipy():
    g = build_weighted_city_graph()

    expected = minimum_spanning_tree(csr_matrix(_upper_triangle(g))).sum()

    assert total_weight(mst(g)) == expected


def test_mst_disconnected_graph_spans_start_component():
    g: WeightedGraph[str, int] = WeightedGraph(["A", "B", "C", "D"])
    g.add_edge_by_indices(0, 1, 3)
    g.add_edge_by_indices(2, 3, 1)

    tree = mst(g, 0)

    assert tree is not None
    assert len(tree) == 1
    assert (tree[0].u, tree[0].v, tree[0].weight) == (0, 1, 3)


def test_mst_single_vertex_is_empty():
    g: WeightedGraph[str, int] = WeightedGraph(["A"])

    assert mst(g) == []


def test_mst_invalid_start_returns_none(caplog):
    g = _textbook()

    with caplog.at_level(logging.WARNING, logger="playground.mst"):
        assert mst(g, 5) is None
        assert mst(g, -1) is None

    assert "invalid" in caplog.text
