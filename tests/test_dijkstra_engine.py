"""
Unit tests for SimpleDijkstraEngine using WeightedGraph.
"""

import numpy as np
import pytest
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import dijkstra as csgraph_dijkstra

from city_graphs import CITIES, build_weighted_city_graph
from dijkstra_engine import SimpleDijkstraEngine, dijkstra, distance_array_to_vertex_dict
from edges import total_weight
from graph import InvalidVertexError
from paths import format_weighted_path, path_dict_to_path
from weighted_graph import WeightedGraph


def _diamond() -> WeightedGraph[str, int]:
    g: WeightedGraph[str, int] = WeightedGraph(["A", "B", "C", "D"])
    # A-B (1), A-C (4), B-C (2), B-D (5), C-D (1)
    g.add_edge_by_vertices("A", "B", 1)
    g.add_edge_by_vertices("A", "C", 4)
    g.add_edge_by_vertices("B", "C", 2)
    g.add_edge_by_vertices("B", "D", 5)
    g.add_edge_by_vertices("C", "D", 1)
    return g


def test_dijkstra_basic_paths():
    g = _diamond()

    engine = SimpleDijkstraEngine()
    distances, path_dict = engine.dijkstra(g, 0)

    # Shortest A->D is A->B->C->D with cost 4
    assert distances == [0, 1, 3, 4]
    assert 0 not in path_dict
    route = path_dict_to_path(0, 3, path_dict)
    assert [(e.u, e.v) for e in route] == [(0, 1), (1, 2), (2, 3)]
    assert total_weight(route) == 4


def test_dijkstra_skips_outdated_queue_entries():
    """C is queued at 4 then improved to 3; the first entry must be discarded."""
    g = _diamond()

    engine = SimpleDijkstraEngine()
    engine.dijkstra(g, 0)

    assert engine.last_stale_skipped >= 1
    assert engine.last_heap_pops == engine.last_heap_pushes
    assert engine.last_relaxed == engine.last_heap_pushes - 1
    assert engine.last_edges_examined == g.edge_count


def test_dijkstra_unreachable_vertex_is_none():
    g: WeightedGraph[str, float] = WeightedGraph(["A", "B", "C"])
    g.add_edge_by_indices(0, 1, 2.0)

    distances, path_dict = dijkstra(g, 0)

    assert distances == [0, 2.0, None]
    assert path_dict_to_path(0, 2, path_dict) == []


def test_dijkstra_directed_edges_are_one_way():
    g: WeightedGraph[str, int] = WeightedGraph(["A", "B"], directed=True)
    g.add_edge_by_indices(0, 1, 7)

    assert dijkstra(g, 0)[0] == [0, 7]
    assert dijkstra(g, 1)[0] == [None, 0]


def test_dijkstra_start_distance_offsets_everything():
    distances, _ = dijkstra(_diamond(), 0, start_distance=10)

    assert distances == [10, 11, 13, 14]


def test_dijkstra_invalid_root_raises():
    g = _diamond()

    with pytest.raises(InvalidVertexError):
        dijkstra(g, 4)
    with pytest.raises(InvalidVertexError):
        dijkstra(g, -1)
    with pytest.raises(InvalidVertexError):
        SimpleDijkstraEngine().dijkstra_from_vertex(g, "Z")


def test_dijkstra_vertex_value_as_root_raises():
    """dijkstra takes indices only; vertex values go through dijkstra_from_vertex."""
    g: WeightedGraph[str, int] = WeightedGraph(["A", "B"])
    g.add_edge_by_indices(0, 1, 3)

    with pytest.raises(InvalidVertexError):
        dijkstra(g, "A")
    assert SimpleDijkstraEngine().dijkstra_from_vertex(g, "A")[0] == [0, 3]


def test_path_from_vertex_off_the_tree_is_empty():
    # tree rooted at 0: 0-1, 1-2, 0-3; 3 is not an ancestor of 2
    g: WeightedGraph[int, int] = WeightedGraph(range(4))
    g.add_edge_by_indices(0, 1, 1)
    g.add_edge_by_indices(1, 2, 1)
    g.add_edge_by_indices(0, 3, 1)

    _, path_dict = dijkstra(g, 0)

    assert path_dict_to_path(3, 2, path_dict) == []
    assert len(path_dict_to_path(0, 2, path_dict)) == 2


def test_city_distances_from_los_angeles():
    g = build_weighted_city_graph()

    distances, path_dict = SimpleDijkstraEngine().dijkstra_from_vertex(g, "Los Angeles")
    by_city = distance_array_to_vertex_dict(g, distances)

    assert by_city == {
        "Seattle": 1026,
        "San Francisco": 348,
        "Los Angeles": 0,
        "Riverside": 50,
        "Phoenix": 357,
        "Chicago": 1754,
        "Boston": 2605,
        "New York": 2474,
        "Atlanta": 1965,
        "Miami": 2340,
        "Dallas": 1244,
        "Houston": 1372,
        "Detroit": 1992,
        "Philadelphia": 2511,
        "Washington": 2388,
    }

    route = path_dict_to_path(g.index_of("Los Angeles"), g.index_of("Boston"), path_dict)
    assert [g.vertex_at(e.v) for e in route] == ["Riverside", "Chicago", "Detroit", "Boston"]
    assert format_weighted_path(g, route).splitlines()[-1] == "Total Weight: 2605"


def test_city_distances_match_scipy():
    g = build_weighted_city_graph()
    matrix = np.zeros((len(CITIES), len(CITIES)))
    for u in range(g.vertex_count):
        for edge in g.edges_for_index(u):
            matrix[edge.u, edge.v] = edge.weight

    expected = csgraph_dijkstra(csr_matrix(matrix), directed=True, indices=0)
    distances, _ = dijkstra(g, 0)

    assert distances == [int(d) for d in expected]


def test_random_graphs_match_scipy():
    """Random sparse graphs, including unreachable vertices, against scipy's Dijkstra."""
    rng = np.random.default_rng(7)
    for _ in range(5):
        n = 20
        g: WeightedGraph[int, int] = WeightedGraph(range(n))
        matrix = np.zeros((n, n))
        for _ in range(30):
            u, v = (int(x) for x in rng.integers(0, n, size=2))
            if u == v or matrix[u, v]:
                continue
            weight = int(rng.integers(1, 20))
            g.add_edge_by_indices(u, v, weight)
            matrix[u, v] = matrix[v, u] = weight

        root = int(rng.integers(0, n))
        expected = csgraph_dijkstra(csr_matrix(matrix), directed=True, indices=root)
        distances, _ = dijkstra(g, root)

        for ours, theirs in zip(distances, expected):
            if np.isinf(theirs):
                assert ours is None
            else:
                assert ours == theirs
