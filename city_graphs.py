"""
Fixture graphs of the 15 largest US metropolitan statistical areas.

The unweighted graph records which cities are directly connected; the
weighted graph adds approximate road distances in miles. Used by the demo
runner and the tests.
"""

from typing import Tuple

from unweighted_graph import UnweightedGraph
from weighted_graph import WeightedGraph

CITIES: Tuple[str, ...] = (
    "Seattle",
    "San Francisco",
    "Los Angeles",
    "Riverside",
    "Phoenix",
    "Chicago",
    "Boston",
    "New York",
    "Atlanta",
    "Miami",
    "Dallas",
    "Houston",
    "Detroit",
    "Philadelphia",
    "Washington",
)

CITY_DISTANCES: Tuple[Tuple[str, str, int], ...] = (
    ("Seattle", "Chicago", 1737),
    ("Seattle", "San Francisco", 678),
    ("San Francisco", "Riverside", 386),
    ("San Francisco", "Los Angeles", 348),
    ("Los Angeles", "Riverside", 50),
    ("Los Angeles", "Phoenix", 357),
    ("Riverside", "Phoenix", 307),
    ("Riverside", "Chicago", 1704),
    ("Phoenix", "Dallas", 887),
    ("Phoenix", "Houston", 1015),
    ("Dallas", "Chicago", 805),
    ("Dallas", "Atlanta", 721),
    ("Dallas", "Houston", 225),
    ("Houston", "Atlanta", 702),
    ("Houston", "Miami", 968),
    ("Atlanta", "Chicago", 588),
    ("Atlanta", "Washington", 543),
    ("Atlanta", "Miami", 604),
    ("Miami", "Washington", 923),
    ("Chicago", "Detroit", 238),
    ("Detroit", "Boston", 613),
    ("Detroit", "Washington", 396),
    ("Detroit", "New York", 482),
    ("Boston", "New York", 190),
    ("New York", "Philadelphia", 81),
    ("Philadelphia", "Washington", 123),
)


def build_city_graph() -> UnweightedGraph[str]:
    graph: UnweightedGraph[str] = UnweightedGraph(CITIES)
    for first, second, _ in CITY_DISTANCES:
        graph.add_edge_by_vertices(first, second)
    return graph


def build_weighted_city_graph() -> WeightedGraph[str, int]:
    graph: WeightedGraph[str, int] = WeightedGraph(CITIES)
    for first, second, miles in CITY_DISTANCES:
        graph.add_edge_by_vertices(first, second, miles)
    return graph
