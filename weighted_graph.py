"""
Concrete weighted graph.

Weights may be any type supporting ordering and addition (int, float,
Fraction, ...). Dijkstra and the spanning-tree engines operate on this type.
"""

from typing import List, Tuple, TypeVar

from edges import WeightedEdge
from graph import Graph

V = TypeVar("V")
W = TypeVar("W")


class WeightedGraph(Graph[V, WeightedEdge[W]]):
    """Graph whose edges carry a comparable, summable weight."""

    # --- Mutation API --------------------------------------------------------

    def add_edge_by_indices(self, u: int, v: int, weight: W) -> None:
        self.add_edge(WeightedEdge(u, v, weight))

    def add_edge_by_vertices(self, first: V, second: V, weight: W) -> None:
        """
        Connect the first occurrences of two vertex values. O(n) lookup.
        Raises InvalidVertexError if either value is missing.
        """
        self.add_edge(WeightedEdge(self.require_index(first), self.require_index(second), weight))

    # --- Queries -------------------------------------------------------------

    def neighbors_for_index_with_weights(self, index: int) -> List[Tuple[V, W]]:
        """Neighbouring vertex values paired with the weight of the connecting edge."""
        return [(self.vertex_at(edge.v), edge.weight) for edge in self.edges_for_index(index)]

    def describe_neighbors(self, index: int) -> str:
        return str(self.neighbors_for_index_with_weights(index))
