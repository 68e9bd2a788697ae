"""
Concrete unweighted graph.

Adds convenience constructors for UnweightedEdge on top of the shared Graph
adjacency-list behaviour.
"""

from typing import TypeVar

from edges import UnweightedEdge
from graph import Graph

V = TypeVar("V")


class UnweightedGraph(Graph[V, UnweightedEdge]):
    """Graph whose edges carry no weight."""

    # --- Mutation API --------------------------------------------------------

    def add_edge_by_indices(self, u: int, v: int) -> None:
        self.add_edge(UnweightedEdge(u, v))

    def add_edge_by_vertices(self, first: V, second: V) -> None:
        """
        Connect the first occurrences of two vertex values.
        Raises InvalidVertexError if either value is missing.
        """
        self.add_edge(UnweightedEdge(self.require_index(first), self.require_index(second)))

    # --- Graph interface -----------------------------------------------------

    def describe_neighbors(self, index: int) -> str:
        return str(self.neighbors_for_index(index))
