"""
Algorithm interfaces for weighted graphs.

Keeps the shortest-path and spanning-tree algorithms separate from the graph
data structure so alternative implementations can be swapped in.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from edges import WeightedEdge
from weighted_graph import WeightedGraph


class ShortestPathEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def dijkstra(
        self, graph: WeightedGraph, root: int, start_distance: Any = 0
    ) -> Tuple[List[Optional[Any]], Dict[int, WeightedEdge]]:
        """
        Compute shortest distances from the vertex at index root to every vertex.

        Args:
            graph: the graph to search; never mutated.
            root: index of the root vertex.
            start_distance: distance assigned to the root (usually 0).

        Returns:
            (distances, path_dict) where distances is indexed by vertex index
            (None for unreachable vertices) and path_dict maps each reached
            vertex index to the edge used to reach it.
        """
        raise NotImplementedError

    def dijkstra_from_vertex(
        self, graph: WeightedGraph, root: Any, start_distance: Any = 0
    ) -> Tuple[List[Optional[Any]], Dict[int, WeightedEdge]]:
        """
        Same as dijkstra, with the root given by value (first occurrence).
        """
        return self.dijkstra(graph, graph.require_index(root), start_distance)


class SpanningTreeEngine(ABC):
    """
    Interface for minimum-spanning-tree construction.
    """

    @abstractmethod
    def mst(self, graph: WeightedGraph, start: int = 0) -> Optional[List[WeightedEdge]]:
        """
        Build a minimum spanning tree grown from vertex index start.

        Returns:
            The tree's edges, or None if start is not a valid index. For a
            disconnected graph only start's component is spanned.
        """
        raise NotImplementedError
