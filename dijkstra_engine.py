"""
Priority-queue based ShortestPathEngine implementation.

Runs Dijkstra's algorithm over a WeightedGraph using the shared PriorityQueue.
Weights are assumed non-negative; that precondition is not checked.
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from algorithms import ShortestPathEngine
from edges import WeightedEdge
from graph import InvalidVertexError
from logging_utils import get_logger
from priority_queue import PriorityQueue
from weighted_graph import WeightedGraph

W = TypeVar("W")

logger = get_logger("dijkstra")


@dataclass(frozen=True)
class DijkstraNode(Generic[W]):
    """Queue entry: a vertex index and the distance it was queued with."""

    vertex: int
    distance: W

    def __lt__(self, other: "DijkstraNode[W]") -> bool:
        return self.distance < other.distance  # type: ignore[operator]


class SimpleDijkstraEngine(ShortestPathEngine):
    """
    Single-source Dijkstra using a binary heap with lazy deletion.

    Complexity:
        O(E log E) over the vertices reachable from the root.
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        self.last_stale_skipped = 0

    def dijkstra(
        self, graph: WeightedGraph, root: int, start_distance: Any = 0
    ) -> Tuple[List[Optional[Any]], Dict[int, WeightedEdge]]:
        """
        Shortest distances from root plus the edge used to reach each vertex.

        A vertex's distance only changes when a strictly shorter path turns
        up; the vertex is then queued again rather than re-keyed, and the
        outdated entry is dropped when it is popped. The path dict never
        contains the root. Use paths.path_dict_to_path to turn it into a route.
        """
        # vertex values go through dijkstra_from_vertex
        if not isinstance(root, int) or not 0 <= root < graph.vertex_count:
            raise InvalidVertexError(
                f"Root index {root} out of range for graph with {graph.vertex_count} vertices."
            )

        self.last_edges_examined = 0
        self.last_relaxed = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        self.last_stale_skipped = 0

        distances: List[Optional[Any]] = [None] * graph.vertex_count
        distances[root] = start_distance
        path_dict: Dict[int, WeightedEdge] = {}
        pq: PriorityQueue[DijkstraNode] = PriorityQueue(ascending=True)
        pq.push(DijkstraNode(root, start_distance))
        self.last_heap_pushes += 1

        while pq:
            node = pq.pop()
            assert node is not None
            self.last_heap_pops += 1
            u, dist_u = node.vertex, node.distance

            # Skip outdated entries
            if dist_u != distances[u]:
                self.last_stale_skipped += 1
                continue

            for edge in graph.edges_for_index(u):
                self.last_edges_examined += 1
                alt = dist_u + edge.weight
                dist_v = distances[edge.v]
                if dist_v is None or alt < dist_v:
                    distances[edge.v] = alt
                    path_dict[edge.v] = edge
                    pq.push(DijkstraNode(edge.v, alt))
                    self.last_heap_pushes += 1
                    self.last_relaxed += 1

        logger.debug(
            "dijkstra from %d: %d pops, %d pushes, %d stale entries skipped",
            root,
            self.last_heap_pops,
            self.last_heap_pushes,
            self.last_stale_skipped,
        )
        return distances, path_dict


def dijkstra(
    graph: WeightedGraph, root: int, start_distance: Any = 0
) -> Tuple[List[Optional[Any]], Dict[int, WeightedEdge]]:
    """Convenience wrapper around a fresh SimpleDijkstraEngine."""
    return SimpleDijkstraEngine().dijkstra(graph, root, start_distance)


def distance_array_to_vertex_dict(graph: WeightedGraph, distances: List[Optional[Any]]) -> Dict[Any, Optional[Any]]:
    """
    Key a Dijkstra distance list by vertex value instead of index.

    Duplicate vertex values collapse onto one key; the later index wins.
    """
    return {graph.vertex_at(i): distance for i, distance in enumerate(distances)}
