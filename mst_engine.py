"""
Jarník/Prim minimum spanning tree over a WeightedGraph.

Based on the lazy Prim formulation from Sedgewick & Wayne, Algorithms 4th ed.
Edges are treated as undirected; on a directed graph the result may not be a
true minimum spanning tree.
"""

from typing import List, Optional

from algorithms import SpanningTreeEngine
from edges import WeightedEdge, total_weight
from logging_utils import get_logger
from priority_queue import PriorityQueue
from weighted_graph import WeightedGraph

logger = get_logger("mst")


class JarnikSpanningTreeEngine(SpanningTreeEngine):
    """
    Grows a tree from the start vertex, always taking the lightest edge that
    crosses from the visited set to an unvisited vertex.
    """

    def __init__(self) -> None:
        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        self.last_stale_skipped = 0

    def mst(self, graph: WeightedGraph, start: int = 0) -> Optional[List[WeightedEdge]]:
        if not 0 <= start < graph.vertex_count:
            logger.warning("mst start index %d invalid for graph with %d vertices", start, graph.vertex_count)
            return None

        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        self.last_stale_skipped = 0

        result: List[WeightedEdge] = []
        pq: PriorityQueue[WeightedEdge] = PriorityQueue(ascending=True)
        visited = [False] * graph.vertex_count

        def visit(index: int) -> None:
            visited[index] = True
            for edge in graph.edges_for_index(index):
                if not visited[edge.v]:
                    pq.push(edge)
                    self.last_heap_pushes += 1

        visit(start)

        while pq:
            edge = pq.pop()
            assert edge is not None
            self.last_heap_pops += 1
            # Both ends already in the tree
            if visited[edge.v]:
                self.last_stale_skipped += 1
                continue
            result.append(edge)
            visit(edge.v)

        if len(result) < graph.vertex_count - 1:
            logger.debug(
                "graph is disconnected: tree from %d spans %d of %d vertices",
                start,
                len(result) + 1,
                graph.vertex_count,
            )
        logger.debug("mst from %d has %d edges, total weight %s", start, len(result), total_weight(result))
        return result


def mst(graph: WeightedGraph, start: int = 0) -> Optional[List[WeightedEdge]]:
    """Convenience wrapper around a fresh JarnikSpanningTreeEngine."""
    return JarnikSpanningTreeEngine().mst(graph, start)
