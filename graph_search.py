"""
Breadth- and depth-first search over a Graph's vertices.

Unlike the state-space searches in ``search``, these walk vertex indices
and report the result as the list of edges taken.
"""

from typing import Callable, Dict, List, Optional, Set, TypeVar

from edges import Edge
from graph import Graph
from logging_utils import get_logger
from paths import path_dict_to_path
from search import Queue, Stack

V = TypeVar("V")

logger = get_logger("graph_search")


def _graph_search(
    frontier, graph: Graph[V, Edge], initial_vertex: V, goal_test: Callable[[V], bool]
) -> Optional[List[Edge]]:
    start = graph.require_index(initial_vertex)
    frontier.push(start)
    explored: Set[int] = {start}
    # how we reached each vertex
    path_dict: Dict[int, Edge] = {}

    while not frontier.is_empty:
        current = frontier.pop()
        if goal_test(graph.vertex_at(current)):
            return path_dict_to_path(start, current, path_dict)
        for edge in graph.edges_for_index(current):
            if edge.v in explored:
                continue
            explored.add(edge.v)
            frontier.push(edge.v)
            path_dict[edge.v] = edge

    logger.debug("no vertex satisfying the goal is reachable from %r", initial_vertex)
    return None


def graph_bfs(graph: Graph[V, Edge], initial_vertex: V, goal_test: Callable[[V], bool]) -> Optional[List[Edge]]:
    """
    Fewest-edges path from ``initial_vertex`` to the first vertex passing ``goal_test``.

    Returns [] if the initial vertex is itself a goal and None if no goal is
    reachable. Raises InvalidVertexError if ``initial_vertex`` is not in the graph.
    """
    return _graph_search(Queue(), graph, initial_vertex, goal_test)


def graph_dfs(graph: Graph[V, Edge], initial_vertex: V, goal_test: Callable[[V], bool]) -> Optional[List[Edge]]:
    """Depth-first counterpart of graph_bfs; the path found need not be shortest."""
    return _graph_search(Stack(), graph, initial_vertex, goal_test)
