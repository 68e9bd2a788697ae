"""
Edge-path helpers shared by graph search and Dijkstra.

A "path dict" maps each reached vertex index to the edge used to reach it.
Walking it backwards from a destination recovers the edge path.
"""

from typing import List, Mapping, Sequence

from edges import Edge, WeightedEdge, total_weight
from graph import Graph


def path_dict_to_path(start: int, end: int, path_dict: Mapping[int, Edge]) -> List[Edge]:
    """
    Rebuild the list of edges leading from ``start`` to ``end``.

    Returns an empty list when ``end`` is ``start``, when the dict is empty,
    or when ``end`` was never reached from ``start``.
    """
    if start == end or not path_dict or end not in path_dict:
        return []

    edge_path: List[Edge] = []
    edge = path_dict[end]
    edge_path.append(edge)
    while edge.u != start:
        if edge.u not in path_dict:
            # walked past the tree's root without meeting start
            return []
        edge = path_dict[edge.u]
        edge_path.append(edge)
    edge_path.reverse()
    return edge_path


def format_path(graph: Graph, path: Sequence[Edge]) -> str:
    """One ``from > to`` line per edge, using vertex values."""
    return "\n".join(f"{graph.vertex_at(edge.u)} > {graph.vertex_at(edge.v)}" for edge in path)


def format_weighted_path(graph: Graph, path: Sequence[WeightedEdge]) -> str:
    lines = [f"{graph.vertex_at(edge.u)} {edge.weight}> {graph.vertex_at(edge.v)}" for edge in path]
    weight = total_weight(path)
    if weight is not None:
        lines.append(f"Total Weight: {weight}")
    return "\n".join(lines)
