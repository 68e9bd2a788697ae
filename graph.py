"""
Index-addressed graph abstraction.

Vertices live in a list and are identified by their insertion index.
Edges are kept as one adjacency list per vertex. Graphs are undirected
unless built with ``directed=True``; an undirected edge is stored once in
each endpoint's list.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, Optional, TypeVar

from edges import Edge

V = TypeVar("V")
E = TypeVar("E", bound=Edge)


class InvalidVertexError(ValueError, IndexError):
    """Raised when a vertex index or value does not exist in the graph."""


class Graph(ABC, Generic[V, E]):
    """Vertices plus per-vertex adjacency lists of edges."""

    def __init__(self, vertices: Iterable[V] = (), directed: bool = False) -> None:
        self._vertices: List[V] = []
        self._edges: List[List[E]] = []
        self._directed = directed
        for vertex in vertices:
            self.add_vertex(vertex)

    # --- Mutation API --------------------------------------------------------

    def add_vertex(self, vertex: V) -> int:
        """Append a vertex and return its index."""
        self._vertices.append(vertex)
        self._edges.append([])
        return len(self._vertices) - 1

    def add_edge(self, edge: E) -> None:
        """
        Add ``edge`` to the adjacency list of ``edge.u``.

        Undirected graphs also add the reversed edge to ``edge.v``.
        """
        self._check_index(edge.u)
        self._check_index(edge.v)
        self._edges[edge.u].append(edge)
        if not self._directed:
            self._edges[edge.v].append(edge.reversed())  # type: ignore[arg-type]

    # --- Queries -------------------------------------------------------------

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def vertices(self) -> List[V]:
        return list(self._vertices)

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        """Number of stored edges; an undirected edge counts once per direction."""
        return sum(len(adjacent) for adjacent in self._edges)

    def vertex_at(self, index: int) -> V:
        self._check_index(index)
        return self._vertices[index]

    def index_of(self, vertex: V) -> Optional[int]:
        """
        Index of the first vertex equal to ``vertex``, or None.

        Linear scan. When the same value was added twice the first index wins.
        """
        for i, candidate in enumerate(self._vertices):
            if candidate == vertex:
                return i
        return None

    def neighbors_for_index(self, index: int) -> List[V]:
        return [self._vertices[edge.v] for edge in self.edges_for_index(index)]

    def neighbors_for_vertex(self, vertex: V) -> Optional[List[V]]:
        index = self.index_of(vertex)
        if index is None:
            return None
        return self.neighbors_for_index(index)

    def edges_for_index(self, index: int) -> List[E]:
        self._check_index(index)
        return list(self._edges[index])

    def edges_for_vertex(self, vertex: V) -> Optional[List[E]]:
        index = self.index_of(vertex)
        if index is None:
            return None
        return self.edges_for_index(index)

    def require_index(self, vertex: V) -> int:
        """Like index_of, but a missing vertex is an error."""
        index = self.index_of(vertex)
        if index is None:
            raise InvalidVertexError(f"Vertex {vertex!r} is not in the graph.")
        return index

    @abstractmethod
    def describe_neighbors(self, index: int) -> str:
        """Human-readable neighbour listing for one vertex."""
        raise NotImplementedError

    def __str__(self) -> str:
        return "".join(
            f"{vertex} -> {self.describe_neighbors(i)}\n" for i, vertex in enumerate(self._vertices)
        )

    # --- Internal helpers ----------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._vertices):
            raise InvalidVertexError(
                f"Vertex index {index} out of range for graph with {len(self._vertices)} vertices."
            )
