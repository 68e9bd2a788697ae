"""
Edge types for index-addressed graphs.

An edge connects the vertex at index ``u`` to the vertex at index ``v``.
Undirected graphs store every edge twice, once per direction, so each edge
type knows how to produce its reverse.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import reduce
from typing import Generic, Optional, Sequence, TypeVar

W = TypeVar("W")


class Edge(ABC):
    """Directed connection between two vertex indices."""

    u: int  # index of the "from" vertex
    v: int  # index of the "to" vertex

    @abstractmethod
    def reversed(self) -> "Edge":
        """Return the same connection pointing the other way."""
        raise NotImplementedError


@dataclass(frozen=True)
class UnweightedEdge(Edge):
    u: int
    v: int

    def reversed(self) -> "UnweightedEdge":
        return UnweightedEdge(self.v, self.u)

    def __str__(self) -> str:
        return f"{self.u} <-> {self.v}"


@dataclass(frozen=True)
class WeightedEdge(Edge, Generic[W]):
    """
    Edge with a weight that supports ``<`` and ``+``.

    Edges order by weight alone, which is what the spanning-tree queue needs.
    Equality still compares endpoints and weight.
    """

    u: int
    v: int
    weight: W

    def reversed(self) -> "WeightedEdge[W]":
        return WeightedEdge(self.v, self.u, self.weight)

    def __lt__(self, other: "WeightedEdge[W]") -> bool:
        return self.weight < other.weight  # type: ignore[operator]

    def __str__(self) -> str:
        return f"{self.u} <{self.weight}> {self.v}"


def total_weight(edges: Sequence[WeightedEdge[W]]) -> Optional[W]:
    """Sum the weights of ``edges``; None for an empty sequence."""
    if not edges:
        return None
    return reduce(lambda acc, edge: acc + edge.weight, edges[1:], edges[0].weight)  # type: ignore[operator]
