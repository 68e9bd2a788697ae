"""
Grid maze used to exercise DFS, BFS and A*.

The maze is a numpy array of single-character cell codes. Walls are placed
independently with probability ``sparseness`` using an explicit numpy random
Generator, so a seed reproduces the same maze. Movement is in the four
cardinal directions only.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional
import math

import numpy as np


class Cell(str, Enum):
    EMPTY = "O"
    BLOCKED = "X"
    START = "S"
    GOAL = "G"
    PATH = "P"


@dataclass(frozen=True)
class MazeLocation:
    row: int
    col: int


class Maze:
    """
    Rectangular maze with a start and a goal cell.

    Start and goal are never walls. ``marked`` returns a new maze with a path
    drawn on it and leaves this one untouched.
    """

    def __init__(
        self,
        rows: int = 10,
        columns: int = 10,
        sparseness: float = 0.2,
        start: MazeLocation = MazeLocation(0, 0),
        goal: MazeLocation = MazeLocation(9, 9),
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        if rows <= 0 or columns <= 0:
            raise ValueError("Maze dimensions must be positive.")
        if not 0.0 <= sparseness <= 1.0:
            raise ValueError("sparseness must be between 0 and 1.")
        if rng is None:
            rng = np.random.default_rng()

        self.rows = rows
        self.columns = columns
        self.start = start
        self.goal = goal
        for location in (start, goal):
            if not self._in_bounds(location):
                raise ValueError(f"{location} lies outside a {rows}x{columns} maze.")

        walls = rng.random((rows, columns)) < sparseness
        self.grid: np.ndarray = np.where(walls, Cell.BLOCKED.value, Cell.EMPTY.value)
        self.grid[start.row, start.col] = Cell.START.value
        self.grid[goal.row, goal.col] = Cell.GOAL.value

    @classmethod
    def from_grid(cls, grid: np.ndarray, start: MazeLocation, goal: MazeLocation) -> "Maze":
        """Wrap an existing cell grid; the array is copied."""
        maze = cls.__new__(cls)
        maze.rows, maze.columns = grid.shape
        maze.start = start
        maze.goal = goal
        maze.grid = np.array(grid, copy=True)
        return maze

    def goal_test(self, location: MazeLocation) -> bool:
        return location == self.goal

    def is_clear(self, location: MazeLocation) -> bool:
        return self._in_bounds(location) and self.grid[location.row, location.col] != Cell.BLOCKED.value

    def successors(self, location: MazeLocation) -> List[MazeLocation]:
        # no diagonals
        candidates = (
            MazeLocation(location.row + 1, location.col),
            MazeLocation(location.row - 1, location.col),
            MazeLocation(location.row, location.col + 1),
            MazeLocation(location.row, location.col - 1),
        )
        return [candidate for candidate in candidates if self.is_clear(candidate)]

    def marked(self, path: Iterable[MazeLocation]) -> "Maze":
        maze = Maze.from_grid(self.grid, self.start, self.goal)
        for location in path:
            maze.grid[location.row, location.col] = Cell.PATH.value
        maze.grid[self.start.row, self.start.col] = Cell.START.value
        maze.grid[self.goal.row, self.goal.col] = Cell.GOAL.value
        return maze

    def _in_bounds(self, location: MazeLocation) -> bool:
        return 0 <= location.row < self.rows and 0 <= location.col < self.columns

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.grid)


def euclidean_distance(goal: MazeLocation) -> Callable[[MazeLocation], float]:
    """Straight-line distance to ``goal``; admissible on a 4-connected grid."""

    def distance(location: MazeLocation) -> float:
        return math.hypot(location.col - goal.col, location.row - goal.row)

    return distance


def manhattan_distance(goal: MazeLocation) -> Callable[[MazeLocation], float]:
    """Grid distance to ``goal``; the exact cost on an obstacle-free grid."""

    def distance(location: MazeLocation) -> float:
        return float(abs(location.col - goal.col) + abs(location.row - goal.row))

    return distance
