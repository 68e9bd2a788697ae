"""
Word search construction as a CSP.

Each word is a variable whose domain is every straight run of grid cells it
fits in (left to right, top to bottom, and both downward diagonals). The one
constraint forbids two words from sharing a cell. Letter grids are numpy
arrays of single characters, filled from an explicit random generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from .base import CSP, Constraint

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

DEFAULT_WORDS: Tuple[str, ...] = ("MATTHEW", "JOE", "MARY", "SARAH", "SALLY")


@dataclass(frozen=True)
class GridLocation:
    row: int
    col: int


Placement = Tuple[GridLocation, ...]


def generate_grid(rows: int, columns: int, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Random uppercase letters in a (rows, columns) array."""
    if rng is None:
        rng = np.random.default_rng()
    letters = np.array(list(ALPHABET))
    return rng.choice(letters, size=(rows, columns))


def generate_domain(word: str, grid: np.ndarray) -> List[Placement]:
    """Every placement of ``word`` that fits inside ``grid``."""
    height, width = grid.shape
    length = len(word)
    domain: List[Placement] = []
    for row in range(height):
        for col in range(width):
            fits_right = col + length <= width
            fits_down = row + length <= height
            fits_left = col - length + 1 >= 0
            if fits_right:
                # left to right
                domain.append(tuple(GridLocation(row, c) for c in range(col, col + length)))
                if fits_down:
                    # diagonal towards bottom right
                    domain.append(tuple(GridLocation(row + i, col + i) for i in range(length)))
            if fits_down:
                # top to bottom
                domain.append(tuple(GridLocation(r, col) for r in range(row, row + length)))
                if fits_left:
                    # diagonal towards bottom left
                    domain.append(tuple(GridLocation(row + i, col - i) for i in range(length)))
    return domain


class WordSearchConstraint(Constraint[str, Placement]):
    """No grid cell may be used by more than one word."""

    def __init__(self, words: Sequence[str]) -> None:
        self.words = list(words)

    @property
    def variables(self) -> List[str]:
        return self.words

    def is_satisfied(self, assignment: Mapping[str, Placement]) -> bool:
        cells = [location for word in self.words if word in assignment for location in assignment[word]]
        return len(set(cells)) == len(cells)


def word_search_csp(words: Sequence[str], grid: np.ndarray) -> CSP[str, Placement]:
    domains: Dict[str, List[Placement]] = {word: generate_domain(word, grid) for word in words}
    csp: CSP[str, Placement] = CSP(list(words), domains)
    csp.add_constraint(WordSearchConstraint(words))
    return csp


def fill_grid(
    grid: np.ndarray, solution: Mapping[str, Placement], rng: Optional[np.random.Generator] = None
) -> np.ndarray:
    """
    Copy of ``grid`` with each word written into its placement.

    Each word is written backwards half of the time.
    """
    if rng is None:
        rng = np.random.default_rng()
    filled = grid.copy()
    for word, placement in solution.items():
        locations = placement[::-1] if rng.random() < 0.5 else placement
        for letter, location in zip(word, locations):
            filled[location.row, location.col] = letter
    return filled
