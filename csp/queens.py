"""
N-queens as a CSP.

Variables are columns 1..n, values are rows 1..n, so two queens can never
share a column. One constraint over all columns rules out shared rows and
shared diagonals.
"""

from itertools import combinations
from typing import List, Mapping, Sequence

from .base import CSP, Constraint


class QueensConstraint(Constraint[int, int]):
    def __init__(self, columns: Sequence[int]) -> None:
        self.columns = list(columns)

    @property
    def variables(self) -> List[int]:
        return self.columns

    def is_satisfied(self, assignment: Mapping[int, int]) -> bool:
        placed = [(c, assignment[c]) for c in self.columns if c in assignment]
        for (c1, r1), (c2, r2) in combinations(placed, 2):
            if r1 == r2:
                return False
            if abs(r1 - r2) == abs(c1 - c2):
                return False
        return True


def queens_csp(n: int = 8) -> CSP[int, int]:
    if n < 1:
        raise ValueError("Board size must be positive.")
    columns = list(range(1, n + 1))
    rows = {column: list(range(1, n + 1)) for column in columns}
    csp: CSP[int, int] = CSP(columns, rows)
    csp.add_constraint(QueensConstraint(columns))
    return csp
