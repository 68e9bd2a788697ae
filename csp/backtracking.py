"""
Backtracking search for constraint satisfaction problems.

Depth-first over partial assignments: pick the first unassigned variable in
declaration order, try its values in domain order, and recurse on every
value that keeps the assignment consistent. The first complete assignment
found is returned. There is no variable-ordering heuristic and no constraint
propagation, so recursion depth equals the number of variables.
"""

from __future__ import annotations

from typing import Dict, Hashable, Mapping, Optional, TypeVar

from .base import CSP, CSPConfigurationError
from logging_utils import get_logger

V = TypeVar("V", bound=Hashable)
D = TypeVar("D")

logger = get_logger("csp")


def is_consistent(csp: CSP[V, D], variable: V, assignment: Mapping[V, D]) -> bool:
    """Check every constraint registered against ``variable``."""
    return all(constraint.is_satisfied(assignment) for constraint in csp.constraints_for(variable))


class BacktrackingSolver:
    """
    Recursive backtracking solver with per-run counters.

    last_assignments_tried counts tentative variable/value extensions and
    last_backtracks counts variables whose whole domain failed.
    """

    def __init__(self) -> None:
        self.last_assignments_tried = 0
        self.last_backtracks = 0

    def solve(self, csp: CSP[V, D], assignment: Optional[Mapping[V, D]] = None) -> Optional[Dict[V, D]]:
        """
        Return the first complete consistent assignment, or None.

        ``assignment`` may pre-assign some variables. It must only mention
        variables of ``csp`` and values from their domains; if it already
        violates a constraint the result is None.
        """
        self.last_assignments_tried = 0
        self.last_backtracks = 0

        start: Dict[V, D] = dict(assignment or {})
        variables = set(csp.variables)
        unknown = [v for v in start if v not in variables]
        if unknown:
            raise CSPConfigurationError(f"Initial assignment references unknown variables {unknown!r}.")
        outside = {v: value for v, value in start.items() if value not in csp.domain_of(v)}
        if outside:
            raise CSPConfigurationError(f"Initial assignment uses values outside their domains: {outside!r}.")
        if not all(constraint.is_satisfied(start) for constraint in csp.all_constraints()):
            logger.debug("initial assignment already violates a constraint")
            return None

        result = self._backtrack(csp, start)
        logger.debug(
            "backtracking %s after %d assignments tried, %d backtracks",
            "solved" if result is not None else "found no solution",
            self.last_assignments_tried,
            self.last_backtracks,
        )
        return result

    def _backtrack(self, csp: CSP[V, D], assignment: Dict[V, D]) -> Optional[Dict[V, D]]:
        # assignment is complete once every variable has a value
        if len(assignment) == len(csp):
            return assignment

        variable = next(v for v in csp.variables if v not in assignment)

        for value in csp.domain_of(variable):
            self.last_assignments_tried += 1
            local_assignment = dict(assignment)
            local_assignment[variable] = value
            if is_consistent(csp, variable, local_assignment):
                result = self._backtrack(csp, local_assignment)
                if result is not None:
                    return result

        self.last_backtracks += 1
        return None


def backtracking_search(csp: CSP[V, D], assignment: Optional[Mapping[V, D]] = None) -> Optional[Dict[V, D]]:
    """Convenience wrapper around a fresh BacktrackingSolver."""
    return BacktrackingSolver().solve(csp, assignment)
