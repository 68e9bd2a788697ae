"""
Constraint satisfaction problem model.

A CSP holds an ordered list of variables, a domain (ordered candidate values)
for each variable, and the constraints registered against each variable.
Configuration mistakes raise CSPConfigurationError at build time instead of
surfacing later as a confusing search failure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Generic, Hashable, List, Mapping, Sequence, TypeVar

V = TypeVar("V", bound=Hashable)
D = TypeVar("D")


class CSPConfigurationError(ValueError):
    """Raised when a CSP is built or queried with inconsistent definitions."""


class Constraint(ABC, Generic[V, D]):
    """
    Base class for every constraint.

    Subclasses name the variables they cover and decide whether a (possibly
    partial) assignment satisfies them. A constraint that cannot be decided
    yet because some of its variables are unassigned should return True.
    """

    @property
    @abstractmethod
    def variables(self) -> Sequence[V]:
        """The variables this constraint covers."""
        raise NotImplementedError

    @abstractmethod
    def is_satisfied(self, assignment: Mapping[V, D]) -> bool:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.variables)!r})"


class CSP(Generic[V, D]):
    """
    Variables, their domains, and the constraints on them.

    Variables must be unique and every variable needs a non-empty domain.
    """

    def __init__(self, variables: Sequence[V], domains: Mapping[V, Sequence[D]]) -> None:
        self._variables: List[V] = list(variables)
        if len(set(self._variables)) != len(self._variables):
            raise CSPConfigurationError("CSP variables must be unique.")

        self._domains: Dict[V, List[D]] = {}
        for variable in self._variables:
            if variable not in domains:
                raise CSPConfigurationError(f"Missing domain for variable {variable!r}.")
            domain = list(domains[variable])
            if not domain:
                raise CSPConfigurationError(f"Empty domain for variable {variable!r}.")
            self._domains[variable] = domain

        self._constraints: Dict[V, List[Constraint[V, D]]] = {v: [] for v in self._variables}

    @property
    def variables(self) -> List[V]:
        return list(self._variables)

    @property
    def domains(self) -> Dict[V, List[D]]:
        return {v: list(values) for v, values in self._domains.items()}

    def domain_of(self, variable: V) -> List[D]:
        self._require_variable(variable)
        return list(self._domains[variable])

    def constraints_for(self, variable: V) -> List[Constraint[V, D]]:
        self._require_variable(variable)
        return list(self._constraints[variable])

    def all_constraints(self) -> List[Constraint[V, D]]:
        """Each registered constraint once, in registration order."""
        seen: Dict[int, Constraint[V, D]] = {}
        for variable in self._variables:
            for constraint in self._constraints[variable]:
                seen.setdefault(id(constraint), constraint)
        return list(seen.values())

    def add_constraint(self, constraint: Constraint[V, D]) -> None:
        """
        Register ``constraint`` against every variable it covers.

        All of the constraint's variables must belong to this CSP; nothing is
        registered if any of them is unknown.
        """
        unknown = [v for v in constraint.variables if v not in self._constraints]
        if unknown:
            raise CSPConfigurationError(f"Constraint {constraint!r} references unknown variables {unknown!r}.")
        for variable in dict.fromkeys(constraint.variables):
            self._constraints[variable].append(constraint)

    def _require_variable(self, variable: V) -> None:
        if variable not in self._constraints:
            raise CSPConfigurationError(f"Unknown variable {variable!r}.")

    def __len__(self) -> int:
        return len(self._variables)
