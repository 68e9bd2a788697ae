"""Constraint satisfaction: problem model, backtracking search, bundled problems."""

from .base import CSP, Constraint, CSPConfigurationError
from .backtracking import BacktrackingSolver, backtracking_search, is_consistent
from .map_coloring import MapColoringConstraint, australia_csp, map_coloring_csp
from .queens import QueensConstraint, queens_csp
from .send_more_money import SendMoreMoneyConstraint, send_more_money_csp
from .word_search import (
    GridLocation,
    WordSearchConstraint,
    fill_grid,
    generate_domain,
    generate_grid,
    word_search_csp,
)

__all__ = [
    "CSP",
    "Constraint",
    "CSPConfigurationError",
    "BacktrackingSolver",
    "backtracking_search",
    "is_consistent",
    "MapColoringConstraint",
    "australia_csp",
    "map_coloring_csp",
    "QueensConstraint",
    "queens_csp",
    "SendMoreMoneyConstraint",
    "send_more_money_csp",
    "GridLocation",
    "WordSearchConstraint",
    "fill_grid",
    "generate_domain",
    "generate_grid",
    "word_search_csp",
]
