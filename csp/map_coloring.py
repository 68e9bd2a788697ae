"""
Map colouring as a CSP: adjacent regions must get different colours.

Ships the classic Australian map (seven regions, three colours).
"""

from typing import Dict, List, Mapping, Sequence, Tuple

from .base import CSP, Constraint


class MapColoringConstraint(Constraint[str, str]):
    """Two bordering places may not share a colour."""

    def __init__(self, place1: str, place2: str) -> None:
        self.place1 = place1
        self.place2 = place2

    @property
    def variables(self) -> List[str]:
        return [self.place1, self.place2]

    def is_satisfied(self, assignment: Mapping[str, str]) -> bool:
        # Undecided while either place is still uncoloured
        if self.place1 not in assignment or self.place2 not in assignment:
            return True
        return assignment[self.place1] != assignment[self.place2]


AUSTRALIA_REGIONS: Tuple[str, ...] = (
    "Western Australia",
    "Northern Territory",
    "South Australia",
    "Queensland",
    "New South Wales",
    "Victoria",
    "Tasmania",
)

AUSTRALIA_BORDERS: Tuple[Tuple[str, str], ...] = (
    ("Western Australia", "Northern Territory"),
    ("Western Australia", "South Australia"),
    ("South Australia", "Northern Territory"),
    ("Queensland", "Northern Territory"),
    ("Queensland", "South Australia"),
    ("Queensland", "New South Wales"),
    ("New South Wales", "South Australia"),
    ("Victoria", "South Australia"),
    ("Victoria", "New South Wales"),
)


def map_coloring_csp(
    regions: Sequence[str], borders: Sequence[Tuple[str, str]], colors: Sequence[str]
) -> CSP[str, str]:
    domains: Dict[str, List[str]] = {region: list(colors) for region in regions}
    csp: CSP[str, str] = CSP(regions, domains)
    for place1, place2 in borders:
        csp.add_constraint(MapColoringConstraint(place1, place2))
    return csp


def australia_csp(colors: Sequence[str] = ("r", "g", "b")) -> CSP[str, str]:
    """The Australian map; with fewer than three colours it has no solution."""
    return map_coloring_csp(AUSTRALIA_REGIONS, AUSTRALIA_BORDERS, colors)
