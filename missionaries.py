"""
Missionaries and cannibals river-crossing puzzle as a search problem.

A state records how many missionaries and cannibals remain on the west bank
and whether the boat is there. Everyone starts on the west bank; the goal is
to get everyone east without cannibals ever outnumbering missionaries on a
bank that has missionaries. The boat carries one or two people.
"""

from dataclasses import dataclass
from typing import List, Sequence

MAX_NUM = 3  # missionaries, and also cannibals


@dataclass(frozen=True)
class MCState:
    missionaries: int  # on the west bank
    cannibals: int  # on the west bank
    boat: bool  # True when the boat is on the west bank

    @property
    def east_missionaries(self) -> int:
        return MAX_NUM - self.missionaries

    @property
    def east_cannibals(self) -> int:
        return MAX_NUM - self.cannibals

    @property
    def is_legal(self) -> bool:
        wm, wc = self.missionaries, self.cannibals
        em, ec = self.east_missionaries, self.east_cannibals
        if not (0 <= wm <= MAX_NUM and 0 <= wc <= MAX_NUM):
            return False
        if 0 < wm < wc:
            return False
        if 0 < em < ec:
            return False
        return True

    def __str__(self) -> str:
        return (
            f"On the west bank there are {self.missionaries} missionaries and {self.cannibals} cannibals.\n"
            f"On the east bank there are {self.east_missionaries} missionaries and {self.east_cannibals} cannibals.\n"
            f"The boat is on the {'west' if self.boat else 'east'} bank."
        )


START = MCState(MAX_NUM, MAX_NUM, True)

# (missionaries, cannibals) the boat can carry
_CROSSINGS = ((2, 0), (1, 0), (0, 2), (0, 1), (1, 1))


def goal_test(state: MCState) -> bool:
    return state.missionaries == 0 and state.cannibals == 0 and not state.boat


def successors(state: MCState) -> List[MCState]:
    # crossing west -> east removes people from the west bank
    sign = -1 if state.boat else 1
    candidates = [
        MCState(state.missionaries + sign * m, state.cannibals + sign * c, not state.boat) for m, c in _CROSSINGS
    ]
    return [candidate for candidate in candidates if candidate.is_legal]


def describe_solution(path: Sequence[MCState]) -> str:
    """Narrate a solution path one crossing at a time."""
    if not path:
        return ""
    lines = [str(path[0])]
    for old, current in zip(path, path[1:]):
        moved_m = abs(old.missionaries - current.missionaries)
        moved_c = abs(old.cannibals - current.cannibals)
        direction = "west bank to the east bank" if not current.boat else "east bank to the west bank"
        lines.append(f"{moved_m} missionaries and {moved_c} cannibals moved from the {direction}.")
        lines.append(str(current))
    return "\n".join(lines)
