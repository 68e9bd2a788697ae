"""
SEND + MORE = MONEY cryptarithm as a CSP.

Each letter takes a distinct digit, the leading letters S and M are not
zero, and once every letter is assigned the sum must hold. The unique answer
is 9567 + 1085 = 10652.
"""

from typing import Dict, List, Mapping, Sequence

from .base import CSP, Constraint

LETTERS: List[str] = ["S", "E", "N", "D", "M", "O", "R", "Y"]
LEADING_LETTERS = ("S", "M")


def word_value(word: str, assignment: Mapping[str, int]) -> int:
    value = 0
    for letter in word:
        value = value * 10 + assignment[letter]
    return value


class SendMoreMoneyConstraint(Constraint[str, int]):
    def __init__(self, letters: Sequence[str]) -> None:
        self.letters = list(letters)

    @property
    def variables(self) -> List[str]:
        return self.letters

    def is_satisfied(self, assignment: Mapping[str, int]) -> bool:
        # duplicate digits can never be fixed by later assignments
        digits = [assignment[letter] for letter in self.letters if letter in assignment]
        if len(set(digits)) < len(digits):
            return False
        if any(assignment.get(letter) == 0 for letter in LEADING_LETTERS):
            return False

        if not all(letter in assignment for letter in self.letters):
            return True

        send = word_value("SEND", assignment)
        more = word_value("MORE", assignment)
        money = word_value("MONEY", assignment)
        return send + more == money


def send_more_money_csp(hints: bool = True) -> CSP[str, int]:
    """
    Build the puzzle.

    With ``hints`` the domains of S, M and O are narrowed to 9, 1 and 0 (the
    carries force them), which keeps plain backtracking fast. Without hints
    only the leading letters lose the digit 0 and the search is far slower.
    """
    domains: Dict[str, List[int]] = {letter: list(range(10)) for letter in LETTERS}
    if hints:
        domains["S"] = [9]
        domains["M"] = [1]
        domains["O"] = [0]
    else:
        for letter in LEADING_LETTERS:
            domains[letter] = list(range(1, 10))

    csp: CSP[str, int] = CSP(LETTERS, domains)
    csp.add_constraint(SendMoreMoneyConstraint(LETTERS))
    return csp
