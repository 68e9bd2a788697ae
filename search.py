"""
Generic state-space search: depth-first, breadth-first and A*.

States can be any hashable value. Callers supply a goal test and a successor
function (and, for A*, a heuristic and optionally a step-cost function). The
frontier type is the only thing that distinguishes DFS from BFS.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, Generic, Hashable, Iterable, List, Optional, Set, TypeVar

from logging_utils import get_logger
from priority_queue import PriorityQueue

S = TypeVar("S", bound=Hashable)
T = TypeVar("T")

GoalTest = Callable[[S], bool]
Successors = Callable[[S], Iterable[S]]
Heuristic = Callable[[S], float]
StepCost = Callable[[S, S], float]

logger = get_logger("search")


@dataclass(eq=False)
class Node(Generic[S]):
    """
    One node of the search tree.

    ``parent`` links back toward the initial state; following it from a goal
    node yields the path. Nodes order by ``cost + heuristic`` so they can sit
    directly in a priority queue.
    """

    state: S
    parent: Optional["Node[S]"] = None
    cost: float = 0.0
    heuristic: float = 0.0

    @property
    def priority(self) -> float:
        return self.cost + self.heuristic

    def __lt__(self, other: "Node[S]") -> bool:
        return self.priority < other.priority


class Stack(Generic[T]):
    """LIFO frontier."""

    def __init__(self) -> None:
        self._container: List[T] = []

    @property
    def is_empty(self) -> bool:
        return not self._container

    def push(self, item: T) -> None:
        self._container.append(item)

    def pop(self) -> T:
        return self._container.pop()

    def __len__(self) -> int:
        return len(self._container)


class Queue(Generic[T]):
    """FIFO frontier."""

    def __init__(self) -> None:
        self._container: Deque[T] = deque()

    @property
    def is_empty(self) -> bool:
        return not self._container

    def push(self, item: T) -> None:
        self._container.append(item)

    def pop(self) -> T:
        return self._container.popleft()

    def __len__(self) -> int:
        return len(self._container)


def _uninformed_search(frontier, initial: S, goal_test: GoalTest, successors: Successors) -> Optional[Node[S]]:
    frontier.push(Node(initial))
    # States are marked explored when pushed, so each is queued at most once.
    explored: Set[S] = {initial}
    expanded = 0

    while not frontier.is_empty:
        current = frontier.pop()
        if goal_test(current.state):
            logger.debug("goal found after expanding %d nodes", expanded)
            return current
        expanded += 1
        for child in successors(current.state):
            if child in explored:
                continue
            explored.add(child)
            frontier.push(Node(child, current))

    logger.debug("frontier exhausted after expanding %d nodes", expanded)
    return None


def dfs(initial: S, goal_test: GoalTest, successors: Successors) -> Optional[Node[S]]:
    """Depth-first search. Returns the goal node or None."""
    return _uninformed_search(Stack(), initial, goal_test, successors)


def bfs(initial: S, goal_test: GoalTest, successors: Successors) -> Optional[Node[S]]:
    """
    Breadth-first search. Returns the goal node or None.

    The returned path uses the fewest possible steps.
    """
    return _uninformed_search(Queue(), initial, goal_test, successors)


def astar(
    initial: S,
    goal_test: GoalTest,
    successors: Successors,
    heuristic: Heuristic,
    cost: Optional[StepCost] = None,
) -> Optional[Node[S]]:
    """
    A* search ordered by accumulated cost plus heuristic estimate.

    ``cost(parent_state, child_state)`` defaults to 1 per step. A state is
    queued again whenever a strictly cheaper route to it is found; the
    superseded queue entries are skipped when they surface. The result is
    optimal only if ``heuristic`` never overestimates the remaining cost.
    """
    step_cost: StepCost = cost if cost is not None else (lambda _parent, _child: 1.0)

    frontier: PriorityQueue[Node[S]] = PriorityQueue(ascending=True)
    frontier.push(Node(initial, None, 0.0, heuristic(initial)))
    explored: Dict[S, float] = {initial: 0.0}
    expanded = 0
    stale = 0

    while frontier:
        current = frontier.pop()
        assert current is not None
        if current.cost > explored.get(current.state, float("inf")):
            stale += 1
            continue
        if goal_test(current.state):
            logger.debug("goal found after expanding %d nodes (%d stale entries skipped)", expanded, stale)
            return current
        expanded += 1
        for child in successors(current.state):
            new_cost = current.cost + step_cost(current.state, child)
            if child not in explored or explored[child] > new_cost:
                explored[child] = new_cost
                frontier.push(Node(child, current, new_cost, heuristic(child)))

    logger.debug("frontier exhausted after expanding %d nodes", expanded)
    return None


def node_to_path(node: Node[S]) -> List[S]:
    """States from the initial state to ``node``'s state, in order."""
    path: List[S] = [node.state]
    current = node
    while current.parent is not None:
        current = current.parent
        path.append(current.state)
    path.reverse()
    return path
