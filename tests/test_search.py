"""
Unit tests for generic DFS, BFS and A*, using the line graph, mazes and the
missionaries puzzle as problems.
"""

import numpy as np

from maze import Cell, Maze, MazeLocation, euclidean_distance, manhattan_distance
from missionaries import START, MCState, describe_solution, goal_test, successors
from search import Node, Queue, Stack, astar, bfs, dfs, node_to_path


def _line_successors(n: int):
    def successors(i: int):
        return [j for j in (i - 1, i + 1) if 0 <= j < n]

    return successors


def test_bfs_on_line_graph():
    node = bfs(0, lambda s: s == 4, _line_successors(5))

    assert node is not None
    assert node_to_path(node) == [0, 1, 2, 3, 4]


def test_dfs_finds_a_valid_path():
    maze = Maze(rng=np.random.default_rng(0), sparseness=0.0)

    node = dfs(maze.start, maze.goal_test, maze.successors)

    assert node is not None
    path = node_to_path(node)
    assert path[0] == maze.start
    assert path[-1] == maze.goal
    for here, there in zip(path, path[1:]):
        assert there in maze.successors(here)


def test_start_is_goal_returns_single_node():
    for search in (dfs, bfs):
        node = search(3, lambda s: s == 3, _line_successors(5))
        assert node is not None
        assert node_to_path(node) == [3]

    node = astar(3, lambda s: s == 3, _line_successors(5), lambda s: 0.0)
    assert node is not None
    assert node.cost == 0


def test_unreachable_goal_returns_none():
    # goal 9 is outside the 5-state line
    assert bfs(0, lambda s: s == 9, _line_successors(5)) is None
    assert dfs(0, lambda s: s == 9, _line_successors(5)) is None
    assert astar(0, lambda s: s == 9, _line_successors(5), lambda s: 0.0) is None


def test_astar_on_open_grid_is_manhattan_length():
    maze = Maze(rng=np.random.default_rng(3), sparseness=0.0)

    node = astar(maze.start, maze.goal_test, maze.successors, manhattan_distance(maze.goal))

    assert node is not None
    assert len(node_to_path(node)) - 1 == 18
    assert node.cost == 18


def test_astar_matches_bfs_length_on_random_mazes():
    """With unit costs and an admissible heuristic A* is as short as BFS."""
    for seed in range(10):
        maze = Maze(sparseness=0.25, rng=np.random.default_rng(seed))
        by_bfs = bfs(maze.start, maze.goal_test, maze.successors)
        by_astar = astar(maze.start, maze.goal_test, maze.successors, euclidean_distance(maze.goal))

        if by_bfs is None:
            assert by_astar is None
        else:
            assert by_astar is not None
            assert len(node_to_path(by_astar)) == len(node_to_path(by_bfs))


def test_astar_reopens_state_on_cheaper_route():
    # S->A (1), S->B (4), A->B (1), B->G (5): the cheap route to B comes second
    graph = {"S": {"A": 1, "B": 4}, "A": {"B": 1}, "B": {"G": 5}, "G": {}}

    node = astar(
        "S",
        lambda s: s == "G",
        lambda s: graph[s].keys(),
        lambda s: 0.0,
        cost=lambda parent, child: graph[parent][child],
    )

    assert node is not None
    assert node_to_path(node) == ["S", "A", "B", "G"]
    assert node.cost == 7


def test_node_ordering_uses_cost_plus_heuristic():
    cheap = Node("a", cost=1.0, heuristic=1.0)
    dear = Node("b", cost=0.5, heuristic=3.0)

    assert cheap < dear
    assert dear.priority == 3.5


def test_frontiers():
    stack: Stack[int] = Stack()
    queue: Queue[int] = Queue()
    for i in range(3):
        stack.push(i)
        queue.push(i)

    assert [stack.pop() for _ in range(3)] == [2, 1, 0]
    assert [queue.pop() for _ in range(3)] == [0, 1, 2]
    assert stack.is_empty and queue.is_empty


def test_missionaries_solution():
    node = bfs(START, goal_test, successors)

    assert node is not None
    path = node_to_path(node)
    # the classic puzzle needs eleven crossings
    assert len(path) - 1 == 11
    assert all(state.is_legal for state in path)
    assert "moved from the west bank to the east bank" in describe_solution(path)


def test_missionaries_legality():
    assert MCState(3, 3, True).is_legal
    assert not MCState(1, 2, True).is_legal
    # east bank: 1 missionary against 2 cannibals
    assert not MCState(2, 1, True).is_legal
    assert MCState(0, 3, False).is_legal


def test_maze_is_reproducible_and_marked_copy():
    first = Maze(sparseness=0.3, rng=np.random.default_rng(42))
    second = Maze(sparseness=0.3, rng=np.random.default_rng(42))
    assert str(first) == str(second)

    node = bfs(first.start, first.goal_test, first.successors)
    if node is not None:
        path = node_to_path(node)
        marked = first.marked(path)
        assert str(marked).count(Cell.PATH.value) == len(path) - 2
        # source maze untouched
        assert Cell.PATH.value not in str(first)

    assert first.grid[0, 0] == Cell.START.value
    assert first.grid[9, 9] == Cell.GOAL.value


def test_maze_heuristics():
    goal = MazeLocation(3, 4)

    assert manhattan_distance(goal)(MazeLocation(0, 0)) == 7
    assert euclidean_distance(goal)(MazeLocation(0, 0)) == 5.0
