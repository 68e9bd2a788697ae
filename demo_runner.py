"""
CLI to run the search, graph and CSP demos across multiple seeds.

Reads demos/demos.yml (or --config), runs every configured demo once per seed
and per algorithm, prints a progress line per run, and optionally writes the
per-run results to CSV.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence
import argparse
import csv
import time

import numpy as np

from city_graphs import build_city_graph, build_weighted_city_graph
from csp import (
    BacktrackingSolver,
    australia_csp,
    generate_grid,
    queens_csp,
    send_more_money_csp,
    word_search_csp,
)
from csp.word_search import DEFAULT_WORDS
from dijkstra_engine import SimpleDijkstraEngine
from edges import total_weight
from graph_search import graph_bfs, graph_dfs
from maze import Maze, MazeLocation, manhattan_distance
from missionaries import START, goal_test, successors
from mst_engine import JarnikSpanningTreeEngine
from search import astar, bfs, dfs, node_to_path

DEFAULT_CONFIG = Path(__file__).parent / "demos" / "demos.yml"

RUN_FIELDS = [
    "demo",
    "kind",
    "seed",
    "algorithm",
    "solved",
    "path_length",
    "cost",
    "assignments_tried",
    "duration_sec",
]


@dataclass(frozen=True)
class DemoConfig:
    name: str
    kind: str
    options: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Config:
    seed: int
    seed_count: int
    demos: Sequence[DemoConfig]


def load_config(path: Path) -> Config:
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text())
    demos = []
    for entry in data["demos"]:
        kind = str(entry["kind"])
        if kind not in DEMO_KINDS:
            raise ValueError(f"Unknown demo kind '{kind}' in {path}.")
        options = {k: v for k, v in entry.items() if k not in ("name", "kind")}
        demos.append(DemoConfig(name=str(entry["name"]), kind=kind, options=options))
    return Config(
        seed=int(data.get("seed", 0)),
        seed_count=int(data.get("seed_count", 1)),
        demos=demos,
    )


def run_demos(config_path: Path, runs_csv: Optional[Path] = None) -> List[Dict[str, object]]:
    cfg = load_config(config_path)
    start = time.time()

    results: List[Dict[str, object]] = []
    for demo in cfg.demos:
        for offset in range(cfg.seed_count):
            seed = cfg.seed + offset
            for res in _run_demo(demo, seed):
                results.append(res)
                print(
                    f"[run] completed demo={res['demo']} algorithm={res['algorithm']} seed={seed} "
                    f"solved={res['solved']} duration={res['duration_sec']:.3f}s"
                )

    if runs_csv:
        write_results_csv(results, runs_csv)

    elapsed = time.time() - start
    print(f"[run] completed {len(results)} total runs in {elapsed:.2f}s")
    return results


def _run_demo(demo: DemoConfig, seed: int) -> List[Dict[str, object]]:
    runner = DEMO_KINDS[demo.kind]
    rows = []
    for algorithm, metrics, duration in runner(demo.options, seed):
        rows.append(
            {
                "demo": demo.name,
                "kind": demo.kind,
                "seed": seed,
                "algorithm": algorithm,
                "solved": metrics.get("solved", False),
                "path_length": metrics.get("path_length"),
                "cost": metrics.get("cost"),
                "assignments_tried": metrics.get("assignments_tried"),
                "duration_sec": duration,
            }
        )
    return rows


def _timed(fn: Callable[[], Dict[str, object]]) -> tuple[Dict[str, object], float]:
    start = time.time()
    metrics = fn()
    return metrics, time.time() - start


# --- Demo kinds -----------------------------------------------------------------


def _run_maze(options: Mapping[str, Any], seed: int):
    rows = int(options.get("rows", 10))
    columns = int(options.get("columns", 10))
    maze = Maze(
        rows=rows,
        columns=columns,
        sparseness=float(options.get("sparseness", 0.2)),
        start=MazeLocation(0, 0),
        goal=MazeLocation(rows - 1, columns - 1),
        rng=np.random.default_rng(seed),
    )
    searches = {
        "dfs": lambda: dfs(maze.start, maze.goal_test, maze.successors),
        "bfs": lambda: bfs(maze.start, maze.goal_test, maze.successors),
        "astar": lambda: astar(maze.start, maze.goal_test, maze.successors, manhattan_distance(maze.goal)),
    }
    for algorithm in options.get("algorithms", ["dfs", "bfs", "astar"]):
        if algorithm not in searches:
            raise ValueError(f"Unknown maze search algorithm '{algorithm}'.")

        def solve(search=searches[algorithm]) -> Dict[str, object]:
            node = search()
            if node is None:
                return {"solved": False}
            path = node_to_path(node)
            return {"solved": True, "path_length": len(path) - 1}

        metrics, duration = _timed(solve)
        yield algorithm, metrics, duration


def _run_missionaries(options: Mapping[str, Any], seed: int):
    def solve() -> Dict[str, object]:
        node = bfs(START, goal_test, successors)
        if node is None:
            return {"solved": False}
        return {"solved": True, "path_length": len(node_to_path(node)) - 1}

    metrics, duration = _timed(solve)
    yield "bfs", metrics, duration


def _run_city_routes(options: Mapping[str, Any], seed: int):
    origin = str(options.get("origin", "Los Angeles"))
    destination = str(options.get("destination", "Boston"))
    unweighted = build_city_graph()
    weighted = build_weighted_city_graph()

    for algorithm, search in (("bfs", graph_bfs), ("dfs", graph_dfs)):

        def hops(search=search) -> Dict[str, object]:
            path = search(unweighted, origin, lambda city: city == destination)
            if path is None:
                return {"solved": False}
            return {"solved": True, "path_length": len(path)}

        metrics, duration = _timed(hops)
        yield algorithm, metrics, duration

    def shortest() -> Dict[str, object]:
        distances, _ = SimpleDijkstraEngine().dijkstra_from_vertex(weighted, origin)
        distance = distances[weighted.require_index(destination)]
        return {"solved": distance is not None, "cost": distance}

    metrics, duration = _timed(shortest)
    yield "dijkstra", metrics, duration

    def spanning_tree() -> Dict[str, object]:
        tree = JarnikSpanningTreeEngine().mst(weighted, weighted.require_index(origin))
        if tree is None:
            return {"solved": False}
        return {"solved": True, "path_length": len(tree), "cost": total_weight(tree)}

    metrics, duration = _timed(spanning_tree)
    yield "mst", metrics, duration


def _backtracking_metrics(csp) -> Dict[str, object]:
    solver = BacktrackingSolver()
    solution = solver.solve(csp)
    return {"solved": solution is not None, "assignments_tried": solver.last_assignments_tried}


def _run_map_coloring(options: Mapping[str, Any], seed: int):
    colors = options.get("colors", ["r", "g", "b"])
    metrics, duration = _timed(lambda: _backtracking_metrics(australia_csp(colors)))
    yield "backtracking", metrics, duration


def _run_queens(options: Mapping[str, Any], seed: int):
    metrics, duration = _timed(lambda: _backtracking_metrics(queens_csp(int(options.get("size", 8)))))
    yield "backtracking", metrics, duration


def _run_send_more_money(options: Mapping[str, Any], seed: int):
    hints = bool(options.get("hints", True))
    metrics, duration = _timed(lambda: _backtracking_metrics(send_more_money_csp(hints=hints)))
    yield "backtracking", metrics, duration


def _run_word_search(options: Mapping[str, Any], seed: int):
    grid = generate_grid(int(options.get("rows", 9)), int(options.get("columns", 9)), np.random.default_rng(seed))
    words = [str(word).upper() for word in options.get("words", DEFAULT_WORDS)]
    metrics, duration = _timed(lambda: _backtracking_metrics(word_search_csp(words, grid)))
    yield "backtracking", metrics, duration


DEMO_KINDS: Dict[str, Callable] = {
    "maze": _run_maze,
    "missionaries": _run_missionaries,
    "city_routes": _run_city_routes,
    "map_coloring": _run_map_coloring,
    "queens": _run_queens,
    "send_more_money": _run_send_more_money,
    "word_search": _run_word_search,
}


def write_results_csv(results: Sequence[Mapping[str, object]], path: Path) -> None:
    """
    Write per-run results to CSV for downstream analysis.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RUN_FIELDS)
        writer.writeheader()
        for res in results:
            writer.writerow({key: res.get(key) for key in RUN_FIELDS})


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG)
    parser.add_argument("--runs-csv", type=Path, default=None)
    args = parser.parse_args(argv)

    results = run_demos(args.config, runs_csv=args.runs_csv)
    solved = sum(1 for res in results if res["solved"])
    print(f"Solved {solved} of {len(results)} runs")
    if args.runs_csv:
        print(f"Wrote runs to {args.runs_csv}")


if __name__ == "__main__":
    main()
