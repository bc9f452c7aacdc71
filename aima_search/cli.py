# aima_search/cli.py
# Command line front end: solve a sample problem with a chosen strategy and mode, list choices, or benchmark.
from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.errors import SearchError
from .core.problem import heuristic_from_problem
from .factory import ModeId, StrategyId, create_search, is_supported


def _parse_coord(text: str):
    r, c = text.split(",")
    return int(r), int(c)


def build_problem(args):
    if args.problem == "romania":
        from .problems.romania import romania_problem
        return romania_problem(start=args.start or "Arad", goal=args.goal or "Bucharest")
    from .problems.grid import GridProblem
    walls = {_parse_coord(w) for w in args.wall}
    return GridProblem(
        rows=args.rows,
        cols=args.cols,
        start=_parse_coord(args.start) if args.start else (0, 0),
        goal=_parse_coord(args.goal) if args.goal else (args.rows - 1, args.cols - 1),
        walls=walls,
    )


def cmd_solve(args) -> int:
    problem = build_problem(args)
    search = create_search(args.strategy, args.mode, heuristic=heuristic_from_problem(problem))
    result = search.run(problem, max_expansions=args.max_expansions, trace_memory=args.trace_memory)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2, default=str))
    else:
        status = "solved" if result.success else f"failed ({result.failure.value})"
        print(f"{result.algo}: {status}")
        if result.actions:
            print("  actions:", " -> ".join(str(a) for a in result.actions))
        print(f"  cost={result.cost:g} expanded={result.nodes_expanded} "
              f"max_frontier={result.metrics.max_frontier_size} time={result.time_s:.4f}s")
    return 0 if result.success else 1


def cmd_list(args) -> int:
    print("Strategies:")
    for s in StrategyId:
        print(f"  {s.value:8} {s.label}")
    print("Modes:")
    for m in ModeId:
        print(f"  {m.value:14} {m.label}")
    print("Unsupported pairs:")
    for s in StrategyId:
        for m in ModeId:
            if not is_supported(s, m):
                print(f"  {s.value} x {m.value}")
    return 0


def cmd_bench(args) -> int:
    from .benchmarks import plot_results, run_all

    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)
    problem = run_all.load_problem(args.problem or run_all.BENCH_PROBLEM)
    rows = run_all.run_all(problem, max_expansions=args.max_expansions)
    results_json = out_dir / "results.json"
    results_json.write_text(json.dumps({"problem": type(problem).__name__, "results": rows}, indent=2))
    print(f"Wrote {results_json}")
    if args.plot:
        plot_results.main(results_json=results_json, out_dir=out_dir)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aima-search", description="Generic state-space search engine.")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="solve a sample problem")
    solve.add_argument("--problem", choices=["romania", "grid"], default="romania")
    solve.add_argument("--strategy", default="astar", help="dfs, bfs, ids, ucs, greedy, astar, rbfs, rbfs-al, hill")
    solve.add_argument("--mode", default="graph", help="tree, graph, bidirectional")
    solve.add_argument("--start", help="city name, or row,col on the grid")
    solve.add_argument("--goal", help="city name, or row,col on the grid")
    solve.add_argument("--rows", type=int, default=4)
    solve.add_argument("--cols", type=int, default=4)
    solve.add_argument("--wall", action="append", default=[], help="row,col of a wall cell (repeatable)")
    solve.add_argument("--max-expansions", type=int, default=None)
    solve.add_argument("--trace-memory", action="store_true")
    solve.add_argument("--json", action="store_true", help="print the result as JSON")
    solve.set_defaults(func=cmd_solve)

    lst = sub.add_parser("list", help="list strategies and modes")
    lst.set_defaults(func=cmd_list)

    bench = sub.add_parser("bench", help="run every supported strategy/mode pair")
    bench.add_argument("--problem", choices=["romania", "grid"], default=None)
    bench.add_argument("--max-expansions", type=int, default=200_000)
    bench.add_argument("--out", default=".")
    bench.add_argument("--plot", action="store_true", help="also write results.md and comparison.png")
    bench.set_defaults(func=cmd_bench)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (SearchError, KeyError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
