# aima_search/benchmarks/run_all.py
from __future__ import annotations

import json
import os
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.errors import InvalidConfiguration
from ..core.problem import heuristic_from_problem
from ..factory import ModeId, StrategyId, create_search, is_supported

# ---- Tunables (overridable via environment variables) -----------------------
MAX_EXPANSIONS = int(os.getenv("MAX_EXPANSIONS", "200000"))   # cap per run; tree modes can loop forever
TRACE_MEMORY   = os.getenv("TRACE_MEMORY", "0") == "1"        # tracemalloc peak KB (slows runs down)
BENCH_PROBLEM  = os.getenv("BENCH_PROBLEM", "romania")        # "romania" or "grid"

# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"

def load_problem(name: str = BENCH_PROBLEM):
    if name == "romania":
        from ..problems.romania import romania_problem
        return romania_problem()
    if name == "grid":
        from ..problems.grid import make_grid_problem
        return make_grid_problem()
    raise SystemExit(f"Unknown BENCH_PROBLEM {name!r}; use 'romania' or 'grid'.")

def run_all(problem, max_expansions: Optional[int] = MAX_EXPANSIONS,
            trace_memory: bool = TRACE_MEMORY, verbose: bool = True) -> List[Dict[str, Any]]:
    """Run every supported strategy/mode pair on `problem` and return one row per run."""
    h = heuristic_from_problem(problem)
    rows = []
    for strategy in StrategyId:
        for mode in ModeId:
            if not is_supported(strategy, mode):
                continue
            try:
                search = create_search(strategy, mode, heuristic=h)
            except InvalidConfiguration as e:
                if verbose:
                    print(f"  Skipping {strategy.label}/{mode.label}: {e}")
                continue
            if verbose:
                print(f"→ Running {search.name} ...")
            r = search.run(problem, max_expansions=max_expansions, trace_memory=trace_memory)
            if verbose:
                print(
                    f"  {r.algo}: "
                    f"{'OK' if r.success else 'FAIL(' + r.failure.value + ')'} "
                    f"cost={r.cost} "
                    f"expanded={r.nodes_expanded}, "
                    f"time={_fmt_time(r.time_s)}s"
                )
            rows.append({
                "algo": r.algo,
                "strategy": strategy.value,
                "mode": mode.value,
                "success": r.success,
                "failure": r.failure.value if r.failure else None,
                "cost": r.cost if r.success else None,
                "nodes_expanded": r.nodes_expanded,
                "max_frontier_size": r.metrics.max_frontier_size,
                "time_s": r.time_s,
                "peak_kb": r.peak_kb,
                "actions": len(r.actions),
            })
    return rows

def main(out_path: Optional[Path] = None):
    problem = load_problem()
    rows = run_all(problem)

    out = {"problem": type(problem).__name__, "results": rows, "ts": time.time()}
    out_path = out_path or Path(__file__).with_name("results.json")
    out_path.write_text(json.dumps(out, indent=2))
    print(f"Wrote {out_path}")
    return out_path

if __name__ == "__main__":
    main()
