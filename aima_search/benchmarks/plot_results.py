from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, List

from ..plots.plotting import bar_compare

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"


def load_results(results_json: Path = RESULTS_JSON) -> Dict[str, Any]:
    if not results_json.exists():
        raise SystemExit(f"Missing {results_json}. Run: aima-search bench")
    return json.loads(results_json.read_text())


def load_rows(results_json: Path = RESULTS_JSON) -> List[Dict[str, Any]]:
    """Successful rows only; failed runs have no cost to compare."""
    rows = [r for r in load_results(results_json).get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows


def _num(x) -> str:
    if isinstance(x, bool) or not isinstance(x, (int, float)):
        return "n/a"
    return f"{x:.6f}" if isinstance(x, float) else str(x)


def fmt_table(rows: List[Dict[str, Any]]) -> str:
    """Markdown table with one line per run, failed runs included."""
    lines = [
        "| Algorithm | Cost | Nodes Expanded | Max Frontier | Time (s) | Peak KB | Result |",
        "|---|---:|---:|---:|---:|---:|---|",
    ]
    for r in rows:
        outcome = "ok" if r.get("success") else (r.get("failure") or "failed")
        lines.append(
            f"| {r['algo']} | {_num(r.get('cost'))} | {_num(r.get('nodes_expanded'))} | "
            f"{_num(r.get('max_frontier_size'))} | {_num(r.get('time_s'))} | {_num(r.get('peak_kb'))} | {outcome} |"
        )
    return "\n".join(lines)


def main(results_json: Path = RESULTS_JSON, out_dir: Path = HERE):
    data = load_results(results_json)
    solved = load_rows(results_json)

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(data.get("results", [])) + "\n")
    print(f"Wrote {md_path}")

    title = f"Search comparison on {data.get('problem', 'problem')}"
    fig = bar_compare(sorted(solved, key=lambda r: r.get("nodes_expanded") or 0), title=title)
    png_path = out_dir / "comparison.png"
    fig.savefig(png_path, format="png", dpi=160)
    print(f"Wrote {png_path}")
    return md_path, png_path


if __name__ == "__main__":
    main()
