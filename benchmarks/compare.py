"""Summarise tagtree benchmark results.

Reads the JSON files written by the bench_* scripts and reports how much
``static()`` gains over walking the full tree, alongside the latency
percentiles and peak memory of a render.

Usage::

    python benchmarks/compare.py [RESULTS_DIR]
"""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

RENDER_FILE = "render_throughput_baseline.json"
STATIC_FILE = "static_throughput_baseline.json"
LATENCY_FILE = "latency_baseline.json"
MEMORY_FILE = "memory_baseline.json"


def load_results(results_dir: Path) -> dict[str, dict[str, Any]]:
    """Return the result dicts found in ``results_dir``, keyed by file name."""
    results: dict[str, dict[str, Any]] = {}
    for name in (RENDER_FILE, STATIC_FILE, LATENCY_FILE, MEMORY_FILE):
        path = results_dir / name
        if path.exists():
            results[name] = json.loads(path.read_text(encoding="utf-8"))
    return results


def static_speedup(render: dict[str, Any], static: dict[str, Any]) -> float | None:
    """Return static-head throughput divided by full-walk throughput.

    ``None`` when either run reports no throughput.
    """
    base = float(render.get("ops_per_second", 0))
    replay = float(static.get("ops_per_second", 0))
    if base <= 0 or replay <= 0:
        return None
    return replay / base


def summarize(results: dict[str, dict[str, Any]]) -> list[str]:
    """Build the report lines for ``results``."""
    lines: list[str] = []

    render = results.get(RENDER_FILE)
    static = results.get(STATIC_FILE)
    if render is not None and static is not None:
        lines.append(f"full tree walk     {float(render['ops_per_second']):>12,.0f} pages/sec")
        lines.append(f"static stylesheet  {float(static['ops_per_second']):>12,.0f} pages/sec")
        speedup = static_speedup(render, static)
        if speedup is not None:
            lines.append(f"static() speedup   {speedup:>12.2f}x")
    else:
        lines.append("throughput: missing, run benchmarks/bench_throughput.py")

    latency = results.get(LATENCY_FILE)
    if latency is not None:
        lines.append(
            f"render latency     p50 {float(latency['p50_ms']):.3f}ms"
            f"  p95 {float(latency['p95_ms']):.3f}ms"
        )
    else:
        lines.append("latency: missing, run benchmarks/bench_latency.py")

    memory = results.get(MEMORY_FILE)
    if memory is not None:
        lines.append(f"peak render memory {float(memory['peak_memory_kb']):>12,.1f} KB")
    else:
        lines.append("memory: missing, run benchmarks/bench_memory.py")

    return lines


def main(argv: list[str]) -> None:
    results_dir = Path(argv[0]) if argv else Path(__file__).parent / "results"
    print(f"tagtree benchmarks ({results_dir})")
    for line in summarize(load_results(results_dir)):
        print("  " + line)


if __name__ == "__main__":
    main(sys.argv[1:])
