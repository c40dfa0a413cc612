"""Benchmark: tagtree render throughput, tree walk versus static replay.

Measures how many full-page renders complete per second, first walking
the whole tree and then with the stylesheet captured by ``static()``.
"""
from __future__ import annotations

import io
import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from pages import build_page

_ITERATIONS: int = 2_000


def _measure(operation: str, static_head: bool, iterations: int) -> dict[str, object]:
    page = build_page(20, static_head=static_head)
    start = time.perf_counter()
    for _ in range(iterations):
        page.render(io.BytesIO())
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": operation,
        "iterations": iterations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1),
        "avg_latency_ms": round(total / iterations * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_render_throughput(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark rendering a 20-row page by walking the full tree.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    return _measure("tagtree_render_throughput", False, iterations)


def bench_static_throughput(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark the same page with its stylesheet pre-rendered by ``static()``."""
    return _measure("tagtree_static_head_throughput", True, iterations)


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    render_result = bench_render_throughput()
    render_path = results_dir / "render_throughput_baseline.json"
    with open(render_path, "w", encoding="utf-8") as fh:
        json.dump(render_result, fh, indent=2)
    print(f"Results saved to {render_path}")

    static_result = bench_static_throughput()
    static_path = results_dir / "static_throughput_baseline.json"
    with open(static_path, "w", encoding="utf-8") as fh:
        json.dump(static_result, fh, indent=2)
    print(f"Results saved to {static_path}")
