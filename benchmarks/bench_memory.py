"""Benchmark: Memory usage while rendering a large page."""
from __future__ import annotations

import io
import json
import sys
import tracemalloc
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from pages import build_page

_ITERATIONS: int = 200


def bench_render_memory(iterations: int = _ITERATIONS) -> dict[str, object]:
    """Benchmark memory usage while rendering a 500-row page.

    Returns
    -------
    dict with keys: operation, iterations, peak_memory_kb, current_memory_kb.
    """
    page = build_page(500)

    tracemalloc.start()
    for _ in range(iterations):
        page.render(io.BytesIO())
    current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    peak_kb = round(peak / 1024, 2)
    result: dict[str, object] = {
        "operation": "tagtree_render_memory_500_rows",
        "iterations": iterations,
        "peak_memory_kb": peak_kb,
        "current_memory_kb": round(current / 1024, 2),
        "ops_per_second": 0.0,
        "avg_latency_ms": 0.0,
    }
    print(f"[bench_memory] {result['operation']}: peak {peak_kb:.2f} KB over {iterations} iterations")
    return result


if __name__ == "__main__":
    result = bench_render_memory()
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)
    output_path = results_dir / "memory_baseline.json"
    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(result, fh, indent=2)
    print(f"Results saved to {output_path}")
