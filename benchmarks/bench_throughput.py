"""Benchmark: proclang tokenize throughput.

Measures how many full tokenize passes over a sample program complete
per second, both eagerly via proclang.tokenize() and lazily by pulling
tokens from a Lexer one at a time.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import proclang
from proclang.lexer.lexer import Lexer

_ITERATIONS: int = 2_000

_SAMPLE_SOURCE = """
# sprite behaviour
event on_start {
    score = 0
    name = "player \\"one\\""
    path = r'C:\\games\\save'
    forever {
        if score >= 100.5 { break }
        score += 1.25 * speed ** 2
        say(${name})
    }
}

private fn clamp(v, lo, hi) {
    while v < lo || v > hi { v = (v + lo) // 2 }
}
"""


def _report(operation: str, iterations: int, total: float) -> dict[str, object]:
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


def bench_tokenize_throughput() -> dict[str, object]:
    """Benchmark eager tokenization of the sample program.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    start = time.perf_counter()
    for _ in range(_ITERATIONS):
        proclang.tokenize(_SAMPLE_SOURCE)
    return _report("proclang_tokenize_throughput", _ITERATIONS, time.perf_counter() - start)


def bench_pull_throughput() -> dict[str, object]:
    """Benchmark pulling tokens with Lexer.next_token() until end of input."""
    start = time.perf_counter()
    for _ in range(_ITERATIONS):
        lexer = Lexer(_SAMPLE_SOURCE)
        while not lexer.next_token().is_end:
            pass
    return _report("proclang_pull_throughput", _ITERATIONS, time.perf_counter() - start)


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_tokenize_throughput, "tokenize_throughput_baseline.json"),
        (bench_pull_throughput, "pull_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
