"""
Blind index performance benchmarking module.

Measures: fingerprint generation latency, padded generation latency, and the
observed padded set size per input length. Inputs are synthetic; nothing is persisted.
"""

import csv
import time
from pathlib import Path
from typing import Any, Dict, List

import structlog

from blind_index import (
    SharedRandomSource,
    generate_fingerprints,
    generate_fingerprints_padded,
)

logger = structlog.get_logger()

BENCHMARK_LENGTHS = (10, 50, 100, 200)
ITERATIONS = 200
SALT = b"benchmark-salt"
PARTITION_ID = "benchmark"


def _synthetic_text(length: int) -> str:
    """Mixed Latin/accented/CJK words trimmed to exactly length characters."""
    words = ["alpha", "José", "Núñez", "invoice", "志豪", "report", "812-111-7654", "TİRYAKİ"]
    line = " ".join(words)
    n = max(1, length // len(line) + 1)
    return (" ".join([line] * n))[:length]


def _time_per_call(fn, iterations: int) -> float:
    t0 = time.perf_counter()
    for _ in range(iterations):
        fn()
    return (time.perf_counter() - t0) / iterations


def _compute_summary(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    valid = [r for r in results if r.get("error") is None]
    if not valid:
        return {"summary": "Insufficient data for analysis.", "max_length_tested": None}
    largest = max(valid, key=lambda r: r["input_chars"])
    parts = [
        f"Fingerprinting at {largest['input_chars']} chars: {largest['fingerprint_ms']:.3f} ms per call.",
        f"Padding overhead: {largest['padded_ms'] - largest['fingerprint_ms']:.3f} ms per call.",
    ]
    noise = [r["mean_padded_size"] - r["fingerprint_count"] for r in valid]
    parts.append(f"Mean noise entries per set: {sum(noise) / len(noise):.2f}.")
    return {"summary": " ".join(parts), "max_length_tested": largest["input_chars"]}


def run_benchmark(
    lengths: tuple[int, ...] = BENCHMARK_LENGTHS,
    iterations: int = ITERATIONS,
    csv_path: Path | None = None,
) -> Dict[str, Any]:
    """
    Benchmark both public operations for each input length.
    A single shared random source is used for padded runs, as a long-lived service would.
    """
    rng = SharedRandomSource()
    results: List[Dict[str, Any]] = []
    for length in lengths:
        text = _synthetic_text(length)
        row: Dict[str, Any] = {"input_chars": length, "iterations": iterations}
        logger.info("benchmark_run_started", input_chars=length, iterations=iterations)
        try:
            row["fingerprint_count"] = len(generate_fingerprints(text, PARTITION_ID, SALT))
            row["fingerprint_ms"] = round(
                _time_per_call(lambda: generate_fingerprints(text, PARTITION_ID, SALT), iterations) * 1000, 4
            )
            sizes = []
            t0 = time.perf_counter()
            for _ in range(iterations):
                sizes.append(len(generate_fingerprints_padded(text, PARTITION_ID, SALT, rng)))
            row["padded_ms"] = round((time.perf_counter() - t0) / iterations * 1000, 4)
            row["min_padded_size"] = min(sizes)
            row["max_padded_size"] = max(sizes)
            row["mean_padded_size"] = round(sum(sizes) / len(sizes), 2)
        except ValueError as e:
            row["error"] = str(e)
        logger.info("benchmark_run_finished", input_chars=length, error=row.get("error"))
        results.append(row)

    out: Dict[str, Any] = {
        "benchmark_results": results,
        "input_lengths": list(lengths),
        "summary": _compute_summary(results),
    }
    if csv_path:
        fieldnames = [
            "input_chars", "iterations", "fingerprint_count",
            "fingerprint_ms", "padded_ms",
            "min_padded_size", "max_padded_size", "mean_padded_size",
        ]
        if any("error" in r for r in results):
            fieldnames.append("error")
        with open(csv_path, "w", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
            w.writeheader()
            w.writerows(results)
    return out
