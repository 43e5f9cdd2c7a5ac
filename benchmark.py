#!/usr/bin/env python3
"""
Benchmark blind index generation: plain and padded fingerprint latency, padded set sizes.
Runs for inputs of 10, 50, 100 and 200 characters; writes results to benchmark_results.csv.
"""

import sys
from pathlib import Path

# Project root on path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from benchmark import run_benchmark


def main() -> None:
    out_path = Path(__file__).parent / "benchmark_results.csv"
    out = run_benchmark(csv_path=out_path)
    for row in out["benchmark_results"]:
        if "error" in row:
            print(f"  n={row['input_chars']}: error: {row['error']}", flush=True)
        else:
            print(
                f"  n={row['input_chars']}: {row['fingerprint_ms']} ms plain, "
                f"{row['padded_ms']} ms padded, mean size {row['mean_padded_size']}",
                flush=True,
            )
    print(out["summary"]["summary"])
    print(f"Wrote {out_path}")


if __name__ == "__main__":
    main()
