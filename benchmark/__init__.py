"""Blind index benchmarking: fingerprint latency, padding overhead, padded set sizes."""

from .benchmark import run_benchmark, BENCHMARK_LENGTHS

__all__ = ["run_benchmark", "BENCHMARK_LENGTHS"]
