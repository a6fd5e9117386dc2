"""Benchmark — warm-up, замеры и trimmed-статистика стратегий."""

from .harness import BenchmarkConfig, BenchmarkResult, BenchmarkRun, run_benchmark, summarize_samples

__all__ = [
    "BenchmarkConfig",
    "BenchmarkResult",
    "BenchmarkRun",
    "run_benchmark",
    "summarize_samples",
]
