"""Engine — оркестратор settlement и асинхронный runner."""

from .engine import (
    SettlementEngine,
    SettlementMetrics,
    SettlementReport,
    compute_metrics,
    rank_reports,
    ranking_key,
)
from .runner import BenchmarkRunner

__all__ = [
    "SettlementEngine",
    "SettlementMetrics",
    "SettlementReport",
    "compute_metrics",
    "rank_reports",
    "ranking_key",
    "BenchmarkRunner",
]
