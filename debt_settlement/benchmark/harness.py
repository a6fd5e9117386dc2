"""
Benchmark Harness — устойчивая оценка времени стратегии

Процедура:
1. Warm-up: warmup_runs запусков на deep-copy входа, результаты отбрасываются
2. Заранее создаются timed_runs независимых deep-copy (копирование вне замера)
3. Каждый из timed_runs последовательных запусков замеряется perf_counter;
   результат ПОСЛЕДНЕГО запуска возвращается вызывающему
4. Выборка сортируется, отбрасываются trim_fraction снизу и сверху;
   по оставшимся считаются mean / median / min / max

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. all_times содержит все timed_runs сырых замеров (в порядке запусков)
2. min_time <= median_time <= max_time, min_time <= avg_time <= max_time
3. Журнал (steps) есть только у результата последнего запуска
4. Стоимость копирования не входит в замер

Все времена — в миллисекундах.
"""

import copy
import logging
import statistics
import time
from dataclasses import dataclass
from typing import Callable, Mapping, Sequence

from debt_settlement.core.domain.obligation import Party
from debt_settlement.ledger.net_balances import fork_working_balances
from debt_settlement.strategies.base import SettlementStrategy, StrategyResult

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BenchmarkConfig:
    """Конфигурация benchmark harness."""

    warmup_runs: int = 5
    timed_runs: int = 50
    trim_fraction: float = 0.10  # Доля отбрасываемых замеров с каждой стороны

    def __post_init__(self):
        if self.warmup_runs < 0:
            raise ValueError(f"warmup_runs must be non-negative, got {self.warmup_runs}")
        if self.timed_runs < 1:
            raise ValueError(f"timed_runs must be >= 1, got {self.timed_runs}")
        if not 0.0 <= self.trim_fraction < 0.5:
            raise ValueError(f"trim_fraction must be in [0, 0.5), got {self.trim_fraction}")
        if self.timed_runs - 2 * self.trim_count < 1:
            raise ValueError(
                f"trim_fraction={self.trim_fraction} leaves no samples out of {self.timed_runs}"
            )

    @property
    def trim_count(self) -> int:
        """Число замеров, отбрасываемых с каждой стороны (50 × 0.10 = 5)."""
        return int(self.timed_runs * self.trim_fraction)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class BenchmarkResult:
    """Статистика замеров (ms)."""

    avg_time: float  # Trimmed mean
    median_time: float  # Trimmed median
    min_time: float  # Минимум после trim
    max_time: float  # Максимум после trim
    all_times: tuple[float, ...]  # Все сырые замеры

    def to_payload(self) -> dict:
        return {
            "avgTime": self.avg_time,
            "medianTime": self.median_time,
            "minTime": self.min_time,
            "maxTime": self.max_time,
            "allTimes": list(self.all_times),
        }


@dataclass(frozen=True)
class BenchmarkRun:
    """Результат последнего запуска + статистика времени."""

    result: StrategyResult
    timing: BenchmarkResult


# =============================================================================
# STATISTICS
# =============================================================================


def summarize_samples(samples: Sequence[float], trim_count: int) -> BenchmarkResult:
    """
    Trimmed-статистика выборки.

    Args:
        samples: Сырые замеры в порядке запусков
        trim_count: Сколько отбросить с каждой стороны отсортированной выборки

    Returns:
        BenchmarkResult; all_times — исходные samples без сортировки

    Raises:
        ValueError: Если после trim не остаётся замеров
    """
    ordered = sorted(samples)
    trimmed = ordered[trim_count:len(ordered) - trim_count]
    if not trimmed:
        raise ValueError(f"trim_count={trim_count} leaves no samples out of {len(samples)}")

    return BenchmarkResult(
        avg_time=statistics.fmean(trimmed),
        median_time=statistics.median(trimmed),
        min_time=trimmed[0],
        max_time=trimmed[-1],
        all_times=tuple(samples),
    )


# =============================================================================
# HARNESS
# =============================================================================


def run_benchmark(
    strategy: SettlementStrategy,
    net: Mapping[Party, float],
    config: BenchmarkConfig = BenchmarkConfig(),
    timer: Callable[[], float] = time.perf_counter,
) -> BenchmarkRun:
    """
    Многократный запуск стратегии с warm-up и trimmed-статистикой.

    Args:
        strategy: Стратегия settlement
        net: Net-балансы (не изменяются)
        config: Параметры harness
        timer: Источник времени в секундах (default: time.perf_counter)

    Returns:
        BenchmarkRun с результатом последнего запуска и статистикой
    """
    template = fork_working_balances(net)

    # 1. Warm-up: результаты и время отбрасываются
    for _ in range(config.warmup_runs):
        strategy.settle(copy.deepcopy(template))

    # 2. Копии создаются до замеров
    copies = [copy.deepcopy(template) for _ in range(config.timed_runs)]

    # 3. Замеры; журнал сохраняется только у последнего запуска
    samples: list[float] = []
    result = None
    for working in copies:
        start = timer()
        result = strategy.settle(working)
        samples.append((timer() - start) * 1000.0)

    timing = summarize_samples(samples, config.trim_count)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "benchmark %s: parties=%d runs=%d avg=%.4fms median=%.4fms",
            strategy.name.value,
            len(template),
            config.timed_runs,
            timing.avg_time,
            timing.median_time,
        )

    return BenchmarkRun(result=result, timing=timing)
