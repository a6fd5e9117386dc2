"""
Settlement Engine — оркестратор

Поток одного запроса:
    parties + obligations
        → compute_net_balances
        → run_benchmark(стратегия из registry)
        → SettlementReport (transactions, steps, timing, metrics)

Метрики:
    transaction_count  = число переводов
    reduction_percent  = (1 − transaction_count / obligation_count) × 100
    total_cash_flow    = Σ amount переводов

Сравнение стратегий (compare): все пять стратегий на одном сценарии,
упорядоченные по ranking_key — (transaction_count, total_cash_flow, avg_time).

Engine синхронный и без побочных эффектов: каждый запрос работает со своей
копией балансов. Асинхронный запуск — см. BenchmarkRunner.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

from debt_settlement.benchmark.harness import BenchmarkConfig, BenchmarkResult, run_benchmark
from debt_settlement.core.domain.obligation import Obligation, Party, SettlementTransaction
from debt_settlement.core.domain.scenario import SettlementRequest, StrategyName
from debt_settlement.core.domain.trace import TraceStep, trace_to_payload
from debt_settlement.ledger.net_balances import (
    NetBalance,
    balance_total,
    compute_net_balances,
    is_balanced,
)
from debt_settlement.strategies.registry import available_strategies, get_strategy

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class SettlementMetrics:
    """Производные метрики settlement."""

    transaction_count: int
    reduction_percent: float
    total_cash_flow: float

    def to_payload(self) -> dict:
        return {
            "transactionCount": self.transaction_count,
            "reductionPercent": self.reduction_percent,
            "totalCashFlow": self.total_cash_flow,
        }


@dataclass(frozen=True)
class SettlementReport:
    """Консолидированный результат запроса."""

    strategy: StrategyName
    balances: NetBalance
    transactions: tuple[SettlementTransaction, ...]
    steps: tuple[TraceStep, ...]
    timing: BenchmarkResult
    metrics: SettlementMetrics

    def to_payload(self) -> dict:
        """Внешний JSON контракт ответа."""
        return {
            "transactions": [txn.to_payload() for txn in self.transactions],
            "steps": trace_to_payload(self.steps),
            "timing": self.timing.to_payload(),
            "metrics": self.metrics.to_payload(),
        }


def compute_metrics(
    transactions: Sequence[SettlementTransaction],
    obligation_count: int,
) -> SettlementMetrics:
    """
    Метрики settlement.

    reduction_percent = 0.0 при отсутствии обязательств.

    Examples:
        2 обязательства → 1 перевод: reduction_percent = 50.0
    """
    count = len(transactions)
    if obligation_count > 0:
        reduction = (1.0 - count / obligation_count) * 100.0
    else:
        reduction = 0.0

    return SettlementMetrics(
        transaction_count=count,
        reduction_percent=reduction,
        total_cash_flow=sum(txn.amount for txn in transactions),
    )


def ranking_key(report: SettlementReport) -> tuple[int, float, float]:
    """Лексикографический ключ: меньше переводов, меньше оборот, быстрее."""
    return (
        report.metrics.transaction_count,
        report.metrics.total_cash_flow,
        report.timing.avg_time,
    )


def rank_reports(reports: Iterable[SettlementReport]) -> list[SettlementReport]:
    """Отчёты от лучшего к худшему (стабильно при полном равенстве)."""
    return sorted(reports, key=ranking_key)


# =============================================================================
# ENGINE
# =============================================================================


class SettlementEngine:
    """Оркестратор: net-балансы → benchmark стратегии → отчёт."""

    def __init__(self, benchmark_config: Optional[BenchmarkConfig] = None):
        """
        Args:
            benchmark_config: параметры harness (default: 5 warm-up, 50 замеров, trim 10%)
        """
        self.benchmark_config = benchmark_config or BenchmarkConfig()

    def settle(
        self,
        parties: Sequence[Party],
        obligations: Sequence[Obligation],
        strategy: Union[StrategyName, str] = StrategyName.GREEDY,
    ) -> SettlementReport:
        """
        Settlement одного сценария выбранной стратегией.

        Args:
            parties: участники (порядок определяет tie-break)
            obligations: валидированные обязательства
            strategy: идентификатор стратегии

        Returns:
            SettlementReport

        Raises:
            UnknownStrategyError: Если стратегия неизвестна
        """
        impl = get_strategy(strategy)
        net = compute_net_balances(parties, obligations)

        if not is_balanced(net):
            # Контракт вызывающей стороны нарушен; settlement будет односторонним
            logger.warning(
                "net balances do not sum to zero (total=%.4f); settlement will be one-sided",
                balance_total(net),
            )

        run = run_benchmark(impl, net, self.benchmark_config)
        metrics = compute_metrics(run.result.transactions, len(obligations))

        logger.info(
            "settled %d obligation(s) among %d parties with %s: %d transaction(s)",
            len(obligations),
            len(parties),
            impl.name.value,
            metrics.transaction_count,
        )

        return SettlementReport(
            strategy=impl.name,
            balances=net,
            transactions=run.result.transactions,
            steps=run.result.steps,
            timing=run.timing,
            metrics=metrics,
        )

    def settle_request(self, request: SettlementRequest) -> SettlementReport:
        """Settlement по валидированному SettlementRequest."""
        return self.settle(request.parties, request.obligations, request.strategy)

    def compare(
        self,
        parties: Sequence[Party],
        obligations: Sequence[Obligation],
        strategies: Optional[Iterable[Union[StrategyName, str]]] = None,
    ) -> list[SettlementReport]:
        """
        Последовательный запуск нескольких стратегий и ранжирование.

        Args:
            strategies: подмножество стратегий (default: все пять)

        Returns:
            Отчёты, упорядоченные по ranking_key
        """
        names = list(strategies) if strategies is not None else available_strategies()
        reports = [self.settle(parties, obligations, name) for name in names]
        return rank_reports(reports)
