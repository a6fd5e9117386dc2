"""
Debt Settlement Engine — упрощение долгов между участниками.

Сводит набор направленных обязательств (from → to, amount) к минимальному
практическому числу переводов. Пакет содержит:
- core/        : доменные модели, численные safeguards, JSON контракты
- ledger/      : расчёт net-балансов
- strategies/  : пять взаимозаменяемых стратегий settlement
- benchmark/   : статистический micro-benchmark
- engine/      : оркестратор (balances → benchmark → report) и async runner
- scenarios/   : генерация случайных сценариев
"""

from debt_settlement.engine import SettlementEngine, SettlementReport
from debt_settlement.strategies import StrategyName

__all__ = [
    "SettlementEngine",
    "SettlementReport",
    "StrategyName",
]
