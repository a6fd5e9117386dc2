"""Strategies — взаимозаменяемые стратегии settlement.

- STRATEGY 1: Greedy (max creditor ↔ max debtor, линейный проход)
- STRATEGY 2: Heap-based (пересортировка creditors/debtors)
- STRATEGY 3: Sorting (одна сортировка + два указателя)
- STRATEGY 4: Priority queue (явное поле priority)
- STRATEGY 5: Min cash flow (развёрнутая рекурсия, идентична Greedy)
"""

from debt_settlement.core.domain.scenario import StrategyName

from .base import SettlementStrategy, StrategyResult, settle_pair
from .registry import UnknownStrategyError, available_strategies, get_strategy, resolve_strategy_name
from .strategy_01_greedy import Strategy01Greedy
from .strategy_02_heap_based import Strategy02HeapBased
from .strategy_03_sorting import Strategy03Sorting
from .strategy_04_priority_queue import Strategy04PriorityQueue
from .strategy_05_min_cash_flow import Strategy05MinCashFlow

__all__ = [
    "StrategyName",
    "SettlementStrategy",
    "StrategyResult",
    "settle_pair",
    "UnknownStrategyError",
    "available_strategies",
    "get_strategy",
    "resolve_strategy_name",
    "Strategy01Greedy",
    "Strategy02HeapBased",
    "Strategy03Sorting",
    "Strategy04PriorityQueue",
    "Strategy05MinCashFlow",
]
