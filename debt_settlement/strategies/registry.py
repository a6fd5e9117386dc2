"""Registry стратегий: единственная точка выбора стратегии по имени."""

from typing import Union

from debt_settlement.core.domain.scenario import StrategyName

from .base import SettlementStrategy
from .strategy_01_greedy import Strategy01Greedy
from .strategy_02_heap_based import Strategy02HeapBased
from .strategy_03_sorting import Strategy03Sorting
from .strategy_04_priority_queue import Strategy04PriorityQueue
from .strategy_05_min_cash_flow import Strategy05MinCashFlow


class UnknownStrategyError(KeyError):
    """Имя стратегии не входит в StrategyName."""


_REGISTRY: dict[StrategyName, type[SettlementStrategy]] = {
    StrategyName.GREEDY: Strategy01Greedy,
    StrategyName.HEAP_BASED: Strategy02HeapBased,
    StrategyName.SORTING: Strategy03Sorting,
    StrategyName.PRIORITY_QUEUE: Strategy04PriorityQueue,
    StrategyName.MIN_CASH_FLOW: Strategy05MinCashFlow,
}


def resolve_strategy_name(name: Union[StrategyName, str]) -> StrategyName:
    """Нормализация идентификатора ("heapBased" или StrategyName.HEAP_BASED)."""
    if isinstance(name, StrategyName):
        return name
    try:
        return StrategyName(name)
    except ValueError:
        known = ", ".join(s.value for s in StrategyName)
        raise UnknownStrategyError(f"unknown strategy {name!r} (expected one of: {known})") from None


def get_strategy(name: Union[StrategyName, str]) -> SettlementStrategy:
    """Экземпляр стратегии по имени.

    Raises:
        UnknownStrategyError: Если имя неизвестно
    """
    return _REGISTRY[resolve_strategy_name(name)]()


def available_strategies() -> list[StrategyName]:
    """Все стратегии в порядке регистрации."""
    return list(_REGISTRY)
