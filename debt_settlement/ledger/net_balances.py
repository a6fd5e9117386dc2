"""
Net Balances — расчёт чистых балансов участников

Формула:
    net[p] = Σ amount (to == p) − Σ amount (from == p)

Знак:
    net[p] > 0  → участник должен получить (creditor)
    net[p] < 0  → участник должен заплатить (debtor)

ИНВАРИАНТЫ:
1. Баланс есть у каждого участника из списка (по умолчанию 0.0)
2. Σ net[p] ≈ 0 в пределах EPS_BALANCE_SUM для корректного входа
3. Результат не зависит от порядка обязательств
4. Валидация обязательств здесь не выполняется (см. Obligation)

Рабочие копии (WorkingBalance) создаются заново на каждый запуск стратегии
и никогда не ссылаются на исходный словарь балансов.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from debt_settlement.core.domain.obligation import Obligation, Party
from debt_settlement.core.math.numerical_safeguards import (
    EPS_BALANCE_SUM,
    EPS_SETTLEMENT,
    is_settled,
)


# Net balance: участник → signed сумма (порядок = порядок участников)
NetBalance = dict[Party, float]


@dataclass
class WorkingBalance:
    """Изменяемый остаток участника внутри одного запуска стратегии"""

    party: Party
    amount: float


# =============================================================================
# NET BALANCE CALCULATOR
# =============================================================================


def compute_net_balances(
    parties: Sequence[Party],
    obligations: Iterable[Obligation],
) -> NetBalance:
    """
    Расчёт net-баланса каждого участника.

    Args:
        parties: Участники сценария (порядок сохраняется в результате)
        obligations: Обязательства (from → to, amount)

    Returns:
        Словарь участник → signed баланс; участник без обязательств получает 0.0

    Examples:
        >>> compute_net_balances(["A", "B"], [Obligation(**{"from": "A", "to": "B", "amount": 50})])
        {'A': -50.0, 'B': 50.0}
    """
    net: NetBalance = {party: 0.0 for party in parties}

    for obligation in obligations:
        net[obligation.to_party] = net.get(obligation.to_party, 0.0) + obligation.amount
        net[obligation.from_party] = net.get(obligation.from_party, 0.0) - obligation.amount

    return net


def balance_total(net: Mapping[Party, float]) -> float:
    """Сумма всех балансов (fsum для устойчивости к порядку)"""
    return math.fsum(net.values())


def is_balanced(net: Mapping[Party, float], tol: float = EPS_BALANCE_SUM) -> bool:
    """Проверка инварианта Σ net[p] ≈ 0"""
    return abs(balance_total(net)) <= tol


def unsettled_parties(net: Mapping[Party, float], tol: float = EPS_SETTLEMENT) -> list[Party]:
    """Участники с |balance| > tol в исходном порядке"""
    return [party for party, amount in net.items() if not is_settled(amount, tol)]


# =============================================================================
# WORKING COPIES
# =============================================================================


def fork_working_balances(
    net: Mapping[Party, float],
    tol: float = EPS_SETTLEMENT,
) -> list[WorkingBalance]:
    """
    Свежая рабочая копия незакрытых балансов для одного запуска стратегии.

    Каждый вызов создаёт новые WorkingBalance объекты; изменения внутри
    стратегии не затрагивают исходный net.
    """
    return [
        WorkingBalance(party=party, amount=amount)
        for party, amount in net.items()
        if not is_settled(amount, tol)
    ]


def replay_transactions(
    net: Mapping[Party, float],
    transactions: Iterable,
) -> NetBalance:
    """
    Применение переводов к балансам.

    Перевод from → to на сумму amount увеличивает баланс from и уменьшает
    баланс to (долг погашается). Для корректного settlement результат ≈ 0
    у всех участников.
    """
    remaining: NetBalance = dict(net)
    for txn in transactions:
        remaining[txn.from_party] = remaining.get(txn.from_party, 0.0) + txn.amount
        remaining[txn.to_party] = remaining.get(txn.to_party, 0.0) - txn.amount
    return remaining
