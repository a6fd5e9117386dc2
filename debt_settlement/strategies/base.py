"""Общий контракт стратегий settlement.

Каждая стратегия получает собственную рабочую копию незакрытых балансов
(list[WorkingBalance]) и возвращает:
- упорядоченную последовательность переводов (SettlementTransaction)
- упорядоченный журнал решений (TraceStep)

Общие правила:
- сумма перевода = min(creditor_remaining, |debtor_remaining|)
- обе стороны уменьшаются на эту сумму
- участник выбывает, когда |remaining| <= EPS_SETTLEMENT
- при равных максимумах выбирается первый в текущем порядке рабочего списка
- цикл завершается, как только нет creditor или нет debtor выше порога
"""

from dataclasses import dataclass
from typing import Mapping

from debt_settlement.core.domain.obligation import Party, SettlementTransaction
from debt_settlement.core.domain.scenario import StrategyName
from debt_settlement.core.domain.trace import TraceRecorder, TraceStep
from debt_settlement.core.math.numerical_safeguards import EPS_SETTLEMENT, is_settled
from debt_settlement.ledger.net_balances import WorkingBalance, fork_working_balances


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class StrategyResult:
    """Результат одного запуска стратегии."""

    transactions: tuple[SettlementTransaction, ...]
    steps: tuple[TraceStep, ...]

    @property
    def transaction_count(self) -> int:
        return len(self.transactions)

    @property
    def total_cash_flow(self) -> float:
        return sum(txn.amount for txn in self.transactions)


EMPTY_RESULT = StrategyResult(transactions=(), steps=())


# =============================================================================
# HELPERS
# =============================================================================


def settle_pair(creditor: WorkingBalance, debtor: WorkingBalance) -> SettlementTransaction:
    """Перевод debtor → creditor на min(creditor, |debtor|); обе стороны обновляются."""
    amount = min(creditor.amount, -debtor.amount)
    creditor.amount -= amount
    debtor.amount += amount
    return SettlementTransaction(from_party=debtor.party, to_party=creditor.party, amount=amount)


def drop_settled(entries: list[WorkingBalance], tol: float = EPS_SETTLEMENT) -> list[WorkingBalance]:
    """Новый список без закрытых участников (порядок сохраняется)."""
    return [entry for entry in entries if not is_settled(entry.amount, tol)]


def payment_message(txn: SettlementTransaction) -> str:
    return f"{txn.from_party} pays {txn.to_party} ${txn.amount:.2f}"


# =============================================================================
# BASE STRATEGY
# =============================================================================


class SettlementStrategy:
    """Базовый класс стратегии settlement.

    Подклассы реализуют settle(); run() — удобная обёртка, которая сама
    создаёт рабочую копию из net-балансов.
    """

    name: StrategyName
    title: str = ""
    complexity: str = ""

    def settle(self, working: list[WorkingBalance]) -> StrategyResult:
        """Settlement по рабочей копии (копия изменяется и принадлежит вызову).

        Args:
            working: незакрытые балансы в порядке участников

        Returns:
            StrategyResult с переводами и журналом
        """
        raise NotImplementedError

    def run(self, net: Mapping[Party, float]) -> StrategyResult:
        """Settlement по net-балансам без изменения исходного словаря."""
        return self.settle(fork_working_balances(net))

    def _start(self, working: list[WorkingBalance], description: str) -> TraceRecorder:
        recorder = TraceRecorder()
        recorder.info(f"{self.title}: {description}")
        recorder.consider([entry.party for entry in working])
        return recorder

    def _finish(
        self,
        recorder: TraceRecorder,
        transactions: list[SettlementTransaction],
    ) -> StrategyResult:
        recorder.info(f"{self.title}: settled in {len(transactions)} transaction(s)")
        return StrategyResult(transactions=tuple(transactions), steps=recorder.steps)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name.value!r})"
