"""STRATEGY 5: Min cash flow

Классическая рекурсивная формулировка minCashFlow(balances):
    1. найти max credit и max debit
    2. провести перевод на min(credit, |debit|)
    3. minCashFlow(оставшиеся балансы)

Здесь рекурсия развёрнута в явный цикл по собственному сокращающемуся
списку с аккумулятором переводов: глубина стека не зависит от числа
участников. Правило выбора совпадает с STRATEGY 1, поэтому переводы
идентичны Greedy.

Сложность: O(n²).
"""

from typing import Optional

from debt_settlement.core.domain.obligation import SettlementTransaction
from debt_settlement.core.domain.scenario import StrategyName
from debt_settlement.core.domain.trace import TraceRecorder
from debt_settlement.core.math.numerical_safeguards import is_negative, is_positive
from debt_settlement.ledger.net_balances import WorkingBalance

from .base import EMPTY_RESULT, SettlementStrategy, StrategyResult, drop_settled, payment_message, settle_pair


def _extremes(pending: list[WorkingBalance]) -> Optional[tuple[WorkingBalance, WorkingBalance]]:
    """(max credit, max debit) или None, если одна из сторон исчерпана.

    max()/min() возвращают первый из равных элементов.
    """
    if not pending:
        return None

    max_credit = max(pending, key=lambda entry: entry.amount)
    max_debit = min(pending, key=lambda entry: entry.amount)

    if not is_positive(max_credit.amount) or not is_negative(max_debit.amount):
        return None
    return max_credit, max_debit


class Strategy05MinCashFlow(SettlementStrategy):
    """STRATEGY 5: Min cash flow (развёрнутая рекурсия)."""

    name = StrategyName.MIN_CASH_FLOW
    title = "Min cash flow"
    complexity = "O(n²)"

    def settle(self, working: list[WorkingBalance]) -> StrategyResult:
        if not working:
            return EMPTY_RESULT

        recorder = self._start(working, "settle max credit against max debit, then recurse on the rest")
        accumulator: list[SettlementTransaction] = []
        pending = list(working)
        depth = 0

        while True:
            pair = _extremes(pending)
            if pair is None:
                break

            max_credit, max_debit = pair
            depth += 1
            self._step(recorder, accumulator, max_credit, max_debit, depth)
            pending = drop_settled(pending)

        return self._finish(recorder, accumulator)

    @staticmethod
    def _step(
        recorder: TraceRecorder,
        accumulator: list[SettlementTransaction],
        max_credit: WorkingBalance,
        max_debit: WorkingBalance,
        depth: int,
    ) -> None:
        recorder.select(
            max_credit.party,
            max_debit.party,
            f"Level {depth}: max credit {max_credit.party} (+{max_credit.amount:.2f}), "
            f"max debit {max_debit.party} ({max_debit.amount:.2f})",
        )
        txn = settle_pair(max_credit, max_debit)
        accumulator.append(txn)
        recorder.transaction(txn.from_party, txn.to_party, txn.amount, payment_message(txn))
