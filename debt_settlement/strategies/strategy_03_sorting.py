"""STRATEGY 3: Sorting (two pointers)

Одна стабильная сортировка всех незакрытых балансов по убыванию.
Два указателя:
- left  → максимальный положительный баланс (начало списка)
- right → максимальный по модулю отрицательный (конец списка)

Указатель сдвигается внутрь, когда его сторона закрыта.

Сложность: O(n log n).
"""

from debt_settlement.core.domain.scenario import StrategyName
from debt_settlement.core.math.numerical_safeguards import is_negative, is_positive, is_settled
from debt_settlement.ledger.net_balances import WorkingBalance

from .base import EMPTY_RESULT, SettlementStrategy, StrategyResult, payment_message, settle_pair


class Strategy03Sorting(SettlementStrategy):
    """STRATEGY 3: Sorting + two pointers."""

    name = StrategyName.SORTING
    title = "Sorting"
    complexity = "O(n log n)"

    def settle(self, working: list[WorkingBalance]) -> StrategyResult:
        if not working:
            return EMPTY_RESULT

        recorder = self._start(working, "sort balances once and walk two pointers inward")
        transactions = []

        ordered = sorted(working, key=lambda entry: entry.amount, reverse=True)
        recorder.info("Sorted order: " + ", ".join(f"{e.party} ({e.amount:.2f})" for e in ordered))

        left = 0
        right = len(ordered) - 1

        while left < right:
            creditor = ordered[left]
            debtor = ordered[right]

            if not is_positive(creditor.amount) or not is_negative(debtor.amount):
                break

            recorder.select(
                creditor.party,
                debtor.party,
                f"Left pointer {creditor.party} (+{creditor.amount:.2f}), "
                f"right pointer {debtor.party} ({debtor.amount:.2f})",
            )

            txn = settle_pair(creditor, debtor)
            transactions.append(txn)
            recorder.transaction(txn.from_party, txn.to_party, txn.amount, payment_message(txn))

            if is_settled(creditor.amount):
                left += 1
            if is_settled(debtor.amount):
                right -= 1

        return self._finish(recorder, transactions)
