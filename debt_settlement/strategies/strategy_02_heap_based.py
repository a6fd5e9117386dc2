"""STRATEGY 2: Heap-based

Раздельные списки creditors / debtors, отсортированные по убыванию
остатка (debtors — по убыванию модуля). На каждой итерации сопоставляются
головы списков, после перевода оба списка сортируются заново.

Это симуляция heap через полную пересортировку: sorted() стабилен, поэтому
при равных остатках сохраняется текущий порядок списка, и журнал
воспроизводим байт-в-байт.

Сложность: O(n² log n).
"""

from debt_settlement.core.domain.scenario import StrategyName
from debt_settlement.core.math.numerical_safeguards import is_negative, is_positive
from debt_settlement.ledger.net_balances import WorkingBalance

from .base import EMPTY_RESULT, SettlementStrategy, StrategyResult, drop_settled, payment_message, settle_pair


def _by_remaining(entries: list[WorkingBalance]) -> list[WorkingBalance]:
    """Стабильная сортировка по убыванию |amount|."""
    return sorted(entries, key=lambda entry: abs(entry.amount), reverse=True)


class Strategy02HeapBased(SettlementStrategy):
    """STRATEGY 2: Heap-based (sorted-list heap simulation)."""

    name = StrategyName.HEAP_BASED
    title = "Heap-based"
    complexity = "O(n² log n)"

    def settle(self, working: list[WorkingBalance]) -> StrategyResult:
        if not working:
            return EMPTY_RESULT

        recorder = self._start(working, "split creditors and debtors into max-heaps")
        transactions = []

        creditors = _by_remaining([entry for entry in working if is_positive(entry.amount)])
        debtors = _by_remaining([entry for entry in working if is_negative(entry.amount)])

        recorder.info(f"Creditors: {len(creditors)}, debtors: {len(debtors)}")

        while creditors and debtors:
            creditor = creditors[0]
            debtor = debtors[0]

            recorder.select(
                creditor.party,
                debtor.party,
                f"Heap tops: creditor {creditor.party} (+{creditor.amount:.2f}), "
                f"debtor {debtor.party} ({debtor.amount:.2f})",
            )

            txn = settle_pair(creditor, debtor)
            transactions.append(txn)
            recorder.transaction(txn.from_party, txn.to_party, txn.amount, payment_message(txn))

            creditors = _by_remaining(drop_settled(creditors))
            debtors = _by_remaining(drop_settled(debtors))

        return self._finish(recorder, transactions)
