"""STRATEGY 1: Greedy

На каждой итерации один линейный проход находит:
- первого участника с максимальным положительным балансом (creditor)
- первого участника с максимальным по модулю отрицательным балансом (debtor)

Сложность: O(n²) — до n-1 итераций по n элементов.
"""

from debt_settlement.core.domain.scenario import StrategyName
from debt_settlement.core.math.numerical_safeguards import is_negative, is_positive
from debt_settlement.ledger.net_balances import WorkingBalance

from .base import SettlementStrategy, StrategyResult, EMPTY_RESULT, drop_settled, payment_message, settle_pair


class Strategy01Greedy(SettlementStrategy):
    """STRATEGY 1: Greedy (max creditor ↔ max debtor)."""

    name = StrategyName.GREEDY
    title = "Greedy"
    complexity = "O(n²)"

    def settle(self, working: list[WorkingBalance]) -> StrategyResult:
        if not working:
            return EMPTY_RESULT

        recorder = self._start(working, "match the largest creditor with the largest debtor")
        transactions = []

        while True:
            creditor = None
            debtor = None

            # Строгое сравнение: при равенстве остаётся первый найденный
            for entry in working:
                if is_positive(entry.amount):
                    if creditor is None or entry.amount > creditor.amount:
                        creditor = entry
                elif is_negative(entry.amount):
                    if debtor is None or entry.amount < debtor.amount:
                        debtor = entry

            if creditor is None or debtor is None:
                break

            recorder.select(
                creditor.party,
                debtor.party,
                f"Largest creditor {creditor.party} (+{creditor.amount:.2f}), "
                f"largest debtor {debtor.party} ({debtor.amount:.2f})",
            )

            txn = settle_pair(creditor, debtor)
            transactions.append(txn)
            recorder.transaction(txn.from_party, txn.to_party, txn.amount, payment_message(txn))

            working = drop_settled(working)

        return self._finish(recorder, transactions)
