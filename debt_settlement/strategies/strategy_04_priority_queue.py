"""STRATEGY 4: Priority queue

Как heap-based, но каждый элемент очереди несёт явное поле priority,
равное остатку к погашению (для debtors — модулю долга). После каждого
перевода priority пересчитывается из остатка, и обе очереди
упорядочиваются заново по priority (стабильно, по убыванию).

Порядок выбора и tie-break совпадают с STRATEGY 2, поэтому переводы
идентичны; отличается только журнал.

Сложность: O(n² log n).
"""

from dataclasses import dataclass

from debt_settlement.core.domain.scenario import StrategyName
from debt_settlement.core.math.numerical_safeguards import is_negative, is_positive
from debt_settlement.ledger.net_balances import WorkingBalance

from .base import EMPTY_RESULT, SettlementStrategy, StrategyResult, drop_settled, payment_message, settle_pair


@dataclass
class QueueEntry(WorkingBalance):
    """Элемент очереди с явным приоритетом."""

    priority: float = 0.0

    def refresh_priority(self) -> None:
        self.priority = abs(self.amount)


def _enqueue(entries: list[WorkingBalance]) -> list[QueueEntry]:
    queue = [QueueEntry(party=e.party, amount=e.amount) for e in entries]
    return _reprioritize(queue)


def _reprioritize(queue: list[QueueEntry]) -> list[QueueEntry]:
    for entry in queue:
        entry.refresh_priority()
    return sorted(queue, key=lambda entry: entry.priority, reverse=True)


class Strategy04PriorityQueue(SettlementStrategy):
    """STRATEGY 4: Priority queue (priority = remaining amount)."""

    name = StrategyName.PRIORITY_QUEUE
    title = "Priority queue"
    complexity = "O(n² log n)"

    def settle(self, working: list[WorkingBalance]) -> StrategyResult:
        if not working:
            return EMPTY_RESULT

        recorder = self._start(working, "dequeue the highest-priority creditor and debtor")
        transactions = []

        creditor_queue = _enqueue([e for e in working if is_positive(e.amount)])
        debtor_queue = _enqueue([e for e in working if is_negative(e.amount)])

        recorder.info(
            f"Queued {len(creditor_queue)} creditor(s) and {len(debtor_queue)} debtor(s) by priority"
        )

        while creditor_queue and debtor_queue:
            creditor = creditor_queue[0]
            debtor = debtor_queue[0]

            recorder.select(
                creditor.party,
                debtor.party,
                f"Dequeued creditor {creditor.party} (priority {creditor.priority:.2f}) "
                f"and debtor {debtor.party} (priority {debtor.priority:.2f})",
            )

            txn = settle_pair(creditor, debtor)
            transactions.append(txn)
            recorder.transaction(txn.from_party, txn.to_party, txn.amount, payment_message(txn))

            creditor_queue = _reprioritize(drop_settled(creditor_queue))
            debtor_queue = _reprioritize(drop_settled(debtor_queue))

        return self._finish(recorder, transactions)
