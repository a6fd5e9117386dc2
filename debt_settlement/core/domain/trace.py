"""
Trace Steps — структурированный журнал решений стратегии

Четыре вида шагов (discriminated union по полю "type"):
- info(message)                            — справочный комментарий
- consider(parties)                        — исходные незакрытые участники
- select(creditor, debtor, message)        — выбор пары на итерации
- transaction(from, to, amount, message)   — созданный перевод

Журнал append-only и принадлежит одному запуску стратегии. Потребитель,
игнорирующий все info шаги, восстанавливает переводы из пар
select/transaction (см. transactions_from_trace).
"""

from typing import Annotated, Literal, Sequence, Union

from pydantic import BaseModel, Field, TypeAdapter

from debt_settlement.core.domain.obligation import Party, SettlementTransaction


# =============================================================================
# STEP MODELS
# =============================================================================


class InfoStep(BaseModel):
    """Справочный шаг (не влияет на восстановление переводов)"""

    type: Literal["info"] = "info"
    message: str

    model_config = {"frozen": True}


class ConsiderStep(BaseModel):
    """Участники с незакрытым балансом на момент старта"""

    type: Literal["consider"] = "consider"
    parties: tuple[Party, ...]

    model_config = {"frozen": True}


class SelectStep(BaseModel):
    """Выбранная пара creditor/debtor"""

    type: Literal["select"] = "select"
    creditor: Party
    debtor: Party
    message: str

    model_config = {"frozen": True}


class TransactionStep(BaseModel):
    """Перевод, созданный после select"""

    type: Literal["transaction"] = "transaction"
    from_party: Party = Field(..., alias="from")
    to_party: Party = Field(..., alias="to")
    amount: float = Field(..., gt=0)
    message: str

    model_config = {"frozen": True, "populate_by_name": True}


TraceStep = Annotated[
    Union[InfoStep, ConsiderStep, SelectStep, TransactionStep],
    Field(discriminator="type"),
]

_TRACE_ADAPTER: TypeAdapter = TypeAdapter(list[TraceStep])


# =============================================================================
# RECORDER
# =============================================================================


class TraceRecorder:
    """
    Append-only журнал шагов одного запуска стратегии.

    Шаги можно только добавлять; наружу отдаётся immutable tuple.
    """

    def __init__(self):
        self._steps: list[TraceStep] = []

    def info(self, message: str) -> None:
        self._steps.append(InfoStep(message=message))

    def consider(self, parties: Sequence[Party]) -> None:
        self._steps.append(ConsiderStep(parties=tuple(parties)))

    def select(self, creditor: Party, debtor: Party, message: str) -> None:
        self._steps.append(SelectStep(creditor=creditor, debtor=debtor, message=message))

    def transaction(self, from_party: Party, to_party: Party, amount: float, message: str) -> None:
        self._steps.append(
            TransactionStep(from_party=from_party, to_party=to_party, amount=amount, message=message)
        )

    @property
    def steps(self) -> tuple[TraceStep, ...]:
        return tuple(self._steps)

    def __len__(self) -> int:
        return len(self._steps)


# =============================================================================
# HELPERS
# =============================================================================


def transactions_from_trace(steps: Sequence) -> list[SettlementTransaction]:
    """
    Восстановление последовательности переводов из журнала.

    info шаги игнорируются; каждый transaction шаг должен следовать за select
    шагом с той же парой (creditor = to, debtor = from).

    Raises:
        ValueError: Если transaction шаг не подтверждён предшествующим select
    """
    transactions: list[SettlementTransaction] = []
    pending_select = None

    for step in steps:
        if isinstance(step, SelectStep):
            pending_select = step
        elif isinstance(step, TransactionStep):
            if (
                pending_select is None
                or pending_select.creditor != step.to_party
                or pending_select.debtor != step.from_party
            ):
                raise ValueError(
                    f"transaction {step.from_party}->{step.to_party} "
                    f"is not preceded by a matching select step"
                )
            transactions.append(
                SettlementTransaction(
                    from_party=step.from_party, to_party=step.to_party, amount=step.amount
                )
            )
            pending_select = None

    return transactions


def trace_to_payload(steps: Sequence) -> list[dict]:
    """JSON-совместимое представление журнала (ключи "from"/"to")"""
    return _TRACE_ADAPTER.dump_python(list(steps), by_alias=True, mode="json")


def trace_from_payload(payload: list[dict]) -> list:
    """Разбор журнала из JSON-представления (discriminator = "type")"""
    return _TRACE_ADAPTER.validate_python(payload)
