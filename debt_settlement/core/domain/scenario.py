"""
Scenario / SettlementRequest — входные данные engine

Scenario — набор участников и обязательств между ними.
SettlementRequest — Scenario + выбранная стратегия.

Immutable Pydantic модели. Валидация на границе:
- участники уникальны и непусты
- каждое обязательство ссылается на известных участников
- суммы > 0, from != to (см. Obligation)
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from debt_settlement.core.domain.obligation import Obligation, Party


# =============================================================================
# ENUMS
# =============================================================================


class StrategyName(str, Enum):
    """Идентификатор стратегии settlement (значения совпадают с JSON контрактом)"""

    GREEDY = "greedy"
    HEAP_BASED = "heapBased"
    SORTING = "sorting"
    PRIORITY_QUEUE = "priorityQueue"
    MIN_CASH_FLOW = "minCashFlow"


# =============================================================================
# SCENARIO MODELS
# =============================================================================


class Scenario(BaseModel):
    """
    Сценарий: участники и обязательства между ними.

    Порядок участников значим: он определяет порядок рабочего списка
    стратегий и, как следствие, tie-break при равных балансах.
    """

    parties: tuple[Party, ...] = Field(default=(), description="Участники (уникальные)")
    obligations: tuple[Obligation, ...] = Field(default=(), description="Обязательства")

    model_config = {"frozen": True}

    @field_validator("parties")
    @classmethod
    def validate_unique_parties(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Участники непусты и не повторяются"""
        seen: set[str] = set()
        for party in v:
            if not party:
                raise ValueError("party identifier must be a non-empty string")
            if party in seen:
                raise ValueError(f"duplicate party '{party}'")
            seen.add(party)
        return v

    @field_validator("obligations")
    @classmethod
    def validate_known_parties(cls, v: tuple[Obligation, ...], info) -> tuple[Obligation, ...]:
        """Каждое обязательство ссылается на участников сценария"""
        if "parties" not in info.data:
            return v
        known = set(info.data["parties"])
        for obligation in v:
            for party in (obligation.from_party, obligation.to_party):
                if party not in known:
                    raise ValueError(f"obligation references unknown party '{party}'")
        return v

    def to_payload(self) -> dict:
        """JSON-совместимое представление сценария"""
        return {
            "parties": list(self.parties),
            "obligations": [o.to_payload() for o in self.obligations],
        }


class SettlementRequest(Scenario):
    """Запрос на settlement: сценарий + стратегия"""

    strategy: StrategyName = Field(StrategyName.GREEDY, description="Стратегия settlement")

    def to_payload(self) -> dict:
        payload = super().to_payload()
        payload["strategy"] = self.strategy.value
        return payload
