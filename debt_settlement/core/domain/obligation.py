"""
Obligation / SettlementTransaction — направленные денежные рёбра

Obligation — сырое входное обязательство (from должен to сумму amount).
SettlementTransaction — итоговый перевод, созданный стратегией settlement.

Обе модели immutable (frozen=True) и сериализуются с ключами "from"/"to"
(by_alias=True), как в внешнем JSON контракте.

Некорректные обязательства (amount <= 0, NaN/Inf, from == to) отклоняются
здесь, на границе, и никогда не доходят до engine.
"""

from pydantic import BaseModel, Field, field_validator

from debt_settlement.core.math.numerical_safeguards import validate_positive


# Участник сценария: уникальный строковый идентификатор
Party = str


class Obligation(BaseModel):
    """
    Входное обязательство: from_party должен to_party сумму amount.

    Immutable модель (frozen=True).
    """

    from_party: Party = Field(..., alias="from", min_length=1, description="Должник")
    to_party: Party = Field(..., alias="to", min_length=1, description="Кредитор")
    amount: float = Field(..., gt=0, description="Сумма обязательства (> 0)")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("amount")
    @classmethod
    def validate_amount_finite(cls, v: float) -> float:
        """Сумма должна быть конечной и положительной"""
        validate_positive(v, "amount")
        return v

    @field_validator("to_party")
    @classmethod
    def validate_not_self(cls, v: str, info) -> str:
        """Обязательство самому себе не имеет смысла"""
        if info.data.get("from_party") == v:
            raise ValueError(f"obligation from '{v}' to itself is not allowed")
        return v

    def to_payload(self) -> dict:
        """JSON-совместимое представление ({from, to, amount})"""
        return self.model_dump(by_alias=True)


class SettlementTransaction(BaseModel):
    """
    Итоговый перевод settlement: from_party платит to_party сумму amount.

    Создаётся только стратегиями; amount всегда > EPS_SETTLEMENT.
    Immutable модель (frozen=True).
    """

    from_party: Party = Field(..., alias="from", description="Плательщик (debtor)")
    to_party: Party = Field(..., alias="to", description="Получатель (creditor)")
    amount: float = Field(..., gt=0, description="Сумма перевода")

    model_config = {"frozen": True, "populate_by_name": True}

    def to_payload(self) -> dict:
        """JSON-совместимое представление ({from, to, amount})"""
        return self.model_dump(by_alias=True)
