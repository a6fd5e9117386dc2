"""
Тесты для базовых доменных моделей: Obligation, SettlementTransaction, Scenario

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Отклонение некорректных обязательств (amount <= 0, from == to, NaN/Inf)
3. Immutability (frozen=True)
4. Сериализацию с ключами "from"/"to"
5. Валидацию сценария (уникальные участники, известные участники)
"""

import pytest
from pydantic import ValidationError

from debt_settlement.core.domain import (
    Obligation,
    Scenario,
    SettlementRequest,
    SettlementTransaction,
    StrategyName,
)


# =============================================================================
# OBLIGATION TESTS
# =============================================================================


class TestObligation:
    """Тесты для модели Obligation"""

    def test_create_by_alias(self):
        """Создание через JSON ключи from/to"""
        obligation = Obligation.model_validate({"from": "A", "to": "B", "amount": 100})
        assert obligation.from_party == "A"
        assert obligation.to_party == "B"
        assert obligation.amount == 100.0
        assert isinstance(obligation.amount, float)

    def test_create_by_field_name(self):
        """Создание через имена полей"""
        obligation = Obligation(from_party="A", to_party="B", amount=12.5)
        assert obligation.to_payload() == {"from": "A", "to": "B", "amount": 12.5}

    @pytest.mark.parametrize("amount", [0, -10.0, float("nan"), float("inf")])
    def test_invalid_amount_rejected(self, amount):
        """amount <= 0 и NaN/Inf отклоняются"""
        with pytest.raises(ValidationError):
            Obligation(from_party="A", to_party="B", amount=amount)

    def test_self_obligation_rejected(self):
        """from == to отклоняется"""
        with pytest.raises(ValidationError, match="itself"):
            Obligation(from_party="A", to_party="A", amount=10.0)

    def test_empty_party_rejected(self):
        with pytest.raises(ValidationError):
            Obligation(from_party="", to_party="B", amount=10.0)

    def test_immutable(self):
        """Obligation — frozen модель"""
        obligation = Obligation(from_party="A", to_party="B", amount=10.0)
        with pytest.raises(ValidationError):
            obligation.amount = 20.0


class TestSettlementTransaction:
    """Тесты для модели SettlementTransaction"""

    def test_payload_uses_aliases(self):
        txn = SettlementTransaction(from_party="A", to_party="C", amount=100.0)
        assert txn.to_payload() == {"from": "A", "to": "C", "amount": 100.0}

    def test_non_positive_amount_rejected(self):
        with pytest.raises(ValidationError):
            SettlementTransaction(from_party="A", to_party="C", amount=0.0)

    def test_equality_by_value(self):
        a = SettlementTransaction(from_party="A", to_party="C", amount=1.0)
        b = SettlementTransaction(from_party="A", to_party="C", amount=1.0)
        assert a == b


# =============================================================================
# SCENARIO TESTS
# =============================================================================


class TestScenario:
    """Тесты для Scenario / SettlementRequest"""

    def test_valid_scenario(self):
        scenario = Scenario.model_validate(
            {
                "parties": ["A", "B", "C"],
                "obligations": [
                    {"from": "A", "to": "B", "amount": 100},
                    {"from": "B", "to": "C", "amount": 100},
                ],
            }
        )
        assert scenario.parties == ("A", "B", "C")
        assert len(scenario.obligations) == 2
        assert scenario.to_payload()["obligations"][1] == {"from": "B", "to": "C", "amount": 100.0}

    def test_empty_scenario_allowed(self):
        """Пустой сценарий — не ошибка"""
        scenario = Scenario()
        assert scenario.parties == ()
        assert scenario.obligations == ()

    def test_duplicate_parties_rejected(self):
        with pytest.raises(ValidationError, match="duplicate"):
            Scenario(parties=("A", "A"))

    def test_unknown_party_rejected(self):
        """Обязательство с неизвестным участником отклоняется"""
        with pytest.raises(ValidationError, match="unknown party"):
            Scenario.model_validate(
                {"parties": ["A", "B"], "obligations": [{"from": "A", "to": "Z", "amount": 5}]}
            )

    def test_request_default_strategy(self):
        request = SettlementRequest(parties=("A", "B"))
        assert request.strategy == StrategyName.GREEDY

    def test_request_strategy_from_identifier(self):
        request = SettlementRequest.model_validate(
            {"parties": ["A", "B"], "obligations": [], "strategy": "priorityQueue"}
        )
        assert request.strategy is StrategyName.PRIORITY_QUEUE
        assert request.to_payload()["strategy"] == "priorityQueue"

    def test_request_unknown_strategy_rejected(self):
        with pytest.raises(ValidationError):
            SettlementRequest.model_validate({"parties": [], "obligations": [], "strategy": "magic"})
