"""
JSON Schema Contract Validators

Модуль для валидации JSON данных на границе engine согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы (schema/ рядом с этим модулем):
- settlement_request.json   — вход {parties, obligations, strategy}
- settlement_response.json  — выход {transactions, steps, timing, metrics}

parse_settlement_request объединяет оба уровня проверки:
1. JSON Schema (структура, типы, amount > 0, известная стратегия)
2. Pydantic модели (from != to, участники обязательств известны, NaN/Inf)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from pydantic import ValidationError as ModelValidationError

from debt_settlement.core.domain.scenario import SettlementRequest


class InvalidSettlementRequest(ValueError):
    """Запрос не прошёл валидацию контракта или доменных моделей."""


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'settlement_request')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class SettlementRequestValidator(ContractValidator):
    """Валидатор для settlement_request контракта."""

    def __init__(self):
        super().__init__("settlement_request")


class SettlementResponseValidator(ContractValidator):
    """Валидатор для settlement_response контракта."""

    def __init__(self):
        super().__init__("settlement_response")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_settlement_request(data: Dict[str, Any]) -> None:
    """
    Валидация settlement_request данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    SettlementRequestValidator().validate(data)


def validate_settlement_response(data: Dict[str, Any]) -> None:
    """
    Валидация settlement_response данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    SettlementResponseValidator().validate(data)


def parse_settlement_request(data: Dict[str, Any]) -> SettlementRequest:
    """
    Валидация и разбор запроса в SettlementRequest.

    Некорректные обязательства отклоняются здесь и не доходят до engine.

    Args:
        data: JSON-совместимый dict запроса

    Returns:
        Immutable SettlementRequest

    Raises:
        InvalidSettlementRequest: Нарушение схемы или доменных инвариантов
    """
    try:
        validate_settlement_request(data)
    except ValidationError as e:
        raise InvalidSettlementRequest(f"settlement_request schema violation: {e.message}") from e

    try:
        return SettlementRequest.model_validate(data)
    except ModelValidationError as e:
        raise InvalidSettlementRequest(f"settlement_request rejected: {e}") from e
