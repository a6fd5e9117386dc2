"""
Contract Validation Module

Модуль для валидации JSON контрактов запроса и ответа settlement engine.
"""

from .validators import (
    ContractValidator,
    InvalidSettlementRequest,
    SchemaLoader,
    SettlementRequestValidator,
    SettlementResponseValidator,
    parse_settlement_request,
    validate_settlement_request,
    validate_settlement_response,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SettlementRequestValidator",
    "SettlementResponseValidator",
    # Exceptions
    "InvalidSettlementRequest",
    # Functions
    "validate_settlement_request",
    "validate_settlement_response",
    "parse_settlement_request",
]
