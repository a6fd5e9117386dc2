"""
Core math modules для Debt Settlement Engine

Численные примитивы с гарантией стабильности сравнений денежных сумм.
"""

from debt_settlement.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_BALANCE_SUM,
    EPS_SETTLEMENT,
    # NaN/Inf check
    is_valid_float,
    # Epsilon comparisons
    is_negative,
    is_positive,
    is_settled,
    # Validation
    validate_positive,
)

__all__ = [
    # Epsilon constants
    "EPS_BALANCE_SUM",
    "EPS_SETTLEMENT",
    # NaN/Inf check
    "is_valid_float",
    # Epsilon comparisons
    "is_negative",
    "is_positive",
    "is_settled",
    # Validation
    "validate_positive",
]
