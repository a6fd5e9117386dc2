"""
Numerical Safeguards — Tolerance Primitives for Settlement Math

Модуль обеспечивает численную устойчивость операций над денежными суммами:
- Единый порог settlement (EPS_SETTLEMENT = 0.01) для всех стратегий
- Проверка NaN/Inf для отклонения невалидных сумм
- Epsilon-сравнения float (settled / creditor / debtor)
- Валидация входных сумм

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Баланс с |amount| <= EPS_SETTLEMENT считается закрытым (settled)
2. Закрытый баланс никогда не попадает в settlement transaction
3. Сумма net-балансов ≈ 0 в пределах EPS_BALANCE_SUM
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог, ниже которого баланс или сумма перевода считается нулевой
# Используется всеми стратегиями для отбрасывания закрытых участников
EPS_SETTLEMENT: Final[float] = 0.01

# Толерантность инварианта sum(net_balance) ≈ 0
EPS_BALANCE_SUM: Final[float] = 0.01


# =============================================================================
# NaN/Inf ПРОВЕРКА
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_settled(amount: float, tol: float = EPS_SETTLEMENT) -> bool:
    """
    Проверка, закрыт ли баланс (|amount| <= tol).

    Args:
        amount: Остаток баланса (signed)
        tol: Порог settlement (default: EPS_SETTLEMENT)

    Returns:
        True если участник больше не должен и не получает

    Examples:
        >>> is_settled(0.0)
        True
        >>> is_settled(-0.01)
        True
        >>> is_settled(0.011)
        False
    """
    return abs(amount) <= tol


def is_positive(value: float, tol: float = EPS_SETTLEMENT) -> bool:
    """
    Проверка, является ли значение положительным (creditor) с учётом толерантности.

    Returns:
        True если value > tol
    """
    return value > tol


def is_negative(value: float, tol: float = EPS_SETTLEMENT) -> bool:
    """
    Проверка, является ли значение отрицательным (debtor) с учётом толерантности.

    Returns:
        True если value < -tol
    """
    return value < -tol


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive(value: float, name: str, eps: float = 0.0) -> None:
    """
    Валидация, что значение положительное и конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        eps: Минимальный порог (default: 0.0)

    Raises:
        ValueError: Если value <= eps или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= eps:
        raise ValueError(f"{name} must be positive (> {eps}), got {value}")
