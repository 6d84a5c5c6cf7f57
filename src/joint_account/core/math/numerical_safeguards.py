"""
Numerical Safeguards — Float Primitives для расчёта долей

Модуль собирает примитивы работы с float, на которые опирается калькулятор:
- Проверка знакового бита (различает -0.0 и +0.0)
- NaN/Inf проверки
- Epsilon-сравнения float с учётом машинной точности
- Валидация входных параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. is_sign_negative(-0.0) is True, is_sign_negative(0.0) is False
2. NaN/Inf никогда не проходят валидацию
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-9


# =============================================================================
# ЗНАК И ВАЛИДНОСТЬ FLOAT
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


def is_sign_negative(value: float) -> bool:
    """
    Проверка знакового бита float.

    В отличие от `value < 0`, учитывает знак нуля: -0.0 считается
    отрицательным, +0.0 нет. NaN с установленным знаковым битом тоже
    считается отрицательным.

    Examples:
        >>> is_sign_negative(-1.0)
        True
        >>> is_sign_negative(-0.0)
        True
        >>> is_sign_negative(0.0)
        False
    """
    return math.copysign(1.0, value) < 0


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(0.1 + 0.2, 0.3)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение неотрицательное.

    -0.0 проходит: сравнение `value < 0` не смотрит на знаковый бит.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    validate_finite(value, name)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
