"""
Numerical Safeguards — валидация аргументов для ленивых численных методов

Модуль задаёт толерантности по умолчанию и проверки входных параметров:
- Epsilon-параметры для сходимости (absolute / relative)
- Проверка float на NaN/Inf
- Валидация положительных параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Толерантность всегда конечная и строго положительная
2. NaN/Inf никогда не попадают в итерационные формулы
3. Ошибка валидации всегда называет параметр
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность по умолчанию для within / relative
DEFAULT_TOLERANCE: Final[float] = 1e-4


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_zero(value: float) -> bool:
    """Точное сравнение с нулём (включая -0.0)."""
    return value == 0.0


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное число.

    Raises:
        ValueError: Если value NaN/Inf или не число
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a real number, got {value!r}")

    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf

    Examples:
        >>> validate_positive(1e-4, "eps")
        >>> validate_positive(0.0, "eps")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        ValueError: eps must be positive, got 0.0
    """
    validate_finite(value, name)

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_max_terms(max_terms: int | None) -> None:
    """Валидация лимита количества членов последовательности (None — без лимита)."""
    if max_terms is None:
        return

    if isinstance(max_terms, bool) or not isinstance(max_terms, int):
        raise ValueError(f"max_terms must be an int or None, got {max_terms!r}")

    if max_terms < 2:
        raise ValueError(f"max_terms must be >= 2, got {max_terms}")
