"""
Convergence — извлечение предела из ленивой последовательности приближений

По мотивам John Hughes, "Why Functional Programming Matters" (1989):
функции within и relative "склеивают" генератор приближений и критерий
остановки, не зная ничего о том, как приближения получены.

Алгоритм:
    Сканируем соседние пары (a, b) начиная с первых двух членов.
    absolute: |a - b| <= eps          → вернуть b
    relative: |a / b - 1| <= eps      → вернуть b

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Просмотр строго вперёд, lookahead ровно один элемент
2. Ни один член не запрашивается повторно и не запрашивается заранее
3. Пустая, одноэлементная или исчерпанная последовательность → NoConvergenceError
4. NaN/Inf член → NoConvergenceError (критерий для них никогда не выполнится)
5. Деления на ноль в relative режиме не происходит
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from lazyfp.core.math.numerical_safeguards import (
    DEFAULT_TOLERANCE,
    is_valid_float,
    is_zero,
    validate_max_terms,
    validate_positive,
)
from lazyfp.logger import get_logger

logger = get_logger("convergence")


# =============================================================================
# ENUMS & CONFIG
# =============================================================================


class ConvergenceMode(str, Enum):
    """Критерий остановки сканирования."""

    ABSOLUTE = "ABSOLUTE"
    RELATIVE = "RELATIVE"


@dataclass(frozen=True)
class ConvergenceSettings:
    """Параметры сканирования, передаваемые вместе.

    max_terms=None — без лимита (для заведомо сходящихся последовательностей).
    """

    eps: float = DEFAULT_TOLERANCE
    mode: ConvergenceMode = ConvergenceMode.ABSOLUTE
    max_terms: Optional[int] = None

    def __post_init__(self) -> None:
        validate_positive(self.eps, "eps")
        validate_max_terms(self.max_terms)
        # str → Enum ("RELATIVE" допустимо)
        object.__setattr__(self, "mode", ConvergenceMode(self.mode))


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NoConvergenceError(ArithmeticError):
    """
    Последовательность закончилась (или была прервана) до выполнения критерия.

    Attributes:
        terms_consumed: Сколько членов было прочитано
        last_value: Последний прочитанный член (None для пустой последовательности)
    """

    def __init__(
        self,
        message: str,
        terms_consumed: int = 0,
        last_value: Optional[float] = None,
    ):
        super().__init__(message)
        self.terms_consumed = terms_consumed
        self.last_value = last_value


# =============================================================================
# КРИТЕРИИ
# =============================================================================


def is_absolutely_close(a: float, b: float, eps: float) -> bool:
    """|a - b| <= eps"""
    return abs(a - b) <= eps


def is_relatively_close(a: float, b: float, eps: float) -> bool:
    """
    |a / b - 1| <= eps без деления на ноль.

    При b == 0 отношение не определено: пара считается сошедшейся
    только если a тоже ноль.

    Examples:
        >>> is_relatively_close(1.00001, 1.0, 1e-4)
        True
        >>> is_relatively_close(1.0, 0.0, 1e-4)
        False
        >>> is_relatively_close(0.0, 0.0, 1e-4)
        True
    """
    if is_zero(b):
        return is_zero(a)
    return abs((a / b) - 1.0) <= eps


_CRITERIA = {
    ConvergenceMode.ABSOLUTE: is_absolutely_close,
    ConvergenceMode.RELATIVE: is_relatively_close,
}


# =============================================================================
# СКАНИРОВАНИЕ
# =============================================================================


def converge(
    eps: float,
    values: Iterable[float],
    mode: ConvergenceMode = ConvergenceMode.ABSOLUTE,
    max_terms: Optional[int] = None,
) -> float:
    """
    Первый член b, для которого пара (a, b) удовлетворяет критерию.

    Args:
        eps: Толерантность (> 0)
        values: Последовательность приближений (обычно бесконечный генератор)
        mode: ABSOLUTE или RELATIVE
        max_terms: Максимум читаемых членов (None — без лимита)

    Returns:
        Второй член первой сошедшейся пары

    Raises:
        ValueError: Некорректные eps / max_terms
        NoConvergenceError: Критерий не выполнен до конца последовательности,
            встретился NaN/Inf или достигнут max_terms
    """
    validate_positive(eps, "eps")
    validate_max_terms(max_terms)
    criterion = _CRITERIA[ConvergenceMode(mode)]

    iterator = iter(values)
    try:
        a = next(iterator)
    except StopIteration:
        raise _fail("sequence is empty", 0, None) from None
    consumed = 1
    _check_term(a, consumed)

    for b in iterator:
        consumed += 1
        _check_term(b, consumed)

        if criterion(a, b, eps):
            logger.debug("converged to %r after %d terms (%s)", b, consumed, mode)
            return b

        if max_terms is not None and consumed >= max_terms:
            raise _fail(f"no convergence within {max_terms} terms", consumed, b)

        a = b

    raise _fail(f"sequence exhausted after {consumed} terms", consumed, a)


def converge_with(settings: ConvergenceSettings, values: Iterable[float]) -> float:
    """converge() с параметрами из ConvergenceSettings."""
    return converge(settings.eps, values, settings.mode, settings.max_terms)


def within(
    eps: float,
    values: Iterable[float],
    max_terms: Optional[int] = None,
) -> float:
    """
    Абсолютный критерий: |a - b| <= eps.

    Examples:
        >>> within(0.1, [1.0, 0.5, 0.45, 0.44])
        0.45
    """
    return converge(eps, values, ConvergenceMode.ABSOLUTE, max_terms)


def relative(
    eps: float,
    values: Iterable[float],
    max_terms: Optional[int] = None,
) -> float:
    """Относительный критерий: |a / b - 1| <= eps."""
    return converge(eps, values, ConvergenceMode.RELATIVE, max_terms)


def _check_term(value: float, position: int) -> None:
    if not is_valid_float(value):
        raise _fail(f"term {position} is not finite: {value}", position, value)


def _fail(
    reason: str, terms_consumed: int, last_value: Optional[float]
) -> NoConvergenceError:
    logger.warning("no convergence: %s", reason)
    return NoConvergenceError(reason, terms_consumed, last_value)
